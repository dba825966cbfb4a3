"""
Collections Gateway
GraphQL API for browsing collections and managing a user's favorites
"""

__version__ = "0.1.0"

from .config import settings

__all__ = ["settings", "__version__"]
