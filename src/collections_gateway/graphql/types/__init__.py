from .collection import Collection, CollectionType, MutationResult
from .user import User

__all__ = ["Collection", "CollectionType", "MutationResult", "User"]
