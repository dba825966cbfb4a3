"""HTTP surface: FastAPI application factory."""
