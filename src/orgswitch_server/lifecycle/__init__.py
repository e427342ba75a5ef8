"""Application lifecycle plugins (FastAPI app and route registration)."""
