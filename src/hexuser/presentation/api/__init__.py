"""FastAPI inbound adapter."""
