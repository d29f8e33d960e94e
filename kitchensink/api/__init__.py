"""API layer - FastAPI application, routes and models."""
