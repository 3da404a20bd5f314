"""Presentation layer: FastAPI routers, schemas and RFC 7807 errors."""
