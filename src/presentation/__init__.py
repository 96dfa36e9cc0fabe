"""Presentation layer - HTTP interface (FastAPI routers, middleware, errors)."""
