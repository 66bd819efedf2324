"""
API routes module.

FastAPI routers, dependencies and application factory for all HTTP endpoints.
"""
