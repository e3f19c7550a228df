"""Shared middleware for cross-cutting concerns.

This module contains FastAPI middleware that is shared across bounded
contexts. The tenant resolution middleware is the primary component,
resolving tenant context from request headers, host and query string.
"""
