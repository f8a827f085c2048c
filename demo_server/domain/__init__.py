"""Pure domain utilities: request path resolution and health status.

These modules are intentionally free of FastAPI/HTTP concerns so they can be
unit-tested and reused by both the server and the smoke runner.
"""
__all__ = ["paths", "status"]
