"""
Top-level package for the Posts API.

All functionality lives in submodules under ``app``; import
``posts_api.app.main`` for the ASGI application.
"""

__all__ = []
