"""
Top‑level package for the Garage Records API.

All functionality lives in submodules under ``app``; the ASGI
application is ``garage_api.app.main:app``.
"""

__all__ = []
