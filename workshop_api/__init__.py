"""
Top‑level package for the Workshop API.

This file makes ``workshop_api`` a Python package so that the
application can be imported with fully qualified names like
``workshop_api.app.main``.  The HTTP client for the API lives in
``workshop_api.client``.
"""

__all__ = []
