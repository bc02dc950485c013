"""
Application package initializer.

This package contains the FastAPI application for the workshop
backend.  It is split into ``core`` (configuration, logging, errors,
admin authentication and the document store), ``schemas`` (request and
response models), ``services`` (one service per resource plus the
read‑side aggregations) and ``api`` (the public and admin routers).
"""

from .main import app  # noqa: F401
