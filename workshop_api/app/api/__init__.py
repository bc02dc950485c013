"""
HTTP surface of the workshop API.

``router.py`` assembles the public routes under ``/api`` and the
password protected routes under ``/api/admin``; the endpoint modules in
``endpoints`` define the handlers per resource.
"""
