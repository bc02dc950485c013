"""
Endpoint modules.

Each module defines a public ``router`` and, where administrators have
extra operations on the resource, an ``admin_router``.  Both are
included in ``api.router``.
"""
