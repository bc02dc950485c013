"""
Service layer.

Each service wraps one collection of the document store and holds the
logic of its resource: payload handling, identifier generation and
read-side reshaping.  Services receive the store in their constructor;
endpoints obtain them through the dependencies in ``api.deps``.
"""
