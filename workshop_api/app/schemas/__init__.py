"""
Pydantic schema definitions for API payloads.

Each resource (attendees, speakers, sessions) defines a ``*Create``
model for request bodies, validated before anything reaches the
document store, and a ``*Read`` model for stored documents and
responses.  Field names are snake_case in Python and camelCase on the
wire through aliases.
"""
