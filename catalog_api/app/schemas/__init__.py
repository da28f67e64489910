"""
Pydantic schema definitions for API payloads and stored records.

Each domain (users, products) defines its own models: a ``Create`` and
an ``Update`` schema validated by the HTTP layer, and the record model
held by the store and returned to clients.  Records use camelCase names
on the wire (``isActive``, ``createdAt``) and snake_case in Python.
"""
