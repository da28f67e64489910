"""
Version 1 of the Catalog API.

Breaking changes to the users or products routes should go into a new
version subpackage (e.g. ``v2``) so existing clients keep working.
"""
