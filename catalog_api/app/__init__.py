"""
Application package initializer.

The service is split into ``core`` (configuration, logging, error
translation), ``schemas`` (pydantic models), ``services`` (the record
stores) and ``api`` (routers).  Importing this package builds the
default application instance.
"""

from .main import app  # noqa: F401
