"""
Top‑level package for the Catalog API.

All functionality lives in submodules: the web application under
``app``, the HTTP client in ``client`` and the OpenAPI export command
in ``export_openapi``.
"""

__version__ = "1.0.0"

__all__ = []
