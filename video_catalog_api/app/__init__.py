"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Each domain (users, videos) has its own schema module,
service module and router defined in ``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
