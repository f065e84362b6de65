"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API can be started without any configuration at all.  Tests build
their own ``Settings`` instances and pass them to ``create_app``.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Video Catalog API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_flag("DEBUG"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # Prefix under which the user and video routers are mounted.  Empty
    # by default so that routes are served as ``/users`` and ``/videos``;
    # set e.g. ``API_PREFIX=/api/v1`` to nest them.
    api_prefix: str = field(default_factory=lambda: os.getenv("API_PREFIX", "").rstrip("/"))

    # Base URLs used when synthesising media and upload links for mocked
    # uploads.  No file is ever stored at these locations.
    media_base_url: str = field(
        default_factory=lambda: os.getenv("MEDIA_BASE_URL", "https://example.com").rstrip("/")
    )
    upload_base_url: str = field(
        default_factory=lambda: os.getenv("UPLOAD_BASE_URL", "https://upload.example.com").rstrip("/")
    )

    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3333")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
