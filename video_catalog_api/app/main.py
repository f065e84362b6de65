"""
Main entrypoint for the Video Catalog API.

This module assembles the FastAPI application, sets up logging,
creates the in‑memory services and includes the versioned routers.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn video_catalog_api.app.main:app --reload

Every call to ``create_app`` produces an application with its own
empty user and video collections; state is never shared between
application instances.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import validation_exception_handler
from .core.logging_config import setup_logging
from .services.metadata import VideoMetadataGenerator
from .services.user_service import UserService
from .services.video_service import VideoService


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
    video_service: Optional[VideoService] = None,
    generator: Optional[VideoMetadataGenerator] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment‑derived
        module level ``settings``.
    user_service, video_service : optional
        Pre‑built services.  When omitted, fresh empty ones are created.
    generator : Optional[VideoMetadataGenerator]
        Source of ids, time and random numbers for a newly created
        ``VideoService``.  Ignored when ``video_service`` is given.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)

    app.state.settings = settings
    app.state.user_service = user_service or UserService()
    app.state.video_service = video_service or VideoService(
        generator=generator,
        media_base_url=settings.media_base_url,
        upload_base_url=settings.upload_base_url,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.include_router(v1_router, prefix=settings.api_prefix)

    logging.getLogger(__name__).debug("Application created with prefix %r", settings.api_prefix)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
