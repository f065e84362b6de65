"""
Service layer abstraction.

Each service owns the in‑memory collection for its domain.  Services
are plain objects created by ``create_app`` and handed to the routes
through FastAPI dependencies, so every application instance (and every
test) gets its own isolated storage.
"""
