"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the services so that request validation
can be exercised without touching any stored state.
"""
