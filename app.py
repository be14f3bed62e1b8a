"""
App assembly entry point.

Re-exports the FastAPI `app` from `worldscribe.api.main` so the server can be
started with ``uvicorn app:app`` from the repository root.
"""

from worldscribe.api.main import app  # noqa: F401
