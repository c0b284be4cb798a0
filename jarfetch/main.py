"""ASGI application, e.g. ``uvicorn jarfetch.main:app``; configured from ``JARFETCH_*`` variables."""

from __future__ import annotations

from .factory import create_app

app = create_app()
