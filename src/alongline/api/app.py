# src/alongline/api/app.py
"""
FastAPI application wiring.

This file creates the `FastAPI` instance and configures CORS.
Business logic lives in `alongline.api.routes` and `alongline.measure`.
"""

from __future__ import annotations

import os

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from alongline.core.logging import configure_logging

from .routes import router

configure_logging()

app = FastAPI(title="AlongLine API", version="0.1.0")

# Configure via env:
# - ALONGLINE_CORS_ORIGINS="http://localhost:8003,http://127.0.0.1:8003"
# - ALONGLINE_CORS_ALLOW_LOCAL=0 to disable the default localhost allowance
cors_origins = [s.strip() for s in os.getenv("ALONGLINE_CORS_ORIGINS", "").split(",") if s.strip()]
cors_allow_local = os.getenv("ALONGLINE_CORS_ALLOW_LOCAL", "1").strip().lower() in {"1", "true", "yes", "y"}
cors_origin_regex = os.getenv("ALONGLINE_CORS_ALLOW_ORIGIN_REGEX", "").strip() or (
    r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$" if cors_allow_local and not cors_origins else ""
)
if cors_origins or cors_origin_regex:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_origin_regex=cors_origin_regex or None,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(router)
