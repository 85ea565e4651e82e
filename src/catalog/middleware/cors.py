"""CORS middleware configuration."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog.middleware.logging import REQUEST_ID_HEADER


def configure_cors(app: FastAPI, allowed_origins: list[str]) -> None:
    """Allow browser clients to read the catalog and append records.

    Args:
        app: FastAPI application instance.
        allowed_origins: List of allowed origin URLs.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["ETag", REQUEST_ID_HEADER],
    )
