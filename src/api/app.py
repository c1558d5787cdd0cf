"""HTTP endpoint for downloading stored documents.

Provides POST /api/download-document, which returns a saved resume or
cover letter as .docx or PDF. Authentication happens upstream; the
authenticated user id is resolved from the request.
"""

import logging
from typing import Callable, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, Field

from src.config.settings import SettingsLoader
from src.config.style_config import StyleConfigLoader
from src.download.download_service import DownloadService
from src.download.errors import DownloadError
from src.storage.errors import ObjectNotFoundError

logger = logging.getLogger(__name__)

USER_ID_HEADER = "X-User-Id"

UserResolver = Callable[[Request], Optional[str]]


class DownloadDocumentRequest(BaseModel):
    """Download request body."""
    key: Optional[str] = Field(None, description="Object key of the saved HTML")
    format: Optional[str] = Field(None, description="Output format: 'docx' or 'pdf'")


def header_user_resolver(request: Request) -> Optional[str]:
    """Read the user id the auth proxy forwards in the X-User-Id header."""
    user_id = request.headers.get(USER_ID_HEADER)
    if user_id and user_id.strip():
        return user_id.strip()
    return None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(
    service: DownloadService,
    user_resolver: Optional[UserResolver] = None,
) -> FastAPI:
    """Create the FastAPI application.

    Args:
        service: Download pipeline used by the endpoint
        user_resolver: Returns the authenticated user id for a request, or
            None when unauthenticated (default: X-User-Id header)

    Returns:
        Configured FastAPI app
    """
    resolve_user = user_resolver or header_user_resolver

    app = FastAPI(
        title="resume-docs",
        version="0.1.0",
        description="Download saved resumes and cover letters as .docx or PDF",
    )

    # Sync route: runs in the threadpool, where the sync Playwright API is allowed
    @app.post("/api/download-document")
    def download_document(body: DownloadDocumentRequest, request: Request):
        user_id = resolve_user(request)
        if not user_id:
            return _error(401, "Unauthorized")

        try:
            document = service.download(user_id, body.key, body.format)
        except ObjectNotFoundError:
            return _error(404, "Object not found")
        except DownloadError as e:
            return _error(e.status_code, str(e))

        logger.info(f"Serving {document.filename} ({len(document.content)} bytes) to user {user_id}")
        return Response(
            content=document.content,
            media_type=document.content_type,
            headers={"Content-Disposition": document.content_disposition},
        )

    return app


def build_app() -> FastAPI:
    """Create the app from environment settings.

    Intended for `uvicorn --factory src.api.app:build_app`.

    Raises:
        ConfigError: If settings or the style file are invalid
    """
    settings = SettingsLoader().load()
    style = StyleConfigLoader.load(settings.style_config_path)
    return create_app(DownloadService.from_settings(settings, style))
