"""Static file serving with a single-page-application fallback."""

from __future__ import annotations

from pathlib import Path

from starlette.exceptions import HTTPException
from starlette.responses import Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

STATIC_DIR = Path(__file__).resolve().parent / "static"
INDEX_FILE = "index.html"

# Unknown paths below these prefixes stay 404 instead of serving the shell
API_PATH_PREFIXES = ("v1", "health", "docs", "redoc", "openapi.json")


class SPAStaticFiles(StaticFiles):
    """
    Serve files from the static directory, falling back to index.html.

    Client-side routes (e.g. /compare) have no file behind them, so a direct
    navigation or a refresh gets the application shell instead of a 404.
    """

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            response = await super().get_response(path, scope)
        except HTTPException as exc:
            if exc.status_code != 404 or _is_api_path(path):
                raise
            return await super().get_response(INDEX_FILE, scope)

        if response.status_code == 404 and not _is_api_path(path):
            return await super().get_response(INDEX_FILE, scope)
        return response


def _is_api_path(path: str) -> bool:
    normalized = path.lstrip("/")
    return any(
        normalized == prefix or normalized.startswith(prefix + "/")
        for prefix in API_PATH_PREFIXES
    )
