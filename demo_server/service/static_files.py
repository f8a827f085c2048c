from __future__ import annotations

import os
from typing import Any

from fastapi import HTTPException, status
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response
from starlette.types import Scope

from ..api.models import ErrorDetail
from ..domain.paths import hidden_segment
from ..logging_conf import get_logger

logger = get_logger("service.static")

CACHE_CONTROL = "public, max-age=0"
NOT_FOUND_DETAIL = ErrorDetail(error_code="not_found", error_message="Not Found").model_dump()


def _request_id(scope: Scope) -> Any:
    # Set by the request logging middleware on the shared scope state.
    return scope.get("state", {}).get("request_id")


class SiteStaticFiles(StaticFiles):
    """StaticFiles for the served root.

    On top of Starlette's lookup (root containment, index.html for
    directories, trailing-slash redirects, HEAD, ETag/Last-Modified 304s):
    - dotfiles are never served
    - every 404 carries the JSON error detail the API uses
    - file responses get a Cache-Control header
    - a missing root only makes lookups 404; it does not fail the request
    """

    async def check_config(self) -> None:
        if self.directory is not None and not os.path.isdir(self.directory):
            return
        await super().check_config()

    async def get_response(self, path: str, scope: Scope) -> Response:
        hidden = hidden_segment(path)
        if hidden is not None:
            logger.info(
                "static.rejected",
                extra={
                    "event": "static_rejected",
                    "path": path,
                    "reason": "hidden",
                    "request_id": _request_id(scope),
                },
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != status.HTTP_404_NOT_FOUND:
                raise
            logger.info(
                "static.missing",
                extra={"event": "static_missing", "path": path, "request_id": _request_id(scope)},
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL
            ) from e

    def file_response(
        self,
        full_path: str | os.PathLike[str],
        stat_result: os.stat_result,
        scope: Scope,
        status_code: int = 200,
    ) -> Response:
        response = super().file_response(full_path, stat_result, scope, status_code)
        response.headers.setdefault("cache-control", CACHE_CONTROL)
        return response
