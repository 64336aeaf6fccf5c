from typing import Any

from fastapi import status

from .base import AppError


class EmptySearchQueryError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        detail = "Search query is required."
        super().__init__(detail)


class TmdbCredentialsMissingError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self):
        detail = "TMDB credentials missing (set TMDB_READ_TOKEN or TMDB_API_KEY)."
        super().__init__(detail)


class TmdbRequestFailedError(AppError):
    """Raised when TMDB answers with a non-2xx status or cannot be reached."""

    status_code = status.HTTP_502_BAD_GATEWAY

    def __init__(self, upstream_status: int | None, upstream_detail: str):
        self.upstream_status = upstream_status
        self.upstream_detail = upstream_detail
        super().__init__("TMDB request failed")

    def to_content(self) -> dict[str, Any]:
        return {
            "detail": self.detail,
            "status": self.upstream_status,
            "details": self.upstream_detail,
        }
