from fastapi import status

from .base import AppError


class MovieDataInvalidError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, invalid_count: int):
        self.invalid_count = invalid_count
        detail = (
            f"Movie data file holds {invalid_count} invalid record(s); "
            "fix or remove them before making changes."
        )
        super().__init__(detail)
