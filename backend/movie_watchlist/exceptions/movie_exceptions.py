from fastapi import status

from .base import AppError


class MovieNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, movie_id: int):
        self.movie_id = movie_id
        detail = f"Movie with ID {movie_id} not found."
        super().__init__(detail)


class InvalidMovieIdError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, raw_id: str):
        self.raw_id = raw_id
        detail = "Invalid movie id."
        super().__init__(detail)


class MovieTitleMissingError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        detail = "Title is required."
        super().__init__(detail)


class MovieAlreadyExistsError(AppError):
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, tmdb_id: int):
        self.tmdb_id = tmdb_id
        detail = "Movie already exists in watchlist."
        super().__init__(detail)


class InvalidRatingError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self):
        detail = "Rating must be a number from 1 to 5."
        super().__init__(detail)
