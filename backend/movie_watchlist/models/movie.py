from typing import Any

from pydantic import ConfigDict, field_validator
from sqlmodel import Field, SQLModel

__all__ = [
    "MovieBase",
    "MovieCreate",
    "MovieUpdate",
    "Movie",
]


# Shared properties
class MovieBase(SQLModel):
    tmdb_id: int | None = None
    title: str
    year: str | None = None
    poster_path: str | None = None
    overview: str = ""

    # Hand-edited data files may carry a numeric year
    @field_validator("year", mode="before")
    @classmethod
    def year_as_text(cls, value: Any) -> Any:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


# Properties to receive on movie creation
class MovieCreate(SQLModel):
    tmdb_id: int | None = None
    title: str | None = None
    year: str | int | None = None
    poster_path: str | None = None
    overview: str | None = None


# Properties to receive on movie update, id and tmdb_id are fixed for life
class MovieUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    title: str | None = None
    year: str | int | None = None
    poster_path: str | None = None
    overview: str | None = None
    watched: bool | None = None
    watchlist: bool | None = None
    liked: bool | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    review: str | None = None


# Stored record
class Movie(MovieBase):
    id: int = Field(ge=1)
    watched: bool = False
    watchlist: bool = True
    liked: bool = False
    rating: int | None = Field(default=None, ge=1, le=5)
    review: str = ""
