import json
from logging import getLogger
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from movie_watchlist.exceptions.storage_exceptions import MovieDataInvalidError
from movie_watchlist.models.movie import Movie

logger = getLogger(__name__)


class JsonFileStorage:
    """Keeps the whole collection in one JSON array on disk."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        # Records from the last load that did not validate
        self.invalid_records: list[Any] = []

    def load(self) -> list[Movie]:
        """
        Read every stored movie.

        A missing file, unreadable file, invalid JSON or a document that is not
        an array all read as an empty collection. Inside an array, records that
        fail validation are skipped one by one and remembered, so that save()
        can refuse to overwrite them.
        """
        self.invalid_records = []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("Movie data file %s does not exist yet", self.path)
            return []
        except OSError:
            logger.exception("Error reading movie data from %s", self.path)
            return []

        try:
            parsed = json.loads(raw)
        except json.JSONDecodeError:
            logger.exception("Movie data file %s is not valid JSON", self.path)
            return []

        if not isinstance(parsed, list):
            logger.error("Movie data file %s does not hold a JSON array", self.path)
            return []

        movies: list[Movie] = []
        for index, record in enumerate(parsed):
            try:
                movies.append(Movie.model_validate(record))
            except ValidationError as e:
                self.invalid_records.append(record)
                logger.warning(
                    "Skipping invalid movie record at index %s in %s (%s errors)",
                    index,
                    self.path,
                    e.error_count(),
                )
        return movies

    def save(self, movies: list[Movie]) -> None:
        """
        Rewrite the whole collection.

        Raises:
            MovieDataInvalidError: If the last load skipped invalid records;
                the file is left untouched.
            OSError: If the file cannot be written.
        """
        if self.invalid_records:
            logger.error(
                "Refusing to overwrite %s, it holds %s invalid record(s)",
                self.path,
                len(self.invalid_records),
            )
            raise MovieDataInvalidError(len(self.invalid_records))

        payload = [movie.model_dump(mode="json") for movie in movies]
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False),
                encoding="utf-8",
            )
        except OSError:
            logger.exception("Error writing movie data to %s", self.path)
            raise
