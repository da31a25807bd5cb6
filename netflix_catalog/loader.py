"""
Load movies and shows from the CSV dataset.

Expected columns, in order:
    id,title,type,description,release_year,runtime,genres,seasons,imdb_id,imdb_score,imdb_votes

Genres are stored as a bracketed, semicolon separated list, e.g. ``['drama'; 'crime']``.
"""

import math
from pathlib import Path
from typing import TextIO, Union

import pandas as pd

from netflix_catalog.errors import LoadFailure
from netflix_catalog.logger import logger
from netflix_catalog.models import Content, ContentType
from netflix_catalog.utils import timed

COLUMNS = [
    "id",
    "title",
    "type",
    "description",
    "release_year",
    "runtime",
    "genres",
    "seasons",
    "imdb_id",
    "imdb_score",
    "imdb_votes",
]


def _field(row, name: str) -> str:
    # short rows are padded with NaN by pandas
    value = row[name]
    return value.strip() if isinstance(value, str) else ""


def parse_genres(raw: str) -> frozenset[str]:
    raw = raw.strip()
    if not (raw.startswith("[") and raw.endswith("]")):
        raise ValueError(f"genres must be a bracketed list, got {raw!r}")
    genres = (genre.strip().strip("'\"").strip() for genre in raw[1:-1].split(";"))
    return frozenset(genre for genre in genres if genre)


def _finite(value: float, name: str) -> float:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value}")
    return value


def _non_negative(value, name: str):
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def process_content(row) -> Content:
    raw_type = _field(row, "type")
    try:
        content_type = ContentType(raw_type.upper())
    except ValueError:
        raise ValueError(f"unknown content type {raw_type!r}") from None

    return Content(
        id=_field(row, "id"),
        title=_field(row, "title"),
        type=content_type,
        description=_field(row, "description"),
        release_year=int(_field(row, "release_year")),
        runtime=_non_negative(int(_field(row, "runtime")), "runtime"),
        genres=parse_genres(_field(row, "genres")),
        seasons=int(float(_field(row, "seasons"))),
        imdb_id=_field(row, "imdb_id"),
        imdb_score=_finite(float(_field(row, "imdb_score")), "imdb_score"),
        imdb_votes=_non_negative(
            _finite(float(_field(row, "imdb_votes")), "imdb_votes"), "imdb_votes"
        ),
    )


def load_contents(reader: TextIO) -> list[Content]:
    """Parse every data row of ``reader``; the header row is skipped."""
    try:
        # the header line sets the row width, longer data rows fail to tokenize
        table = pd.read_csv(reader, header=None, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.warning("dataset is empty, no content loaded")
        return []
    except (pd.errors.ParserError, OSError, UnicodeDecodeError) as exc:
        raise LoadFailure(f"could not read dataset: {exc}") from exc

    if len(table.columns) != len(COLUMNS):
        raise LoadFailure(
            f"expected {len(COLUMNS)} columns, found {len(table.columns)}: {list(table.iloc[0])}"
        )
    table.columns = COLUMNS
    table = table.iloc[1:]

    contents = []
    for row_num, (_, row) in enumerate(table.iterrows(), 1):
        try:
            contents.append(process_content(row))
        except (ValueError, OverflowError) as exc:
            raise LoadFailure(f"malformed data row {row_num}: {exc}") from exc
    logger.debug(f"parsed {len(contents)} rows")
    return contents


@timed
def load_contents_from_path(path: Union[str, Path]) -> list[Content]:
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as reader:
            return load_contents(reader)
    except OSError as exc:
        raise LoadFailure(f"could not open dataset {path}: {exc}") from exc
