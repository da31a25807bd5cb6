"""
Data models and types.
"""

from dataclasses import dataclass
from enum import Enum


class ContentType(str, Enum):
    MOVIE = "MOVIE"
    SHOW = "SHOW"


@dataclass(frozen=True)
class Content:
    id: str
    title: str
    type: ContentType
    description: str
    release_year: int
    runtime: int
    genres: frozenset[str]
    seasons: int
    imdb_id: str
    imdb_score: float
    imdb_votes: float

    @property
    def is_movie(self) -> bool:
        return self.type is ContentType.MOVIE
