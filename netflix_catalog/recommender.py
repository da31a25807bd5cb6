"""
Public entry point answering every catalog query.
"""

from pathlib import Path
from typing import Iterable, TextIO, Union

from netflix_catalog.catalog import Catalog
from netflix_catalog.loader import load_contents, load_contents_from_path
from netflix_catalog.logger import logger
from netflix_catalog.models import Content, ContentType
from netflix_catalog.ranking import SENSITIVITY_THRESHOLD, RankingEngine


class NetflixRecommender:
    def __init__(
        self, contents: Iterable[Content], sensitivity_threshold: float = SENSITIVITY_THRESHOLD
    ):
        self.catalog = Catalog(contents)
        self.ranking = RankingEngine(self.catalog, sensitivity_threshold)
        logger.info(f"loaded {len(self.catalog)} movies and shows")

    @classmethod
    def from_reader(cls, reader: TextIO, **kwargs) -> "NetflixRecommender":
        return cls(load_contents(reader), **kwargs)

    @classmethod
    def from_path(cls, path: Union[str, Path], **kwargs) -> "NetflixRecommender":
        return cls(load_contents_from_path(path), **kwargs)

    def get_all_content(self) -> list[Content]:
        return self.catalog.all_content()

    def get_all_genres(self) -> frozenset[str]:
        return self.catalog.all_genres()

    def get_the_longest_movie(self) -> Content:
        return self.catalog.longest_movie()

    def group_content_by_type(self) -> dict[ContentType, frozenset[Content]]:
        return self.catalog.group_by_type()

    def get_top_n_rated_content(self, n: int) -> list[Content]:
        return self.ranking.top_n_rated(n)

    def get_similar_content(self, content: Content) -> list[Content]:
        return self.ranking.similar_to(content)

    def get_content_by_keywords(self, *keywords: str) -> frozenset[Content]:
        return self.catalog.by_keywords(keywords)

    def get_content_by_id(self, content_id: str) -> Content:
        return self.catalog.by_id(content_id)
