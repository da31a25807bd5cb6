"""
Immutable in-memory catalog of movies and shows.
"""

from collections import defaultdict
from typing import Iterable, Iterator

from netflix_catalog.errors import NotFound
from netflix_catalog.models import Content, ContentType
from netflix_catalog.search.keywords import normalize_keywords, tokenize


class Catalog:
    def __init__(self, contents: Iterable[Content]):
        self.contents = tuple(contents)
        self.content2words = {content: frozenset(tokenize(content.description)) for content in self.contents}
        self.id2content = {}
        for content in self.contents:
            self.id2content.setdefault(content.id, content)

    def all_content(self) -> list[Content]:
        return list(self.contents)

    def all_genres(self) -> frozenset[str]:
        genres = set()
        for content in self.contents:
            genres.update(content.genres)
        return frozenset(genres)

    def longest_movie(self) -> Content:
        """Movie with the largest runtime; the first one in load order wins ties."""
        movies = [content for content in self.contents if content.is_movie]
        if not movies:
            raise NotFound("there are no movies in the catalog")
        return max(movies, key=lambda movie: movie.runtime)

    def group_by_type(self) -> dict[ContentType, frozenset[Content]]:
        """Types without any content are left out of the mapping."""
        groups = defaultdict(set)
        for content in self.contents:
            groups[content.type].add(content)
        return {content_type: frozenset(group) for content_type, group in groups.items()}

    def by_keywords(self, keywords: Iterable[str]) -> frozenset[Content]:
        """
        Content whose description contains every keyword as a whole word, ignoring case.

        Blank keywords are ignored and no keywords at all match every record.
        """
        normalized = normalize_keywords(keywords)
        return frozenset(
            content for content in self.contents if normalized <= self.content2words[content]
        )

    def by_id(self, content_id: str) -> Content:
        content = self.id2content.get(content_id)
        if content is None:
            raise NotFound(f"content ID {content_id} not found")
        return content

    def __len__(self):
        return len(self.contents)

    def __iter__(self) -> Iterator[Content]:
        return iter(self.contents)
