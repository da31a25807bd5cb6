"""
Weighted rating and genre similarity rankings over a catalog.
"""

import numpy as np
import scipy.sparse
from sklearn.preprocessing import MultiLabelBinarizer

from netflix_catalog.catalog import Catalog
from netflix_catalog.errors import InvalidArgument, NotFound
from netflix_catalog.logger import logger
from netflix_catalog.models import Content

# votes needed before a title's own score outweighs the catalog average
SENSITIVITY_THRESHOLD = 10_000


def weighted_rating(score, votes, average_score: float, threshold: float = SENSITIVITY_THRESHOLD):
    """
    Bayesian average of a title's own score and the catalog average.

        WR = (v / (v + m)) * R + (m / (v + m)) * C

    Works on scalars as well as numpy arrays of scores and votes.
    See https://stackoverflow.com/questions/1411199/what-is-a-better-way-to-sort-by-a-5-star-rating
    """
    total = votes + threshold
    return (votes / total) * score + (threshold / total) * average_score


def _encode_genres(catalog: Catalog) -> tuple[MultiLabelBinarizer, scipy.sparse.csr_matrix]:
    binarizer = MultiLabelBinarizer(sparse_output=True)
    genre_matrix = binarizer.fit_transform([sorted(content.genres) for content in catalog])
    return binarizer, scipy.sparse.csr_matrix(genre_matrix)


class RankingEngine:
    def __init__(self, catalog: Catalog, sensitivity_threshold: float = SENSITIVITY_THRESHOLD):
        if sensitivity_threshold <= 0:
            raise InvalidArgument(
                f"sensitivity threshold should be positive, got {sensitivity_threshold}"
            )
        self.catalog = catalog
        self.sensitivity_threshold = sensitivity_threshold
        self.contents = catalog.all_content()
        self.scores = np.array([content.imdb_score for content in self.contents], dtype=np.float64)
        self.votes = np.array([content.imdb_votes for content in self.contents], dtype=np.float64)
        self.types = [content.type for content in self.contents]
        if catalog.all_genres():
            self.binarizer, self.genre_matrix = _encode_genres(catalog)
        else:
            self.binarizer, self.genre_matrix = None, None

    def average_score(self) -> float:
        if not self.contents:
            raise NotFound("average score is undefined for an empty catalog")
        return float(self.scores.mean())

    def weighted_ratings(self) -> np.ndarray:
        return weighted_rating(
            self.scores, self.votes, self.average_score(), self.sensitivity_threshold
        )

    def top_n_rated(self, n: int) -> list[Content]:
        """
        Top ``n`` titles by weighted rating, best first.

        Titles with equal weighted rating keep their catalog order.
        """
        if n < 0:
            raise InvalidArgument(f"n should be a non-negative integer, got {n}")
        if n == 0 or not self.contents:
            return []

        ratings = self.weighted_ratings()
        top_idx = np.argsort(-ratings, kind="stable")[:n]
        logger.debug(f"top {len(top_idx)} weighted ratings: {ratings[top_idx]}")
        return [self.contents[idx] for idx in top_idx]

    def similarity_scores(self, content: Content) -> np.ndarray:
        """Number of genres each catalog title shares with ``content``."""
        if self.binarizer is None:
            return np.zeros(len(self.contents), dtype=np.int64)
        # genres unknown to the catalog can't be shared with anything
        known = [genre for genre in self.binarizer.classes_ if genre in content.genres]
        if not known:
            return np.zeros(len(self.contents), dtype=np.int64)
        reference = self.binarizer.transform([known])
        common = self.genre_matrix @ reference.T
        return np.asarray(common.todense()).ravel().astype(np.int64)

    def similar_to(self, content: Content) -> list[Content]:
        """
        Titles of the same type as ``content`` (itself included), most shared genres first.

        Titles without any shared genre are kept at the end; ties keep catalog order.
        """
        same_type = np.array([content_type == content.type for content_type in self.types], dtype=bool)
        candidates = np.flatnonzero(same_type)
        if len(candidates) == 0:
            return []

        common = self.similarity_scores(content)[candidates]
        top_idx = candidates[np.argsort(-common, kind="stable")]
        return [self.contents[idx] for idx in top_idx]
