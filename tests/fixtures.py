from netflix_catalog.models import Content, ContentType


def make_content(
    content_id: str,
    content_type: ContentType = ContentType.MOVIE,
    genres=(),
    runtime: int = 90,
    imdb_score: float = 7.0,
    imdb_votes: float = 1000.0,
    description: str = "",
) -> Content:
    return Content(
        id=content_id,
        title=f"title {content_id}",
        type=content_type,
        description=description,
        release_year=2000,
        runtime=runtime,
        genres=frozenset(genres),
        seasons=-1 if content_type is ContentType.MOVIE else 2,
        imdb_id=f"tt{content_id}",
        imdb_score=imdb_score,
        imdb_votes=imdb_votes,
    )
