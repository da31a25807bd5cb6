import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Query, Request
from pydantic import BaseModel
from starlette import status
from starlette.responses import JSONResponse

from netflix_catalog.errors import InvalidArgument, NotFound
from netflix_catalog.logger import logger
from netflix_catalog.models import Content
from netflix_catalog.recommender import NetflixRecommender
from netflix_catalog.utils import timed

DATASET_PATH = "./data/netflix.csv"


class ContentOut(BaseModel):
    id: str
    title: str
    type: str
    description: str
    release_year: int
    runtime: int
    genres: list[str]
    seasons: int
    imdb_id: str
    imdb_score: float
    imdb_votes: float

    @classmethod
    def from_content(cls, content: Content) -> "ContentOut":
        return cls(
            id=content.id,
            title=content.title,
            type=content.type.value,
            description=content.description,
            release_year=content.release_year,
            runtime=content.runtime,
            genres=sorted(content.genres),
            seasons=content.seasons,
            imdb_id=content.imdb_id,
            imdb_score=content.imdb_score,
            imdb_votes=content.imdb_votes,
        )


def _to_json(contents) -> list[dict]:
    return [ContentOut.from_content(content).model_dump() for content in contents]


@asynccontextmanager
async def lifespan(app: FastAPI):
    dataset_path = os.environ.get("DATASET_PATH") or DATASET_PATH
    logger.info(f"loading dataset from {dataset_path}")
    app.state.recommender = NetflixRecommender.from_path(dataset_path)
    yield


app = FastAPI(lifespan=lifespan)


@app.exception_handler(NotFound)
async def not_found_handler(request: Request, exc: NotFound) -> JSONResponse:
    logger.warning(f"{request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
    logger.error(f"{request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=status.HTTP_400_BAD_REQUEST)


@app.get("/content")
@timed
async def all_content(request: Request) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    return JSONResponse(_to_json(recommender.get_all_content()))


@app.get("/content/{content_id}")
async def content_by_id(request: Request, content_id: str) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    content = recommender.get_content_by_id(content_id)
    return JSONResponse(ContentOut.from_content(content).model_dump())


@app.get("/genres")
async def genres(request: Request) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    return JSONResponse(sorted(recommender.get_all_genres()))


@app.get("/longest_movie")
async def longest_movie(request: Request) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    movie = recommender.get_the_longest_movie()
    return JSONResponse(ContentOut.from_content(movie).model_dump())


@app.get("/content_by_type")
@timed
async def content_by_type(request: Request) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    groups = recommender.group_content_by_type()
    return JSONResponse(
        {
            content_type.value: _to_json(sorted(group, key=lambda content: content.id))
            for content_type, group in groups.items()
        }
    )


@app.get("/top_rated")
@timed
async def top_rated(request: Request, n: int = Query(default=10)) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    return JSONResponse(_to_json(recommender.get_top_n_rated_content(n)))


@app.get("/similar/{content_id}")
@timed
async def similar(request: Request, content_id: str) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    content = recommender.get_content_by_id(content_id)
    similar_content = recommender.get_similar_content(content)
    logger.info(f"found {len(similar_content)} titles similar to {content_id}")
    return JSONResponse(_to_json(similar_content))


@app.get("/search")
@timed
async def search(request: Request, keywords: list[str] = Query(default=[])) -> JSONResponse:
    recommender: NetflixRecommender = request.app.state.recommender
    found = recommender.get_content_by_keywords(*keywords)
    return JSONResponse(_to_json(sorted(found, key=lambda content: content.id)))
