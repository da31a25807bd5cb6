import io

import pytest

from netflix_catalog.errors import LoadFailure
from netflix_catalog.loader import load_contents, load_contents_from_path, parse_genres
from netflix_catalog.models import ContentType
from netflix_catalog.recommender import NetflixRecommender

HEADER = "id,title,type,description,release_year,runtime,genres,seasons,imdb_id,imdb_score,imdb_votes\n"
TAXI_DRIVER = (
    "tm84618,Taxi Driver,MOVIE,A mentally unstable Vietnam War veteran works as a night-time taxi driver."
    ",1976,114,['drama'; 'crime'],-1,tt0075314,8.2,808582.0\n"
)
MONTY_PYTHON = (
    "ts22164,Monty Python's Flying Circus,SHOW,A British sketch comedy series.,1969,30,"
    "['comedy'; 'european'],4.0,tt0063929,8.8,73424.0\n"
)
NO_GENRES = "tm1,Untitled,MOVIE,,2020,0,[],-1,,0.0,0.0\n"


def test_load_contents():
    contents = load_contents(io.StringIO(HEADER + TAXI_DRIVER + MONTY_PYTHON))
    assert len(contents) == 2
    taxi, monty = contents
    assert taxi.id == "tm84618"
    assert taxi.type is ContentType.MOVIE
    assert taxi.runtime == 114
    assert taxi.genres == {"drama", "crime"}
    assert taxi.seasons == -1
    assert taxi.imdb_score == pytest.approx(8.2)
    assert taxi.imdb_votes == pytest.approx(808582.0)
    assert monty.type is ContentType.SHOW
    assert monty.seasons == 4
    assert monty.title == "Monty Python's Flying Circus"


def test_load_empty_genres_and_description():
    (content,) = load_contents(io.StringIO(HEADER + NO_GENRES))
    assert content.genres == frozenset()
    assert content.description == ""
    assert content.imdb_votes == 0


def test_load_quoted_description():
    row = 'tm2,Heat,MOVIE,"Cops, robbers, and Los Angeles.",1995,170,[\'crime\'],-1,tt0113277,8.3,600000\n'
    (content,) = load_contents(io.StringIO(HEADER + row))
    assert content.description == "Cops, robbers, and Los Angeles."


def test_load_header_only():
    assert load_contents(io.StringIO(HEADER)) == []


def test_load_empty_source():
    assert load_contents(io.StringIO("")) == []


@pytest.mark.parametrize(
    "row",
    [
        "tm1,Untitled,DOCUMENTARY,,2020,90,[],-1,,7.0,10\n",
        "tm1,Untitled,MOVIE,,2020,ninety,[],-1,,7.0,10\n",
        "tm1,Untitled,MOVIE,,2020,-5,[],-1,,7.0,10\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,7.0,-10\n",
        "tm1,Untitled,MOVIE,,2020,90,'drama',-1,,7.0,10\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,,10\n",
        "tm1,Untitled,MOVIE,,2020,90,[]\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,nan,10\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,inf,10\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,7.0,nan\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,7.0,inf\n",
        "tm1,Untitled,MOVIE,,2020,90,[],-1,,7.0,-inf\n",
        "tm1,Untitled,MOVIE,,2020,90,[],inf,,7.0,10\n",
    ],
)
def test_load_malformed_row(row):
    with pytest.raises(LoadFailure):
        load_contents(io.StringIO(HEADER + TAXI_DRIVER + row))


def test_load_too_many_fields():
    row = "tm1,Untitled,MOVIE,,2020,90,[],-1,,7.0,10,extra\n"
    with pytest.raises(LoadFailure):
        load_contents(io.StringIO(HEADER + TAXI_DRIVER + row))


def test_load_every_row_too_wide():
    row = "junk,tm1,Heat,MOVIE,d,1995,170,['crime'],-1,tt1,8.3,600000\n"
    with pytest.raises(LoadFailure):
        load_contents(io.StringIO(HEADER + row))


def test_load_error_names_data_row():
    row = "tm1,Untitled,MOVIE,,2020,ninety,[],-1,,7.0,10\n"
    with pytest.raises(LoadFailure, match="data row 2"):
        load_contents(io.StringIO(HEADER + TAXI_DRIVER + "\n" + row))


def test_load_wrong_header():
    with pytest.raises(LoadFailure):
        load_contents(io.StringIO("id,title\ntm1,Untitled\n"))


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadFailure):
        load_contents_from_path(tmp_path / "missing.csv")


def test_load_from_path(tmp_path):
    path = tmp_path / "netflix.csv"
    path.write_text(HEADER + TAXI_DRIVER + MONTY_PYTHON, encoding="utf-8")
    recommender = NetflixRecommender.from_path(path)
    assert recommender.get_the_longest_movie().id == "tm84618"


def test_parse_genres():
    assert parse_genres("['drama'; 'crime'; 'war']") == {"drama", "crime", "war"}
    assert parse_genres("[]") == frozenset()
    with pytest.raises(ValueError):
        parse_genres("drama")
