import io
import struct

import pytest

from filmotheque.collection import (
    NO_SUCH_ACTOR,
    SEPARATOR,
    Actor,
    Film,
    FilmList,
    destroy_film,
    format_actor,
    read_actor,
    read_film,
)


def _string(text):
    raw = text.encode("utf-8")
    return struct.pack("<H", len(raw)) + raw


def _actor(name, year, sex):
    return _string(name) + struct.pack("<H", year) + bytes([ord(sex)])


def _film(title, director, year, revenue, actors):
    data = _string(title) + _string(director) + struct.pack("<HH", year, revenue)
    data += bytes([len(actors)])
    return data + b"".join(_actor(*a) for a in actors)


def _collection(films):
    return struct.pack("<H", len(films)) + b"".join(_film(*f) for f in films)


FILMS = [
    ("Alien", "Ridley Scott", 1979, 203, [
        ("Sigourney Weaver", 1949, "F"),
        ("Tom Skerritt", 1933, "M"),
        ("John Hurt", 1940, "M"),
    ]),
    ("Avatar", "James Cameron", 2009, 2788, [
        ("Sigourney Weaver", 1949, "F"),
        ("Sam Worthington", 1976, "M"),
    ]),
]


@pytest.fixture
def films():
    return FilmList.from_stream(io.BytesIO(_collection(FILMS)))


def test_loads_all_films_in_order(films):
    assert [f.title for f in films] == ["Alien", "Avatar"]
    assert films[0].director == "Ridley Scott"
    assert films[1].release_year == 2009
    assert films[1].revenue == 2788


def test_actors_are_shared_between_films(films):
    assert films[0].actors[0] is films[1].actors[0]
    weaver = films.find_actor("Sigourney Weaver")
    assert [f.title for f in weaver.films] == ["Alien", "Avatar"]
    assert weaver.sex == "F"


def test_from_file(tmp_path, films):
    path = tmp_path / "films.bin"
    path.write_bytes(_collection(FILMS))
    loaded = FilmList.from_file(path)
    assert [f.title for f in loaded] == [f.title for f in films]


def test_truncated_file_raises():
    with pytest.raises(EOFError):
        FilmList.from_stream(io.BytesIO(_collection(FILMS)[:-3]))


def test_find_missing_actor_returns_none(films):
    assert films.find_actor("Personne") is None


def test_read_actor_reuses_existing(films):
    stream = io.BytesIO(_actor("John Hurt", 1, "X"))
    actor = read_actor(stream, films)
    assert actor is films[0].actors[2]
    assert actor.birth_year == 1940


def test_read_film_links_actors():
    empty = FilmList()
    film = read_film(io.BytesIO(_film(*FILMS[1])), empty)
    assert [a.name for a in film.actors] == ["Sigourney Weaver", "Sam Worthington"]
    assert all(a.films[0] is film for a in film.actors)


def test_add_and_remove_keep_order():
    a, b, c = Film(title="a"), Film(title="b"), Film(title="c")
    films = FilmList([a, b])
    films.add(c)
    films.remove(b)
    assert [f.title for f in films] == ["a", "c"]
    films.remove(Film(title="a"))
    assert len(films) == 2


def test_format_actor():
    assert format_actor(Actor(name="X", birth_year=1950, sex="F")) == "  X, 1950 F\n"


def test_format_films(films):
    text = films.format_films()
    assert text.startswith(SEPARATOR + "Alien\n")
    assert text.count(SEPARATOR) == len(films)
    assert "  Sam Worthington, 1976 M\n" in text


def test_format_filmography(films):
    assert films.format_filmography("Sam Worthington") == SEPARATOR + "Avatar\n" + (
        "  Sigourney Weaver, 1949 F\n  Sam Worthington, 1976 M\n"
    )
    assert films.format_filmography("Inconnu") == NO_SUCH_ACTOR


def test_set_actor_birth_year(films):
    films.set_actor_birth_year("Tom Skerritt", 1976)
    assert films[0].actors[1].birth_year == 1976


def test_set_birth_year_of_missing_actor_raises(films):
    with pytest.raises(LookupError):
        films.set_actor_birth_year("Inconnu", 2000)


def test_destroy_film_releases_only_lone_actors(films):
    alien = films[0]
    released = destroy_film(alien)
    films.remove(alien)
    assert [a.name for a in released] == ["Tom Skerritt", "John Hurt"]
    weaver = films.find_actor("Sigourney Weaver")
    assert [f.title for f in weaver.films] == ["Avatar"]
    assert alien.actors == []
    assert [f.title for f in films] == ["Avatar"]


def test_destroy_all_empties_everything(films):
    actors = {id(a): a for f in films for a in f.actors}.values()
    films.destroy_all()
    assert len(films) == 0
    assert all(len(a.films) == 0 for a in actors)