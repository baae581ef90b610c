"""In-memory film collection with actors shared between films."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO

from filmotheque.binary import read_string, read_uint8, read_uint16

SEPARATOR = "\n\033[35m-------\033[0m\n"
NO_SUCH_ACTOR = "Aucun acteur de ce nom\n"


@dataclass(eq=False)
class Actor:
    """An actor; ``films`` lists the films of the collection they play in."""

    name: str = ""
    birth_year: int = 0
    sex: str = " "
    films: FilmList = field(default_factory=lambda: FilmList(), repr=False)


@dataclass(eq=False)
class Film:
    """A film with its director, release year, revenue (M$) and cast."""

    title: str = ""
    director: str = ""
    release_year: int = 0
    revenue: int = 0
    actors: list[Actor] = field(default_factory=list, repr=False)


class FilmList:
    """An ordered list of films, compared by identity."""

    def __init__(self, films: Iterable[Film] = ()) -> None:
        self._films: list[Film] = list(films)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> FilmList:
        """Load a collection from a binary file."""
        with open(path, "rb") as stream:
            return cls.from_stream(stream)

    @classmethod
    def from_stream(cls, stream: BinaryIO) -> FilmList:
        """Load a collection from a binary stream, sharing actors by name."""
        count = read_uint16(stream)
        films = cls()
        for _ in range(count):
            films.add(read_film(stream, films))
        return films

    def __len__(self) -> int:
        return len(self._films)

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films)

    def __getitem__(self, index: int) -> Film:
        return self._films[index]

    def add(self, film: Film) -> None:
        """Append a film without copying it."""
        self._films.append(film)

    def remove(self, film: Film) -> None:
        """Remove the given film object, if present; the film is kept alive."""
        for position, candidate in enumerate(self._films):
            if candidate is film:
                del self._films[position]
                return

    def find_actor(self, name: str) -> Actor | None:
        """Return the first actor with this name, or ``None``."""
        return next(
            (actor for film in self for actor in film.actors if actor.name == name),
            None,
        )

    def format_films(self) -> str:
        """Render every film with its cast."""
        return "".join(
            SEPARATOR + film.title + "\n" + "".join(map(format_actor, film.actors))
            for film in self
        )

    def format_filmography(self, actor_name: str) -> str:
        """Render the films of the named actor, or a not-found message."""
        actor = self.find_actor(actor_name)
        if actor is None:
            return NO_SUCH_ACTOR
        return actor.films.format_films()

    def set_actor_birth_year(self, actor_name: str, year: int) -> None:
        """Change the birth year of the named actor."""
        actor = self.find_actor(actor_name)
        if actor is None:
            raise LookupError(f"no actor named {actor_name!r}")
        actor.birth_year = year

    def destroy_all(self) -> None:
        """Destroy every film of the collection and empty it."""
        for film in list(self._films):
            destroy_film(film)
        self._films.clear()


def read_actor(stream: BinaryIO, films: FilmList) -> Actor:
    """Read an actor, returning the existing one of the same name if any."""
    name = read_string(stream)
    birth_year = read_uint16(stream)
    sex = chr(read_uint8(stream))
    existing = films.find_actor(name)
    if existing is not None:
        return existing
    return Actor(name=name, birth_year=birth_year, sex=sex)


def read_film(stream: BinaryIO, films: FilmList) -> Film:
    """Read a film and its cast, linking each actor back to the film."""
    film = Film(
        title=read_string(stream),
        director=read_string(stream),
        release_year=read_uint16(stream),
        revenue=read_uint16(stream),
    )
    for _ in range(read_uint8(stream)):
        actor = read_actor(stream, films)
        film.actors.append(actor)
        actor.films.add(film)
    return film


def destroy_film(film: Film) -> list[Actor]:
    """Detach a film from its actors.

    Returns the actors that played in no other film and are thus released.
    """
    released = []
    for actor in film.actors:
        if len(actor.films) <= 1:
            released.append(actor)
        actor.films.remove(film)
    film.actors.clear()
    return released


def format_actor(actor: Actor) -> str:
    """Render one actor line."""
    return f"  {actor.name}, {actor.birth_year} {actor.sex}\n"