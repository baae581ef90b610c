# filmotheque

A small library and command for working with a film collection that is
stored in a compact binary file. Each film has a title, a director, a
release year, its box-office takings in millions of dollars and a cast.
An actor who appears in several films is read once and then shared between
those films.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
filmotheque [path]
```

`path` is the binary film file and defaults to `films.bin` in the current
directory. The command does the following in order:

- prints the title of the first film
- prints every film with its cast
- sets Benedict Cumberbatch's birth year to 1976 and prints his filmography
- detaches the first film from its actors and removes it from the list
- prints the collection again
- prints the filmography of two names that are not in the collection, which
  gives `Aucun acteur de ce nom` for each

The exit status is 0 on success. It is 1, with a message on standard error,
if the file cannot be opened or is cut short, if it holds no films, or if
Benedict Cumberbatch is not in it.

## Library

```python
from filmotheque.collection import FilmList

films = FilmList.from_file("films.bin")
print(len(films), films[0].title)

actor = films.find_actor("Sigourney Weaver")
print(films.format_filmography("Sigourney Weaver"))

films.set_actor_birth_year("Benedict Cumberbatch", 1976)
print(films.format_films())
```

`filmotheque.collection` provides:

- `Actor` (`name`, `birth_year`, `sex`, `films`) and `Film` (`title`,
  `director`, `release_year`, `revenue`, `actors`) dataclasses. An actor's
  `films` is a `FilmList` of the films they play in.
- `FilmList`, an ordered list of films that supports `len()`, iteration and
  indexing. `from_file` and `from_stream` load a collection; `add` appends a
  film; `remove` takes out a given film object (compared by identity) and
  does nothing if it is absent; `find_actor` returns the first actor with a
  name, or `None`.
- `format_films` renders every film with its cast, `format_filmography`
  renders the films of a named actor or `Aucun acteur de ce nom`, and
  `set_actor_birth_year` raises `LookupError` for an unknown name.
- `read_film` and `read_actor` read single records; `read_actor` returns the
  actor already in the list when one has the same name.
- `destroy_film` detaches a film from its actors and returns the actors that
  played in no other film. `FilmList.destroy_all` does this for every film
  and empties the list.
- `format_actor` renders one cast line.

### Binary format

All integers are little-endian and unsigned. `filmotheque.binary` has the
readers for them: `read_uint8`, `read_uint16` and `read_string`. A string is
a 16-bit length followed by that many bytes, decoded as UTF-8 with invalid
bytes replaced. A read that runs past the end of the data raises `EOFError`.

```
uint16 film count
for each film:
    string title, string director
    uint16 release year, uint16 takings
    uint8  actor count
    for each actor: string name, uint16 birth year, uint8 sex
```

### Iteration helpers

`filmotheque.iterutils` has lazy generators:

- `starmap(func, sequence)` yields `func(*item)` for each item.
- `takewhile(predicate, iterable)` yields items until one fails the
  predicate; with `None` as predicate, each item's truth value is used.
- `unique_everseen(iterable)` yields each distinct hashable item once.
- `unique_justseen(iterable)` yields the first item of each run of equal
  items.

`filmotheque.zipping` has `zip_shortest`, which stops at the shortest
iterable, and `zip_longest`, which puts `None` in the place of any iterable
that has already run out. Both yield nothing when given no iterables.

## Limitations

The package only reads collections. It has no writer for the binary format,
and changes made in memory (such as a new birth year or a removed film) are
not saved back to the file.