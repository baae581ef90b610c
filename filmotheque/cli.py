"""Command that loads a film file and walks through the collection."""

from __future__ import annotations

import argparse
import sys

from filmotheque.collection import FilmList, destroy_film

SEPARATOR = "\n\033[35m" + "═" * 40 + "\033[0m\n"
FEATURED_ACTOR = "Benedict Cumberbatch"


def main(argv: list[str] | None = None) -> int:
    """Run the demonstration on a film file; return the exit status."""
    parser = argparse.ArgumentParser(description="Affiche une collection de films.")
    parser.add_argument("path", nargs="?", default="films.bin", help="fichier binaire des films")
    args = parser.parse_args(argv)
    out = sys.stdout

    try:
        films = FilmList.from_file(args.path)
    except (OSError, EOFError) as error:
        print(f"Impossible de lire {args.path}: {error}", file=sys.stderr)
        return 1
    if len(films) == 0:
        print("La collection est vide.", file=sys.stderr)
        return 1

    out.write(SEPARATOR + "Le premier film de la liste est:\n")
    out.write(films[0].title)
    out.write(SEPARATOR + "Les films sont:\n")
    out.write(films.format_films())

    try:
        films.set_actor_birth_year(FEATURED_ACTOR, 1976)
    except LookupError as error:
        print(error, file=sys.stderr)
        return 1
    out.write(SEPARATOR + f"Liste des films où {FEATURED_ACTOR} joue sont:\n")
    out.write(films.format_filmography(FEATURED_ACTOR))

    first = films[0]
    destroy_film(first)
    films.remove(first)
    out.write(SEPARATOR + "Les films sont maintenant:\n")
    out.write(films.format_films())
    out.write(films.format_filmography("Acteur qui n'existe pas"))
    out.write(films.format_filmography("Cet acteur n'existe pas"))

    films.destroy_all()
    return 0


if __name__ == "__main__":
    sys.exit(main())