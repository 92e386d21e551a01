"""Module entrypoint for ``python -m spotfind``."""

from .cli import main


if __name__ == "__main__":
    main()
