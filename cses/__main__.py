"""Allows ``python -m cses <file>``."""

from .cli import main

if __name__ == "__main__":
    main()
