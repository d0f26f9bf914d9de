"""Module entrypoint for ``python -m headless_ui``."""

from .cli import main


if __name__ == "__main__":
    main()
