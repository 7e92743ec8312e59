"""Module entrypoint for `python -m sbximages`."""

from sbximages.cli.app import main

if __name__ == "__main__":
    main()
