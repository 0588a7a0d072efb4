"""Entry point for running the search as a module."""

from .runner import run

if __name__ == "__main__":
    run()
