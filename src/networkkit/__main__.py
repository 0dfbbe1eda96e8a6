"""Permite ejecutar la CLI con `python -m networkkit`."""

from networkkit.cli.main import run

if __name__ == "__main__":
    run()
