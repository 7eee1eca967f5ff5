"""Allow ``python -m grid_moves``."""

from grid_moves.cli import main

if __name__ == "__main__":
    main()
