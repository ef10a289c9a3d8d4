import sys

from guessing_game.cli import main

if __name__ == "__main__":
    sys.exit(main())
