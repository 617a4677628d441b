"""Allow ``python -m pageclip``."""

from pageclip.cli import main

if __name__ == "__main__":
    main()
