"""Allow ``python -m mkver``."""

from .cli import main

if __name__ == "__main__":
    main()
