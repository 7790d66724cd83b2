"""Allow running as ``python -m web_stories``."""

from .cli import main

if __name__ == "__main__":
    main()
