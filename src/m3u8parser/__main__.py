"""Allow `python -m m3u8parser`."""

from .cli import main

if __name__ == "__main__":
    main()
