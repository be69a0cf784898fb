"""Allow running as ``python -m mcli``."""

from mcli.cli import main

if __name__ == "__main__":
    main()
