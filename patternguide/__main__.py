"""Entry point for running patternguide as a module."""

from patternguide.main import main

if __name__ == "__main__":
    raise SystemExit(main())
