"""Allow ``python -m headr``."""

from headr.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
