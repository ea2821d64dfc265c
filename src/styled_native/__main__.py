"""Allow running as ``python -m styled_native``."""

from styled_native.cli import main

if __name__ == "__main__":
    main()
