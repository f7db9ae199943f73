"""Allow ``python -m faultline``."""

from faultline.cli.cli import main

if __name__ == "__main__":
    main()
