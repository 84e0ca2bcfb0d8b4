"""Allow ``python -m fsroutes``."""

from fsroutes.cli import main

if __name__ == "__main__":
    main()
