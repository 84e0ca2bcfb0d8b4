"""List the routes of the project this script lives in.

The project root is the parent of this script's directory, so the script
can be dropped into ``<project>/scripts/`` and run directly::

    python scripts/routes.py
    python scripts/routes.py --json
"""

from pathlib import Path

from fsroutes.cli import main

if __name__ == "__main__":
    main(default_root=Path(__file__).resolve().parent.parent)
