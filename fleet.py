#!/usr/bin/env python3
"""VFBuilder - Main entry point.

Design ships, assemble squadrons, and track points for the miniatures
wargame. State is kept in a local JSON document.
"""

import sys

from vfbuilder.cli import main

if __name__ == "__main__":
    sys.exit(main())
