#!/usr/bin/env python3
"""Main entry point for the cafeteria simulation package."""

import sys
from .scripts.run_simulation import main

if __name__ == '__main__':
    sys.exit(main())
