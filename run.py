#!/usr/bin/env python3
"""Git Monitor - Run the application.

Usage:
    python run.py PATH_TO_CONFIG
    # Or: git-monitor PATH_TO_CONFIG

The dashboard will be available at http://localhost:3000
"""

import sys

from git_monitor.app import main

if __name__ == "__main__":
    sys.exit(main())
