#!/usr/bin/env python3
"""
halfqwerty entry point for running as a module: python3 -m halfqwerty
"""

import sys
from halfqwerty.cli import main

if __name__ == '__main__':
    sys.exit(main())
