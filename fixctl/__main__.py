#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
fixctl main module entry point.
Enables running fixctl as a module: python -m fixctl
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
