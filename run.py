#!/usr/bin/env python3
"""Runner script for ClearPoint."""

import sys
import os

# Add src to path so imports work without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from clearpoint.main import main

if __name__ == "__main__":
    sys.exit(main())
