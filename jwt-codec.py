#!/usr/bin/env python3
"""
Convenience entry point.

Usage:
    python3 jwt-codec.py encode '{"sub": "alice"}'
    python3 jwt-codec.py decode --stdin < token.txt

This shim delegates to the jwt_codec package under src/.
"""

import os
import sys

# Ensure the src/ directory is on the Python path so the package can be found
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from jwt_codec.cli import main

if __name__ == "__main__":
    main()
