#!/usr/bin/env python3
"""
CLI: run prismcat from a checkout without installing.
Usage:
  python scripts/prismcat.py README.md
  fortune | python scripts/prismcat.py -f 1
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from prismcat.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
