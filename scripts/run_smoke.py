#!/usr/bin/env python3
"""Run the MOG engine self check (decoding, octads, M24 generators and order)."""
from __future__ import annotations
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from mog.smoke import main


if __name__ == "__main__":
    sys.exit(main())
