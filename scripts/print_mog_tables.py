#!/usr/bin/env python3
"""Print the hexacode score table, the generator matrix and the M24 generators."""
from __future__ import annotations
import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from mog import gf4
from mog.golay import INFORMATION_SET, generator_matrix
from mog.hexacode import HEXACODE_WORDS, column_score
from mog.m24 import GENERATOR_DESCRIPTIONS, generator, generator_names


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--systematic",
        action="store_true",
        help="Print the generator matrix in reduced row echelon form.",
    )
    args = parser.parse_args()

    print("column pattern -> score")
    for pattern in range(16):
        print(f"  {pattern:04b}  {gf4.symbol_name(column_score(pattern))}")

    print(f"hexacode: {len(HEXACODE_WORDS)} words")
    for word in HEXACODE_WORDS:
        print("  " + " ".join(gf4.symbol_name(x) for x in word))

    print(f"generator matrix (information set {list(INFORMATION_SET)}):")
    for row in generator_matrix(systematic=args.systematic):
        print("  " + "".join(str(int(b)) for b in row))

    for name in generator_names():
        perm = generator(name)
        print(f"{name} (order {perm.order}): {GENERATOR_DESCRIPTIONS[name]}")
        print(f"  {perm}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
