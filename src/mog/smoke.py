"""End-to-end self check of the Golay, octad and M24 layers."""

from __future__ import annotations

import argparse
import json
import random
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from .golay import decode, encode, is_codeword, weight_distribution
from .m24 import M24_ORDER, generator, generator_names, generator_order, m24_group, random_word
from .octads import complete_octad, is_octad
from .points import N_POINTS

EXPECTED_WEIGHTS = {0: 1, 8: 759, 12: 2576, 16: 759, 24: 1}


def _random_error(rng: random.Random, max_weight: int) -> int:
    positions = rng.sample(range(N_POINTS), rng.randint(0, max_weight))
    e = 0
    for p in positions:
        e |= 1 << p
    return e


def run_smoke(
    *,
    out_path: Optional[Path],
    samples: int,
    seed: Optional[int],
    check_order: bool,
) -> int:
    rng = random.Random(seed)
    failures = []

    weights = weight_distribution()
    if weights != EXPECTED_WEIGHTS:
        failures.append(f"weight distribution {weights}")

    for _ in range(samples):
        c = encode(rng.getrandbits(12))
        e = _random_error(rng, 3)
        result = decode(c ^ e)
        if result.codeword != c or result.error != e:
            failures.append(f"decode {c:#08x}^{e:#08x}")
            break

    for _ in range(samples):
        five = rng.sample(range(N_POINTS), 5)
        octad = complete_octad(five)
        if not is_octad(octad):
            failures.append(f"complete_octad {sorted(five)}")
            break

    for name in generator_names():
        if generator(name).order != generator_order(name):
            failures.append(f"order of {name}")

    for _ in range(samples):
        letters, perm = random_word(10, rng)
        c = encode(rng.getrandbits(12))
        if not is_codeword(perm.apply_vector(c)):
            failures.append(f"word {' '.join(letters)}")
            break

    order = None
    if check_order:
        order = m24_group().order
        if order != M24_ORDER:
            failures.append(f"group order {order}")

    summary: Dict[str, Any] = {
        "samples": samples,
        "seed": seed,
        "weight_distribution": weights,
        "group_order": order,
        "failures": failures,
        "ok": not failures,
    }
    if out_path is not None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with out_path.open("w", encoding="utf-8") as f:
            json.dump(summary, f, indent=2, sort_keys=True)

    print(
        "smoke:",
        f"samples={samples}",
        f"seed={seed}",
        f"group_order={order}",
        f"ok={not failures}",
    )
    for failure in failures:
        print(f"FAILED: {failure}", file=sys.stderr)
    return 0 if not failures else 1


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Check decoding, octad completion and the M24 generators."
    )
    parser.add_argument("--out", default=None, help="Write a JSON summary to this path.")
    parser.add_argument("--samples", type=int, default=200, help="Random cases per check.")
    parser.add_argument("--seed", type=int, default=None, help="RNG seed for sampling.")
    parser.add_argument(
        "--skip-order",
        action="store_true",
        help="Skip the Schreier-Sims group order computation.",
    )
    args = parser.parse_args()
    if args.samples <= 0:
        parser.error("--samples must be positive")

    out_path = Path(args.out) if args.out else None
    return run_smoke(
        out_path=out_path,
        samples=args.samples,
        seed=args.seed,
        check_order=not args.skip_order,
    )


if __name__ == "__main__":
    sys.exit(main())
