from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .errors import MogError
from .golay import decode, encode
from .grid import GridState
from .m24 import GENERATOR_DESCRIPTIONS, M24_ORDER, generator, generator_names, m24_group, word
from .octads import complete_octad, complete_sextet, nearest_codewords
from .points import format_vector, parse_vector, points_of
from .sextets import OrderedSextet, complete_labelling, parse_labels


def _log(verbose: bool, msg: str) -> None:
    if verbose:
        print(msg, file=sys.stderr)


def _describe(v: int) -> str:
    return f"{v:#08x} points={points_of(v)}"


def _cmd_decode(args: argparse.Namespace) -> int:
    v = parse_vector(args.vector)
    result = decode(v)
    _log(args.verbose, f"[decode] hexacode={result.hexacode_word} parity={result.parity}")
    print(f"received:  {_describe(v)}")
    print(f"codeword:  {_describe(result.codeword)}")
    print(f"distance:  {result.distance}")
    print(f"corrected: {sorted(result.corrected)}")
    if not result.unique:
        nearest = nearest_codewords(v)
        print(f"nearest codewords at distance {nearest.distance}:")
        for c in nearest.codewords:
            print(f"  {_describe(c)}")
    state = GridState(
        selected=v & result.codeword,
        octad=result.codeword & ~v,
        errors=v & ~result.codeword,
    )
    print(state.render())
    return 0


def _cmd_encode(args: argparse.Namespace) -> int:
    data = int(args.data, 0)
    codeword = encode(data)
    print(_describe(codeword))
    print(format_vector(codeword))
    return 0


def _cmd_complete(args: argparse.Namespace) -> int:
    v = parse_vector(args.points)
    octad = complete_octad(v)
    print(_describe(octad))
    print(GridState(selected=v, octad=octad & ~v).render())
    return 0


def _cmd_sextet(args: argparse.Namespace) -> int:
    tetrads = complete_sextet(parse_vector(args.points))
    labels = ["."] * 24
    for i, tetrad in enumerate(tetrads):
        print(f"{i}: {points_of(tetrad)}")
        for p in points_of(tetrad):
            labels[p] = str(i)
    for r in range(4):
        row = labels[r * 6 : r * 6 + 6]
        print(" ".join(row[0:2]) + "  " + " ".join(row[2:4]) + "  " + " ".join(row[4:6]))
    return 0


def _cmd_label(args: argparse.Namespace) -> int:
    order = None
    if args.order:
        order = [int(x) for x in args.order.split(",")]
    sextet = OrderedSextet.from_tetrad(parse_vector(args.tetrad), order)
    labelling = complete_labelling(sextet, parse_labels(args.labels))
    _log(args.verbose, f"[label] tetrads={[points_of(t) for t in sextet.tetrads]}")
    print(labelling.render())
    print(f"to_standard:   {labelling.to_standard}")
    print(f"from_standard: {labelling.from_standard}")
    if args.stabilizer:
        images = [int(x) for x in args.stabilizer.split(",")]
        print(f"stabilizer:    {labelling.stabilizer_permutation(images)}")
    return 0


def _cmd_generator(args: argparse.Namespace) -> int:
    names = [args.name] if args.name else generator_names()
    for name in names:
        perm = generator(name)
        print(f"{name}: order={perm.order} {GENERATOR_DESCRIPTIONS[name]}")
        print(f"  {perm}")
    return 0


def _cmd_word(args: argparse.Namespace) -> int:
    perm = word(args.letters)
    print(f"order={perm.order} cycle_type={perm.cycle_type()}")
    print(perm)
    return 0


def _cmd_order(args: argparse.Namespace) -> int:
    group = m24_group()
    _log(args.verbose, "[order] building stabiliser chain")
    order = group.order
    print(f"{group.name}: order={order} base={group.chain.base()}")
    return 0 if order == M24_ORDER else 1


def _cmd_grid(args: argparse.Namespace) -> int:
    v = parse_vector(args.vector)
    print(_describe(v))
    print(format_vector(v))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="mog")
    parser.add_argument("-v", "--verbose", action="store_true", help="Print diagnostics to stderr.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("decode", help="Decode a 24-bit vector to a nearest Golay codeword.")
    p.add_argument("vector", help="Points '0,1,5', hex '0x23' or a 24-char bit string.")
    p.set_defaults(func=_cmd_decode)

    p = sub.add_parser("encode", help="Encode 12 data bits.")
    p.add_argument("data", help="Integer in 0..4095 (decimal, 0x or 0b prefix).")
    p.set_defaults(func=_cmd_encode)

    p = sub.add_parser("complete", help="Complete 5-7 points to their octad.")
    p.add_argument("points")
    p.set_defaults(func=_cmd_complete)

    p = sub.add_parser("sextet", help="Complete 4 points to their sextet.")
    p.add_argument("points")
    p.set_defaults(func=_cmd_sextet)

    p = sub.add_parser("label", help="Complete a partial labelling of the sextet of a tetrad.")
    p.add_argument("tetrad", help="Four points determining the sextet.")
    p.add_argument("labels", nargs="+", help="point=label items, labels 0, 1, w, wbar.")
    p.add_argument("--order", default=None, help="Tetrad order as six comma-separated indices.")
    p.add_argument(
        "--stabilizer",
        default=None,
        help="Also print the sextet stabiliser element moving tetrad i to these positions.",
    )
    p.set_defaults(func=_cmd_label)

    p = sub.add_parser("generator", help="Show the named M24 generators.")
    p.add_argument("name", nargs="?", default=None)
    p.set_defaults(func=_cmd_generator)

    p = sub.add_parser("word", help="Multiply generators left to right (g1 g2^-1 ...).")
    p.add_argument("letters", nargs="+")
    p.set_defaults(func=_cmd_word)

    p = sub.add_parser("order", help="Compute the order of the generated group.")
    p.set_defaults(func=_cmd_order)

    p = sub.add_parser("grid", help="Render a vector on the MOG grid.")
    p.add_argument("vector")
    p.set_defaults(func=_cmd_grid)

    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except ValueError as exc:
        # MogError is a ValueError; int() parse failures land here too.
        kind = type(exc).__name__ if isinstance(exc, MogError) else "error"
        print(f"error: {kind}: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
