"""mog: Golay code, S(5,8,24) and M24 on the Miracle Octad Generator."""

from .errors import (
    AmbiguousInput,
    CompletionError,
    InvalidPattern,
    MogError,
    NoCompletion,
    UnknownGenerator,
)
from .golay import DecodeResult, decode, encode, extract_data, is_codeword, syndrome
from .grid import CellState, GridState
from .group import PermutationGroup
from .hexacode import HEXACODE_WORDS, column_score, is_hexacode_word, pattern_symbols
from .m24 import M24_ORDER, apply, generator, generator_names, is_automorphism, m24_group
from .octads import complete_octad, complete_sextet, is_octad, nearest_codewords
from .permutation import Permutation, compose, identity, invert
from .points import point_index, point_position, points_of, vector_from_points
from .sextets import OrderedSextet, SextetLabelling, complete_labelling
from .session import MogSession

__all__ = [
    "MogError",
    "InvalidPattern",
    "CompletionError",
    "NoCompletion",
    "AmbiguousInput",
    "UnknownGenerator",
    "DecodeResult",
    "encode",
    "decode",
    "extract_data",
    "is_codeword",
    "syndrome",
    "CellState",
    "GridState",
    "PermutationGroup",
    "HEXACODE_WORDS",
    "column_score",
    "is_hexacode_word",
    "pattern_symbols",
    "M24_ORDER",
    "apply",
    "generator",
    "generator_names",
    "is_automorphism",
    "m24_group",
    "complete_octad",
    "complete_sextet",
    "is_octad",
    "nearest_codewords",
    "Permutation",
    "compose",
    "identity",
    "invert",
    "point_index",
    "point_position",
    "points_of",
    "vector_from_points",
    "OrderedSextet",
    "SextetLabelling",
    "complete_labelling",
    "MogSession",
]
