import pytest

from mog.errors import InvalidPattern
from mog.points import (
    ALL_POINTS,
    column_mask,
    column_pattern,
    column_patterns_of,
    format_vector,
    parse_vector,
    permute_bits,
    point_index,
    point_position,
    points_of,
    row_mask,
    vector_from_columns,
    vector_from_points,
)


def test_point_layout() -> None:
    assert point_index(0, 0) == 0
    assert point_index(3, 5) == 23
    assert point_position(14) == (2, 2)
    for p in range(24):
        assert point_index(*point_position(p)) == p


def test_point_out_of_range() -> None:
    with pytest.raises(InvalidPattern):
        point_position(24)
    with pytest.raises(InvalidPattern):
        point_index(4, 0)
    with pytest.raises(InvalidPattern):
        vector_from_points([0, 25])


def test_columns_and_rows() -> None:
    assert points_of(column_mask(2)) == [2, 8, 14, 20]
    assert points_of(row_mask(1)) == [6, 7, 8, 9, 10, 11]
    v = vector_from_points([0, 6, 13, 23])
    assert column_pattern(v, 0) == 0b0011
    assert column_pattern(v, 1) == 0b0100
    assert column_pattern(v, 5) == 0b1000
    assert vector_from_columns(column_patterns_of(v)) == v


def test_permute_bits() -> None:
    images = [(i + 1) % 24 for i in range(24)]
    assert permute_bits(vector_from_points([0, 23]), images) == vector_from_points([1, 0])


def test_parse_vector_forms() -> None:
    assert parse_vector("0,1, 5") == vector_from_points([0, 1, 5])
    assert parse_vector("0x21") == vector_from_points([0, 5])
    assert parse_vector("1" + "0" * 22 + "1") == vector_from_points([0, 23])
    assert parse_vector("0x" + "f" * 6) == ALL_POINTS


def test_parse_vector_rejects_garbage() -> None:
    for text in ("", "a,b", "0x1000000", "0,24"):
        with pytest.raises(InvalidPattern):
            parse_vector(text)


def test_format_vector() -> None:
    text = format_vector(vector_from_points([0, 23]))
    lines = text.splitlines()
    assert lines[0] == "# .  . .  . ."
    assert lines[3] == ". .  . .  . #"
