import sys
from pathlib import Path
import unittest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from mog.errors import AmbiguousInput, NoCompletion  # noqa: E402
from mog.octads import complete_octad, complete_sextet, is_octad  # noqa: E402
from mog.points import points_of, vector_from_points  # noqa: E402


class TestOctadCompletion(unittest.TestCase):
    def test_top_row_completion(self) -> None:
        octad = complete_octad([0, 1, 2, 3, 4])
        self.assertEqual(points_of(octad), [0, 1, 2, 3, 4, 11, 17, 23])
        self.assertTrue(is_octad(octad))

    def test_completion_failures(self) -> None:
        with self.assertRaises(AmbiguousInput):
            complete_octad([0, 1, 2, 3])
        with self.assertRaises(NoCompletion):
            complete_octad([0, 1, 2, 3, 4, 5])

    def test_sextet_of_top_tetrad(self) -> None:
        tetrads = complete_sextet([0, 1, 2, 3])
        self.assertEqual(tetrads[0], vector_from_points([0, 1, 2, 3]))
        self.assertEqual(tetrads[1], vector_from_points([4, 11, 17, 23]))
        union = 0
        for t in tetrads:
            union |= t
        self.assertEqual(union, (1 << 24) - 1)


if __name__ == "__main__":
    unittest.main()
