import unittest
from random import Random

from inctri.delaunay.helpers import box, super_radius, SUPER_SCALE, \
    random_circle_vertices, random_sorted_vertices


class TestHelpers(unittest.TestCase):

    def test_box(self):
        self.assertEqual(box([(1, 5), (-2, 3), (4, -1)]), ((-2, -1), (4, 5)))

    def test_super_radius(self):
        self.assertAlmostEqual(super_radius([(3, 4), (0, 0)]),
                               SUPER_SCALE * 5.)
        self.assertEqual(super_radius([(0, 0)]), SUPER_SCALE)
        self.assertEqual(super_radius([]), SUPER_SCALE)

    def test_random_circle(self):
        pts = random_circle_vertices(50, 10, -10, rng=Random(3))
        self.assertEqual(pts, sorted(set(pts)))
        for x, y in pts:
            self.assertLessEqual((x - 10) ** 2 + (y + 10) ** 2, 1. + 1e-9)

    def test_random_sorted(self):
        pts = random_sorted_vertices(20, rng=Random(3))
        self.assertLessEqual(len(pts), 20)
        self.assertEqual(pts, sorted(set(pts)))
        for x, y in pts:
            self.assertTrue(0 <= x <= 1 and 0 <= y <= 1)


if __name__ == "__main__":
    unittest.main()
