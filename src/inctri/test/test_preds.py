import unittest

from inctri.delaunay.vec2 import squared_length, subtract, add
from inctri.delaunay.mat3 import determinant
from inctri.delaunay.preds import circumcircle, in_circumcircle, orient2d, \
    Circle


class TestVectorMatrix(unittest.TestCase):

    def test_vec2(self):
        self.assertEqual(squared_length((3., 4.)), 25.)
        self.assertEqual(subtract((1., 2.), (4., 6.)), (-3., -4.))
        self.assertEqual(add((1., 2.), (4., 6.)), (5., 8.))

    def test_identity(self):
        self.assertEqual(determinant([1, 0, 0,
                                      0, 1, 0,
                                      0, 0, 1]), 1)

    def test_determinant(self):
        self.assertEqual(determinant([2, -3, 1,
                                      2, 0, -1,
                                      1, 4, 5]), 49)
        # swapping two rows flips the sign
        self.assertEqual(determinant([2, 0, -1,
                                      2, -3, 1,
                                      1, 4, 5]), -49)

    def test_singular(self):
        self.assertEqual(determinant([1, 2, 3,
                                      2, 4, 6,
                                      7, 8, 9]), 0)


class TestCircumcircle(unittest.TestCase):

    def test_unit_circle(self):
        circle = circumcircle((1., 0.), (0., 1.), (-1., 0.))
        self.assertAlmostEqual(circle.center[0], 0.)
        self.assertAlmostEqual(circle.center[1], 0.)
        self.assertAlmostEqual(circle.radius_squared, 1.)

    def test_right_angle(self):
        # the center lies halfway the hypotenuse
        center, radius_squared = circumcircle((0., 0.), (2., 0.), (0., 2.))
        self.assertAlmostEqual(center[0], 1.)
        self.assertAlmostEqual(center[1], 1.)
        self.assertAlmostEqual(radius_squared, 2.)

    def test_orientation_does_not_matter(self):
        ccw = circumcircle((3., 1.), (7., 2.), (4., 6.))
        cw = circumcircle((3., 1.), (4., 6.), (7., 2.))
        self.assertAlmostEqual(ccw.center[0], cw.center[0])
        self.assertAlmostEqual(ccw.center[1], cw.center[1])
        self.assertAlmostEqual(ccw.radius_squared, cw.radius_squared)

    def test_far_from_origin(self):
        circle = circumcircle((1e6 + 1., 1e6), (1e6, 1e6 + 1.),
                              (1e6 - 1., 1e6))
        self.assertAlmostEqual(circle.center[0], 1e6)
        self.assertAlmostEqual(circle.center[1], 1e6)
        self.assertAlmostEqual(circle.radius_squared, 1.)

    def test_collinear(self):
        self.assertIsNone(circumcircle((0., 0.), (1., 1.), (2., 2.)))
        self.assertIsNone(circumcircle((0., 0.), (1., 0.), (0., 0.)))

    def test_almost_collinear(self):
        self.assertIsNone(circumcircle((0., 0.), (1., 1e-14), (2., 0.)))


class TestInCircumcircle(unittest.TestCase):

    def setUp(self):
        self.circle = Circle((0., 0.), 1.)

    def test_inside(self):
        self.assertTrue(in_circumcircle((0., 0.), self.circle))
        self.assertTrue(in_circumcircle((0.5, -0.5), self.circle))

    def test_outside(self):
        self.assertFalse(in_circumcircle((1., 1.), self.circle))
        self.assertFalse(in_circumcircle((-3., 0.), self.circle))

    def test_on_circle_is_outside(self):
        self.assertFalse(in_circumcircle((0., 1.), self.circle))
        self.assertFalse(in_circumcircle((-1., 0.), self.circle))

    def test_almost_on_circle_is_outside(self):
        self.assertFalse(in_circumcircle((0., 1. - 1e-14), self.circle))

    def test_cocircular(self):
        circle = circumcircle((0., 0.), (1., 0.), (0., 1.))
        self.assertFalse(in_circumcircle((1., 1.), circle))


class TestOrientation(unittest.TestCase):

    def test_orient2d(self):
        self.assertGreater(orient2d((0., 0.), (1., 0.), (0., 1.)), 0)
        self.assertLess(orient2d((0., 0.), (0., 1.), (1., 0.)), 0)
        self.assertEqual(orient2d((0., 0.), (1., 1.), (2., 2.)), 0)


if __name__ == "__main__":
    unittest.main()
