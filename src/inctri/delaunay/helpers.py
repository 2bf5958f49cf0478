"""Helpers for choosing the size of the super-triangle and for generating
randomized point sets (for testing purposes)
"""

from math import sqrt, pi, cos, sin, hypot
from random import Random

# how much larger than the point set the super-triangle is made
SUPER_SCALE = 100.0


def box(points):
    """Obtain a tight fitting axis-aligned box around point set"""
    xmin = min(points, key=lambda x: x[0])[0]
    ymin = min(points, key=lambda x: x[1])[1]
    xmax = max(points, key=lambda x: x[0])[0]
    ymax = max(points, key=lambda x: x[1])[1]
    return (xmin, ymin), (xmax, ymax)


def super_radius(points):
    """Circumradius for a super-triangle around the origin that contains
    all points

    The circle inscribed in the super-triangle has half its circumradius,
    the scale factor keeps the corners far away from the points.
    """
    if not points:
        return SUPER_SCALE
    (xmin, ymin), (xmax, ymax) = box(points)
    reach = max(hypot(x, y) for x, y in
                ((xmin, ymin), (xmin, ymax), (xmax, ymin), (xmax, ymax)))
    if reach == 0:
        reach = 1.
    return SUPER_SCALE * reach


def _unique_sorted(vertices):
    return sorted(set(vertices))


def random_sorted_vertices(n=10, rng=None):
    """Returns a sorted list with at most n vertices, drawn from the
    (n + 1) x (n + 1) grid on the unit square

    Grid input has many collinear and cocircular points.
    """
    rng = rng or Random()
    W = float(n)
    return _unique_sorted((rng.randint(0, n) / W, rng.randint(0, n) / W)
                          for _ in range(n))


def random_circle_vertices(n=10, cx=0, cy=0, rng=None):
    """Returns a sorted list with n vertices, uniformly distributed over the
    unit disk around (cx, cy)

    Taking the square root of the radius keeps the density uniform, see:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    rng = rng or Random()

    def sample():
        r = sqrt(rng.random())
        t = 2 * pi * rng.random()
        return (cx + r * cos(t), cy + r * sin(t))
    return _unique_sorted(sample() for _ in range(n))
