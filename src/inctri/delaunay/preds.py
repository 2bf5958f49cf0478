"""Geometric predicates

Circumcircle construction and the point-in-circumcircle test used for
finding the triangles that conflict with a point to be inserted.
Orientation is decided with the robust predicate of geompreds.
"""

from collections import namedtuple

from geompreds import orient2d

from inctri.delaunay.mat3 import determinant
from inctri.delaunay.vec2 import add, squared_length, subtract

__all__ = ["Circle", "circumcircle", "in_circumcircle", "orient2d",
           "EPSILON", "COLLINEAR_EPSILON"]

# relative tolerance on the squared radius, points closer to the circle than
# this are treated as lying on it (thus: *not* inside)
EPSILON = 1e-10
# relative tolerance for the signed area of a triangle, with respect to its
# squared edge lengths
COLLINEAR_EPSILON = 1e-12


Circle = namedtuple("Circle", ("center", "radius_squared"))


def circumcircle(pa, pb, pc):
    """Circle that passes through the points pa, pb and pc

    Computed with the determinant based closed form, in a local frame that
    has pa at its origin.

    Returns None if the three points are (nearly) collinear.
    """
    b = subtract(pb, pa)
    c = subtract(pc, pa)
    b2 = squared_length(b)
    c2 = squared_length(c)
    # twice the signed area of the triangle
    a = determinant([0., 0., 1.,
                     b[0], b[1], 1.,
                     c[0], c[1], 1.])
    if abs(a) <= COLLINEAR_EPSILON * (b2 + c2):
        return None
    bx = -determinant([0., 0., 1.,
                       b2, b[1], 1.,
                       c2, c[1], 1.])
    by = determinant([0., 0., 1.,
                      b2, b[0], 1.,
                      c2, c[0], 1.])
    # pa lies on the origin of the local frame, so that the constant term
    # vanishes and the radius is the distance from the center to the origin
    local = (-bx / (2. * a), -by / (2. * a))
    return Circle(add(pa, local), squared_length(local))


def in_circumcircle(point, circle):
    """Tests whether point lies strictly inside the circle

    Points (nearly) on the circle are not inside.
    """
    d2 = squared_length(subtract(point, circle.center))
    return d2 < circle.radius_squared * (1. - EPSILON)
