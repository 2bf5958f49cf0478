"""Triangulation data structure

Points are (x, y) tuples, kept in insertion order; triangles refer to
them by index.
"""

from collections import namedtuple

from inctri.delaunay.preds import circumcircle

# indices of the corners of the super-triangle
SUPER = (0, 1, 2)


class DegenerateInsertionError(ValueError):
    """Raised when a point cannot be inserted without making the
    triangulation inconsistent (duplicate point, point outside of the
    domain or a retriangulated region that does not close properly).
    """

    def __init__(self, point, reason):
        super(DegenerateInsertionError, self).__init__(
            "Cannot insert {}: {}".format(point, reason))
        self.point = point
        self.reason = reason


class Edge(object):
    """An edge connects two points, its orientation is not significant:
    Edge(a, b) == Edge(b, a)
    """

    __slots__ = ('p1', 'p2')

    def __init__(self, p1, p2):
        self.p1 = p1
        self.p2 = p2

    def __repr__(self):
        return "Edge({0}, {1})".format(self.p1, self.p2)

    def __eq__(self, other):
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.p1 == other.p1 and self.p2 == other.p2) or \
            (self.p1 == other.p2 and self.p2 == other.p1)

    def __hash__(self):
        return hash(frozenset((self.p1, self.p2)))


class Triangle(namedtuple("Triangle", ("p1", "p2", "p3"))):
    """Triangle, as three point indices, in ccw order

    As it is a tuple, it can be handed as is to a renderer.
    """

    __slots__ = ()

    @property
    def edges(self):
        """The three edges p1-p2, p2-p3, p3-p1"""
        return (Edge(self.p1, self.p2),
                Edge(self.p2, self.p3),
                Edge(self.p3, self.p1))

    @property
    def sides(self):
        """The three edges, as directed (orig, dest) pairs, following the
        winding order of the triangle
        """
        return ((self.p1, self.p2), (self.p2, self.p3), (self.p3, self.p1))

    def touches(self, indices):
        """Does the triangle use one of the given point indices"""
        return any(p in indices for p in self)


class Triangulation(object):
    """Triangulation data structure"""
    # The points and triangles are only changed by the point inserter;
    # the properties hand out copies.

    def __init__(self):
        self._points = []
        self._points_idx = {}
        self._triangles = []
        self.finalized = False

    def __len__(self):
        return len(self._points)

    @property
    def points(self):
        """Snapshot of the points, in insertion order"""
        return tuple(self._points)

    @property
    def triangles(self):
        """Snapshot of the triangles"""
        return tuple(self._triangles)

    def index(self, point):
        """Index of the point with exactly these coordinates, or None"""
        return self._points_idx.get(point)

    def coordinates(self, triangle):
        """The (x, y) tuples of the corners of a triangle"""
        pts = self._points
        return (pts[triangle[0]], pts[triangle[1]], pts[triangle[2]])

    def circumcircle(self, triangle):
        return circumcircle(*self.coordinates(triangle))

    def wkt(self, triangle):
        """Conversion to WKT string."""
        corners = ["{0[0]} {0[1]}".format(pt)
                   for pt in self.coordinates(triangle)]
        corners.append(corners[0])
        return "POLYGON(({0}))".format(", ".join(corners))

    # -- mutation, used by the point inserter

    def add_point(self, point):
        """Appends a point, returns its index"""
        idx = len(self._points)
        self._points.append(point)
        self._points_idx[point] = idx
        return idx

    def pop_point(self):
        """Removes the point that was appended last"""
        point = self._points.pop()
        del self._points_idx[point]
        return point

    def add_triangle(self, triangle):
        self._triangles.append(triangle)

    def replace(self, old, new):
        """Removes the triangles in old and appends the triangles in new"""
        old = set(old)
        self._triangles = [t for t in self._triangles if t not in old]
        self._triangles.extend(new)

    def discard(self, indices):
        """Removes all triangles that use one of the given point indices,
        returns how many were removed
        """
        before = len(self._triangles)
        self._triangles = [t for t in self._triangles
                           if not t.touches(indices)]
        return before - len(self._triangles)
