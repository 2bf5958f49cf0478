"""Incremental construction of a Delaunay triangulation

Points are inserted one at a time with the algorithm of Bowyer and Watson:

    all triangles of which the circumcircle contains the new point are
    removed, and the polygonal hole that results is filled by connecting the
    new point to the edges on the boundary of the hole.

@article{Bowyer1981,
  doi = {10.1093/comjnl/24.2.162},
  year = {1981},
  volume = {24},
  number = {2},
  pages = {162--166},
  author = {Adrian Bowyer},
  title = {Computing Dirichlet tessellations},
  journal = {The Computer Journal}
}
@article{Watson1981,
  doi = {10.1093/comjnl/24.2.167},
  year = {1981},
  volume = {24},
  number = {2},
  pages = {167--172},
  author = {David F. Watson},
  title = {Computing the n-dimensional Delaunay tessellation with application
           to Voronoi polytopes},
  journal = {The Computer Journal}
}
"""

import logging
import time
from collections import Counter
from math import cos, sin, pi, isfinite

from inctri.delaunay.tds import SUPER, DegenerateInsertionError, \
    Triangle, Triangulation
from inctri.delaunay.preds import circumcircle, in_circumcircle, orient2d
from inctri.delaunay.helpers import super_radius
from inctri.delaunay.iter import EdgeIterator


class BowyerWatsonInserter(object):
    """Class to insert points into a Triangulation.

    It is ensured that after every insertion the triangles obey the
    Delaunay criterion: no point lies inside the circumcircle of any of
    the triangles (points on the circle are allowed).
    """

    __slots__ = ('triangulation', 'tests', 'removed')

    def __init__(self, triangulation):
        self.triangulation = triangulation
        self.tests = 0
        self.removed = 0

    def initialize(self, radius):
        """Initialize the large triangle that will contain all points,
        its corners lie on a circle with the given radius around the origin
        """
        if not (isfinite(radius) and radius > 0):
            raise ValueError(
                "Radius of super-triangle should be positive, "
                "not {}".format(radius))
        if len(self.triangulation) or self.triangulation.triangles:
            raise ValueError("Triangulation is already initialized")
        angle = 2. * pi / 3.
        for i in range(3):
            self.triangulation.add_point(
                (radius * cos(angle * i), radius * sin(angle * i)))
        # counter clockwise
        self.triangulation.add_triangle(Triangle(*SUPER))
        logging.debug("super-triangle {}".format(
            self.triangulation.wkt(Triangle(*SUPER))))

    def insert(self, points):
        """Insert a list of points into the triangulation.
        """
        for j, pt in enumerate(points):
            self.append(pt)
            if (j % 1000) == 0:
                logging.debug(" {} points inserted".format(j))

    def append(self, pt):
        """Appends one point to the triangulation, returns its index.

        This method assumes that the triangulation is initialized
        and the point lies inside the super-triangle.

        If the point cannot be inserted, DegenerateInsertionError is raised
        and the triangulation is left as it was.
        """
        dt = self.triangulation
        if dt.finalized:
            raise ValueError("Super-triangle is removed, "
                             "no more points can be inserted")
        point = (float(pt[0]), float(pt[1]))
        if not (isfinite(point[0]) and isfinite(point[1])):
            raise ValueError(
                "Coordinates should be finite, not {}".format(pt))
        logging.debug(" - inserting {}".format(point))
        # skip insertion of point, if it is on same location already there
        if dt.index(point) is not None:
            raise DegenerateInsertionError(
                point, "duplicate of point {}".format(dt.index(point)))
        n = dt.add_point(point)
        try:
            bad = self.conflicts(point)
            boundary = self.cavity(point, bad)
            new = self.fan(point, n, boundary)
        except Exception:
            dt.pop_point()
            raise
        # only now the triangles are changed
        dt.replace(bad, new)
        self.removed += len(bad)
        logging.debug("   {} triangles replaced by {}".format(
            len(bad), len(new)))
        return n

    def conflicts(self, point):
        """Triangles of which the circumcircle contains the point"""
        dt = self.triangulation
        bad = []
        for t in dt.triangles:
            self.tests += 1
            # triangles in the triangulation are never degenerate,
            # so the circle always exists
            if in_circumcircle(point, dt.circumcircle(t)):
                bad.append(t)
        if not bad:
            raise DegenerateInsertionError(
                point, "outside of all circumcircles")
        return bad

    def cavity(self, point, bad):
        """Directed edges on the boundary of the polygon formed by the bad
        triangles, with the winding order of the triangles

        The edges have to form one closed loop.
        """
        count = Counter(edge for t in bad for edge in t.edges)
        boundary = [side for t in bad
                    for side, edge in zip(t.sides, t.edges)
                    if count[edge] == 1]
        # every corner of the loop is once the start and once the end
        nxt = {}
        for orig, dest in boundary:
            if orig in nxt:
                raise DegenerateInsertionError(
                    point, "boundary touches itself at point {}".format(orig))
            nxt[orig] = dest
        if not boundary or set(nxt) != set(nxt.values()):
            raise DegenerateInsertionError(point, "boundary is not closed")
        start = boundary[0][0]
        cur = nxt[start]
        steps = 1
        while cur != start:
            cur = nxt[cur]
            steps += 1
        if steps != len(boundary):
            raise DegenerateInsertionError(
                point, "boundary consists of more than one loop")
        return boundary

    def fan(self, point, n, boundary):
        """Triangles connecting the boundary edges to the new point n

        The new point is different from all others, so that none of these
        triangles is already in the triangulation.
        """
        dt = self.triangulation
        new = []
        for orig, dest in boundary:
            t = Triangle(orig, dest, n)
            a, b, c = dt.coordinates(t)
            if orient2d(a, b, c) <= 0:
                raise DegenerateInsertionError(
                    point, "not visible from edge {}-{}".format(orig, dest))
            if circumcircle(a, b, c) is None:
                raise DegenerateInsertionError(
                    point, "almost collinear with edge {}-{}".format(
                        orig, dest))
            new.append(t)
        return new

    def finalize(self, remove_super_triangle=True):
        """Removes the triangles that use a corner of the super-triangle.

        The points are not renumbered.
        """
        if not remove_super_triangle:
            return
        dt = self.triangulation
        ct = dt.discard(SUPER)
        dt.finalized = True
        logging.debug("{} triangles of super-triangle removed".format(ct))


def create_triangulation(radius):
    """Creates a triangulation with only a super-triangle, of which the
    corners lie on a circle with the given radius around the origin.
    """
    dt = Triangulation()
    BowyerWatsonInserter(dt).initialize(radius)
    return dt


def insert_point(dt, point):
    """Inserts a point (x, y) into the triangulation, returns its index

    Raises DegenerateInsertionError when this is not possible, the
    triangulation is then left unchanged.
    """
    return BowyerWatsonInserter(dt).append(point)


def finalize(dt, remove_super_triangle=True):
    BowyerWatsonInserter(dt).finalize(remove_super_triangle)


def points(dt):
    """The points of the triangulation, as (x, y) tuples"""
    return dt.points


def triangles(dt):
    """The triangles of the triangulation, as triples of point indices"""
    return dt.triangles


def triangulate(pts, radius=None, remove_super_triangle=True):
    """Triangulate a set of points

    Point i of pts gets index i + 3 in the triangulation, as the
    corners of the super-triangle come first.
    """
    start = time.perf_counter()
    if radius is None:
        radius = super_radius(pts)
    dt = create_triangulation(radius)
    incremental = BowyerWatsonInserter(dt)
    incremental.insert(pts)
    end = time.perf_counter()

    logging.debug("Triangulating took: " + str(end - start) + " secs")
    logging.debug("{} triangles".format(len(dt.triangles)))
    logging.debug("{} edges".format(sum(1 for _ in EdgeIterator(dt))))
    logging.debug("{} points".format(len(dt)))
    logging.debug("{} circumcircle tests".format(incremental.tests))
    if len(pts) > 0:
        logging.debug(str(float(incremental.removed) /
                          len(pts)) + " triangles removed per insert")

    incremental.finalize(remove_super_triangle)
    return dt
