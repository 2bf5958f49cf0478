"""Iterators over the triangulation"""

from inctri.delaunay.tds import SUPER


class FiniteTriangleIterator(object):
    """Iterator over the triangles that do not use a corner of the
    super-triangle, i.e. the triangles of the user supplied points.
    """

    def __init__(self, triangulation):
        self.triangles = triangulation.triangles
        self.current_idx = 0

    def __iter__(self):
        return self

    def __next__(self):
        while self.current_idx < len(self.triangles):
            triangle = self.triangles[self.current_idx]
            self.current_idx += 1
            if not triangle.touches(SUPER):
                return triangle
        raise StopIteration()


class EdgeIterator(object):
    """Iterator over all edges of the triangulation, every edge is
    output once

    With finite_only set, edges that end in a corner of the super-triangle
    are skipped.
    """

    def __init__(self, triangulation, finite_only=False):
        self.triangles = triangulation.triangles
        self.finite_only = finite_only
        self.current_idx = 0  # this is index in the list
        self.pos = -1  # this is index in the triangle (side)
        self.seen = set()

    def __iter__(self):
        return self

    def __next__(self):
        while self.current_idx < len(self.triangles):
            triangle = self.triangles[self.current_idx]
            self.pos += 1
            edge = triangle.edges[self.pos]
            if self.pos == 2:
                self.pos = -1
                self.current_idx += 1
            if edge in self.seen:
                continue
            self.seen.add(edge)
            if self.finite_only and \
                    (edge.p1 in SUPER or edge.p2 in SUPER):
                continue
            return edge
        raise StopIteration()
