"""Inctri - Incremental Delaunay Triangulation of a set of points
"""

from inctri.delaunay.insert_bw import create_triangulation, insert_point, \
    finalize, points, triangles, triangulate, BowyerWatsonInserter
from inctri.delaunay.tds import DegenerateInsertionError, Edge, Triangle, \
    Triangulation
from inctri.delaunay.iter import FiniteTriangleIterator, EdgeIterator


__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__all__ = ("create_triangulation", "insert_point", "finalize",
           "points", "triangles", "triangulate",
           "BowyerWatsonInserter", "DegenerateInsertionError",
           "Edge", "Triangle", "Triangulation",
           "FiniteTriangleIterator", "EdgeIterator")

