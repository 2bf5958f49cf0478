"""Inctri - Incremental Delaunay Triangulation of a set of points
"""

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'

from inctri.delaunay import create_triangulation, insert_point, finalize, \
    points, triangles, triangulate, DegenerateInsertionError

__all__ = ["create_triangulation", "insert_point", "finalize",
           "points", "triangles", "triangulate", "DegenerateInsertionError"]
