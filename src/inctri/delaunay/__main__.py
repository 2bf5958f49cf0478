"""Triangulates a random point set, with debug output

    python -m inctri.delaunay [n]
"""
import logging
import sys

from inctri.delaunay import triangulate, FiniteTriangleIterator
from inctri.delaunay.helpers import random_circle_vertices


def main(n=1500):
    logging.basicConfig(level=logging.DEBUG)
    pts = random_circle_vertices(n)
    dt = triangulate(pts)
    for t in FiniteTriangleIterator(dt):
        logging.debug(dt.wkt(t))


if __name__ == "__main__":
    main(*map(int, sys.argv[1:2]))
