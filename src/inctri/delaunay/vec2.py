"""Methods for manipulating 2-vectors.

A vector is just a sequence with 2 elements, e.g. an (x, y) tuple.
"""


def squared_length(v):
    """Length of vector v, *squared*"""
    return v[0] * v[0] + v[1] * v[1]


def subtract(a, b):
    """Vector from b to a"""
    return (a[0] - b[0], a[1] - b[1])


def add(a, b):
    return (a[0] + b[0], a[1] + b[1])
