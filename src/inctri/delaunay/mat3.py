"""Functions for 3x3 matrices.

A matrix is a sequence of 9 values, in row-major order.
"""


def determinant(m):
    """Determinant of a 3x3 matrix, by cofactor expansion along the first row
    """
    return (m[0] * (m[4] * m[8] - m[5] * m[7]) -
            m[1] * (m[3] * m[8] - m[5] * m[6]) +
            m[2] * (m[3] * m[7] - m[4] * m[6]))
