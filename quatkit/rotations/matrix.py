# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Matrix3x3` class, a mutable 3x3 matrix value type stored row major.
"""

from typing import Self, TYPE_CHECKING

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR

from quatkit.rotations.core.conversions import rotmat_to_quaternion_direct
from quatkit.rotations.vector import Vector

if TYPE_CHECKING:
    from quatkit.rotations.quaternion import Quaternion


MATRIX_ROWS: int = 3
"""
The number of rows in a :class:`Matrix3x3`
"""

MATRIX_COLS: int = 3
"""
The number of columns in a :class:`Matrix3x3`
"""

MATRIX_LEN: int = MATRIX_ROWS * MATRIX_COLS
"""
The number of members stored by a :class:`Matrix3x3`
"""


class Matrix3x3:
    """
    A 3x3 matrix of double precision scalars stored in a flat, row major buffer of 9 members.

    The element at row ``r`` and column ``c`` is stored at index ``3*r + c``.  No structure is enforced on the
    matrix.  Only the rotation conversions (:meth:`to_quaternion` and :meth:`.Quaternion.from_matrix`) assume the
    matrix is orthonormal with a determinant of +1, and they give meaningless (possibly non-finite) results if it is
    not.  This is not checked.

    Row and column indices must be in 0..2.  Out of range indices raise an :exc:`IndexError`.
    """

    def __init__(self,
                 b11: SCALAR = 0.0, b12: SCALAR = 0.0, b13: SCALAR = 0.0,
                 b21: SCALAR = 0.0, b22: SCALAR = 0.0, b23: SCALAR = 0.0,
                 b31: SCALAR = 0.0, b32: SCALAR = 0.0, b33: SCALAR = 0.0):
        """
        :param b11: row 0, column 0
        :param b12: row 0, column 1
        :param b13: row 0, column 2
        :param b21: row 1, column 0
        :param b22: row 1, column 1
        :param b23: row 1, column 2
        :param b31: row 2, column 0
        :param b32: row 2, column 1
        :param b33: row 2, column 2
        """

        self._members: DOUBLE_ARRAY = np.array([b11, b12, b13, b21, b22, b23, b31, b32, b33], dtype=np.float64)

    @classmethod
    def from_array(cls, values: ARRAY_LIKE) -> Self:
        """
        Creates a matrix from 9 values in row major order, given either flat or as 3 rows of 3.

        :param values: The values of the matrix
        :return: The new matrix
        :raises ValueError: If ``values`` does not hold exactly 9 elements
        """

        out = cls()
        out.reset(values)

        return out

    @classmethod
    def identity(cls) -> Self:
        """
        Returns the 3x3 identity matrix.
        """

        return cls(1.0, 0.0, 0.0,
                   0.0, 1.0, 0.0,
                   0.0, 0.0, 1.0)

    @classmethod
    def merge(cls, v1: Vector, v2: Vector, v3: Vector) -> Self:
        """
        Creates a matrix using the three vectors as its columns.

        :param v1: The first column
        :param v2: The second column
        :param v3: The third column
        :return: The new matrix
        """

        return cls(v1.x, v2.x, v3.x,
                   v1.y, v2.y, v3.y,
                   v1.z, v2.z, v3.z)

    @staticmethod
    def _index(r: int, c: int) -> int:
        if not (0 <= r < MATRIX_ROWS and 0 <= c < MATRIX_COLS):
            raise IndexError(f'Matrix indices must be in 0..2, got ({r}, {c})')

        return MATRIX_COLS * r + c

    def coeff(self, r: int, c: int) -> float:
        """
        Returns the element at row ``r`` and column ``c``.
        """

        return float(self._members[self._index(r, c)])

    def set(self, r: int, c: int, value: SCALAR = 0.0):
        """
        Sets the element at row ``r`` and column ``c``.

        :param r: The row index
        :param c: The column index
        :param value: The new value
        """

        self._members[self._index(r, c)] = value

    def set_diagonal(self, i: int, value: SCALAR = 0.0):
        """
        Sets the diagonal element ``(i, i)``.

        :param i: The row and column index
        :param value: The new value
        """

        self._members[self._index(i, i)] = value

    def reset(self, values: ARRAY_LIKE):
        """
        Overwrites all 9 members with ``values`` given in row major order.

        :param values: The new values, flat or as 3 rows of 3
        :raises ValueError: If ``values`` does not hold exactly 9 elements
        """

        values = np.asarray(values, dtype=np.float64).ravel()

        if values.size != MATRIX_LEN:
            raise ValueError('A Matrix3x3 must be reset with exactly 9 values')

        self._members[:] = values

    def from_vectors(self, vx: Vector, vy: Vector, vz: Vector, row: bool = True) -> Self:
        """
        Overwrites this matrix with three vectors, used either as the rows or as the columns.

        :param vx: The first row (column)
        :param vy: The second row (column)
        :param vz: The third row (column)
        :param row: If ``True`` the vectors are the rows, otherwise they are the columns
        :return: self
        """

        stacked = np.vstack([np.asarray(vx), np.asarray(vy), np.asarray(vz)])

        if not row:
            stacked = stacked.T

        self.reset(stacked)

        return self

    def trace(self) -> float:
        """
        Returns the sum of the diagonal elements.
        """

        return self.coeff(0, 0) + self.coeff(1, 1) + self.coeff(2, 2)

    def row(self, idx: int) -> Vector:
        """
        Returns row ``idx`` as a :class:`.Vector`.
        """

        return Vector(self.coeff(idx, 0), self.coeff(idx, 1), self.coeff(idx, 2))

    def col(self, idx: int) -> Vector:
        """
        Returns column ``idx`` as a :class:`.Vector`.
        """

        return Vector(self.coeff(0, idx), self.coeff(1, idx), self.coeff(2, idx))

    def transpose(self) -> 'Matrix3x3':
        """
        Returns the transpose of this matrix as a new matrix.
        """

        return Matrix3x3.from_array(self._members.reshape(MATRIX_ROWS, MATRIX_COLS).T)

    def det(self) -> float:
        """
        Returns the determinant by cofactor expansion along the first row.
        """

        return (self.coeff(0, 0) * (self.coeff(1, 1) * self.coeff(2, 2) - self.coeff(1, 2) * self.coeff(2, 1)) +
                self.coeff(0, 1) * (self.coeff(1, 2) * self.coeff(2, 0) - self.coeff(1, 0) * self.coeff(2, 2)) +
                self.coeff(0, 2) * (self.coeff(1, 0) * self.coeff(2, 1) - self.coeff(1, 1) * self.coeff(2, 0)))

    def to_quaternion(self) -> 'Quaternion':
        """
        Converts this rotation matrix to a unit quaternion with the direct formula.

        This path loses precision as the trace approaches -1 and is non-finite at exactly -1 (180 degree rotations).
        :meth:`.Quaternion.from_matrix` is the numerically stable alternative.

        See :func:`.rotmat_to_quaternion_direct` for details.

        :return: The rotation quaternion
        """

        from quatkit.rotations.quaternion import Quaternion

        return Quaternion.from_array(rotmat_to_quaternion_direct(np.asarray(self)))

    def __mul__(self, rhs: Vector) -> Vector:
        if not isinstance(rhs, Vector):
            return NotImplemented

        return Vector(*(self._members.reshape(MATRIX_ROWS, MATRIX_COLS) @ np.asarray(rhs)))

    __matmul__ = __mul__

    def __array__(self, dtype=None, copy=None) -> DOUBLE_ARRAY:
        out = self._members.reshape(MATRIX_ROWS, MATRIX_COLS).copy()
        if dtype is not None:
            out = out.astype(dtype)
        return out

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix3x3):
            return NotImplemented

        return bool((self._members == other._members).all())

    def __ne__(self, other) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None

    __array_ufunc__ = None

    def __repr__(self) -> str:
        return 'Matrix3x3({0})'.format(', '.join(repr(float(v)) for v in self._members))

    def __str__(self) -> str:
        return str(np.asarray(self))

    def copy(self) -> 'Matrix3x3':
        """
        Returns a copy of self breaking all mutability.
        """

        return Matrix3x3.from_array(self._members)
