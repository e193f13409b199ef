# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Vector` class, a mutable 3 element value type.
"""

from numbers import Real
from typing import Self, Iterator, TYPE_CHECKING

import numpy as np

from quatkit._typing import DOUBLE_ARRAY, SCALAR

if TYPE_CHECKING:
    from quatkit.rotations.quaternion import Quaternion


class Vector:
    """
    A 3 element vector of double precision scalars.

    The vector supports elementwise arithmetic with scalars and other vectors through the standard operators, both as
    pure operators returning a new :class:`Vector` and as in place compound assignment (``+=``, ``-=``, ``*=``,
    ``/=``) which modify the instance.  For example::

        >>> from quatkit.rotations import Vector
        >>> v = Vector(1, 2, 3)
        >>> 2 * v
        Vector(2.0, 4.0, 6.0)
        >>> v.cross(Vector(0, 0, 1))
        Vector(2.0, -1.0, 0.0)

    Division is never guarded.  Dividing by zero (including :meth:`normalise` on a zero vector) produces inf or NaN
    components without raising an error or warning.  Use :meth:`no_zeros` on a divisor to avoid this.
    """

    def __init__(self, x: SCALAR = 0.0, y: SCALAR = 0.0, z: SCALAR = 0.0):
        """
        :param x: The first component
        :param y: The second component
        :param z: The third component
        """

        self._v: DOUBLE_ARRAY = np.array([x, y, z], dtype=np.float64)

    @classmethod
    def identical(cls, a: SCALAR) -> Self:
        """
        Creates a vector with all three components set to ``a``.

        :param a: The value for every component
        :return: The new vector
        """

        return cls(a, a, a)

    @classmethod
    def _from_array(cls, values: DOUBLE_ARRAY) -> Self:
        out = cls.__new__(cls)
        out._v = np.asarray(values, dtype=np.float64).copy()
        return out

    @property
    def x(self) -> float:
        """
        The first component of the vector
        """

        return float(self._v[0])

    @x.setter
    def x(self, value: SCALAR):
        self._v[0] = value

    @property
    def y(self) -> float:
        """
        The second component of the vector
        """

        return float(self._v[1])

    @y.setter
    def y(self, value: SCALAR):
        self._v[1] = value

    @property
    def z(self) -> float:
        """
        The third component of the vector
        """

        return float(self._v[2])

    @z.setter
    def z(self, value: SCALAR):
        self._v[2] = value

    def __getitem__(self, index: int) -> float:
        if index < 0 or index > 2:
            raise IndexError("Index must be 0, 1, or 2.")

        return float(self._v[index])

    def __iter__(self) -> Iterator[float]:
        return iter(self._v.tolist())

    def __len__(self) -> int:
        return 3

    def __array__(self, dtype=None, copy=None) -> DOUBLE_ARRAY:
        if dtype is None:
            return self._v.copy()
        return self._v.astype(dtype)

    def __repr__(self) -> str:
        return 'Vector({0!r}, {1!r}, {2!r})'.format(self.x, self.y, self.z)

    def __str__(self) -> str:
        return str(self._v)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented

        return bool((self._v == other._v).all())

    def __ne__(self, other) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None  # mutable

    # numpy scalars on the left defer to the reflected operators
    __array_ufunc__ = None

    def is_nil(self) -> bool:
        """
        Returns ``True`` if every component is exactly zero.
        """

        return bool((self._v == 0).all())

    def is_nan(self) -> bool:
        """
        Returns ``True`` if any component is NaN.
        """

        return bool(np.isnan(self._v).any())

    def norm_sqr(self) -> float:
        """
        Returns the squared Euclidean length of the vector.
        """

        return float((self._v * self._v).sum())

    def norm(self) -> float:
        """
        Returns the Euclidean length of the vector.
        """

        return float(np.sqrt(self.norm_sqr()))

    def normalise(self) -> Self:
        """
        Scales this vector to unit length in place.

        A zero vector becomes NaN in every component.

        :return: self
        """

        self /= self.norm()

        return self

    def normalised(self) -> 'Vector':
        """
        Returns a unit length copy of this vector.  See :meth:`normalise`.
        """

        return self / self.norm()

    def set_nan(self) -> Self:
        """
        Sets every component to NaN.

        :return: self
        """

        self._v[:] = np.nan

        return self

    def set_undefined(self) -> Self:
        """
        Marks the vector as undefined by setting every component to NaN.

        :return: self
        """

        return self.set_nan()

    def cross(self, rhs: 'Vector') -> 'Vector':
        """
        Returns the right handed cross product ``self x rhs``.

        :param rhs: The right hand vector
        :return: The cross product
        """

        return Vector._from_array(np.cross(self._v, rhs._v))

    def dot(self, rhs: 'Vector') -> float:
        """
        Returns ``x * rhs.x + y * rhs.y``.

        .. warning::
            This product only includes the x and y components.  It is kept for compatibility with existing data
            produced through it.  Use :meth:`inner` for the full 3 component dot product.

        :param rhs: The right hand vector
        :return: The planar dot product
        """

        return float(self._v[0] * rhs._v[0] + self._v[1] * rhs._v[1])

    def inner(self, rhs: 'Vector') -> float:
        """
        Returns the full dot product ``x * rhs.x + y * rhs.y + z * rhs.z``.

        :param rhs: The right hand vector
        :return: The dot product
        """

        return float((self._v * rhs._v).sum())

    def no_zeros(self) -> Self:
        """
        Replaces every component that is exactly zero with 1.0 in place.

        This allows a vector to be used safely as an elementwise divisor.

        :return: self
        """

        self._v[self._v == 0] = 1.0

        return self

    def clear(self) -> Self:
        """
        Sets every component to zero.

        :return: self
        """

        self._v[:] = 0.0

        return self

    def sum(self) -> float:
        """
        Returns the sum of the components.
        """

        return float(self._v.sum())

    def power(self, n: SCALAR) -> 'Vector':
        """
        Raises each component to the power ``n``.

        :param n: The exponent
        :return: A new vector
        """

        with np.errstate(divide='ignore', invalid='ignore'):
            return Vector._from_array(np.power(self._v, n))

    def sqrt(self) -> 'Vector':
        """
        Returns the elementwise square root.  Negative components become NaN.
        """

        with np.errstate(invalid='ignore'):
            return Vector._from_array(np.sqrt(self._v))

    def absf(self) -> 'Vector':
        """
        Returns the elementwise absolute value.
        """

        return Vector._from_array(np.abs(self._v))

    @staticmethod
    def _operand(other) -> DOUBLE_ARRAY | float | None:
        # the value to broadcast against the components, or None if other is not supported
        if isinstance(other, Vector):
            return other._v
        if isinstance(other, Real):
            return float(other)
        return None

    def __add__(self, other: 'Vector | SCALAR') -> 'Vector':
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented

        return Vector._from_array(self._v + rhs)

    def __radd__(self, other: SCALAR) -> 'Vector':
        if not isinstance(other, Real):
            return NotImplemented

        return Vector._from_array(other + self._v)

    def __sub__(self, other: 'Vector | SCALAR') -> 'Vector':
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented

        return Vector._from_array(self._v - rhs)

    def __rsub__(self, other: SCALAR) -> 'Vector':
        if not isinstance(other, Real):
            return NotImplemented

        # f - v is v - f
        return Vector._from_array(self._v - other)

    def __neg__(self) -> 'Vector':
        return Vector._from_array(-self._v)

    def __mul__(self, other):
        from quatkit.rotations.quaternion import Quaternion

        if isinstance(other, Quaternion):
            return other * self

        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented

        return Vector._from_array(self._v * rhs)

    def __rmul__(self, other: SCALAR) -> 'Vector':
        if not isinstance(other, Real):
            return NotImplemented

        return Vector._from_array(other * self._v)

    def __truediv__(self, other: 'Vector | SCALAR') -> 'Vector':
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented

        with np.errstate(divide='ignore', invalid='ignore'):
            return Vector._from_array(self._v / rhs)

    def __iadd__(self, other: 'Vector') -> Self:
        if not isinstance(other, Vector):
            return NotImplemented

        self._v += other._v

        return self

    def __isub__(self, other: 'Vector') -> Self:
        if not isinstance(other, Vector):
            return NotImplemented

        self._v -= other._v

        return self

    def __imul__(self, other: 'Vector | SCALAR') -> Self:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented

        self._v *= rhs

        return self

    def __itruediv__(self, other: SCALAR) -> Self:
        if not isinstance(other, Real):
            return NotImplemented

        with np.errstate(divide='ignore', invalid='ignore'):
            self._v /= other

        return self

    def copy(self) -> 'Vector':
        """
        Returns a copy of self breaking all mutability.
        """

        return Vector._from_array(self._v)
