# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Quaternion` class, a mutable ``(w, x, y, z)`` value type used to represent
rotations, along with the :class:`QuaternionComponent` enumeration used for index based access.
"""

from enum import IntEnum
from numbers import Real
from typing import Self

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR

from quatkit.rotations.core._helpers import _check_quaternion_array_and_shape
from quatkit.rotations.core.conversions import (euler_to_quaternion, quaternion_to_rotmat, rotmat_to_quaternion,
                                                quaternion_angle, quaternion_axis)
from quatkit.rotations.core.quaternion_math import (quaternion_conjugate, quaternion_multiplication,
                                                    quaternion_normalize, vector_quaternion_multiplication)
from quatkit.rotations.matrix import Matrix3x3
from quatkit.rotations.vector import Vector


class QuaternionComponent(IntEnum):
    """
    The fixed mapping between an index and a quaternion component used by :meth:`.Quaternion.set`.
    """

    W = 0
    X = 1
    Y = 2
    Z = 3


class Quaternion:
    """
    A quaternion ``w + xi + yj + zk`` where ``w`` is the scalar part and ``(x, y, z)`` the vector part.

    A default constructed quaternion is the identity rotation ``(1, 0, 0, 0)``.  Rotation semantics assume unit
    length, but this is never enforced: addition and scalar multiplication generally leave a quaternion of some other
    length, and it is up to the caller to call :meth:`normalize`.  As with :class:`.Vector`, normalizing a zero
    quaternion silently produces NaN.

    The ``*`` operator implements the hamiltonian product with another quaternion (see
    :func:`.quaternion_multiplication`), scaling by a number, or the product with a :class:`.Vector` treated as a
    pure quaternion.  The latter is the raw product, not a rotation of the vector.  For example::

        >>> from quatkit.rotations import Quaternion
        >>> Quaternion.from_angles(0, 0, 0)
        Quaternion(1.0, 0.0, 0.0, 0.0)
        >>> q = Quaternion(0, 0, 0, 1)
        >>> q * q.conjugate()
        Quaternion(1.0, 0.0, 0.0, 0.0)

    Equality is exact, component by component.
    """

    def __init__(self, w: SCALAR = 1.0, x: SCALAR = 0.0, y: SCALAR = 0.0, z: SCALAR = 0.0):
        """
        :param w: The scalar part
        :param x: The first vector component
        :param y: The second vector component
        :param z: The third vector component
        """

        self._q: DOUBLE_ARRAY = np.array([w, x, y, z], dtype=np.float64)

    @classmethod
    def from_array(cls, array: ARRAY_LIKE) -> Self:
        """
        Creates a quaternion from a 4 element sequence ordered ``[w, x, y, z]``.

        :param array: The components
        :return: The new quaternion
        :raises ValueError: If the input is not a 4 element 1d array
        """

        return cls(*_check_quaternion_array_and_shape(array))

    @classmethod
    def from_angles(cls, roll: SCALAR, pitch: SCALAR, yaw: SCALAR) -> Self:
        """
        Creates the rotation quaternion for roll about x, then pitch about y, then yaw about z.

        See :func:`.euler_to_quaternion` for the exact formula.

        :param roll: The rotation about the x axis in radians
        :param pitch: The rotation about the y axis in radians
        :param yaw: The rotation about the z axis in radians
        :return: The rotation quaternion
        """

        return cls.from_array(euler_to_quaternion(roll, pitch, yaw))

    @property
    def w(self) -> float:
        """
        The scalar part of the quaternion
        """

        return float(self._q[QuaternionComponent.W])

    @w.setter
    def w(self, value: SCALAR):
        self._q[QuaternionComponent.W] = value

    @property
    def x(self) -> float:
        """
        The first component of the vector part
        """

        return float(self._q[QuaternionComponent.X])

    @x.setter
    def x(self, value: SCALAR):
        self._q[QuaternionComponent.X] = value

    @property
    def y(self) -> float:
        """
        The second component of the vector part
        """

        return float(self._q[QuaternionComponent.Y])

    @y.setter
    def y(self, value: SCALAR):
        self._q[QuaternionComponent.Y] = value

    @property
    def z(self) -> float:
        """
        The third component of the vector part
        """

        return float(self._q[QuaternionComponent.Z])

    @z.setter
    def z(self, value: SCALAR):
        self._q[QuaternionComponent.Z] = value

    def set(self, idx: int, value: SCALAR):
        """
        Sets a component by index using the mapping in :class:`QuaternionComponent` (0 is w, 1 is x, 2 is y, 3 is z).

        Indices outside 0..3 are ignored.

        :param idx: The component index
        :param value: The new value
        """

        if QuaternionComponent.W <= idx <= QuaternionComponent.Z:
            self._q[QuaternionComponent(idx)] = value

    def norm_sqr(self) -> float:
        """
        Returns ``w**2 + x**2 + y**2 + z**2``.
        """

        return float((self._q * self._q).sum())

    def norm(self) -> float:
        """
        Returns the length of the quaternion.
        """

        return float(np.sqrt(self.norm_sqr()))

    def normalize(self) -> Self:
        """
        Scales this quaternion to unit length in place.

        :return: self
        """

        self._q = quaternion_normalize(self._q)

        return self

    def normalised(self) -> 'Quaternion':
        """
        Returns a unit length copy of this quaternion.  See :meth:`normalize`.
        """

        return Quaternion.from_array(quaternion_normalize(self._q))

    def conjugate(self) -> 'Quaternion':
        """
        Returns the conjugate ``(w, -x, -y, -z)``, which is the inverse rotation for a unit quaternion.
        """

        return Quaternion.from_array(quaternion_conjugate(self._q))

    def clear(self) -> Self:
        """
        Resets this quaternion to the identity ``(1, 0, 0, 0)``.

        :return: self
        """

        self._q[:] = [1.0, 0.0, 0.0, 0.0]

        return self

    def angle(self, in_degrees: bool = False) -> float:
        """
        Returns the rotation angle ``2 * acos(w)``, in radians unless ``in_degrees`` is set.

        See :func:`.quaternion_angle`.
        """

        return quaternion_angle(self._q, in_degrees=in_degrees)

    def axis(self) -> Vector:
        """
        Returns the vector part ``(x, y, z)`` as a :class:`.Vector`.

        This is the rotation axis scaled by the sine of half the rotation angle, so its length is not 1 in general.
        Normalize the result when a unit axis is required.
        """

        return Vector(*quaternion_axis(self._q))

    get_axis = axis

    def set_axis(self, v: Vector) -> Self:
        """
        Overwrites the vector part with ``v``, leaving the scalar part unchanged.

        :return: self
        """

        self._q[1:] = np.asarray(v)

        return self

    def from_quaternion(self, q: 'Quaternion') -> Self:
        """
        Overwrites this quaternion with the components of ``q``.

        :return: self
        """

        self._q[:] = q._q

        return self

    def is_unit(self) -> bool:
        """
        Returns ``True`` only if this quaternion is exactly the identity ``(1, 0, 0, 0)``.

        .. note::
            Despite the name this is not a unit length test.  Any other unit quaternion returns ``False``.  Compare
            :meth:`norm` against 1 when a length test is needed.
        """

        return bool((self._q == [1.0, 0.0, 0.0, 0.0]).all())

    def to_rotation_matrix(self) -> Matrix3x3:
        """
        Returns the rotation matrix for this quaternion.

        The quaternion is used as is.  If it is not unit length the result is not orthonormal.  See
        :func:`.quaternion_to_rotmat`.
        """

        return Matrix3x3.from_array(quaternion_to_rotmat(self._q))

    def from_matrix(self, mat: Matrix3x3) -> Self:
        """
        Overwrites this quaternion with the rotation of ``mat`` using Shoemake's numerically stable algorithm.

        See :func:`.rotmat_to_quaternion`.

        :param mat: The rotation matrix
        :return: self
        """

        self._q = rotmat_to_quaternion(np.asarray(mat))

        return self

    def __array__(self, dtype=None, copy=None) -> DOUBLE_ARRAY:
        if dtype is None:
            return self._q.copy()
        return self._q.astype(dtype)

    def __iter__(self):
        return iter(self._q.tolist())

    def __repr__(self) -> str:
        return 'Quaternion({0!r}, {1!r}, {2!r}, {3!r})'.format(self.w, self.x, self.y, self.z)

    def __str__(self) -> str:
        return str(self._q)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Quaternion):
            return NotImplemented

        return bool((self._q == other._q).all())

    def __ne__(self, other) -> bool:
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None

    __array_ufunc__ = None

    def __neg__(self) -> 'Quaternion':
        return Quaternion.from_array(-self._q)

    def __add__(self, other: 'Quaternion') -> 'Quaternion':
        if not isinstance(other, Quaternion):
            return NotImplemented

        return Quaternion.from_array(self._q + other._q)

    def __sub__(self, other: 'Quaternion') -> 'Quaternion':
        if not isinstance(other, Quaternion):
            return NotImplemented

        return Quaternion.from_array(self._q - other._q)

    def __mul__(self, other: 'Quaternion | Vector | SCALAR') -> 'Quaternion':

        if isinstance(other, Quaternion):
            return Quaternion.from_array(quaternion_multiplication(self._q, other._q))

        elif isinstance(other, Vector):
            return Quaternion.from_array(vector_quaternion_multiplication(self._q, np.asarray(other)))

        elif isinstance(other, Real):
            return Quaternion.from_array(self._q * other)

        return NotImplemented

    def __rmul__(self, other: SCALAR) -> 'Quaternion':
        if not isinstance(other, Real):
            return NotImplemented

        return Quaternion.from_array(other * self._q)

    def __truediv__(self, other: SCALAR) -> 'Quaternion':
        if not isinstance(other, Real):
            return NotImplemented

        with np.errstate(divide='ignore', invalid='ignore'):
            return Quaternion.from_array(self._q / other)

    def __iadd__(self, other: 'Quaternion') -> Self:
        if not isinstance(other, Quaternion):
            return NotImplemented

        self._q += other._q

        return self

    def __isub__(self, other: 'Quaternion') -> Self:
        if not isinstance(other, Quaternion):
            return NotImplemented

        self._q -= other._q

        return self

    def __imul__(self, other: 'Quaternion | SCALAR') -> Self:
        if not isinstance(other, (Quaternion, Real)):
            return NotImplemented

        self._q = (self * other)._q

        return self

    def __itruediv__(self, other: SCALAR) -> Self:
        if not isinstance(other, Real):
            return NotImplemented

        with np.errstate(divide='ignore', invalid='ignore'):
            self._q /= other

        return self

    def copy(self) -> 'Quaternion':
        """
        Returns a copy of self breaking all mutability.
        """

        return Quaternion.from_array(self._q)
