# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`RotationConverter` class, which converts between the rotation representations of
quatkit according to a :class:`ConversionOptions` configuration.
"""

import warnings

from dataclasses import dataclass

import numpy as np

from quatkit._typing import SCALAR

from quatkit.rotations.core.conversions import (euler_to_quaternion, rotmat_to_quaternion,
                                                rotmat_to_quaternion_direct, quaternion_to_rotmat)
from quatkit.rotations.core.elementals import RAD_TO_DEG
from quatkit.rotations.core.quaternion_math import quaternion_normalize
from quatkit.rotations.matrix import Matrix3x3
from quatkit.rotations.quaternion import Quaternion
from quatkit.utilities.mixin_classes import UserOptionConfigured
from quatkit.utilities.options import UserOptions


DIRECT_TRACE_LIMIT: float = -1 + 1e-6
"""
The trace at or below which the direct matrix to quaternion formula is considered ill conditioned
"""


@dataclass
class ConversionOptions(UserOptions):
    """
    Options for configuring a :class:`RotationConverter`.
    """

    stable: bool = True
    """
    Use Shoemake's algorithm (:func:`.rotmat_to_quaternion`) for matrix to quaternion conversions.

    When ``False`` the direct formula (:func:`.rotmat_to_quaternion_direct`) is used instead and a warning is issued
    for matrices whose trace is at or below :data:`DIRECT_TRACE_LIMIT`.
    """

    degrees: bool = False
    """
    Accept Euler angles and report rotation angles in degrees instead of radians.
    """

    renormalize: bool = False
    """
    Normalize quaternions to unit length before converting them to a rotation matrix.
    """


class RotationConverter(UserOptionConfigured[ConversionOptions], ConversionOptions):
    """
    Converts between :class:`.Quaternion`, :class:`.Matrix3x3`, and Euler angle rotation representations.

    Which matrix to quaternion algorithm is used, the angle units, and whether quaternions are renormalized before
    building a matrix are controlled by the :class:`ConversionOptions` given at construction.  The options can be
    changed on the instance directly and restored with :meth:`reset_settings`.  For example::

        >>> from quatkit.rotations import RotationConverter, ConversionOptions, Matrix3x3
        >>> converter = RotationConverter(ConversionOptions(degrees=True))
        >>> q = converter.matrix_to_quaternion(Matrix3x3(-1, 0, 0, 0, -1, 0, 0, 0, 1))
        >>> q
        Quaternion(0.0, 0.0, 0.0, 1.0)
        >>> round(converter.angle(q), 6)
        180.0

    None of the conversions modify their inputs.
    """

    def __init__(self, options: ConversionOptions | None = None):
        """
        :param options: The options to configure the converter with.  If ``None`` the defaults are used.
        """

        super().__init__(ConversionOptions, options=options)

    def _to_radians(self, angle: SCALAR) -> SCALAR:
        if self.degrees:
            return angle / RAD_TO_DEG

        return angle

    def matrix_to_quaternion(self, matrix: Matrix3x3) -> Quaternion:
        """
        Converts a rotation matrix into a rotation quaternion.

        :param matrix: The rotation matrix to convert
        :return: The rotation quaternion
        """

        matrix_array = np.asarray(matrix)

        if self.stable:
            return Quaternion.from_array(rotmat_to_quaternion(matrix_array))

        trace = np.trace(matrix_array)
        if trace <= DIRECT_TRACE_LIMIT:
            warnings.warn(f'The trace of the matrix ({trace}) is close to -1.  The direct conversion is ill '
                          f'conditioned for this input, consider enabling the stable option.')

        return Quaternion.from_array(rotmat_to_quaternion_direct(matrix_array))

    def quaternion_to_matrix(self, quaternion: Quaternion) -> Matrix3x3:
        """
        Converts a rotation quaternion into a rotation matrix.

        :param quaternion: The rotation quaternion to convert
        :return: The rotation matrix
        """

        quaternion_array = np.asarray(quaternion)

        if self.renormalize:
            quaternion_array = quaternion_normalize(quaternion_array)

        return Matrix3x3.from_array(quaternion_to_rotmat(quaternion_array))

    def euler_to_quaternion(self, roll: SCALAR, pitch: SCALAR, yaw: SCALAR) -> Quaternion:
        """
        Converts roll, pitch, and yaw angles into a rotation quaternion.

        See :func:`.euler_to_quaternion`.

        :param roll: The rotation about the x axis
        :param pitch: The rotation about the y axis
        :param yaw: The rotation about the z axis
        :return: The rotation quaternion
        """

        return Quaternion.from_array(euler_to_quaternion(self._to_radians(roll),
                                                         self._to_radians(pitch),
                                                         self._to_radians(yaw)))

    def euler_to_matrix(self, roll: SCALAR, pitch: SCALAR, yaw: SCALAR) -> Matrix3x3:
        """
        Converts roll, pitch, and yaw angles into a rotation matrix.

        :param roll: The rotation about the x axis
        :param pitch: The rotation about the y axis
        :param yaw: The rotation about the z axis
        :return: The rotation matrix
        """

        return self.quaternion_to_matrix(self.euler_to_quaternion(roll, pitch, yaw))

    def angle(self, quaternion: Quaternion) -> float:
        """
        Returns the rotation angle of a quaternion in the configured units.

        :param quaternion: The rotation quaternion
        :return: The rotation angle
        """

        return quaternion.angle(in_degrees=self.degrees)
