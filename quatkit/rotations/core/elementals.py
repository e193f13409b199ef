# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from quatkit._typing import SCALAR, DOUBLE_ARRAY


__all__ = ["RAD_TO_DEG", "sqr", "rot_x", "rot_y", "rot_z"]


RAD_TO_DEG: float = 57.295779513082320876798154814105
"""
The number of degrees in one radian
"""


def sqr(value: SCALAR) -> float:
    """
    Returns the square of a scalar.

    :param value: the value to square
    :return: ``value * value``
    """

    return value * value


def rot_x(theta: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    Theta should be in units of radians.  For example::

        >>> from quatkit.rotations import rot_x
        >>> rot_x(0.5)
        array([[ 1.        ,  0.        ,  0.        ],
               [ 0.        ,  0.87758256, -0.47942554],
               [ 0.        ,  0.47942554,  0.87758256]])

    :param theta: The angle to form the rotation matrix for
    :return: The rotation matrix corresponding to the rotation angle
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[1, 0, 0],
                     [0, ctheta, -stheta],
                     [0, stheta, ctheta]], dtype=np.float64)


def rot_y(theta: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the y axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angle to form the rotation matrix for, in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, 0, stheta],
                     [0, 1, 0],
                     [-stheta, 0, ctheta]], dtype=np.float64)


def rot_z(theta: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function performs a right handed rotation about the z axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angle to form the rotation matrix for, in radians
    :return: The rotation matrix corresponding to the rotation angle
    """

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    return np.array([[ctheta, -stheta, 0],
                     [stheta, ctheta, 0],
                     [0, 0, 1]], dtype=np.float64)
