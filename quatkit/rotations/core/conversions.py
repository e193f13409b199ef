# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines for rotation representations

This module contains the routines for converting between the rotation representations used in quatkit.
All routines are implemented purely on numpy arrays (or array like objects) and never modify their inputs.
"""


import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SCALAR

from quatkit.rotations.core._helpers import _check_matrix_array_and_shape, _check_quaternion_array_and_shape
from quatkit.rotations.core.elementals import RAD_TO_DEG
from quatkit.rotations.core.quaternion_math import quaternion_normalize


__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion', 'rotmat_to_quaternion_direct',
           'euler_to_quaternion', 'euler_to_rotmat', 'quaternion_angle', 'quaternion_axis']


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix of the form discussed in
    :ref:`Rotation Representations <rotation-representation-table>`.

    The matrix is built from the pairwise products of the quaternion components

    .. math::
        t_{ab} = 2ab \quad a, b \in \{w, x, y, z\}

    as

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        1-(t_{yy}+t_{zz}) & t_{xy}-t_{wz} & t_{xz}+t_{wy} \\
        t_{xy}+t_{wz} & 1-(t_{xx}+t_{zz}) & t_{yz}-t_{wx} \\
        t_{xz}-t_{wy} & t_{yz}+t_{wx} & 1-(t_{xx}+t_{yy}) \end{array}\right]

    The result is only a rotation matrix when the input has unit length.  No normalization is performed here, so a
    non-unit quaternion silently produces a matrix that is not orthonormal.  For example::

        >>> from quatkit.rotations import quaternion_to_rotmat
        >>> quaternion_to_rotmat([0, 0, 0, 1])
        array([[-1.,  0.,  0.],
               [ 0., -1.,  0.],
               [ 0.,  0.,  1.]])

    :param quaternion: The rotation quaternion as ``[w, x, y, z]``
    :return: a 3x3 numpy array containing the rotation matrix corresponding to the input quaternion
    """

    w, x, y, z = _check_quaternion_array_and_shape(quaternion)

    tx = 2 * x
    ty = 2 * y
    tz = 2 * z

    twx = tx * w
    twy = ty * w
    twz = tz * w
    txx = tx * x
    txy = ty * x
    txz = tz * x
    tyy = ty * y
    tyz = tz * y
    tzz = tz * z

    return np.array([[1 - (tyy + tzz), txy - twz, txz + twy],
                     [txy + twz, 1 - (txx + tzz), tyz - twx],
                     [txz - twy, tyz + twx, 1 - (txx + tyy)]])


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion using Shoemake's numerically stable algorithm.

    When the trace of the matrix is positive the scalar term dominates and the quaternion is formed as

    .. math::
        t = \sqrt{\text{Tr}(\mathbf{T})+1} \\
        q_w = \frac{t}{2} \\
        \mathbf{q}_v = \frac{1}{2t}\left[\begin{array}{c}t_{21}-t_{12}\\t_{02}-t_{20}\\t_{10}-t_{01}
        \end{array}\right]

    Otherwise the largest diagonal element :math:`t_{ii}` selects the dominant vector component (comparing row 1
    against row 0 first, and then row 2 against the winner), :math:`j=(i+1)\bmod 3`, :math:`k=(j+1)\bmod 3` and

    .. math::
        t = \sqrt{t_{ii}-t_{jj}-t_{kk}+1} \\
        q_i = \frac{t}{2} \\
        q_w = \frac{t_{kj}-t_{jk}}{2t}, \quad q_j = \frac{t_{ji}+t_{ij}}{2t}, \quad q_k = \frac{t_{ki}+t_{ik}}{2t}

    where :math:`q_0, q_1, q_2` are the x, y, and z components of the quaternion.  For a valid rotation matrix this
    keeps the square root argument at or above 1, so the conversion is well conditioned even for 180 degree
    rotations where :math:`\text{Tr}(\mathbf{T})=-1`.

    The input is not validated.  A matrix that is not orthonormal gives a result without meaning, possibly
    containing NaN values, and no error is raised.

    :param rotation_matrix: The 3x3 rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion as ``[w, x, y, z]``
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    quaternion = np.zeros(4)

    trace = np.trace(rotation_matrix)

    with np.errstate(divide='ignore', invalid='ignore'):
        if trace > 0:
            t = np.sqrt(trace + 1)
            quaternion[0] = 0.5 * t
            t = 0.5 / t
            quaternion[1] = (rotation_matrix[2, 1] - rotation_matrix[1, 2]) * t
            quaternion[2] = (rotation_matrix[0, 2] - rotation_matrix[2, 0]) * t
            quaternion[3] = (rotation_matrix[1, 0] - rotation_matrix[0, 1]) * t

        else:
            # find the largest diagonal element
            i = 0
            if rotation_matrix[1, 1] > rotation_matrix[0, 0]:
                i = 1

            if rotation_matrix[2, 2] > rotation_matrix[i, i]:
                i = 2

            j = (i + 1) % 3
            k = (j + 1) % 3

            t = np.sqrt(rotation_matrix[i, i] - rotation_matrix[j, j] - rotation_matrix[k, k] + 1)

            # axis i is stored after the scalar term
            quaternion[i + 1] = 0.5 * t
            t = 0.5 / t
            quaternion[0] = (rotation_matrix[k, j] - rotation_matrix[j, k]) * t
            quaternion[j + 1] = (rotation_matrix[j, i] + rotation_matrix[i, j]) * t
            quaternion[k + 1] = (rotation_matrix[k, i] + rotation_matrix[i, k]) * t

    return quaternion


def rotmat_to_quaternion_direct(rotation_matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion using the direct formula.

    .. math::
        q_w = \frac{1}{2}\sqrt{1+\text{Tr}(\mathbf{T})} \\
        \mathbf{q}_v = \frac{1}{4q_w}\left[\begin{array}{c}t_{21}-t_{12}\\t_{02}-t_{20}\\t_{10}-t_{01}
        \end{array}\right]

    after which the quaternion is normalized to unit length.

    .. warning::
        The direct formula divides by :math:`4q_w`, which goes to zero as the trace approaches -1 (rotations
        approaching 180 degrees).  Precision is lost near that point and at exactly 180 degrees the result is
        non-finite.  Use :func:`rotmat_to_quaternion` when the input may be near this case.

    :param rotation_matrix: The 3x3 rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion as ``[w, x, y, z]``
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    with np.errstate(divide='ignore', invalid='ignore'):
        w = 0.5 * np.sqrt(1 + np.trace(rotation_matrix))
        w4 = 4 * w

        x = (rotation_matrix[2, 1] - rotation_matrix[1, 2]) / w4
        y = (rotation_matrix[0, 2] - rotation_matrix[2, 0]) / w4
        z = (rotation_matrix[1, 0] - rotation_matrix[0, 1]) / w4

    return quaternion_normalize([w, x, y, z])


def euler_to_quaternion(roll: SCALAR, pitch: SCALAR, yaw: SCALAR) -> DOUBLE_ARRAY:
    r"""
    This function converts roll, pitch, and yaw angles into a rotation quaternion.

    The rotation applies roll about x first, then pitch about y, then yaw about z, and is formed from the half
    angles as

    .. math::
        q_w = c_rc_pc_y + s_rs_ps_y \\
        q_x = s_rc_pc_y - c_rs_ps_y \\
        q_y = c_rs_pc_y + s_rc_ps_y \\
        q_z = c_rc_ps_y - s_rs_pc_y

    where :math:`c_a` and :math:`s_a` are the cosine and sine of half of angle :math:`a`.  The result is unit length
    for any finite input.

    :param roll: The rotation about the x axis in radians
    :param pitch: The rotation about the y axis in radians
    :param yaw: The rotation about the z axis in radians
    :return: The rotation quaternion as ``[w, x, y, z]``
    """

    half_roll = roll / 2
    half_pitch = pitch / 2
    half_yaw = yaw / 2

    cos_r = np.cos(half_roll)
    cos_p = np.cos(half_pitch)
    cos_y = np.cos(half_yaw)
    sin_r = np.sin(half_roll)
    sin_p = np.sin(half_pitch)
    sin_y = np.sin(half_yaw)

    return np.array([cos_r * cos_p * cos_y + sin_r * sin_p * sin_y,
                     sin_r * cos_p * cos_y - cos_r * sin_p * sin_y,
                     cos_r * sin_p * cos_y + sin_r * cos_p * sin_y,
                     cos_r * cos_p * sin_y - sin_r * sin_p * cos_y], dtype=np.float64)


def euler_to_rotmat(roll: SCALAR, pitch: SCALAR, yaw: SCALAR) -> DOUBLE_ARRAY:
    """
    This function converts roll, pitch, and yaw angles into a rotation matrix.

    The result is the matrix of the rotation built by :func:`euler_to_quaternion`, which is the same as
    ``rot_z(yaw) @ rot_y(pitch) @ rot_x(roll)``.

    :param roll: The rotation about the x axis in radians
    :param pitch: The rotation about the y axis in radians
    :param yaw: The rotation about the z axis in radians
    :return: The 3x3 rotation matrix
    """

    return quaternion_to_rotmat(euler_to_quaternion(roll, pitch, yaw))


def quaternion_angle(quaternion: ARRAY_LIKE, in_degrees: bool = False) -> float:
    r"""
    Returns the rotation angle :math:`\theta=2\text{cos}^{-1}(q_w)` of a rotation quaternion.

    The scalar term is not clipped, so a non-unit quaternion with :math:`|q_w|>1` yields NaN.

    :param quaternion: The rotation quaternion as ``[w, x, y, z]``
    :param in_degrees: Return the angle in degrees instead of radians
    :return: The rotation angle
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    with np.errstate(invalid='ignore'):
        angle = 2 * np.arccos(quaternion[0])

    if in_degrees:
        return float(angle * RAD_TO_DEG)

    return float(angle)


def quaternion_axis(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Returns the vector portion of the quaternion.

    This is the rotation axis scaled by the sine of half the rotation angle.  It is not renormalized.

    :param quaternion: The rotation quaternion as ``[w, x, y, z]``
    :return: The 3 element vector portion
    """

    return _check_quaternion_array_and_shape(quaternion, return_copy=True)[1:]
