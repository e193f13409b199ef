# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

import numpy as np

from quatkit._typing import ARRAY_LIKE, DOUBLE_ARRAY

from quatkit.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_multiplication",
           "vector_quaternion_multiplication"]


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Scales the quaternion to unit length.

    Unlike a sign-normalizing convention, the sign of the scalar term is left untouched.  There is no guard against a
    zero length quaternion: the division is carried out and the non-finite result is returned silently.

    :param quaternion: the quaternion to normalize as ``[w, x, y, z]``
    :returns: The normalized quaternion as a new array
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    with np.errstate(divide='ignore', invalid='ignore'):
        work_quaternion /= np.sqrt((work_quaternion * work_quaternion).sum())

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the conjugate of a quaternion of the form ``[w, x, y, z]``.

    The conjugate negates the vector portion of the quaternion:

    .. math::
        \mathbf{q}^*=\left[\begin{array}{c}q_w \\ -\mathbf{q}_v\end{array}\right]

    For a unit quaternion the conjugate is also the inverse, such that
    :math:`\mathbf{q}\otimes\mathbf{q}^*=\left[\begin{array}{cccc}1&0&0&0\end{array}\right]^T`.  For any other
    quaternion the product is :math:`\left[\begin{array}{cccc}\|\mathbf{q}\|^2&0&0&0\end{array}\right]^T`.

    :param quaternion: The quaternion to be conjugated
    :return: a numpy array representing the conjugate quaternion
    """

    # break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[1:] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation on ``[w, x, y, z]`` quaternions.

    The product is defined such that `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`.
    Written out component by component, with the right operand labelled 1 and the left operand labelled 2:

    .. math::
        w' = w_1w_2 - x_1x_2 - y_1y_2 - z_1z_2 \\
        x' = w_1x_2 + x_1w_2 - y_1z_2 + z_1y_2 \\
        y' = w_1y_2 + x_1z_2 + y_1w_2 - z_1x_2 \\
        z' = w_1z_2 - x_1y_2 + y_1x_2 + z_1w_2

    which in vector form is

    .. math::
        \mathbf{q}_2\otimes\mathbf{q}_1=\left[\begin{array}{c}w_2w_1-\mathbf{q}_{v2}^T\mathbf{q}_{v1}\\
        w_2\mathbf{q}_{v1} + w_1\mathbf{q}_{v2} + \mathbf{q}_{v2}\times\mathbf{q}_{v1}\end{array}\right]

    The product is associative but not commutative.

    :param quaternion_1_in: The left quaternion to multiply
    :param quaternion_2_in: The right quaternion to multiply
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[0]
    qv1 = quaternion_1[1:]

    qs2 = quaternion_2[0]
    qv2 = quaternion_2[1:]

    return np.concatenate([[qs1 * qs2 - (qv1 * qv2).sum()],
                           qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2)])


def vector_quaternion_multiplication(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Multiplies a quaternion by a 3 element vector treated as a pure quaternion (scalar part 0).

    This is the raw hamiltonian product ``q * [0, v]``, not the rotation of ``v`` by ``q`` (which would be
    ``q * [0, v] * q^-1``).

    :param quaternion: The quaternion as ``[w, x, y, z]``
    :param vector: The 3 element vector
    :return: The product as a ``[w, x, y, z]`` array
    """

    vector = _check_vector_array_and_shape(vector)

    return quaternion_multiplication(quaternion, np.concatenate([[0.0], vector]))
