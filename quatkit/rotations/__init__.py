# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


r"""
This package defines the value types used to express rotations in quatkit (:class:`.Vector`,
:class:`.Quaternion`, and :class:`.Matrix3x3`), the routines for converting between rotation
representations, and a configurable :class:`.RotationConverter` tying them together.

The rotation representations used in this package are described as follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion ordered scalar first
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_w \\ q_x \\ q_y \\ q_z\end{array}\right]=
                   \left[\begin{array}{c}\text{cos}(\frac{\theta}{2})\\
                   \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
rotation matrix    A :math:`3\times 3` orthonormal matrix with a determinant of +1, stored row major, such that
                   :math:`\mathbf{T}\mathbf{y}` rotates the 3 element column vector :math:`\mathbf{y}`.
                   Rotation matrices uniquely represent a single rotation.
euler angles       Roll, pitch, and yaw angles.  The rotation applies roll about x first, then pitch about y, then
                   yaw about z, so that :math:`\mathbf{T}=\mathbf{R}_z(yaw)\mathbf{R}_y(pitch)\mathbf{R}_x(roll)`.
=================  =====================================================================================================

All angles are in radians unless a degree option or flag is given.

Two matrix to quaternion conversions are provided.  :func:`.rotmat_to_quaternion` (used by
:meth:`.Quaternion.from_matrix`) is Shoemake's numerically stable algorithm.  :func:`.rotmat_to_quaternion_direct`
(used by :meth:`.Matrix3x3.to_quaternion`) is the simple direct formula, which loses precision for rotations near
180 degrees.  The caller chooses which to use.
"""

import quatkit.rotations.core
import quatkit.rotations.vector
import quatkit.rotations.matrix
import quatkit.rotations.quaternion
import quatkit.rotations.converter

from quatkit.rotations.core import *
from quatkit.rotations.vector import Vector
from quatkit.rotations.matrix import Matrix3x3
from quatkit.rotations.quaternion import Quaternion, QuaternionComponent
from quatkit.rotations.converter import ConversionOptions, RotationConverter

__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion', 'rotmat_to_quaternion_direct',
           'euler_to_quaternion', 'euler_to_rotmat', 'quaternion_angle', 'quaternion_axis',
           'RAD_TO_DEG', 'sqr', 'rot_x', 'rot_y', 'rot_z',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_multiplication',
           'vector_quaternion_multiplication',
           'Vector', 'Matrix3x3', 'Quaternion', 'QuaternionComponent', 'ConversionOptions', 'RotationConverter']
