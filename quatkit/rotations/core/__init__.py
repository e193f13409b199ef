# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module contains fundamental mathematical operations and utilities for rotation
calculations. It has no dependencies on other rotation modules to avoid circular imports.
All functions here are pure mathematical operations on numpy arrays that are used as building
blocks for the value types and the converter.
"""

import quatkit.rotations.core.conversions
import quatkit.rotations.core.elementals
import quatkit.rotations.core.quaternion_math

from quatkit.rotations.core.conversions import (quaternion_to_rotmat, rotmat_to_quaternion, rotmat_to_quaternion_direct,
                                                euler_to_quaternion, euler_to_rotmat, quaternion_angle, quaternion_axis)

from quatkit.rotations.core.elementals import RAD_TO_DEG, sqr, rot_x, rot_y, rot_z

from quatkit.rotations.core.quaternion_math import (quaternion_normalize, quaternion_conjugate,
                                                    quaternion_multiplication, vector_quaternion_multiplication)

__all__ = ['quaternion_to_rotmat', 'rotmat_to_quaternion', 'rotmat_to_quaternion_direct',
           'euler_to_quaternion', 'euler_to_rotmat', 'quaternion_angle', 'quaternion_axis',
           'RAD_TO_DEG', 'sqr', 'rot_x', 'rot_y', 'rot_z',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_multiplication',
           'vector_quaternion_multiplication']
