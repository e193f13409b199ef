# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
quatkit: vector, quaternion, and 3x3 matrix value types and the conversions between rotation representations.
"""

from quatkit.rotations import Vector, Matrix3x3, Quaternion, RotationConverter, ConversionOptions

__all__ = ['Vector', 'Matrix3x3', 'Quaternion', 'RotationConverter', 'ConversionOptions']
