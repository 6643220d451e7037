# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Attitude Conversion Constants
=============================

Numerical thresholds and axis conventions shared by the attitude conversions.
All angles are in radians.
"""

import numpy as np

# ============================================================================
# AXES
# ============================================================================
X_AXIS = 0
Y_AXIS = 1
Z_AXIS = 2

AXIS_NAMES = ('X', 'Y', 'Z')

# ============================================================================
# ANGLES
# ============================================================================
HALF_PI = 0.5 * np.pi
TWO_PI = 2.0 * np.pi

# ============================================================================
# NUMERICAL THRESHOLDS
# ============================================================================
# Gimbal lock is declared when the pooled estimate of cos(theta) (asymmetric
# sequences) or sin(theta) (symmetric sequences) is at or below this value.
GIMBAL_LOCK_THRESHOLD = 1e-13

# Tolerance used when checking that a matrix is a proper rotation
ORTHONORMAL_TOLERANCE = 1e-9

# Quaternion norms below this are treated as zero
QUATERNION_ZERO_NORM = 1e-300
