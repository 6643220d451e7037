#!/usr/bin/env python3
"""
Euler Angle Conversion Example using PyAttitude

This example demonstrates:
1. Building a transformation matrix and quaternion from Euler angles
2. Re-expressing the same attitude in every rotation sequence
3. Extracting Euler angles at gimbal lock
4. Reporting an invalid rotation sequence
"""

import numpy as np

from pyattitude import (
    EulerSequence,
    compute_euler_angles_from_matrix,
    compute_matrix_from_euler_angles,
    compute_quaternion_from_euler_angles,
    quat2dcm,
)
from pyattitude.logger import setup_logger


def main():
    logger = setup_logger("pyattitude", "TRACE")

    angles = np.array([0.1, 0.2, 0.3])
    trans = compute_matrix_from_euler_angles(EulerSequence.EulerXYZ, angles)
    quat = compute_quaternion_from_euler_angles(EulerSequence.EulerXYZ, angles)
    logger.info("XYZ %s ->\n%s", angles, np.array2string(trans, precision=6))
    logger.info("quaternion %s", np.array2string(quat, precision=6))
    logger.info("quaternion/matrix difference %.2e", np.max(np.abs(quat2dcm(quat) - trans)))

    for seq in EulerSequence:
        extracted = compute_euler_angles_from_matrix(trans, seq)
        logger.info("%s: %s", seq.axis_names, np.array2string(np.degrees(extracted), precision=4))

    locked = compute_matrix_from_euler_angles(EulerSequence.EulerXYZ, [0.4, np.pi/2, 0.3])
    logger.info("gimbal lock XYZ -> %s",
                compute_euler_angles_from_matrix(locked, EulerSequence.EulerXYZ))

    out = np.zeros(3)
    result = compute_euler_angles_from_matrix(trans, 12, out=out)
    logger.info("invalid sequence returned %s, out left at %s", result, out)


if __name__ == "__main__":
    main()
