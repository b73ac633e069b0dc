# ------------------------------------------------------------------------ #
#      o-o      o                o                                         #
#     /         |                |                                         #
#    O     o  o O-o  o-o o-o     |  oo o--o o-o o-o                        #
#     \    |  | |  | |-' |   \   o | | |  |  /   /                         #
#      o-o o--O o-o  o-o o    o-o  o-o-o--O o-o o-o                        #
#             |                           |                                #
#          o--o                        o--o                                #
#                        o--o      o         o                             #
#                        |   |     |         |  o                          #
#                        O-Oo  o-o O-o  o-o -o-    o-o o-o                 #
#                        |  \  | | |  | | |  |  | |     \                  #
#                        o   o o-o o-o  o-o  o  |  o-o o-o                 #
#                                                                          #
#    Jemison High School - Huntsville Alabama                              #
# ------------------------------------------------------------------------ #

import logging
from typing import Sequence, Tuple

from wpimath.geometry import Pose2d, Rotation2d
from wpimath.kinematics import SwerveDrive4Kinematics, SwerveDrive4Odometry, SwerveModulePosition

from lib_swerve.subsystems.gyro.heading import HeadingReference
from lib_swerve.subsystems.swervedrive.swervemodule import SwerveModule

logger = logging.getLogger(__name__)


class OdometryEstimator:
    """
    Running (x, y, heading) estimate from the four wheel positions and the gyro.

    The pose only changes through update() (once per control cycle) and reset().
    Resetting also re-zeros every module so the next update reads from the new
    baseline.
    """
    def __init__(self, kinematics: SwerveDrive4Kinematics,
                 modules: Sequence[SwerveModule],
                 heading: HeadingReference,
                 initial_pose: Pose2d = Pose2d()) -> None:
        if len(modules) != 4:
            raise ValueError(f"Swerve odometry needs exactly four modules, got {len(modules)}")

        self._modules = tuple(modules)
        self._heading = heading

        for module in self._modules:
            if not module.calibrated:
                module.reset_encoders()

        self._odometry = SwerveDrive4Odometry(kinematics,
                                              self._gyro_rotation(),
                                              self.module_positions(),
                                              initial_pose)

    def _gyro_rotation(self) -> Rotation2d:
        return Rotation2d(self._heading.get_continuous_heading_radians())

    def module_positions(self) -> Tuple[SwerveModulePosition, ...]:
        return tuple(module.get_position() for module in self._modules)

    @property
    def pose(self) -> Pose2d:
        return self._odometry.getPose()

    def reset(self, pose: Pose2d = Pose2d()) -> None:
        for module in self._modules:
            module.reset_encoders()

        self._odometry.resetPosition(self._gyro_rotation(), self.module_positions(), pose)
        logger.info(f"Odometry reset to {pose}")

    def update(self) -> Pose2d:
        return self._odometry.update(self._gyro_rotation(), self.module_positions())
