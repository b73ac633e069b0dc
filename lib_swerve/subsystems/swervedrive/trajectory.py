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

from typing import Sequence

from wpimath.geometry import Pose2d, Translation2d
from wpimath.trajectory import Trajectory, TrajectoryConfig, TrajectoryGenerator

from lib_swerve.subsystems.swervedrive.config import SwerveDriveConfig


def trajectory_config(config: SwerveDriveConfig) -> TrajectoryConfig:
    """
    Trajectory limits for this drivetrain. Uses the full drive speed, the
    acceleration limit is the autonomous one.
    """
    trajectory = TrajectoryConfig(config.max_speed, config.auto_max_acceleration)
    trajectory.setKinematics(config.kinematics)
    return trajectory


def generate_trajectory(start: Pose2d, waypoints: Sequence[Translation2d], goal: Pose2d,
                        config: SwerveDriveConfig) -> Trajectory:
    """
    Time parameterized path from 'start' through the interior 'waypoints' to 'goal'
    """
    return TrajectoryGenerator.generateTrajectory(start, list(waypoints), goal, trajectory_config(config))
