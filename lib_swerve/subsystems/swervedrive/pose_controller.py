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
import math
from typing import Callable, Optional

from wpimath.controller import ProfiledPIDController, ProfiledPIDControllerRadians
from wpimath.geometry import Pose2d, Rotation2d
from wpimath.kinematics import ChassisSpeeds
from wpimath.trajectory import TrapezoidProfile, TrapezoidProfileRadians
from wpimath.units import radians, radians_per_second, seconds

from lib_swerve.subsystems.swervedrive.config import SwerveDriveConfig
from lib_swerve.util.telemetry import TelemetrySink

logger = logging.getLogger(__name__)

_ORIGIN = Pose2d()


class PoseController:
    """
    Position hold / point tracking. Three profiled PD loops, one each for x, y and
    heading, working in meters and radians on the field. The heading loop wraps at
    +/- pi so it always turns the short way.

    Outputs are field relative ChassisSpeeds (WPILib convention, y left, counter-
    clockwise positive). The drivetrain rotates them to the robot before driving.
    """
    def __init__(self, config: SwerveDriveConfig, telemetry: Optional[TelemetrySink] = None) -> None:
        translation_constraints = TrapezoidProfile.Constraints(config.auto_max_speed,
                                                               config.auto_max_acceleration)

        self._x_controller = ProfiledPIDController(config.x_kp, 0.0, config.x_kd,
                                                   translation_constraints, config.period)
        self._y_controller = ProfiledPIDController(config.y_kp, 0.0, config.y_kd,
                                                   translation_constraints, config.period)
        self._theta_controller = ProfiledPIDControllerRadians(
            config.theta_kp, 0.0, config.theta_kd,
            TrapezoidProfileRadians.Constraints(config.auto_max_angular_speed,
                                                config.auto_max_angular_acceleration),
            config.period)
        self._theta_controller.enableContinuousInput(-math.pi, math.pi)

        self._telemetry = telemetry or TelemetrySink()

    @property
    def x_controller(self) -> ProfiledPIDController:
        return self._x_controller

    @property
    def y_controller(self) -> ProfiledPIDController:
        return self._y_controller

    @property
    def theta_controller(self) -> ProfiledPIDControllerRadians:
        return self._theta_controller

    def reset(self, current: Pose2d) -> None:
        """
        Restart the motion profiles from where the robot is now
        """
        self._x_controller.reset(current.x)
        self._y_controller.reset(current.y)
        self._theta_controller.reset(current.rotation().radians())

    def set_goal(self, target: Pose2d) -> None:
        self._x_controller.setGoal(target.x)
        self._y_controller.setGoal(target.y)
        self._theta_controller.setGoal(target.rotation().radians())

    def at_goal(self) -> bool:
        return self._x_controller.atGoal() and self._y_controller.atGoal() and self._theta_controller.atGoal()

    def set_tolerance(self, translation: float, rotation: radians) -> None:
        self._x_controller.setTolerance(translation)
        self._y_controller.setTolerance(translation)
        self._theta_controller.setTolerance(rotation)

    def calculate(self, current: Pose2d, target: Pose2d) -> ChassisSpeeds:
        """
        Field relative velocity that moves the robot from 'current' toward 'target'
        """
        x = self._x_controller.calculate(current.x, target.x)
        y = self._y_controller.calculate(current.y, target.y)
        theta = self._theta_controller.calculate(current.rotation().radians(), target.rotation().radians())

        self._telemetry.publish("DriveToPose/x", x)
        self._telemetry.publish("DriveToPose/y", y)
        self._telemetry.publish("DriveToPose/theta", theta)

        return ChassisSpeeds(x, y, theta)

    def calculate_vision(self, target: Pose2d) -> ChassisSpeeds:
        """
        Same loops as calculate(), but the robot is always at the origin and 'target'
        is the offset to the goal as seen by the vision system
        """
        return self.calculate(_ORIGIN, target)

    def heading_rate(self, current: Rotation2d, target: Rotation2d) -> radians_per_second:
        """
        Heading loop only, used to keep the robot pointed somewhere while the
        driver translates
        """
        return self._theta_controller.calculate(current.radians(), target.radians())


class RefreshTimer:
    """
    Tells the caller when more than 'interval' seconds have passed since the last
    refresh. Used to re-anchor odometry to a vision pose every so often.
    """
    def __init__(self, clock: Callable[[], seconds]) -> None:
        self._clock = clock
        self._last_refresh: seconds = clock()

    @property
    def last_refresh(self) -> seconds:
        return self._last_refresh

    def due(self, interval: seconds) -> bool:
        return interval < self._clock() - self._last_refresh

    def mark(self) -> None:
        self._last_refresh = self._clock()
