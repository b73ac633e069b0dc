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

from pathplannerlib.auto import NamedCommands
from wpimath.geometry import Pose2d, Rotation2d
from wpimath.units import degrees, meters, radians, seconds

from lib_swerve.commands.command import BaseCommand
from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive

logger = logging.getLogger(__name__)

PoseSupplier = Callable[[], Optional[Pose2d]]


class DriveToPoseConstants:
    TRANSLATION_TOLERANCE: meters = 0.05
    ROTATION_TOLERANCE: radians = math.radians(2.0)
    VISION_REFRESH_TIME: seconds = 0.5


class DriveToPose(BaseCommand):
    """
    Drive to a field pose using odometry. Finishes once all three loops are within
    tolerance, or never if 'hold' is set (position hold).
    """
    name = "DriveToPose"

    def __init__(self, drivetrain: SwerveDrive,
                 x: meters = 0.0,
                 y: meters = 0.0,
                 heading: Rotation2d | degrees = 0.0,
                 hold: bool = False,
                 translation_tolerance: meters = DriveToPoseConstants.TRANSLATION_TOLERANCE,
                 rotation_tolerance: radians = DriveToPoseConstants.ROTATION_TOLERANCE):
        super().__init__(drivetrain)

        if not isinstance(heading, Rotation2d):
            heading = Rotation2d.fromDegrees(heading)

        self._target = Pose2d(x, y, heading)
        self._hold = hold
        self._translation_tolerance = translation_tolerance
        self._rotation_tolerance = rotation_tolerance

    @property
    def target(self) -> Pose2d:
        return self._target

    @staticmethod
    def pathplanner_register(drivetrain: SwerveDrive) -> None:
        """
        This command factory can be used with register this command
        and make it available from within PathPlanner
        """
        NamedCommands.registerCommand(DriveToPose.name, DriveToPose(drivetrain))

    def initialize(self) -> None:
        super().initialize()

        controller = self._drivetrain.pose_controller
        controller.set_tolerance(self._translation_tolerance, self._rotation_tolerance)
        controller.reset(self._drivetrain.pose)
        self._drivetrain.set_drive_to_pose_goal(self._target)

    def execute(self) -> None:
        self._drivetrain.drive_to_pose_odometry(self._target)

    def isFinished(self) -> bool:
        if self._hold:
            return False

        pose = self._drivetrain.pose
        distance = pose.translation().distance(self._target.translation())
        turn = abs((self._target.rotation() - pose.rotation()).radians())

        return distance <= self._translation_tolerance and turn <= self._rotation_tolerance

    def end(self, interrupted: bool) -> None:
        self._drivetrain.stop()
        super().end(interrupted)


class DriveToVisionTarget(BaseCommand):
    """
    Close the loop on a target reported relative to the robot by the vision system.
    The supplier returns None when no target is visible, and the robot holds still.
    """
    name = "DriveToVisionTarget"

    def __init__(self, drivetrain: SwerveDrive, target: PoseSupplier,
                 translation_tolerance: meters = DriveToPoseConstants.TRANSLATION_TOLERANCE,
                 rotation_tolerance: radians = DriveToPoseConstants.ROTATION_TOLERANCE):
        super().__init__(drivetrain)

        self._target = target
        self._translation_tolerance = translation_tolerance
        self._rotation_tolerance = rotation_tolerance
        self._last_target: Optional[Pose2d] = None

    def initialize(self) -> None:
        super().initialize()

        controller = self._drivetrain.pose_controller
        controller.set_tolerance(self._translation_tolerance, self._rotation_tolerance)
        controller.reset(Pose2d())
        self._last_target = None

    def execute(self) -> None:
        target = self._target()
        self._last_target = target

        if target is None:
            self._drivetrain.stop()
            return

        self._drivetrain.drive_to_pose_vision(target)

    def isFinished(self) -> bool:
        target = self._last_target
        if target is None:
            return False

        return (target.translation().norm() <= self._translation_tolerance
                and abs(target.rotation().radians()) <= self._rotation_tolerance)

    def end(self, interrupted: bool) -> None:
        self._drivetrain.stop()
        super().end(interrupted)


class DriveToPoseCombo(DriveToPose):
    """
    DriveToPose that re-anchors odometry to the vision pose every 'refresh_time'
    seconds while a vision pose is available
    """
    name = "DriveToPoseCombo"

    def __init__(self, drivetrain: SwerveDrive, vision: PoseSupplier,
                 x: meters = 0.0,
                 y: meters = 0.0,
                 heading: Rotation2d | degrees = 0.0,
                 refresh_time: seconds = DriveToPoseConstants.VISION_REFRESH_TIME,
                 **kwargs):
        super().__init__(drivetrain, x, y, heading, **kwargs)

        self._vision = vision
        self._refresh_time = refresh_time

    def execute(self) -> None:
        vision_input = self._vision()

        if vision_input is None:
            super().execute()
        else:
            self._drivetrain.drive_to_pose_combo(vision_input, self._target, self._refresh_time)
