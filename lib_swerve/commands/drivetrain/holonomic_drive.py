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
from typing import Callable, Optional

from wpimath import applyDeadband

from lib_swerve.commands.command import BaseCommand
from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive

logger = logging.getLogger(__name__)

SpeedSupplier = Callable[[], float]


class HolonomicDrive(BaseCommand):
    """
    "holonomic" means that it can rotate independently of driving forward or left
    (examples: mecanum drivetrain, ball drivetrain, swerve drivetrain)

    Speeds are -1.0..1.0 (joystick) in the driver's frame: forward, strafe right and
    rotate clockwise. Each can be a constant or a function returning the value.
    """
    def __init__(self, drivetrain: SwerveDrive,
                 forward_speed: float | SpeedSupplier,
                 strafe_speed: float | SpeedSupplier,
                 rotation_speed: float | SpeedSupplier,
                 deadband: float = 0.0,
                 field_relative: Optional[bool] = True):
        """
        Drive the robot until this command is terminated.
        """
        super().__init__(drivetrain)

        self._forward_speed = forward_speed if callable(forward_speed) else lambda: forward_speed
        self._strafe_speed = strafe_speed if callable(strafe_speed) else lambda: strafe_speed
        self._rotation_speed = rotation_speed if callable(rotation_speed) else lambda: rotation_speed

        if deadband < 0:
            raise ValueError(f"deadband={deadband} is not positive")

        self._deadband = deadband
        self._field_relative = field_relative

    def execute(self) -> None:
        forward = applyDeadband(self._forward_speed(), self._deadband)
        strafe = applyDeadband(self._strafe_speed(), self._deadband)
        rotation = applyDeadband(self._rotation_speed(), self._deadband)

        if self._field_relative:
            config = self._drivetrain.config
            self._drivetrain.drive_field_oriented(forward * config.max_speed,
                                                  strafe * config.max_speed,
                                                  rotation * config.max_angular_speed)
        else:
            self._drivetrain.drive_percent(forward, strafe, rotation)

    def isFinished(self) -> bool:
        return False  # never finishes, you should use it with "withTimeout(...)"

    def end(self, interrupted: bool) -> None:
        self._drivetrain.stop()  # stop immediately if command is ending
        super().end(interrupted)
