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

from typing import Callable

from wpimath.geometry import Translation2d

from lib_swerve.commands.command import BaseCommand
from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive


class TurnToPoint(BaseCommand):
    """
    Let the driver translate (robot relative, -1.0..1.0) while the robot keeps its
    front pointed at a location on the field
    """
    name = "TurnToPoint"

    def __init__(self, drivetrain: SwerveDrive, point: Translation2d,
                 forward_speed: float | Callable[[], float] = 0.0,
                 strafe_speed: float | Callable[[], float] = 0.0):
        super().__init__(drivetrain)

        self._point = point
        self._forward_speed = forward_speed if callable(forward_speed) else lambda: forward_speed
        self._strafe_speed = strafe_speed if callable(strafe_speed) else lambda: strafe_speed

    def initialize(self) -> None:
        super().initialize()
        self._drivetrain.pose_controller.theta_controller.reset(self._drivetrain.pose.rotation().radians())

    def execute(self) -> None:
        self._drivetrain.turn_to_point_while_driving(self._forward_speed(), self._strafe_speed(), self._point)

    def isFinished(self) -> bool:
        return False  # never finishes, you should use it with "withTimeout(...)"

    def end(self, interrupted: bool) -> None:
        self._drivetrain.stop()
        super().end(interrupted)
