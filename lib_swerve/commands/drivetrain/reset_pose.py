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

from pathplannerlib.auto import NamedCommands
from wpimath.geometry import Pose2d, Rotation2d
from wpimath.units import degrees, meters

from lib_swerve.commands.command import BaseCommand
from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive


class ResetPose(BaseCommand):
    """
    Reset the X & Y position as well as the heading of the robot to a specific value

    Good at startup of autonomous period or during testing of the robot
    """
    name = "ResetPose"

    def __init__(self, drivetrain: SwerveDrive,
                 x: meters = 0.0,
                 y: meters = 0.0,
                 heading: degrees = 0.0):
        """
        Reset the starting (X, Y) and heading (in degrees) of the robot to where they should be.

        :param drivetrain: drivetrain on which the (X, Y, heading) should be set
        :param x: X
        :param y: Y
        :param heading: heading (for example: 0 = "North" of the field, 180 = "South" of the field)
        """
        super().__init__(drivetrain)

        self.position = Pose2d(x, y, Rotation2d.fromDegrees(heading))

    @staticmethod
    def pathplanner_register(drivetrain: SwerveDrive) -> None:
        """
        This command factory can be used with register this command
        and make it available from within PathPlanner
        """
        NamedCommands.registerCommand(ResetPose.name, ResetPose(drivetrain))

    def initialize(self) -> None:
        """
        Called just before this Command runs the first time
        """
        super().initialize()

        self._drivetrain.reset_odometry(self.position)

    def isFinished(self) -> bool:
        return True  # this is an instant command, it finishes right after it initialized

    def runsWhenDisabled(self) -> bool:
        return True
