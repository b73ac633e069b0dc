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

import math

from wpimath.geometry import Rotation2d
from wpimath.units import degrees, degrees_per_second

from lib_swerve.util.telemetry import TelemetrySink


class Gyro:
    """
    Gyro is the base class for gyros on our system. Actual gyros are derived
    from this class.
    """
    gyro_type = "unknown"

    def __init__(self, is_reversed: bool) -> None:
        self._reversed = is_reversed

    def initialize(self) -> None:
        """
        Perform initial steps to get your gyro ready
        """
        self.reset()

    @property
    def is_reversed(self) -> bool:
        return self._reversed

    def reset(self) -> None:
        """
        Reset the gyro
        """
        self.zero_yaw()

    def zero_yaw(self) -> None:
        raise NotImplementedError("Implement in derived class")

    @property
    def yaw(self) -> degrees:
        raise NotImplementedError("Implement in derived class")

    def read_yaw_degrees(self) -> degrees:
        """
        Raw yaw as the device reports it. The wrap point (+/-180 or 0/360) depends
        on the device, HeadingReference takes care of that.
        """
        return self.yaw

    @property
    def heading(self) -> Rotation2d:
        """
        Returns the heading of the robot
        """
        return Rotation2d.fromDegrees(self.yaw)

    @property
    def turn_rate(self) -> float:
        """Returns the turn rate of the robot (in radians per second)

        :returns: The turn rate of the robot, in radians per second
        """
        return math.radians(self.turn_rate_degrees_per_second)

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        raise NotImplementedError("Implement in derived class")

    ######################
    # Dashboard support

    def dashboard_initialize(self, telemetry: TelemetrySink) -> None:
        telemetry.publish('Gyro/type', self.gyro_type)

    def dashboard_periodic(self, telemetry: TelemetrySink) -> None:
        """
        Called from periodic function to update dashboard elements for this device
        """
        telemetry.publish('Gyro/yaw', self.yaw)
