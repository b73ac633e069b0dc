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

from wpimath.geometry import Rotation2d
from wpimath.units import degrees, radians

from lib_swerve.constants import DEGREES_PER_REVOLUTION
from lib_swerve.subsystems.gyro.gyro import Gyro
from lib_swerve.subsystems.swervedrive.hardware import LastGoodValue

logger = logging.getLogger(__name__)


class HeadingReference:
    """
    Robot heading relative to where the gyro read when the robot was calibrated.

    The gyro yaw is read clockwise positive (set is_reversed on gyros that count the
    other way). It may wrap at +/-180 or at 0/360, we reduce it either way. The
    result is counter-clockwise positive (WPILib robot math) in [0, 2*pi), and is
    recomputed from the gyro on every read.
    """
    def __init__(self, gyro: Gyro, initial_heading_offset: degrees = 0.0) -> None:
        if not math.isfinite(initial_heading_offset):
            raise ValueError(f"Heading offset must be finite, got {initial_heading_offset}")

        self._gyro = gyro
        self._offset: degrees = initial_heading_offset
        self._guard = LastGoodValue(f"Gyro/{gyro.gyro_type}")

    @property
    def gyro(self) -> Gyro:
        return self._gyro

    @property
    def initial_heading_offset(self) -> degrees:
        return self._offset

    @property
    def degraded(self) -> bool:
        return self._guard.degraded

    def get_continuous_heading_degrees(self) -> degrees:
        yaw = self._guard.filter(self._gyro.read_yaw_degrees())

        angle = (yaw - self._offset) % DEGREES_PER_REVOLUTION

        # Flip so counter-clockwise from field forward is positive
        angle = DEGREES_PER_REVOLUTION - angle
        if angle >= DEGREES_PER_REVOLUTION:
            angle = 0.0

        return angle

    def get_continuous_heading_radians(self) -> radians:
        return math.radians(self.get_continuous_heading_degrees())

    @property
    def rotation(self) -> Rotation2d:
        return Rotation2d(self.get_continuous_heading_radians())
