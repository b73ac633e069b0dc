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
from dataclasses import dataclass, fields
from enum import Enum
from typing import List, Tuple

from wpimath.geometry import Translation2d
from wpimath.kinematics import SwerveDrive4Kinematics
from wpimath.units import meters, meters_per_second, meters_per_second_squared, radians_per_second, \
    radians_per_second_squared, seconds

from lib_swerve.constants import DEFAULT_ROBOT_PERIOD, TALONFX_TICKS_PER_REVOLUTION


class ModuleLocation(Enum):
    """
    Where a module sits in the 2x2 layout. The value is the name we use for
    logging and dashboard keys, the signs place the module relative to the
    center of the robot (x forward, y left)
    """
    FRONT_LEFT = "front-left"
    FRONT_RIGHT = "front-right"
    BACK_LEFT = "back-left"
    BACK_RIGHT = "back-right"

    @property
    def signs(self) -> Tuple[int, int]:
        return {
            ModuleLocation.FRONT_LEFT: (1, 1),
            ModuleLocation.FRONT_RIGHT: (1, -1),
            ModuleLocation.BACK_LEFT: (-1, 1),
            ModuleLocation.BACK_RIGHT: (-1, -1),
        }[self]


# Order used everywhere a set of four module values is passed around. Matches
# the order the modules are handed to SwerveDrive4Kinematics.
MODULE_ORDER: Tuple[ModuleLocation, ...] = (ModuleLocation.FRONT_LEFT,
                                            ModuleLocation.FRONT_RIGHT,
                                            ModuleLocation.BACK_LEFT,
                                            ModuleLocation.BACK_RIGHT)


@dataclass(frozen=True)
class SwerveDriveConfig:
    """
    Drivetrain geometry, limits and gains. Supplied once at construction and
    never changed afterwards.
    """
    # Chassis configuration. Distances from the center of the robot to the
    # center of a wheel contact patch.
    half_length: meters
    half_width: meters

    # Drive and steer motor conversions
    wheel_circumference: meters
    drive_gear_ratio: float
    steer_gear_ratio: float
    ticks_per_revolution: float = TALONFX_TICKS_PER_REVOLUTION

    # Driving limits. These are what a command of 1.0 (100%) maps to
    max_speed: meters_per_second = 4.0
    max_angular_speed: radians_per_second = 2 * math.pi

    # Proportional gain for the wheel steer loop (output at 90 degrees of error)
    steer_kp: float = 1.0

    # Pose controller gains and trapezoid profile constraints
    x_kp: float = 1.0
    x_kd: float = 0.0
    y_kp: float = 1.0
    y_kd: float = 0.0
    theta_kp: float = 1.0
    theta_kd: float = 0.0

    auto_max_speed: meters_per_second = 2.0
    auto_max_acceleration: meters_per_second_squared = 2.0
    auto_max_angular_speed: radians_per_second = math.pi
    auto_max_angular_acceleration: radians_per_second_squared = math.pi

    period: seconds = DEFAULT_ROBOT_PERIOD

    _POSITIVE = ("half_length", "half_width", "wheel_circumference", "drive_gear_ratio", "steer_gear_ratio",
                 "ticks_per_revolution", "max_speed", "max_angular_speed", "auto_max_speed",
                 "auto_max_acceleration", "auto_max_angular_speed", "auto_max_angular_acceleration", "period")

    def __post_init__(self):
        for field in fields(self):
            value = getattr(self, field.name)

            if not isinstance(value, (int, float)) or not math.isfinite(value):
                raise ValueError(f"{field.name} must be a finite number, got {value!r}")

            if field.name in self._POSITIVE and value <= 0:
                raise ValueError(f"{field.name} must be greater than zero, got {value}")

            if field.name not in self._POSITIVE and value < 0:
                raise ValueError(f"{field.name} gain may not be negative, got {value}")

    @property
    def radius(self) -> meters:
        """
        Distance from the center of the robot to any one module
        """
        return math.hypot(self.half_length, self.half_width)

    def module_translation(self, location: ModuleLocation) -> Translation2d:
        x_sign, y_sign = location.signs
        return Translation2d(x_sign * self.half_length, y_sign * self.half_width)

    @property
    def module_translations(self) -> List[Translation2d]:
        return [self.module_translation(location) for location in MODULE_ORDER]

    @property
    def kinematics(self) -> SwerveDrive4Kinematics:
        return SwerveDrive4Kinematics(*self.module_translations)
