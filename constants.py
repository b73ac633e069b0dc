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

#
# Constants for this robot will go here

import math
from enum import Enum, IntEnum, unique

from wpilib import RobotBase
from wpimath.units import degrees, hertz, inchesToMeters, meters, meters_per_second, \
    meters_per_second_squared, radians_per_second, radians_per_second_squared

from lib_swerve.subsystems.swervedrive.config import ModuleLocation, SwerveDriveConfig


class RobotModes(Enum):
    """Enum for robot modes."""
    REAL = 1
    SIMULATION = 2


ROBOT_MODE = RobotModes.REAL if RobotBase.isReal() else RobotModes.SIMULATION

###############################################################################
# Driver station
DRIVER_CONTROLLER_PORT = 0

# Joystick Deadband
JOYSTICK_DEADBAND = 0.1

ODOMETRY_FREQUENCY: hertz = 100.0  # Primarily for yaw

#################################################################
# Drive subsystem related constants
#
# Module centers are measured from the center of the robot
DRIVE_LENGTH: meters = 0.29845  # half of the wheel base (front to back)
DRIVE_WIDTH: meters = 0.2953  # half of the track width (left to right)

WHEEL_DIAMETER: meters = 0.10322
WHEEL_CIRCUMFERENCE: meters = WHEEL_DIAMETER * math.pi

DRIVE_MOTOR_GEAR_RATIO = 6.54
SPIN_MOTOR_GEAR_RATIO = 150.0 / 7.0

# What a 100% command maps to
SWERVE_DRIVE_MAX_MPS: meters_per_second = 4.5
MAX_RADIAN_PER_SECOND: radians_per_second = 2 * math.pi

WHEEL_SPIN_KP = 0.8

# Drive-to-pose loops
X_KP = 1.2
X_KD = 0.05
Y_KP = 1.2
Y_KD = 0.05
THETA_KP = 2.0
THETA_KD = 0.0

AUTO_MAX_MPS: meters_per_second = 2.0
AUTO_MAX_MPS_SQ: meters_per_second_squared = 2.5
AUTO_MAX_RADPS: radians_per_second = math.pi
AUTO_MAX_RADPS_SQ: radians_per_second_squared = math.pi

# Heading the robot is placed at on the field when powered up
ROBOT_STARTING_HEADING: degrees = 0.0

# Yaw reported by the gyro when the robot faces field forward
GYRO_INITIAL_OFFSET: degrees = 0.0
GYRO_REVERSED = True  # Pigeon2 yaw is counter-clockwise, heading math wants clockwise yaw

DRIVE_CONFIG = SwerveDriveConfig(half_length=DRIVE_LENGTH,
                                 half_width=DRIVE_WIDTH,
                                 wheel_circumference=WHEEL_CIRCUMFERENCE,
                                 drive_gear_ratio=DRIVE_MOTOR_GEAR_RATIO,
                                 steer_gear_ratio=SPIN_MOTOR_GEAR_RATIO,
                                 max_speed=SWERVE_DRIVE_MAX_MPS,
                                 max_angular_speed=MAX_RADIAN_PER_SECOND,
                                 steer_kp=WHEEL_SPIN_KP,
                                 x_kp=X_KP, x_kd=X_KD,
                                 y_kp=Y_KP, y_kd=Y_KD,
                                 theta_kp=THETA_KP, theta_kd=THETA_KD,
                                 auto_max_speed=AUTO_MAX_MPS,
                                 auto_max_acceleration=AUTO_MAX_MPS_SQ,
                                 auto_max_angular_speed=AUTO_MAX_RADPS,
                                 auto_max_angular_acceleration=AUTO_MAX_RADPS_SQ)

#################################################################
# Device IDs


@unique
class DeviceID(IntEnum):
    FRONT_LEFT_DRIVE_ID = 1
    FRONT_LEFT_SPIN_ID = 2
    FRONT_RIGHT_DRIVE_ID = 3
    FRONT_RIGHT_SPIN_ID = 4
    BACK_LEFT_DRIVE_ID = 5
    BACK_LEFT_SPIN_ID = 6
    BACK_RIGHT_DRIVE_ID = 7
    BACK_RIGHT_SPIN_ID = 8

    GYRO_DEVICE_ID = 20


# Mag encoders on the roboRIO DIO ports, and their zero (fraction of a revolution
# read when the wheel points at the front of the robot)
MODULE_HARDWARE = {
    ModuleLocation.FRONT_LEFT: {
        "Drive": DeviceID.FRONT_LEFT_DRIVE_ID, "Spin": DeviceID.FRONT_LEFT_SPIN_ID,
        "Encoder": 0, "Offset": 0.9028,
    },
    ModuleLocation.FRONT_RIGHT: {
        "Drive": DeviceID.FRONT_RIGHT_DRIVE_ID, "Spin": DeviceID.FRONT_RIGHT_SPIN_ID,
        "Encoder": 1, "Offset": 0.2374,
    },
    ModuleLocation.BACK_LEFT: {
        "Drive": DeviceID.BACK_LEFT_DRIVE_ID, "Spin": DeviceID.BACK_LEFT_SPIN_ID,
        "Encoder": 2, "Offset": 0.4981,
    },
    ModuleLocation.BACK_RIGHT: {
        "Drive": DeviceID.BACK_RIGHT_DRIVE_ID, "Spin": DeviceID.BACK_RIGHT_SPIN_ID,
        "Encoder": 3, "Offset": 0.6612,
    },
}

# Robot size (including bumpers)
ROBOT_X_WIDTH: meters = inchesToMeters(30.0)
ROBOT_Y_WIDTH: meters = inchesToMeters(30.0)
