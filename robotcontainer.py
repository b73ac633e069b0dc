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
from typing import List

from commands2 import DeferredCommand, Subsystem
from commands2.button import CommandXboxController
from wpimath.geometry import Pose2d, Rotation2d

import constants
from constants import DRIVE_CONFIG, MODULE_HARDWARE
from lib_swerve.commands.drivetrain.drive_to_pose import DriveToPose
from lib_swerve.commands.drivetrain.holonomic_drive import HolonomicDrive
from lib_swerve.commands.drivetrain.reset_pose import ResetPose
from lib_swerve.subsystems.gyro.heading import HeadingReference
from lib_swerve.subsystems.gyro.pigeon2 import Pigeon2
from lib_swerve.subsystems.swervedrive.config import MODULE_ORDER
from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive
from lib_swerve.subsystems.swervedrive.hardware import DutyCycleMagEncoder, TalonFXMotor
from lib_swerve.subsystems.swervedrive.swervemodule import SwerveModule
from lib_swerve.util.telemetry import SmartDashboardTelemetry

logger = logging.getLogger(__name__)


class RobotContainer:
    """
    This class is where the bulk of the robot should be declared. Since Command-based is a
    "declarative" paradigm, very little robot logic should actually be handled in the :class:`.Robot`
    periodic methods (other than the scheduler calls). Instead, the structure of the robot (including
    subsystems, commands, and button mappings) should be declared here.
    """
    def __init__(self, robot: 'MyRobot') -> None:
        logger.debug("*** called container __init__")
        self.robot = robot

        self.telemetry = SmartDashboardTelemetry()

        # Robot size (including bumpers)
        self._robot_x_width = constants.ROBOT_X_WIDTH
        self._robot_y_width = constants.ROBOT_Y_WIDTH

        # The driver's controller
        self.driver_controller = CommandXboxController(constants.DRIVER_CONTROLLER_PORT)

        ##########################################
        # Subsystem Initialization
        #
        # The robot core code will already call the periodic() function
        # as needed, but having our own list (iterated in order) allows us to move much of
        # the other subsystem 'tasks' into a generic loop.
        self.subsystems: List[Subsystem] = []

        ##########################################
        #  Drivetrain
        #
        self.gyro = Pigeon2(constants.DeviceID.GYRO_DEVICE_ID, constants.GYRO_REVERSED,
                            update_frequency=constants.ODOMETRY_FREQUENCY)
        self.gyro.initialize()
        self.gyro.dashboard_initialize(self.telemetry)

        modules = []
        for location in MODULE_ORDER:
            hardware = MODULE_HARDWARE[location]
            modules.append(SwerveModule(location,
                                        drive_motor=TalonFXMotor(hardware["Drive"]),
                                        steer_motor=TalonFXMotor(hardware["Spin"]),
                                        encoder=DutyCycleMagEncoder(hardware["Encoder"]),
                                        encoder_offset=hardware["Offset"],
                                        config=DRIVE_CONFIG,
                                        telemetry=self.telemetry))

        starting_pose = Pose2d(0.0, 0.0, Rotation2d.fromDegrees(constants.ROBOT_STARTING_HEADING))

        self.robot_drive = SwerveDrive(modules,
                                       HeadingReference(self.gyro, constants.GYRO_INITIAL_OFFSET),
                                       DRIVE_CONFIG,
                                       starting_pose=starting_pose,
                                       telemetry=self.telemetry)
        self.subsystems.append(self.robot_drive)

        # Commands autonomous routines can refer to by name
        DriveToPose.pathplanner_register(self.robot_drive)
        ResetPose.pathplanner_register(self.robot_drive)

        self.configure_button_bindings()

        # Field oriented joystick driving unless something else wants the drivetrain
        self.robot_drive.setDefaultCommand(
            HolonomicDrive(self.robot_drive,
                           forward_speed=lambda: -self.driver_controller.getLeftY(),
                           strafe_speed=lambda: self.driver_controller.getLeftX(),
                           rotation_speed=lambda: self.driver_controller.getRightX(),
                           deadband=constants.JOYSTICK_DEADBAND,
                           field_relative=True))

    def configure_button_bindings(self) -> None:
        """
        Use this method to define your button->command mappings.
        """
        # Start button re-zeros odometry where the robot sits
        self.driver_controller.start().onTrue(ResetPose(self.robot_drive))

        # Holding 'A' locks the robot to the pose it had when pressed
        self.driver_controller.a().whileTrue(
            DeferredCommand(lambda: DriveToPose(self.robot_drive,
                                                x=self.robot_drive.pose.x,
                                                y=self.robot_drive.pose.y,
                                                heading=self.robot_drive.pose.rotation(),
                                                hold=True),
                            self.robot_drive))

    def robotPeriodic(self) -> None:
        self.gyro.dashboard_periodic(self.telemetry)
