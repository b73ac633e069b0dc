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

import pytest
from pyfrc.test_support.controller import TestController
from wpilib.simulation import XboxControllerSim

import constants
from lib_swerve.subsystems.swervedrive.config import ModuleLocation
from robot import MyRobot


def test_robot_init_successful(control: TestController, robot: MyRobot):
    # run_robot will cause the robot to be initialized and robotInit to be called
    with control.run_robot():
        assert robot.container is not None, "Robot Container not initialized"

        container = robot.container
        assert container.robot_drive is not None, "Drive is not initialized"
        assert container.robot_drive in container.subsystems
        assert container.gyro.gyro_type == "Pigeon2"

        modules = container.robot_drive.modules
        assert len(modules) == 4
        assert all(module.calibrated for module in modules.values())

        assert container.robot_drive.getDefaultCommand() is not None


def test_module_offsets(control: TestController, robot: MyRobot):
    """
    While a swerve drive can drive in any direction, the notion of front/back/left/right
    still exists, and we give offsets to these based off of the center of the robot.  So
    check that they are correct polarity +/-
    """
    with control.run_robot():
        container = robot.container
        assert container is not None, "Robot Container not initialized"

        config = container.robot_drive.config
        front_left = config.module_translation(ModuleLocation.FRONT_LEFT)
        front_right = config.module_translation(ModuleLocation.FRONT_RIGHT)
        back_left = config.module_translation(ModuleLocation.BACK_LEFT)
        back_right = config.module_translation(ModuleLocation.BACK_RIGHT)

        assert 0.0 < front_left.x < container._robot_x_width / 2
        assert 0.0 < front_left.y < container._robot_y_width / 2

        assert 0.0 < front_right.x < container._robot_x_width / 2
        assert -container._robot_y_width / 2 < front_right.y < 0.0

        assert -container._robot_x_width / 2 < back_left.x < 0.0
        assert 0.0 < back_left.y < container._robot_y_width / 2

        assert -container._robot_x_width / 2 < back_right.x < 0.0
        assert -container._robot_y_width / 2 < back_right.y < 0.0


def test_operator_control(control: TestController, robot: MyRobot):
    """
    Pushing the driver's left stick forward in teleop drives the wheels through the
    default (field oriented) command, and disabling the robot stops them again
    """
    with control.run_robot():
        controller = XboxControllerSim(constants.DRIVER_CONTROLLER_PORT)

        # Run disabled for a short period
        control.step_timing(seconds=0.5, autonomous=False, enabled=False)

        drivetrain = robot.container.robot_drive
        assert drivetrain.last_targets is None

        # Stick forward is negative Y
        controller.setLeftY(-0.5)
        control.step_timing(seconds=1.0, autonomous=False, enabled=True)

        targets = drivetrain.last_targets
        assert targets is not None, "Default drive command did not run"
        assert targets.max_speed > 0.0
        assert all(module.last_command.drive_output != 0.0 for module in drivetrain.modules.values())

        # Disabled for another short period
        controller.setLeftY(0.0)
        control.step_timing(seconds=0.5, autonomous=False, enabled=False)

        assert drivetrain.last_targets is None
        assert all(module.last_command == (0.0, 0.0) for module in drivetrain.modules.values())


@pytest.mark.filterwarnings("ignore")
def test_disabled(control: TestController, robot: MyRobot):
    """Runs disabled mode by itself"""
    with control.run_robot():
        control.step_timing(seconds=2.0, autonomous=False, enabled=False)

        assert robot.counter > 0
        assert robot.container.robot_drive.last_targets is None
