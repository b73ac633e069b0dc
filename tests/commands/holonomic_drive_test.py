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

from lib_swerve.commands.command import BaseCommand
from lib_swerve.commands.drivetrain.holonomic_drive import HolonomicDrive
from lib_swerve.subsystems.swervedrive.config import MODULE_ORDER


def drive_outputs(hardware):
    return [hardware[location].drive.output for location in MODULE_ORDER]


def test_needs_a_drivetrain():
    with pytest.raises(ValueError):
        HolonomicDrive(object(), 0.0, 0.0, 0.0)


def test_requires_drivetrain(drivetrain):
    command = HolonomicDrive(drivetrain, 0.0, 0.0, 0.0)

    assert drivetrain in command.getRequirements()
    assert command.getName() == "HolonomicDrive"
    assert isinstance(command, BaseCommand)


def test_field_relative(drivetrain, hardware, gyro):
    gyro.yaw = 90.0
    command = HolonomicDrive(drivetrain, 0.5, 0.0, 0.0)

    command.initialize()
    command.execute()

    # Robot faces right, so field forward is a strafe to the robot's left. Wheels
    # facing forward take the quarter turn to 90 and drive backwards
    assert drivetrain.last_targets.front_left.angle == pytest.approx(270.0)
    assert drive_outputs(hardware) == pytest.approx([-0.5] * 4)


def test_robot_relative(drivetrain, hardware, gyro):
    gyro.yaw = 90.0
    command = HolonomicDrive(drivetrain, 0.5, 0.0, 0.0, field_relative=False)

    command.execute()

    assert drivetrain.last_targets.front_left.angle == pytest.approx(0.0)
    assert drive_outputs(hardware) == pytest.approx([0.5] * 4)


def test_suppliers_and_deadband(drivetrain, hardware):
    stick = {"forward": 0.05}
    command = HolonomicDrive(drivetrain, lambda: stick["forward"], lambda: 0.0, lambda: 0.0, deadband=0.1)

    command.execute()
    assert drivetrain.last_targets is None
    assert drive_outputs(hardware) == [0.0] * 4

    stick["forward"] = 0.55
    command.execute()
    assert drive_outputs(hardware) == pytest.approx([0.5] * 4)


def test_negative_deadband(drivetrain):
    with pytest.raises(ValueError):
        HolonomicDrive(drivetrain, 0.0, 0.0, 0.0, deadband=-0.1)


def test_never_finishes_and_stops_on_end(drivetrain, hardware, telemetry):
    command = HolonomicDrive(drivetrain, 0.5, 0.0, 0.0)

    command.initialize()
    assert telemetry.values["command/HolonomicDrive"] == "running"

    command.execute()
    assert not command.isFinished()

    command.end(True)
    assert drive_outputs(hardware) == [0.0] * 4
    assert telemetry.values["command/HolonomicDrive"] == "interrupted"
