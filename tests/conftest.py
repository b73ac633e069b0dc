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
import pathlib
from typing import Dict, List, Tuple

import pytest
from commands2 import CommandScheduler
from pyfrc.test_support.pytest_plugin import PyFrcPlugin

from lib_swerve.subsystems.gyro.gyro import Gyro
from lib_swerve.subsystems.gyro.heading import HeadingReference
from lib_swerve.subsystems.swervedrive.config import MODULE_ORDER, ModuleLocation, SwerveDriveConfig
from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive
from lib_swerve.subsystems.swervedrive.hardware import AbsoluteAngleSensor, DisplacementSensor, MotorOutput
from lib_swerve.subsystems.swervedrive.swervemodule import SwerveModule
from lib_swerve.util.telemetry import TelemetrySink
import robot as robot_module

# Seconds robotInit may take while the CTRE devices come up in simulation
ROBOT_INIT_TIMEOUT = 10.0


def pytest_configure(config):
    """
    Provide the pyfrc 'robot' and 'control' fixtures when the tests are run by
    pytest directly instead of through 'robotpy test'
    """
    if any(isinstance(plugin, PyFrcPlugin) for plugin in config.pluginmanager.get_plugins()):
        return

    config.pluginmanager.register(PyFrcPlugin(robot_module.MyRobot, pathlib.Path(robot_module.__file__),
                                              False, ROBOT_INIT_TIMEOUT), "pyfrc")


class FakeMotor(MotorOutput, DisplacementSensor):
    def __init__(self, ticks: float = 0.0, ticks_per_second: float = 0.0):
        self.ticks = ticks
        self.ticks_per_second = ticks_per_second
        self.outputs: List[float] = []

    @property
    def output(self) -> float:
        return self.outputs[-1] if self.outputs else 0.0

    def set_output(self, percent: float) -> None:
        self.outputs.append(percent)

    def read_ticks(self) -> float:
        return self.ticks

    def read_ticks_per_second(self) -> float:
        return self.ticks_per_second


class FakeEncoder(AbsoluteAngleSensor):
    def __init__(self, value: float = 0.0):
        self.value = value

    def read(self) -> float:
        return self.value

    def point_at(self, heading_degrees: float, offset: float = 0.0) -> None:
        """
        Set the raw reading so the module decodes to this clockwise heading
        """
        self.value = (offset + 1.0 - (heading_degrees % 360.0) / 360.0) % 1.0


class FakeGyro(Gyro):
    gyro_type = "fake"

    def __init__(self, yaw: float = 0.0):
        super().__init__(False)
        self._yaw = yaw

    def zero_yaw(self) -> None:
        self._yaw = 0.0

    @property
    def yaw(self) -> float:
        return self._yaw

    @yaw.setter
    def yaw(self, value: float) -> None:
        self._yaw = value

    @property
    def turn_rate_degrees_per_second(self) -> float:
        return 0.0


class RecordingTelemetry(TelemetrySink):
    def __init__(self):
        self.values: Dict[str, object] = {}

    def publish(self, key: str, value) -> None:
        self.values[key] = value


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class ModuleHardware:
    def __init__(self):
        self.drive = FakeMotor()
        self.steer = FakeMotor()
        self.encoder = FakeEncoder()


@pytest.fixture(autouse=True)
def scheduler():
    CommandScheduler.resetInstance()
    yield CommandScheduler.getInstance()
    CommandScheduler.resetInstance()


@pytest.fixture
def config() -> SwerveDriveConfig:
    return SwerveDriveConfig(half_length=0.3,
                             half_width=0.3,
                             wheel_circumference=0.1 * math.pi,
                             drive_gear_ratio=6.0,
                             steer_gear_ratio=12.0,
                             ticks_per_revolution=2048,
                             max_speed=4.0,
                             max_angular_speed=2 * math.pi,
                             steer_kp=1.0)


@pytest.fixture
def telemetry() -> RecordingTelemetry:
    return RecordingTelemetry()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gyro() -> FakeGyro:
    return FakeGyro()


@pytest.fixture
def hardware() -> Dict[ModuleLocation, ModuleHardware]:
    return {location: ModuleHardware() for location in MODULE_ORDER}


@pytest.fixture
def make_module(config):
    def _make(location: ModuleLocation = ModuleLocation.FRONT_LEFT, offset: float = 0.0,
              hardware: ModuleHardware = None, **kwargs) -> Tuple[SwerveModule, ModuleHardware]:
        hardware = hardware or ModuleHardware()
        module = SwerveModule(location, hardware.drive, hardware.steer, hardware.encoder, offset, config, **kwargs)
        return module, hardware

    return _make


@pytest.fixture
def drivetrain(config, hardware, gyro, telemetry, clock, make_module) -> SwerveDrive:
    modules = [make_module(location, hardware=hardware[location], telemetry=telemetry)[0]
               for location in MODULE_ORDER]

    return SwerveDrive(modules, HeadingReference(gyro), config, telemetry=telemetry, clock=clock)
