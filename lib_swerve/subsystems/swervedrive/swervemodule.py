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
from dataclasses import dataclass
from typing import NamedTuple, Optional

from wpimath.geometry import Rotation2d
from wpimath.kinematics import SwerveModulePosition, SwerveModuleState
from wpimath.units import degrees, meters, meters_per_second, radians

from lib_swerve.constants import DEGREES_PER_REVOLUTION, HALF_REVOLUTION_DEGREES, QUARTER_REVOLUTION_DEGREES, \
    RADIANS_PER_REVOLUTION
from lib_swerve.subsystems.swervedrive.config import ModuleLocation, SwerveDriveConfig
from lib_swerve.subsystems.swervedrive.hardware import AbsoluteAngleSensor, DisplacementSensor, LastGoodValue, \
    MotorOutput
from lib_swerve.util.telemetry import TelemetrySink

logger = logging.getLogger(__name__)


class SteerDecision(NamedTuple):
    """
    Result of the shortest path search for one wheel.

    error is how far (degrees, always 0..90) the wheel still has to turn,
    steer_direction is +1 for clockwise and -1 for counter-clockwise, and
    drive_direction is -1 when the wheel should face the opposite of the target
    and drive backwards.
    """
    error: degrees
    steer_direction: int
    drive_direction: int


class SteerCommand(NamedTuple):
    steer_output: float
    drive_output: float


def shortest_steer(wheel_angle: degrees, target_angle: degrees) -> SteerDecision:
    """
    Pick the least amount of steering needed to point the wheel along the target.

    A wheel facing the opposite way and driving backwards moves the robot the same
    as one facing the target and driving forward, so the wheel never has to turn
    more than 90 degrees. Both angles are clockwise positive in [0, 360).
    """
    if wheel_angle <= target_angle:
        difference = target_angle - wheel_angle
        toward, away = 1, -1
    else:
        difference = wheel_angle - target_angle
        toward, away = -1, 1

    if difference <= QUARTER_REVOLUTION_DEGREES:
        # Spin directly towards the target
        return SteerDecision(difference, toward, 1)

    if difference <= HALF_REVOLUTION_DEGREES:
        # Spin back to the opposite of the target and reverse the drive
        return SteerDecision(HALF_REVOLUTION_DEGREES - difference, away, -1)

    if difference <= 3 * QUARTER_REVOLUTION_DEGREES:
        # Opposite of the target is on the far side of it
        return SteerDecision(difference - HALF_REVOLUTION_DEGREES, toward, -1)

    # Target is close, but the short way around crosses 0/360
    return SteerDecision(DEGREES_PER_REVOLUTION - difference, away, 1)


@dataclass(frozen=True)
class ZeroReference:
    """
    Sensor baselines captured by reset_encoders()
    """
    drive_ticks: float
    steer_heading: radians
    steer_ticks: float


class SwerveModule:
    """
    One swerve module: a drive motor, a steer motor and an absolute encoder on the
    steering axis.

    Steering headings read from the absolute encoder are clockwise positive, in
    radians [0, 2*pi), zero when the wheel points at the front of the robot. Anything
    handed to WPILib (get_state and get_position) is converted to its counter-clockwise
    convention.
    """
    def __init__(self, location: ModuleLocation,
                 drive_motor: MotorOutput | DisplacementSensor,
                 steer_motor: MotorOutput | DisplacementSensor,
                 encoder: AbsoluteAngleSensor,
                 encoder_offset: float,
                 config: SwerveDriveConfig,
                 telemetry: Optional[TelemetrySink] = None,
                 reset: bool = True) -> None:
        if not math.isfinite(encoder_offset) or not 0.0 <= encoder_offset < 1.0:
            raise ValueError(f"{location.value}: encoder offset must be in [0, 1), got {encoder_offset}")

        self.location = location
        self.name = location.value

        self._drive_motor = drive_motor
        self._steer_motor = steer_motor
        self._encoder = encoder
        self._encoder_offset = encoder_offset
        self._config = config
        self._telemetry = telemetry or TelemetrySink()

        self._encoder_guard = LastGoodValue(f"{self.name}/encoder")
        self._drive_guard = LastGoodValue(f"{self.name}/drive-ticks")
        self._steer_guard = LastGoodValue(f"{self.name}/steer-ticks")
        self._velocity_guard = LastGoodValue(f"{self.name}/drive-velocity")

        self._zero: Optional[ZeroReference] = None
        self._last_command = SteerCommand(0.0, 0.0)

        if reset:
            self.reset_encoders()

    def __repr__(self) -> str:
        return f"SwerveModule({self.name})"

    @property
    def calibrated(self) -> bool:
        return self._zero is not None

    @property
    def degraded(self) -> bool:
        """
        True while any sensor on this module is returning invalid readings
        """
        return any(guard.degraded for guard in (self._encoder_guard, self._drive_guard,
                                                self._steer_guard, self._velocity_guard))

    @property
    def last_command(self) -> SteerCommand:
        return self._last_command

    def _zero_reference(self) -> ZeroReference:
        if self._zero is None:
            raise RuntimeError(f"{self.name}: encoders have not been zeroed, call reset_encoders() first")
        return self._zero

    def _drive_ticks(self) -> float:
        return self._drive_guard.filter(self._drive_motor.read_ticks())

    def _steer_ticks(self) -> float:
        # Steer motor counts the opposite way to the absolute encoder
        return -self._steer_guard.filter(self._steer_motor.read_ticks())

    def get_steer_heading(self) -> radians:
        """
        Absolute encoder reading as a clockwise positive heading in [0, 2*pi)
        """
        reading = self._encoder_guard.filter(self._encoder.read())

        # Make zero the front of the robot
        reading = (reading - self._encoder_offset) % 1.0

        # Flip to make clockwise positive. A reading of exactly zero comes back
        # as a full revolution, which is the same physical heading
        return ((1.0 - reading) * RADIANS_PER_REVOLUTION) % RADIANS_PER_REVOLUTION

    def reset_encoders(self) -> None:
        """
        Capture the current sensor values as the new zero references
        """
        self._zero = ZeroReference(drive_ticks=self._drive_ticks(),
                                   steer_heading=self.get_steer_heading(),
                                   steer_ticks=self._steer_ticks())
        logger.debug(f"{self.name}: zeroed at {self._zero}")

    def _ticks_to_meters(self, ticks: float) -> meters:
        config = self._config
        return ticks / config.ticks_per_revolution / config.drive_gear_ratio * config.wheel_circumference

    def get_drive_displacement(self) -> meters:
        """
        Distance the wheel has traveled since the last reset
        """
        return self._ticks_to_meters(self._drive_ticks() - self._zero_reference().drive_ticks)

    def get_drive_velocity(self) -> meters_per_second:
        ticks_per_second = self._velocity_guard.filter(self._drive_motor.read_ticks_per_second())
        return self._ticks_to_meters(ticks_per_second)

    def get_steer_rotation(self) -> radians:
        """
        How far the steer motor has turned the wheel (clockwise positive) since the
        last reset, within one revolution. Sign follows math.fmod so the direction
        of travel is kept.
        """
        config = self._config
        ticks = self._steer_ticks() - self._zero_reference().steer_ticks
        rotation = ticks / config.ticks_per_revolution / config.steer_gear_ratio * RADIANS_PER_REVOLUTION

        return math.fmod(rotation, RADIANS_PER_REVOLUTION)

    def get_steer_angle(self) -> radians:
        """
        Heading estimated from the steer motor encoder instead of the absolute encoder,
        in [0, 2*pi)
        """
        return (self._zero_reference().steer_heading + self.get_steer_rotation()) % RADIANS_PER_REVOLUTION

    def get_state(self) -> SwerveModuleState:
        return SwerveModuleState(abs(self.get_drive_velocity()),
                                 Rotation2d(-self.get_steer_heading()))

    def get_position(self) -> SwerveModulePosition:
        return SwerveModulePosition(self.get_drive_displacement(),
                                    Rotation2d(-self.get_steer_heading()))

    def stop(self) -> None:
        self._steer_motor.set_output(0.0)
        self._drive_motor.set_output(0.0)
        self._last_command = SteerCommand(0.0, 0.0)

    def compute_steer_command(self, drive_speed: float, target_angle: degrees) -> SteerCommand:
        """
        Work out the steer and drive outputs that get this wheel moving at
        'drive_speed' (percent) along 'target_angle' (degrees, clockwise positive)
        """
        target_angle %= DEGREES_PER_REVOLUTION
        wheel_angle = math.degrees(self.get_steer_heading())

        decision = shortest_steer(wheel_angle, target_angle)

        # Simple P of PID, the wheel slows down as it reaches the target
        output = self._config.steer_kp * (decision.error / QUARTER_REVOLUTION_DEGREES)

        return SteerCommand(output * decision.steer_direction,
                            drive_speed * decision.drive_direction)

    def drive_percent(self, drive_speed: float, target_angle: degrees) -> SteerCommand:
        """
        Spin the module motors to reach the drive speed (percent) and wheel angle
        """
        command = self.compute_steer_command(drive_speed, target_angle)

        self._steer_motor.set_output(command.steer_output)
        self._drive_motor.set_output(command.drive_output)
        self._last_command = command

        return command

    def drive_meters(self, drive_speed: meters_per_second, target_angle: degrees) -> SteerCommand:
        return self.drive_percent(drive_speed / self._config.max_speed, target_angle)

    def dashboard_periodic(self) -> None:
        prefix = f"Swerve/{self.name}"
        self._telemetry.publish(f"{prefix}/heading", math.degrees(self.get_steer_heading()))
        self._telemetry.publish(f"{prefix}/distance", self.get_drive_displacement())
        self._telemetry.publish(f"{prefix}/steer-output", self._last_command.steer_output)
        self._telemetry.publish(f"{prefix}/drive-output", self._last_command.drive_output)
        self._telemetry.publish(f"{prefix}/degraded", self.degraded)
