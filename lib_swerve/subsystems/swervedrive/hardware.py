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

"""
Hardware capabilities a swerve module needs, and the CTRE / WPILib devices that
provide them on the real robot.

The control code only ever sees the base classes below. Tests and simulation
hand in their own implementations.
"""
import logging
import math
from typing import Optional

from phoenix6 import controls, hardware
from wpilib import DutyCycleEncoder

from lib_swerve.constants import TALONFX_TICKS_PER_REVOLUTION

logger = logging.getLogger(__name__)


class MotorOutput:
    """
    Open loop motor output
    """
    def set_output(self, percent: float) -> None:
        """
        Command the motor.

        :param percent: Duty cycle in the range [-1.0, 1.0]
        """
        raise NotImplementedError("Implement in derived class")


class DisplacementSensor:
    """
    Relative encoder. Values are monotonic within a power cycle
    """
    def read_ticks(self) -> float:
        raise NotImplementedError("Implement in derived class")

    def read_ticks_per_second(self) -> float:
        raise NotImplementedError("Implement in derived class")


class AbsoluteAngleSensor:
    """
    Absolute rotation sensor, wrapped to [0.0, 1.0) of a revolution
    """
    def read(self) -> float:
        raise NotImplementedError("Implement in derived class")


class LastGoodValue:
    """
    Sensor guard. Passes finite readings through and remembers them. A reading that
    is NaN or infinite is replaced by the last good value and the guard is flagged as
    degraded until a good reading comes back.
    """
    def __init__(self, name: str, initial: float = 0.0):
        self.name = name
        self._value: float = initial
        self._degraded = False

    @property
    def degraded(self) -> bool:
        return self._degraded

    @property
    def value(self) -> float:
        return self._value

    def filter(self, reading: float) -> float:
        if reading is not None and math.isfinite(reading):
            if self._degraded:
                logger.info(f"{self.name}: sensor recovered, reading {reading}")
                self._degraded = False

            self._value = reading
            return reading

        if not self._degraded:
            logger.warning(f"{self.name}: invalid sensor reading {reading}, holding {self._value}")
            self._degraded = True

        return self._value


class TalonFXMotor(MotorOutput, DisplacementSensor):
    """
    Falcon 500 / Kraken with an integrated encoder, driven open loop
    """
    def __init__(self, device_id: int, canbus: str = "", inst: Optional[hardware.TalonFX] = None):
        self._motor: hardware.TalonFX = inst or hardware.TalonFX(device_id, canbus)
        self._request = controls.DutyCycleOut(0.0)

        self._position = self._motor.get_rotor_position()
        self._velocity = self._motor.get_rotor_velocity()

    @property
    def motor(self) -> hardware.TalonFX:
        return self._motor

    def set_output(self, percent: float) -> None:
        self._motor.set_control(self._request.with_output(max(-1.0, min(1.0, percent))))

    def read_ticks(self) -> float:
        # Phoenix 6 reports rotor rotations
        return self._position.refresh().value * TALONFX_TICKS_PER_REVOLUTION

    def read_ticks_per_second(self) -> float:
        return self._velocity.refresh().value * TALONFX_TICKS_PER_REVOLUTION


class DutyCycleMagEncoder(AbsoluteAngleSensor):
    """
    Absolute magnetic encoder (CTRE Mag / REV Through Bore) read through a DIO
    duty cycle input
    """
    def __init__(self, channel: int, inst: Optional[DutyCycleEncoder] = None):
        self._encoder: DutyCycleEncoder = inst or DutyCycleEncoder(channel)

    def read(self) -> float:
        value = self._encoder.get()
        if not self._encoder.isConnected():
            return math.nan

        return value
