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
from typing import Optional

from phoenix6 import StatusCode, StatusSignal
from phoenix6.configs import Pigeon2Configuration
from phoenix6.hardware import pigeon2
from wpimath.units import degrees, degrees_per_second, hertz

from lib_swerve.subsystems.gyro.gyro import Gyro
from lib_swerve.util.telemetry import TelemetrySink

logger = logging.getLogger(__name__)


class Pigeon2(Gyro):
    """
    Pigeon2 gyro implementation
    """
    gyro_type = "Pigeon2"

    def __init__(self, device_id: int, is_reversed: bool, update_frequency: hertz,
                 canbus: str = "", inst: Optional[pigeon2.Pigeon2] = None) -> None:
        if inst is not None:
            # Supplied by operator. For Pigeon2, use the Pigeon 2 calibration tool in the CTRE Tuner X
            # to set the orientation.
            assert isinstance(inst, pigeon2.Pigeon2), f"Invalid object type past in as gyro instance: {type(inst)}"
            is_reversed = False

        super().__init__(is_reversed)

        self._gyro: pigeon2.Pigeon2 = inst or pigeon2.Pigeon2(device_id, canbus)
        self._instance_supplied = inst is not None

        # Note: Default pigeon2 config has compass disabled. We want it that way as well.
        config: Pigeon2Configuration = Pigeon2Configuration()
        config.pigeon2_features.enable_compass = False

        for _ in range(5):
            if self._gyro.configurator.apply(config, timeout_seconds=0.2).is_ok():
                break
        else:
            logger.warning(f"{self.gyro_type}: unable to apply configuration")

        self._update_hz: hertz = update_frequency

        self._yaw: StatusSignal = self._gyro.get_yaw()
        self._yaw_velocity: StatusSignal = self._gyro.get_angular_velocity_z_world()

    def initialize(self) -> None:
        """
        Perform initial steps to get your gyro ready
        """
        if self._instance_supplied:
            # Only initialize if this class did the initial initialization of the Pigeon2 object
            return

        self.reset()

        if self._update_hz > 0.0:
            status = StatusSignal.set_update_frequency_for_all(self._update_hz,
                                                               self._yaw,
                                                               self._yaw_velocity)
            if status != StatusCode.OK:
                logger.warning(f"{self.gyro_type}: Error during gyro frequency update: {status}")

        status = self._gyro.optimize_bus_utilization()

        if status != StatusCode.OK:
            logger.warning(f"{self.gyro_type}: Error during gyro bus optimization: {status}")

    def zero_yaw(self) -> None:
        self._gyro.set_yaw(0.0)  # we boot up at zero degrees  - note - you can't reset this while calibrating

    @property
    def yaw(self) -> degrees:
        yaw = self._yaw.refresh().value

        return -yaw if self._reversed else yaw

    @property
    def turn_rate_degrees_per_second(self) -> degrees_per_second:
        rate = self._yaw_velocity.refresh().value

        return -rate if self._reversed else rate

    def dashboard_periodic(self, telemetry: TelemetrySink) -> None:
        super().dashboard_periodic(telemetry)

        # Pigeon has an all-good static to test if all is okay with the world
        telemetry.publish('Gyro/all-good', StatusSignal.is_all_good(self._yaw, self._yaw_velocity))
