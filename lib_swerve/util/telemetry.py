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

from typing import Union

from wpilib import SmartDashboard

TelemetryValue = Union[bool, int, float, str]


class TelemetrySink:
    """
    Destination for dashboard values. The base class drops everything, so it can
    be handed to any subsystem that does not care about telemetry (tests, replay,
    or a robot that has the dashboard turned off).
    """
    def publish(self, key: str, value: TelemetryValue) -> None:
        pass


class SmartDashboardTelemetry(TelemetrySink):
    """
    Publish to the SmartDashboard network table
    """
    def __init__(self, prefix: str = ""):
        self._prefix = f"{prefix}/" if prefix else ""

    def publish(self, key: str, value: TelemetryValue) -> None:
        key = self._prefix + key

        # bool is a subclass of int, so check it first
        if isinstance(value, bool):
            SmartDashboard.putBoolean(key, value)

        elif isinstance(value, (int, float)):
            SmartDashboard.putNumber(key, value)

        else:
            SmartDashboard.putString(key, str(value))
