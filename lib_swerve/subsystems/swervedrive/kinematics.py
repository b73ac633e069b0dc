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
Swerve inverse kinematics, robot velocity to per-wheel speed and angle.

Equations explained at:
https://www.chiefdelphi.com/t/paper-4-wheel-independent-drive-independent-steering-swerve/107383

Commands use the driver's frame: forward positive, strafe positive to the right,
rotation positive clockwise. Wheel angles come out clockwise positive, in degrees.
"""
import math
from typing import Iterator, NamedTuple, Optional

from wpimath.units import degrees, meters

from lib_swerve.constants import DEGREES_PER_REVOLUTION
from lib_swerve.subsystems.swervedrive.config import ModuleLocation


class WheelTarget(NamedTuple):
    speed: float
    angle: degrees


class ModuleTargets(NamedTuple):
    front_left: WheelTarget
    front_right: WheelTarget
    back_left: WheelTarget
    back_right: WheelTarget

    def for_location(self, location: ModuleLocation) -> WheelTarget:
        return getattr(self, location.name.lower())

    @property
    def max_speed(self) -> float:
        return max(target.speed for target in self)

    def items(self) -> Iterator[tuple[ModuleLocation, WheelTarget]]:
        for location in ModuleLocation:
            yield location, self.for_location(location)


def _target(strafe: float, forward: float) -> WheelTarget:
    angle = math.degrees(math.atan2(strafe, forward)) % DEGREES_PER_REVOLUTION

    # A tiny negative angle rounds up to a full revolution
    if angle >= DEGREES_PER_REVOLUTION:
        angle = 0.0

    return WheelTarget(math.hypot(strafe, forward), angle)


def decompose(forward: float, strafe: float, rotation: float,
              length: meters, width: meters) -> Optional[ModuleTargets]:
    """
    Convert a robot velocity into four wheel targets.

    Inputs are percentages (-1.0..1.0). If any wheel would need to go faster than 1.0,
    all four are scaled down together so the fastest is at exactly 1.0 and the ratios
    between wheels are kept.

    Returns None when all three inputs are exactly zero. There is no meaningful wheel
    angle for a stopped robot, the caller should stop the modules instead.
    """
    if forward == 0 and strafe == 0 and rotation == 0:
        return None

    radius = math.hypot(length, width)

    a = strafe - rotation * (length / radius)
    b = strafe + rotation * (length / radius)
    c = forward - rotation * (width / radius)
    d = forward + rotation * (width / radius)

    targets = ModuleTargets(front_left=_target(b, d),
                            front_right=_target(b, c),
                            back_left=_target(a, d),
                            back_right=_target(a, c))

    # If rotation and translation are both high, the equations above will output a
    # number greater than 1. Scale everything back so no motor is asked for more than
    # its maximum.
    fastest = targets.max_speed
    if fastest > 1.0:
        targets = ModuleTargets(*(WheelTarget(target.speed / fastest, target.angle) for target in targets))

    return targets


class DriveKinematics:
    """
    decompose() bound to a fixed chassis size
    """
    def __init__(self, length: meters, width: meters) -> None:
        if not (length > 0 and width > 0):
            raise ValueError(f"Chassis length and width must be positive, got {length} x {width}")

        self._length = length
        self._width = width

    @property
    def length(self) -> meters:
        return self._length

    @property
    def width(self) -> meters:
        return self._width

    def decompose(self, forward: float, strafe: float, rotation: float) -> Optional[ModuleTargets]:
        return decompose(forward, strafe, rotation, self._length, self._width)
