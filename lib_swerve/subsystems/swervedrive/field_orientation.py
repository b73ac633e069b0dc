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
from typing import Tuple

from wpimath.units import radians


def field_to_robot(forward: float, strafe: float, heading: radians) -> Tuple[float, float]:
    """
    Rotate a field oriented (forward, strafe) command by -heading so it is relative
    to the front of the robot. Pure rotation, the magnitude of the command is kept.

    The heading must be measured in the same rotational sense as the command frame
    (clockwise positive for the drive commands, see SwerveDrive.drive_field_oriented)
    """
    cos_heading = math.cos(heading)
    sin_heading = math.sin(heading)

    return (forward * cos_heading + strafe * sin_heading,
            -forward * sin_heading + strafe * cos_heading)
