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

#
# Commonly used constants not found in existing wpilib modules

from math import pi

# The period is available from robot.getPeriod() and the following provides
# a default value in case it returns 0 or None
DEFAULT_ROBOT_PERIOD = 1.0 / 50

######################################################################
# Math
RADIANS_PER_REVOLUTION = 2 * pi
DEGREES_PER_REVOLUTION = 360.0
HALF_REVOLUTION_DEGREES = DEGREES_PER_REVOLUTION / 2
QUARTER_REVOLUTION_DEGREES = DEGREES_PER_REVOLUTION / 4

######################################################################
# Sensors

# Integrated TalonFX encoder resolution. Phoenix 6 reports rotor rotations,
# so our adapters scale those back into ticks.
TALONFX_TICKS_PER_REVOLUTION = 2048
