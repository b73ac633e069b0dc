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
from dataclasses import FrozenInstanceError, replace

import pytest
from wpimath.kinematics import ChassisSpeeds

from lib_swerve.subsystems.swervedrive.config import MODULE_ORDER, ModuleLocation


def test_module_translations(config):
    front_left = config.module_translation(ModuleLocation.FRONT_LEFT)
    back_right = config.module_translation(ModuleLocation.BACK_RIGHT)

    assert (front_left.x, front_left.y) == pytest.approx((0.3, 0.3))
    assert (back_right.x, back_right.y) == pytest.approx((-0.3, -0.3))
    assert len(config.module_translations) == len(MODULE_ORDER)


def test_radius(config):
    assert config.radius == pytest.approx(math.hypot(0.3, 0.3))


@pytest.mark.parametrize("name, value", [
    ("wheel_circumference", 0.0),
    ("half_length", -0.1),
    ("drive_gear_ratio", math.inf),
    ("max_speed", math.nan),
    ("steer_kp", -1.0),
    ("period", 0.0),
])
def test_bad_values_rejected(config, name, value):
    with pytest.raises(ValueError):
        replace(config, **{name: value})


def test_zero_gains_allowed(config):
    assert replace(config, x_kd=0.0, steer_kp=0.0).steer_kp == 0.0


def test_config_is_frozen(config):
    with pytest.raises(FrozenInstanceError):
        config.max_speed = 1.0


def test_wpilib_kinematics_straight(config):
    states = config.kinematics.toSwerveModuleStates(ChassisSpeeds(1.0, 0.0, 0.0))

    assert [state.speed for state in states] == pytest.approx([1.0] * 4)
