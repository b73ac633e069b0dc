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

import pytest

from lib_swerve.subsystems.gyro.heading import HeadingReference


@pytest.fixture
def heading(gyro) -> HeadingReference:
    return HeadingReference(gyro)


@pytest.mark.parametrize("yaw, expected", [
    (0.0, 0.0),
    (360.0, 0.0),
    (-360.0, 0.0),
    (90.0, 270.0),
    (-90.0, 90.0),
    (180.0, 180.0),
    (-180.0, 180.0),
    (0.5, 359.5),
    (720.25, 359.75),
])
def test_heading_degrees(heading, gyro, yaw, expected):
    gyro.yaw = yaw

    assert heading.get_continuous_heading_degrees() == pytest.approx(expected)


@pytest.mark.parametrize("yaw", [-1000.0, -359.999, -180.0, -0.001, 0.0, 1e-9, 179.99, 359.999, 1234.5])
def test_heading_range(heading, gyro, yaw):
    gyro.yaw = yaw

    assert 0.0 <= heading.get_continuous_heading_degrees() < 360.0
    assert 0.0 <= heading.get_continuous_heading_radians() < 2 * math.pi


def test_same_heading_either_gyro_wrap(heading, gyro):
    # Gyros that report +/-180 and ones that report 0..360 agree
    gyro.yaw = -170.0
    signed = heading.get_continuous_heading_degrees()

    gyro.yaw = 190.0
    assert heading.get_continuous_heading_degrees() == pytest.approx(signed)


def test_initial_offset(gyro):
    heading = HeadingReference(gyro, 10.0)

    gyro.yaw = 10.0
    assert heading.get_continuous_heading_degrees() == pytest.approx(0.0)

    gyro.yaw = 5.0
    assert heading.get_continuous_heading_degrees() == pytest.approx(5.0)

    gyro.yaw = 100.0
    assert heading.get_continuous_heading_degrees() == pytest.approx(270.0)
    assert heading.initial_heading_offset == 10.0


def test_small_turn_small_change(heading, gyro):
    gyro.yaw = 45.0
    before = heading.get_continuous_heading_degrees()

    gyro.yaw = 45.5
    after = heading.get_continuous_heading_degrees()

    assert abs(after - before) == pytest.approx(0.5)


def test_radians_and_rotation(heading, gyro):
    gyro.yaw = -90.0

    assert heading.get_continuous_heading_radians() == pytest.approx(math.pi / 2)
    assert heading.rotation.degrees() == pytest.approx(90.0)


def test_bad_gyro_reading_holds_last_value(heading, gyro):
    gyro.yaw = -30.0
    good = heading.get_continuous_heading_degrees()

    gyro.yaw = math.nan
    assert heading.get_continuous_heading_degrees() == pytest.approx(good)
    assert heading.degraded

    gyro.yaw = -40.0
    assert heading.get_continuous_heading_degrees() == pytest.approx(40.0)
    assert not heading.degraded


def test_offset_must_be_finite(gyro):
    with pytest.raises(ValueError):
        HeadingReference(gyro, math.inf)
