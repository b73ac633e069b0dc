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

import constants
from lib_swerve.subsystems.swervedrive.config import MODULE_ORDER


def test_no_duplicate_can_bus_ids():
    """
    Run through our constants and make sure they are unique and match up
    """
    drive_ids = [hw[key] for hw in constants.MODULE_HARDWARE.values() for key in ("Drive", "Spin")]
    gyro_ids = [constants.DeviceID.GYRO_DEVICE_ID]

    all_ids = drive_ids + gyro_ids
    assert len(all_ids) == len(set(all_ids)), f"Duplicate IDs found: All: {all_ids}, Unique: {set(all_ids)}"


def test_every_module_has_hardware():
    assert set(constants.MODULE_HARDWARE) == set(MODULE_ORDER)

    encoders = [hw["Encoder"] for hw in constants.MODULE_HARDWARE.values()]
    assert len(encoders) == len(set(encoders))
    assert all(0.0 <= hw["Offset"] < 1.0 for hw in constants.MODULE_HARDWARE.values())
