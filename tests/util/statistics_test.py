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

import pytest

from lib_swerve.util.statistics import LoopStatistics, MaxMinCounter


def test_counter():
    counter = MaxMinCounter("Loop", "mS", 1000, 3)
    assert counter.average is None

    for value in (0.002, 0.004, 0.009):
        counter.add(value)

    assert counter.count == 3
    assert counter.min == 0.002
    assert counter.max == 0.009
    assert counter.average == pytest.approx(0.005)

    lines = counter.lines(1)
    assert lines[0] == "  Loop:"
    assert any("Max: 9.0 mS" in line for line in lines)

    counter.clear()
    assert counter.count == 0
    assert "No statistics available" in counter.lines()[1]


def test_loop_statistics():
    stats = LoopStatistics()
    stats.add("periodic", 0.01)
    stats.add("teleop", 0.02)
    stats.add("not-a-mode", 1.0)

    assert stats["periodic"].count == 1

    report = stats.report("all")
    assert "Periodic Duration:" in report
    assert "Autonomous Duration:" in report

    stats.clear("periodic")
    assert stats["periodic"].count == 0
    assert stats["teleop"].count == 1

    stats.clear("all")
    assert stats["teleop"].count == 0
    assert stats.report("unknown") == ""
