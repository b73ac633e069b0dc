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
import sys
import time
from typing import Optional

from commands2 import CommandScheduler, TimedCommandRobot
from wpilib import DriverStation

import constants
from lib_swerve.util.statistics import LoopStatistics
from robotcontainer import RobotContainer

# Setup Logging
logger = logging.getLogger(__name__)


class MyRobot(TimedCommandRobot):
    """
    Our default robot class

    Command v2 robots are encouraged to inherit from TimedCommandRobot, which
    has an implementation of robotPeriodic which runs the scheduler for you
    """
    def __init__(self):
        # Initialize our base class, choosing the default scheduler period
        super().__init__()

        self._counter = 0  # Updated on each periodic call. Can be used to logging/smartdashboard updates

        self._container: Optional[RobotContainer] = None
        self._stats: LoopStatistics = LoopStatistics()

    @property
    def container(self) -> RobotContainer:
        return self._container

    @property
    def counter(self) -> int:
        return self._counter

    def robotInit(self) -> None:
        """
        This function is run when the robot is first started up and should be used for any
        initialization code.
        """
        logger.info("robotInit: entry")
        super().robotInit()

        self._logging_init()

        version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
        logger.info(f"Python: {version}")

        # Instantiate our RobotContainer.  This will perform all our button bindings
        self._container = RobotContainer(self)

        logger.info("robotInit: exit")

    def _logging_init(self):
        match constants.ROBOT_MODE:
            case constants.RobotModes.REAL:
                logger.setLevel(logging.ERROR)  # Python logging
                logging.getLogger("lib_swerve").setLevel(logging.WARNING)
                logging.getLogger("wpilib").setLevel(logging.ERROR)
                logging.getLogger("commands2").setLevel(logging.ERROR)

            case constants.RobotModes.SIMULATION:
                DriverStation.silenceJoystickConnectionWarning(True)
                logger.setLevel(logging.INFO)  # Python logging
                logging.getLogger("lib_swerve").setLevel(logging.INFO)
                logging.getLogger("wpilib").setLevel(logging.DEBUG)
                logging.getLogger("commands2").setLevel(logging.DEBUG)

    def endCompetition(self) -> None:
        logger.info("Robot Statistics:\n%s", self._stats.report("all", 1))
        super().endCompetition()

    def robotPeriodic(self) -> None:
        """
        Periodic code for all modes should go here.

        The command scheduler runs from here, and with it the drivetrain's periodic()
        that updates odometry once per cycle.

        Default period is 20 mS.
        """
        start = time.monotonic()

        super().robotPeriodic()
        self.container.robotPeriodic()

        self._counter += 1
        elapsed = time.monotonic() - start
        self._stats.add("periodic", elapsed)
        self._stats.add(self._mode_name(), elapsed)

    def _mode_name(self) -> str:
        if self.isDisabled():
            return "disabled"

        return "auto" if self.isAutonomous() else "teleop"

    def disabledInit(self) -> None:
        """
        Initialization code for disabled mode should go here.
        """
        logger.info("disabledInit: entry")
        super().disabledInit()

        for subsystem in self.container.subsystems:
            if hasattr(subsystem, "stop") and callable(getattr(subsystem, "stop")):
                subsystem.stop()

    def autonomousInit(self) -> None:
        super().autonomousInit()
        logger.info("autonomousInit: entry")

    def teleopInit(self) -> None:
        """
        Initialization code for teleop mode should go here.
        """
        super().teleopInit()
        logger.debug("*** called teleopInit")

        # Stop what we are doing...
        CommandScheduler.getInstance().cancelAll()

    def teleopExit(self) -> None:
        super().teleopExit()
        self.container.robot_drive.stop()

    def testInit(self) -> None:
        super().testInit()
        logger.debug("*** called testInit")
        CommandScheduler.getInstance().cancelAll()

