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

from commands2 import Command

from lib_swerve.subsystems.swervedrive.drivesubsystem import SwerveDrive

logger = logging.getLogger(__name__)


class BaseCommand(Command):
    """
    Base Command class for our drivetrain commands
    """
    def __init__(self, drivetrain: SwerveDrive):
        super().__init__()
        self.setName(self.get_class_name())

        if not isinstance(drivetrain, SwerveDrive):
            raise ValueError(f"drivetrain must be a SwerveDrive, got {type(drivetrain)}")

        self._drivetrain: SwerveDrive = drivetrain
        self.addRequirements(drivetrain)

        self._start_time: float = 0

    @classmethod
    def get_class_name(cls) -> str:
        return cls.__name__

    @property
    def drivetrain(self) -> SwerveDrive:
        return self._drivetrain

    def _publish_status(self, status: str) -> None:
        self._drivetrain.telemetry.publish(f"command/{self.getName()}", status)

    def initialize(self) -> None:
        """
        Called just before this Command runs the first time
        """
        self._start_time = round(self._drivetrain.clock(), 2)
        logger.info(f"{self.getName()}: Started at {self._start_time}")

        self._publish_status("running")

    def end(self, interrupted: bool) -> None:
        """
        The action to take when the command ends. Called when either the command finishes normally, or
        when it interrupted/canceled.

        Do not schedule commands here that share requirements with this command. Use :meth:`.andThen` instead.

        :param interrupted: whether the command was interrupted/canceled
        """
        end_time = self._drivetrain.clock()
        logger.info(f"{self.getName()}: {'Interrupted' if interrupted else 'Ended'} at {end_time:.1f} s "
                    f"after {end_time - self._start_time:.1f} s")

        self._publish_status('interrupted' if interrupted else 'ended')
