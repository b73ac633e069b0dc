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
import math
from collections import OrderedDict
from typing import Callable, Optional, Sequence

from commands2 import Subsystem
from wpilib import Timer
from wpimath.geometry import Pose2d, Rotation2d, Translation2d
from wpimath.kinematics import ChassisSpeeds, SwerveModuleState
from wpimath.trajectory import Trajectory
from wpimath.units import meters_per_second, radians_per_second, seconds

from lib_swerve.subsystems.gyro.heading import HeadingReference
from lib_swerve.subsystems.swervedrive.config import MODULE_ORDER, ModuleLocation, SwerveDriveConfig
from lib_swerve.subsystems.swervedrive.field_orientation import field_to_robot
from lib_swerve.subsystems.swervedrive.kinematics import DriveKinematics, ModuleTargets
from lib_swerve.subsystems.swervedrive.odometry import OdometryEstimator
from lib_swerve.subsystems.swervedrive.pose_controller import PoseController, RefreshTimer
from lib_swerve.subsystems.swervedrive.swervemodule import SwerveModule
from lib_swerve.subsystems.swervedrive.trajectory import generate_trajectory
from lib_swerve.util.telemetry import TelemetrySink

SwerveModuleStates = Sequence[SwerveModuleState]

logger = logging.getLogger(__name__)


class SwerveDrive(Subsystem):
    """
    Four module swerve drivetrain.

    Drive commands are in the driver's frame: forward positive, strafe positive to
    the right, rotation positive clockwise. Poses and anything else that goes through
    WPILib geometry are x forward, y left, counter-clockwise positive.

    Once per control cycle (periodic) the odometry is updated from the gyro and the
    four modules. Drive calls then turn a velocity into wheel targets and each module
    works out its own steering.
    """
    def __init__(self, modules: Sequence[SwerveModule],
                 heading: HeadingReference,
                 config: SwerveDriveConfig,
                 starting_pose: Pose2d = Pose2d(),
                 telemetry: Optional[TelemetrySink] = None,
                 clock: Callable[[], seconds] = Timer.getFPGATimestamp) -> None:
        super().__init__()

        by_location = {module.location: module for module in modules}
        if len(modules) != 4 or set(by_location) != set(ModuleLocation):
            raise ValueError(f"A swerve drive needs one module at each location, got {list(modules)}")

        self._config = config
        self._heading = heading
        self._telemetry = telemetry or TelemetrySink()
        self._clock = clock

        self._swerve_modules: OrderedDict[ModuleLocation, SwerveModule] = OrderedDict(
            (location, by_location[location]) for location in MODULE_ORDER)

        self._kinematics = DriveKinematics(config.half_length, config.half_width)
        self._odometry = OdometryEstimator(config.kinematics,
                                           list(self._swerve_modules.values()),
                                           heading,
                                           starting_pose)

        self._pose_controller = PoseController(config, self._telemetry)
        self._odometry_refresh = RefreshTimer(clock)

        self.current_trajectory: Optional[Trajectory] = None
        self._last_targets: Optional[ModuleTargets] = None

    @property
    def config(self) -> SwerveDriveConfig:
        return self._config

    @property
    def telemetry(self) -> TelemetrySink:
        return self._telemetry

    @property
    def clock(self) -> Callable[[], seconds]:
        return self._clock

    @property
    def modules(self) -> OrderedDict[ModuleLocation, SwerveModule]:
        return self._swerve_modules

    def module(self, location: ModuleLocation) -> SwerveModule:
        return self._swerve_modules[location]

    @property
    def heading_reference(self) -> HeadingReference:
        return self._heading

    @property
    def pose_controller(self) -> PoseController:
        return self._pose_controller

    @property
    def last_targets(self) -> Optional[ModuleTargets]:
        """
        Wheel targets from the last drive call, None if the drivetrain was stopped
        """
        return self._last_targets

    ######################################################################
    # Odometry

    @property
    def pose(self) -> Pose2d:
        return self._odometry.pose

    @pose.setter
    def pose(self, value: Pose2d) -> None:
        self.reset_odometry(value)

    @property
    def heading(self) -> Rotation2d:
        """
        Robot heading from the gyro, counter-clockwise positive
        """
        return self._heading.rotation

    def reset_odometry(self, pose: Pose2d = Pose2d()) -> None:
        self._odometry.reset(pose)

    def update_odometry(self) -> Pose2d:
        return self._odometry.update()

    def periodic(self) -> None:
        pose = self.update_odometry()

        self._telemetry.publish("Odometry/x", pose.x)
        self._telemetry.publish("Odometry/y", pose.y)
        self._telemetry.publish("Odometry/heading", pose.rotation().degrees())
        self._telemetry.publish("Odometry/gyro", self._heading.get_continuous_heading_degrees())

        for module in self._swerve_modules.values():
            module.dashboard_periodic()

    ######################################################################
    # Driving

    def stop(self) -> None:
        for module in self._swerve_modules.values():
            module.stop()

        self._last_targets = None

    def drive_percent(self, forward: float, strafe: float, rotation: float) -> Optional[ModuleTargets]:
        """
        Robot relative drive. All three inputs are -1.0..1.0 of the maximum speeds.
        """
        # If there is no drive input, don't drive the robot and just stop
        targets = self._kinematics.decompose(forward, strafe, rotation)

        if targets is None:
            self.stop()
            return None

        if not all(math.isfinite(value) for target in targets for value in target):
            logger.warning(f"Invalid wheel targets for forward={forward}, strafe={strafe}, "
                           f"rotation={rotation}, stopping")
            self.stop()
            return None

        for location, target in targets.items():
            self._swerve_modules[location].drive_percent(target.speed, target.angle)

        self._last_targets = targets
        return targets

    def drive_field_oriented(self, forward: meters_per_second, strafe: meters_per_second,
                             rotation: radians_per_second) -> Optional[ModuleTargets]:
        """
        Field relative drive in physical units. 'forward' is away from the driver,
        'strafe' to the driver's right and 'rotation' clockwise.
        """
        # The gyro is counter-clockwise positive, the command frame is clockwise
        heading = -self._heading.get_continuous_heading_radians()
        forward, strafe = field_to_robot(forward, strafe, heading)

        return self.drive_percent(forward / self._config.max_speed,
                                  strafe / self._config.max_speed,
                                  rotation / self._config.max_angular_speed)

    def _drive_field_speeds(self, speeds: ChassisSpeeds) -> Optional[ModuleTargets]:
        # WPILib speeds are y left and counter-clockwise
        return self.drive_field_oriented(speeds.vx, -speeds.vy, -speeds.omega)

    def set_module_states(self, states: SwerveModuleStates) -> None:
        """
        Drive each module at a WPILib state (m/s, counter-clockwise angle). The states
        are in front-left, front-right, back-left, back-right order.
        """
        if len(states) != 4:
            raise ValueError(f"Expected four module states, got {len(states)}")

        for module, state in zip(self._swerve_modules.values(), states):
            module.drive_meters(state.speed, -state.angle.degrees())

        self._last_targets = None

    ######################################################################
    # Pose tracking

    def set_drive_to_pose_goal(self, target: Pose2d) -> None:
        self._pose_controller.set_goal(target)

    def drive_to_pose_odometry(self, target: Pose2d) -> ChassisSpeeds:
        speeds = self._pose_controller.calculate(self.pose, target)
        self._drive_field_speeds(speeds)
        return speeds

    def drive_to_pose_vision(self, target: Pose2d) -> ChassisSpeeds:
        """
        'target' is the offset from the robot to the goal as reported by vision, the
        robot is taken to be at the origin
        """
        speeds = self._pose_controller.calculate_vision(target)
        self._drive_field_speeds(speeds)
        return speeds

    def drive_to_pose_combo(self, vision_input: Pose2d, target: Pose2d, refresh_time: seconds) -> ChassisSpeeds:
        """
        Track 'target' with odometry, re-anchoring odometry to the vision pose once
        every 'refresh_time' seconds. The fiducial is taken to be at the field origin,
        so the robot sits at the negated vision offset.
        """
        if self._odometry_refresh.due(refresh_time):
            self.reset_odometry(Pose2d(-vision_input.x, -vision_input.y, -vision_input.rotation()))
            self._odometry_refresh.mark()

        return self.drive_to_pose_odometry(target)

    def turn_to_point_while_driving(self, forward: float, strafe: float,
                                    point: Translation2d) -> Optional[ModuleTargets]:
        """
        Robot relative translation (percent) while the heading loop keeps the front of
        the robot pointed at a point on the field
        """
        difference = point - self.pose.translation()
        target_angle = Rotation2d(difference.x, difference.y)

        theta = self._pose_controller.heading_rate(self.pose.rotation(), target_angle)

        # Heading loop is counter-clockwise positive
        return self.drive_percent(forward, strafe, -theta / self._config.max_angular_speed)

    def generate_trajectory(self, waypoints: Sequence[Translation2d], goal: Pose2d) -> Trajectory:
        self.current_trajectory = generate_trajectory(self.pose, waypoints, goal, self._config)
        return self.current_trajectory
