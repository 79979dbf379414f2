# simulation/projectile.py
"""
Discrete-time projectile motion built on the tuple algebra.

Each tick moves the projectile by its velocity, then changes the velocity by
the environment's gravity and wind.
"""
import logging
from typing import Iterator, Tuple as PyTuple

from pydantic import Field, field_validator

from domain.geometry.tuple import Tuple, point, vector
from simulation.constants import (
    DEFAULT_MAX_TICKS,
    DEFAULT_SPEED,
    GRAVITY,
    LAUNCH_DIRECTION,
    START_POSITION,
    WIND,
)
from utils.base_model import ImmutableModel

logger = logging.getLogger(__name__)


class Projectile(ImmutableModel):
    """A projectile's position (a point) and velocity (a vector)."""
    position: Tuple = Field(description="Current location")
    velocity: Tuple = Field(description="Displacement per tick")

    @field_validator("position")
    @classmethod
    def validate_position(cls, value: Tuple) -> Tuple:
        if not value.is_point():
            raise ValueError(f"Position must be a point, got {value}")
        return value

    @field_validator("velocity")
    @classmethod
    def validate_velocity(cls, value: Tuple) -> Tuple:
        if not value.is_vector():
            raise ValueError(f"Velocity must be a vector, got {value}")
        return value

    def has_landed(self) -> bool:
        # NaN y counts as landed
        return not self.position.y >= 0.0


class Environment(ImmutableModel):
    """Constant accelerations applied to every projectile each tick."""
    gravity: Tuple = Field(description="Acceleration due to gravity")
    wind: Tuple = Field(description="Acceleration due to wind")

    @field_validator("gravity", "wind")
    @classmethod
    def validate_acceleration(cls, value: Tuple) -> Tuple:
        """Ensure the acceleration is a vector."""
        if not value.is_vector():
            raise ValueError(f"Acceleration must be a vector, got {value}")
        return value


def tick(environment: Environment, projectile: Projectile) -> Projectile:
    """Advance the projectile by one time step."""
    return projectile.with_changes(
        position=projectile.position + projectile.velocity,
        velocity=projectile.velocity + environment.gravity + environment.wind,
    )


def fly(
    environment: Environment,
    projectile: Projectile,
    max_ticks: int = DEFAULT_MAX_TICKS,
) -> Iterator[PyTuple[int, Projectile]]:
    """
    Tick the projectile until it drops below the ground.

    Yields (tick number, projectile) after every tick, starting at tick 1. The
    last projectile yielded is the first one with a negative y position.

    Args:
        environment: Gravity and wind to apply
        projectile: Starting state
        max_ticks: Maximum number of ticks before giving up

    Raises:
        ValueError: If max_ticks is not positive
    """
    if max_ticks <= 0:
        raise ValueError(f"max_ticks must be positive, got {max_ticks}")

    count = 0
    while not projectile.has_landed():
        if count >= max_ticks:
            logger.warning(f"Projectile still airborne after {max_ticks} ticks at {projectile.position}")
            return
        projectile = tick(environment, projectile)
        count += 1
        yield count, projectile

    logger.info(f"Projectile landed after {count} ticks at {projectile.position}")


def launch(speed: float = DEFAULT_SPEED) -> Projectile:
    """Create the default projectile, fired diagonally up and to the right."""
    return Projectile(
        position=point(*START_POSITION),
        velocity=vector(*LAUNCH_DIRECTION).normalize() * speed,
    )


def default_environment() -> Environment:
    return Environment(gravity=vector(*GRAVITY), wind=vector(*WIND))
