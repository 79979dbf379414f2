"""
Default launch and environment settings for the projectile simulation.
"""

# Launch state
START_POSITION = (0.0, 1.0, 0.0)  # Point, one unit above the ground
LAUNCH_DIRECTION = (1.0, 1.0, 0.0)  # Normalized before use
DEFAULT_SPEED = 1.0  # Units per tick

# Environment, applied to the velocity once per tick
GRAVITY = (0.0, -0.1, 0.0)
# Not normalized: a unit wind would push ten times harder than gravity pulls
WIND = (-0.01, 0.0, 0.0)

# Upper bound on ticks so a projectile that never lands cannot loop forever
DEFAULT_MAX_TICKS = 10_000
