"""Physical constants used across the library."""

GRAVITATIONAL_CONSTANT: float = 6.67430e-11
G: float = GRAVITATIONAL_CONSTANT
EARTH_MASS: float = 5.972e24
EARTH_RADIUS: float = 6.371e6
SECONDS_PER_MINUTE: float = 60.0
SECONDS_PER_DAY: float = 86_400.0
