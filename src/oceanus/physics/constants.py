"""Physics constants."""

EARTH_RADIUS = 6371e3  # Earth radius in meters
EARTH_ANGULAR_ROTATION = 7.292115e-5  # rad.s⁻¹
EARTH_GRAVITY = 9.80665  # m.s⁻²
