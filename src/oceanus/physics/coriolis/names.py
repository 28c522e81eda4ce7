"""Rotation names."""

from oceanus.utils.names import Name


class RotationName(Name):
    """Rotation models names."""

    F_PLANE = "f_plane"
    BETA_PLANE = "beta_plane"
    NONE = "none"
