"""Exceptions raised while building a TIN surface."""


class TINError(ValueError):
    """Base class for surface construction failures."""


class InsufficientPointsError(TINError):
    """Fewer than three valid survey points remain after validation."""

    def __init__(self, valid_count: int, total_count: int):
        self.valid_count = valid_count
        self.total_count = total_count
        super().__init__(
            f"At least 3 valid points with x, y, z coordinates are required "
            f"({valid_count} of {total_count} valid)"
        )


class TriangulationError(TINError):
    """The triangulation collaborator failed or returned malformed output."""
