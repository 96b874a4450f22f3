"""Exceptions raised by the import pipeline."""


class UnityAnimError(Exception):
    """Base class for all importer failures."""


class DegenerateDurationError(UnityAnimError):
    """No key time exceeds the duration tolerance, so there is nothing to resample."""

    def __init__(self, duration: float):
        super().__init__(
            f"Animation time couldn't be deduced (max key time {duration:.6f}s)"
        )
        self.duration = duration


class MissingSkeletonError(UnityAnimError):
    """The import settings carry no skeleton reference."""

    def __init__(self):
        super().__init__("A skeleton is required to import an animation clip")


class DocumentSchemaError(UnityAnimError):
    """Raised by strict document validation on the first malformed node."""
