# phisched/utils/errors.py
class PhiSchedError(Exception):
    """Base class for every error raised by phisched."""


class InvalidArgument(PhiSchedError, ValueError):
    """
    Raised for non-positive / non-finite base, count, grid_unit,
    an unknown offset policy, or a clock asked to move backwards.
    """


class LengthMismatch(PhiSchedError, ValueError):
    """Offsets and identifiers differ in length. Nothing was scheduled."""

    def __init__(self, offsets: int, identifiers: int):
        super().__init__(
            f"got {offsets} offsets for {identifiers} identifiers"
        )
        self.offsets = offsets
        self.identifiers = identifiers


class ClockUnavailable(PhiSchedError, RuntimeError):
    """
    Clock is absent, does not satisfy the Clock contract,
    or is not ready to accept registrations. Never recovered here.
    """


class ConfigError(PhiSchedError):
    """
    Raised for invalid or missing config files.
    Should NOT print traceback.
    """
