"""
Error taxonomy for pressure-drop calculations.

Every error raised by the core derives from PipeLossError so callers can
catch the whole family at once. Warnings produced by the diagnostics layer
are not errors and never interrupt a computation.
"""


class PipeLossError(Exception):
    """Base class for all calculation errors."""


class InputValidationError(PipeLossError, ValueError):
    """Degenerate geometry or physically impossible input."""


class RangeError(PipeLossError, ValueError):
    """Query point outside the validated domain of a lookup table."""


class FittingNotFoundError(PipeLossError, LookupError):
    """Fitting id not present in any of the supplied catalogs."""

    def __init__(self, fitting_id: str):
        super().__init__(f"Fitting not found: {fitting_id}")
        self.fitting_id = fitting_id


class ConsistencyError(PipeLossError, ValueError):
    """Series segments disagree on fluid density."""

    def __init__(self, segment_index: int, deviation_pct: float, tolerance_pct: float):
        super().__init__(
            f"Segment {segment_index} fluid density deviates {deviation_pct:.2f}% "
            f"from segment 0 (tolerance {tolerance_pct:.1f}%); "
            f"series segments must carry the same fluid"
        )
        self.segment_index = segment_index
        self.deviation_pct = deviation_pct
        self.tolerance_pct = tolerance_pct
