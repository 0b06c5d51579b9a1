"""
Series system aggregation.

Segments in series carry the same volumetric flow and the same fluid, so
their pressure drops add. Fluid consistency is checked on density before
any segment is computed.
"""

import logging
from typing import Callable, Hashable, Iterable, List, Sequence, TypeVar

from ..errors import ConsistencyError
from ..fittings.catalog import FittingCatalog
from ..models import CalcWarning, Reference, SegmentInput, SystemInput, SystemResult
from ..units import pressure_to_head
from .segment import calc_segment_pressure_drop

logger = logging.getLogger(__name__)

# Allowed relative density deviation from segment 0
DENSITY_TOLERANCE = 0.01

T = TypeVar("T")


def check_fluid_consistency(segments: Sequence[SegmentInput], tolerance: float = DENSITY_TOLERANCE):
    """
    Ensure every segment's fluid density is within tolerance of segment 0.

    Raises:
        ConsistencyError: naming the first offending segment index
    """
    if not segments:
        return

    ref_density = segments[0].fluid.density
    for i, seg in enumerate(segments[1:], start=1):
        deviation = abs(seg.fluid.density - ref_density) / ref_density
        if deviation > tolerance:
            logger.warning(
                "Rejecting system: segment %d density %.3f vs %.3f kg/m³",
                i, seg.fluid.density, ref_density,
            )
            raise ConsistencyError(i, deviation * 100.0, tolerance * 100.0)


def _dedupe(items: Iterable[T], key: Callable[[T], Hashable]) -> List[T]:
    """Drop repeated items by key, keeping first-seen order."""
    seen = set()
    unique = []
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            unique.append(item)
    return unique


def calc_system_pressure_drop(system: SystemInput, catalog: FittingCatalog) -> SystemResult:
    """
    Compute the total pressure drop of segments connected in series.

    Total head is derived from the total ΔP using segment 0's density
    rather than by summing per-segment heads.

    Args:
        system: Ordered segments
        catalog: Fitting catalog shared by all segments

    Returns:
        SystemResult; all zeros for an empty system

    Raises:
        ConsistencyError: a segment's density deviates more than 1 %
    """
    segments = system.segments
    if not segments:
        return SystemResult.empty()

    check_fluid_consistency(segments)

    results = tuple(calc_segment_pressure_drop(seg, catalog) for seg in segments)

    dp_friction = sum(r.dp_friction for r in results)
    dp_fittings = sum(r.dp_fittings for r in results)
    dp_elevation = sum(r.dp_elevation for r in results)
    dp_total = dp_friction + dp_fittings + dp_elevation

    references: List[Reference] = _dedupe(
        (ref for r in results for ref in r.references), key=lambda ref: ref.key
    )
    warnings: List[CalcWarning] = _dedupe(
        (w for r in results for w in r.warnings), key=lambda w: w.message_key
    )

    logger.debug("System of %d segments: ΔP=%.1f Pa", len(results), dp_total)

    return SystemResult(
        segment_results=results,
        dp_friction_total=dp_friction,
        dp_fittings_total=dp_fittings,
        dp_elevation_total=dp_elevation,
        dp_total=dp_total,
        head_friction_total_m=sum(r.head_friction_m for r in results),
        head_fittings_total_m=sum(r.head_fittings_m for r in results),
        head_elevation_total_m=sum(r.head_elevation_m for r in results),
        head_total_m=pressure_to_head(dp_total, segments[0].fluid.density),
        references=tuple(references),
        warnings=tuple(warnings),
    )
