"""
Fitting loss resolution.

Each requested fitting is resolved by the first matching step of a fixed
decision list:

1. Cv override (> 0)         → K from Cv, method "cv"
2. fixed-K entrance/exit id  → catalog K, method "fixed_k"
3. catalog fitting id        → Crane L/D or Darby 3-K, per catalog method
4. nothing matched           → FittingNotFoundError
"""

from dataclasses import dataclass
import logging
from typing import Callable, List, Optional, Sequence, Tuple

from ..errors import FittingNotFoundError
from ..models import FittingRequest, FittingResult, KValueMethod, Reference
from ..units import MM_PER_INCH
from .catalog import FittingCatalog, LDFittingEntry
from .k_value import (
    CRANE_REF,
    CV_REF,
    DARBY_3K_REF,
    FIXED_K_REF,
    calc_fitting_loss,
    calc_k_3k,
    calc_k_crane,
    calc_k_from_cv,
    check_cv_k_bounds,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FittingContext:
    """Flow state shared by all fittings on one segment."""
    catalog: FittingCatalog
    ft: float           # fully turbulent friction factor
    id_mm: float
    density: float      # kg/m³
    velocity: float     # m/s
    reynolds: float


# (K, method, description, reference, warning)
_Resolved = Tuple[float, KValueMethod, str, Reference, Optional[str]]


def _from_cv(request: FittingRequest, ctx: FittingContext) -> Optional[_Resolved]:
    cv = request.cv_override
    if cv is None or cv <= 0:
        return None
    k = calc_k_from_cv(cv, ctx.id_mm)
    return k, KValueMethod.CV, f"Cv={cv:g} (user input)", CV_REF, check_cv_k_bounds(k, cv, ctx.id_mm)


def _from_fixed_k(request: FittingRequest, ctx: FittingContext) -> Optional[_Resolved]:
    entry = ctx.catalog.find_fixed_k(request.fitting_id)
    if entry is None:
        return None
    return entry.k, KValueMethod.FIXED_K, entry.description, FIXED_K_REF, None


def _from_catalog(request: FittingRequest, ctx: FittingContext) -> Optional[_Resolved]:
    entry = ctx.catalog.find_fitting(request.fitting_id)
    if entry is None:
        return None
    if isinstance(entry, LDFittingEntry):
        k = calc_k_crane(entry.ld_ratio, ctx.ft)
        return k, KValueMethod.CRANE_LD, entry.description, CRANE_REF, None
    k = calc_k_3k(ctx.reynolds, ctx.id_mm / MM_PER_INCH, entry.k1, entry.ki, entry.kd)
    return k, KValueMethod.THREE_K, entry.description, DARBY_3K_REF, None


RESOLUTION_ORDER: Tuple[Callable[[FittingRequest, FittingContext], Optional[_Resolved]], ...] = (
    _from_cv,
    _from_fixed_k,
    _from_catalog,
)


def resolve_fitting(request: FittingRequest, ctx: FittingContext) -> FittingResult:
    """
    Resolve one fitting request to K and losses (scaled by quantity).

    Raises:
        FittingNotFoundError: no step of the decision list matched
    """
    for step in RESOLUTION_ORDER:
        resolved = step(request, ctx)
        if resolved is not None:
            break
    else:
        raise FittingNotFoundError(request.fitting_id)

    k, method, description, reference, warning = resolved
    dp, head = calc_fitting_loss(k, ctx.density, ctx.velocity)

    logger.debug("Fitting %s x%d: K=%.4f (%s)", request.fitting_id, request.quantity, k, method.value)
    if warning:
        logger.warning("Fitting %s: %s", request.fitting_id, warning)

    return FittingResult(
        id=request.fitting_id,
        description=description,
        quantity=request.quantity,
        k_value=k,
        method=method,
        dp_pa=dp * request.quantity,
        head_loss_m=head * request.quantity,
        reference=reference,
        warning=warning,
    )


def resolve_fittings(requests: Sequence[FittingRequest], ctx: FittingContext) -> List[FittingResult]:
    """Resolve every fitting on a segment, preserving order."""
    return [resolve_fitting(r, ctx) for r in requests]
