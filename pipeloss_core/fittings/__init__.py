"""Fitting loss module for PipeLoss core."""

from .catalog import (
    LDFittingEntry,
    ThreeKFittingEntry,
    FixedKEntry,
    FittingCatalog,
    FtTable,
)
from .k_value import (
    calc_k_crane,
    calc_k_3k,
    calc_k_from_cv,
    calc_fitting_loss,
    calc_total_fitting_loss,
)
from .resolver import FittingContext, resolve_fitting, resolve_fittings

__all__ = [
    "LDFittingEntry",
    "ThreeKFittingEntry",
    "FixedKEntry",
    "FittingCatalog",
    "FtTable",
    "calc_k_crane",
    "calc_k_3k",
    "calc_k_from_cv",
    "calc_fitting_loss",
    "calc_total_fitting_loss",
    "FittingContext",
    "resolve_fitting",
    "resolve_fittings",
]
