"""
Fitting catalogs.

Catalogs are parsed by an outer layer and handed to the core as frozen
value objects. A catalog is either L/D based (Crane TP-410) or 3-K based
(Darby); both carry fixed-K entrance and exit entries.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from ..errors import InputValidationError
from ..models import KValueMethod


@dataclass(frozen=True)
class LDFittingEntry:
    """Crane L/D entry: K = f_T × (L/D)."""
    id: str
    description: str
    ld_ratio: float
    connection: str = ""
    type: str = ""


@dataclass(frozen=True)
class ThreeKFittingEntry:
    """Darby 3-K entry: K = K1/Re + Ki × (1 + Kd/D_inch^0.3)."""
    id: str
    description: str
    k1: float
    ki: float
    kd: float


@dataclass(frozen=True)
class FixedKEntry:
    """Entrance or exit with a size-independent K."""
    id: str
    description: str
    k: float


FittingEntry = Union[LDFittingEntry, ThreeKFittingEntry]

# Fully turbulent f_T keyed by nominal pipe size
FtTable = Dict[str, float]


@dataclass(frozen=True)
class FittingCatalog:
    """
    Fitting catalog consumed by the fitting-loss resolver.

    Attributes:
        method: KValueMethod.CRANE_LD or KValueMethod.THREE_K
        fittings: Size-dependent fittings (all of the catalog's method)
        entrances: Fixed-K entrance entries
        exits: Fixed-K exit entries
        ft_values: Fully turbulent f_T by nominal pipe size, e.g. {"2": 0.019}
    """
    method: KValueMethod
    fittings: Tuple[FittingEntry, ...] = ()
    entrances: Tuple[FixedKEntry, ...] = ()
    exits: Tuple[FixedKEntry, ...] = ()
    ft_values: FtTable = field(default_factory=dict)

    def __post_init__(self):
        for name in ("fittings", "entrances", "exits"):
            object.__setattr__(self, name, tuple(getattr(self, name)))

        if self.method == KValueMethod.CRANE_LD:
            entry_type = LDFittingEntry
        elif self.method == KValueMethod.THREE_K:
            entry_type = ThreeKFittingEntry
        else:
            raise InputValidationError(
                f"Catalog method must be crane_ld or 3k (got {self.method.value})"
            )

        for entry in self.fittings:
            if not isinstance(entry, entry_type):
                raise InputValidationError(
                    f"Fitting '{entry.id}' is not a {entry_type.__name__} "
                    f"but the catalog method is {self.method.value}"
                )

    def find_fixed_k(self, fitting_id: str) -> Optional[FixedKEntry]:
        """Entrance entries first, then exits."""
        for entry in self.entrances + self.exits:
            if entry.id == fitting_id:
                return entry
        return None

    def find_fitting(self, fitting_id: str) -> Optional[FittingEntry]:
        for entry in self.fittings:
            if entry.id == fitting_id:
                return entry
        return None

    def __contains__(self, fitting_id: str) -> bool:
        return self.find_fixed_k(fitting_id) is not None or self.find_fitting(fitting_id) is not None
