"""RevPAR and STR market-index derivations for a single hotel-period.

Every function here is pure: inputs in, rounded ``Decimal`` values out.
Input validation lives in :class:`PerformanceInputs`; the calculators
themselves only guard against zero comp-set denominators.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from decimal import Decimal, InvalidOperation

from revportal.metrics.errors import DivisionByZeroError, InvalidInputError
from revportal.metrics.rounding import Number, round2, to_decimal

SCENARIOS: tuple[str, ...] = ("actual", "budget", "prior_year", "comp_set")

HUNDRED = Decimal(100)


@dataclass(frozen=True)
class IndexSet:
    """Market Penetration, Average Rate and Revenue Generation indices."""

    mpi: Decimal
    ari: Decimal
    rgi: Decimal


def compute_revpar(occupancy_pct: Number, adr: Number) -> Decimal:
    """RevPAR = occupancy% / 100 * ADR, rounded to cents.

    Occupancy is not clamped to [0, 100].
    """
    return round2(to_decimal(occupancy_pct) / HUNDRED * to_decimal(adr))


def _index(name: str, actual: Number, comp_set: Number, denominator_field: str) -> Decimal:
    denominator = to_decimal(comp_set)
    if denominator == 0:
        raise DivisionByZeroError(name, denominator_field)
    return round2(to_decimal(actual) / denominator * HUNDRED)


def compute_indices(
    occupancy_actual: Number,
    occupancy_comp_set: Number,
    adr_actual: Number,
    adr_comp_set: Number,
    revpar_actual: Number,
    revpar_comp_set: Number,
) -> IndexSet:
    """Compute MPI, ARI and RGI as actual / comp set * 100.

    Raises:
        DivisionByZeroError: If any comp-set denominator is exactly 0.
    """
    return IndexSet(
        mpi=_index("mpi", occupancy_actual, occupancy_comp_set, "occupancy_comp_set"),
        ari=_index("ari", adr_actual, adr_comp_set, "adr_comp_set"),
        rgi=_index("rgi", revpar_actual, revpar_comp_set, "revpar_comp_set"),
    )


# ---------------------------------------------------------------------------
# Validated input value object
# ---------------------------------------------------------------------------


def _validated(field: str, value: object) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float)):
        raise InvalidInputError(field, value, "must be a number")
    dec = to_decimal(value)
    if not dec.is_finite():
        raise InvalidInputError(field, value, "must be finite")
    if dec < 0:
        raise InvalidInputError(field, value, "must not be negative")
    return dec


def _parse_number(field: str, raw: object) -> Decimal:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise InvalidInputError(field, raw, "is required")
    if isinstance(raw, str):
        try:
            return _validated(field, Decimal(raw.strip()))
        except InvalidOperation:
            raise InvalidInputError(field, raw, "must be a number") from None
    return _validated(field, raw)


@dataclass(frozen=True)
class PerformanceInputs:
    """The eight user-entered numbers for a performance period.

    Construction normalises every field to ``Decimal`` and rejects
    non-numeric, non-finite and negative values with ``InvalidInputError``.
    """

    occupancy_actual: Decimal
    occupancy_budget: Decimal
    occupancy_prior_year: Decimal
    occupancy_comp_set: Decimal
    adr_actual: Decimal
    adr_budget: Decimal
    adr_prior_year: Decimal
    adr_comp_set: Decimal

    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, _validated(f.name, getattr(self, f.name)))

    @classmethod
    def parse(cls, data: Mapping[str, object]) -> "PerformanceInputs":
        """Build inputs from form-style values, where numbers may arrive as strings."""
        return cls(**{f.name: _parse_number(f.name, data.get(f.name)) for f in fields(cls)})

    def occupancy(self, scenario: str) -> Decimal:
        return getattr(self, f"occupancy_{scenario}")

    def adr(self, scenario: str) -> Decimal:
        return getattr(self, f"adr_{scenario}")

    def as_dict(self) -> dict[str, Decimal]:
        """Input columns rounded to cents, ready for storage."""
        return {name: round2(value) for name, value in asdict(self).items()}


@dataclass(frozen=True)
class DerivedMetrics:
    """Every dependent column of a performance record."""

    revpar_actual: Decimal
    revpar_budget: Decimal
    revpar_prior_year: Decimal
    revpar_comp_set: Decimal
    mpi: Decimal
    ari: Decimal
    rgi: Decimal

    def as_dict(self) -> dict[str, Decimal]:
        return asdict(self)


def derive_performance(inputs: PerformanceInputs) -> DerivedMetrics:
    """Derive the four RevPARs and the index set from validated inputs.

    RGI is computed from the rounded RevPARs so the stored columns satisfy
    ``rgi == revpar_actual / revpar_comp_set * 100`` after rounding.
    """
    revpar = {s: compute_revpar(inputs.occupancy(s), inputs.adr(s)) for s in SCENARIOS}
    indices = compute_indices(
        occupancy_actual=inputs.occupancy_actual,
        occupancy_comp_set=inputs.occupancy_comp_set,
        adr_actual=inputs.adr_actual,
        adr_comp_set=inputs.adr_comp_set,
        revpar_actual=revpar["actual"],
        revpar_comp_set=revpar["comp_set"],
    )
    return DerivedMetrics(
        revpar_actual=revpar["actual"],
        revpar_budget=revpar["budget"],
        revpar_prior_year=revpar["prior_year"],
        revpar_comp_set=revpar["comp_set"],
        mpi=indices.mpi,
        ari=indices.ari,
        rgi=indices.rgi,
    )
