"""Static catalog of ant taxa and their flight response profiles.

Parameters are fixed heuristics per taxon:

- ``t_opt`` / ``t_width``: Gaussian temperature optimum and tolerance (°C).
- ``rh_k``: slope of the logistic humidity response around 60% RH.
- ``rain_sens``: multiplier on the post-rain recency signal.
- ``wind_penalty``: fraction of the wind fit lost to wind sensitivity.

Catalog order has no meaning for scoring but breaks ties when ranking.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TaxonProfile:
    """One catalog entry: a genus (optionally a species) and its response."""

    genus: str
    species: str | None
    months: frozenset[int]
    t_opt: float
    t_width: float
    rh_k: float
    rain_sens: float
    wind_penalty: float

    @property
    def name(self) -> str:
        """Display name, e.g. ``Camponotus modoc`` or ``Formica``."""
        return f"{self.genus} {self.species}" if self.species else self.genus

    def is_active_in(self, month: int) -> bool:
        """Whether flights are expected in the given month (1-12)."""
        return month in self.months


def _profile(
    genus: str,
    species: str | None,
    months: tuple[int, ...],
    t_opt: float,
    t_width: float,
    rh_k: float,
    rain_sens: float,
    wind_penalty: float,
) -> TaxonProfile:
    return TaxonProfile(
        genus=genus,
        species=species,
        months=frozenset(months),
        t_opt=t_opt,
        t_width=t_width,
        rh_k=rh_k,
        rain_sens=rain_sens,
        wind_penalty=wind_penalty,
    )


TAXON_CATALOG: tuple[TaxonProfile, ...] = (
    _profile("Camponotus", "modoc", (5, 6, 7, 8), 28, 6, 0.15, 1.0, 0.1),
    _profile("Formica", None, (5, 6, 7, 8, 9), 26, 7, 0.12, 0.9, 0.1),
    _profile("Lasius", None, (8, 9, 10), 24, 5, 0.18, 1.2, 0.05),
    _profile("Tetramorium", None, (6, 7, 8), 27, 5.5, 0.14, 1.0, 0.1),
    _profile("Solenopsis", None, (6, 7, 8, 9), 29, 6, 0.16, 1.1, 0.15),
    _profile("Pogonomyrmex", None, (7, 8, 9), 31, 5, 0.10, 0.8, 0.2),
    _profile("Prenolepis", None, (2, 3, 4), 18, 4, 0.12, 1.0, 0.05),
    _profile("Tapinoma", None, (5, 6, 7, 8), 26, 6, 0.13, 1.0, 0.1),
    _profile("Myrmica", None, (8, 9), 23, 4.5, 0.17, 1.1, 0.08),
    _profile("Temnothorax", None, (6, 7, 8), 25, 5, 0.14, 1.0, 0.05),
)
