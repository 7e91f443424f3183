"""Subdivision matching over geocoding candidates with ordered fallback."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from geostate.core.models import CandidatePair, MatchResult
from geostate.core.types import MatchStrategy
from geostate.reference.base import SubdivisionRepository
from geostate.validation.subdivision import SubdivisionValidator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategySpec:
    """How one matching strategy picks its candidate and turns it into a code."""

    strategy: MatchStrategy
    level: int
    by_name: bool


# Strict priority order, first validating code wins
DEFAULT_STRATEGIES: tuple[StrategySpec, ...] = (
    StrategySpec(MatchStrategy.LEVEL_2_CODE, level=2, by_name=False),
    StrategySpec(MatchStrategy.LEVEL_1_CODE, level=1, by_name=False),
    StrategySpec(MatchStrategy.LEVEL_2_NAME, level=2, by_name=True),
    StrategySpec(MatchStrategy.LEVEL_1_NAME, level=1, by_name=True),
)


def format_code(country: str, suffix: str) -> str:
    """Build a "{COUNTRY}-{CODE}" subdivision code."""
    return f"{country}-{suffix}"


class SubdivisionMatcher:
    """
    Maps candidate identifiers to validated subdivision codes.

    Strategies run in priority order:
    1. Level-2 candidate as code suffix
    2. Level-1 candidate as code suffix
    3. Level-2 candidate by case-insensitive subdivision name
    4. Level-1 candidate by case-insensitive subdivision name
    """

    def __init__(
        self,
        subdivisions: SubdivisionRepository,
        validator: SubdivisionValidator,
        strategies: tuple[StrategySpec, ...] = DEFAULT_STRATEGIES,
    ) -> None:
        self._subdivisions = subdivisions
        self._validator = validator
        self._strategies = strategies

    def match(self, country: str, candidates: CandidatePair) -> MatchResult | None:
        """Return the first strategy result that validates, or None."""
        for spec in self._strategies:
            candidate = self._candidate_for(candidates, spec.level)
            if not candidate:
                continue

            resolve: Callable[[str, str], str | None] = (
                self._code_by_name if spec.by_name else format_code
            )
            code = resolve(country, candidate)
            if not code:
                continue

            if self._validator.validate(country, code):
                logger.debug(f"Matched {code} via {spec.strategy} from {candidate!r}")
                return MatchResult(code=code, strategy=spec.strategy, candidate=candidate)

        return None

    def _code_by_name(self, country: str, name: str) -> str | None:
        subdivision = self._subdivisions.find_by_name(country, name)
        return subdivision.code if subdivision else None

    @staticmethod
    def _candidate_for(candidates: CandidatePair, level: int) -> str | None:
        if level == 2:
            return candidates.administrative_area_level_2
        return candidates.administrative_area_level_1
