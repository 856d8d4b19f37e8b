"""Facility Filters — pure predicates applied as a sequential intersection.

Invariants:
    - All functions are PURE: no IO, no async, no side effects
    - An omitted criterion (None, empty list, or "any") never narrows the result
    - Criteria combine with AND; list-valued criteria match with OR inside the list
    - Input order is preserved in the output

Design Decisions:
    - One predicate per criterion, chained by filter_facilities: each rule testable alone
      (ADR: ExMA Functional Core)
    - Ordinal criteria compare ranks, so "medium" admits "high" and "good" admits "excellent"
"""

from typing import Iterable

from emergency_planner.core.domain_types import (
    CARE_QUALITY_RANK, INFRASTRUCTURE_RANK,
    CareQuality, FacilityType, Infrastructure, PriceRange,
)
from emergency_planner.core.reference_data import Facility


def matches_treatment_needs(facility: Facility, needs: list[str] | None) -> bool:
    """Rule 1: any requested treatment offered."""
    if not needs:
        return True
    return any(need in facility.treatments_available for need in needs)


def matches_care_quality(facility: Facility, quality: CareQuality | None) -> bool:
    """Rule 2: facility quality is the requested level or better."""
    if quality is None or quality == CareQuality.ANY:
        return True
    return CARE_QUALITY_RANK[facility.care_quality] >= CARE_QUALITY_RANK[quality]


def matches_price_range(facility: Facility, price: PriceRange | None) -> bool:
    """Rule 3: exact price band."""
    if price is None or price == PriceRange.ANY:
        return True
    return facility.price_range == price


def matches_facility_types(
    facility: Facility, types: list[FacilityType] | None,
) -> bool:
    """Rule 4: facility type in the requested set."""
    if not types:
        return True
    return facility.type in types


def matches_infrastructure(
    facility: Facility, infrastructure: Infrastructure | None,
) -> bool:
    """Rule 5: infrastructure is the requested level or better."""
    if infrastructure is None or infrastructure == Infrastructure.ANY:
        return True
    return (
        INFRASTRUCTURE_RANK[facility.infrastructure]
        >= INFRASTRUCTURE_RANK[infrastructure]
    )


def filter_facilities(
    facilities: Iterable[Facility],
    *,
    treatment_needs: list[str] | None = None,
    care_quality: CareQuality | None = None,
    price_range: PriceRange | None = None,
    facility_types: list[FacilityType] | None = None,
    infrastructure: Infrastructure | None = None,
) -> list[Facility]:
    """Apply every criterion in turn. Returns the surviving facilities in order."""
    return [
        f for f in facilities
        if matches_treatment_needs(f, treatment_needs)
        and matches_care_quality(f, care_quality)
        and matches_price_range(f, price_range)
        and matches_facility_types(f, facility_types)
        and matches_infrastructure(f, infrastructure)
    ]
