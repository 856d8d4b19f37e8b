"""Facility Filters — tests for the pure facility predicates over the reference data.

Tests cover:
    - No criteria returns the full reference set in order
    - Treatment needs match any listed treatment
    - Ordinal care quality and infrastructure (requested level or better)
    - Exact price range and facility-type membership
    - "any", None and empty lists never narrow the result
    - Criteria combine with AND
"""

from emergency_planner.core.domain_types import (
    CareQuality, FacilityType, Infrastructure, PriceRange,
)
from emergency_planner.core.filter_facilities import (
    filter_facilities, matches_care_quality, matches_infrastructure,
)
from emergency_planner.core.reference_data import REFERENCE_FACILITIES


def _names(**criteria) -> list[str]:
    return [f.name for f in filter_facilities(REFERENCE_FACILITIES, **criteria)]


def test_no_criteria_returns_all_three():
    assert _names() == [
        "General Hospital", "Community Clinic", "Specialized Medical Center",
    ]


def test_oncology_matches_specialized_center_only():
    assert _names(treatment_needs=["oncology"]) == ["Specialized Medical Center"]


def test_treatment_needs_match_any():
    assert _names(treatment_needs=["pediatrics", "neurology"]) == [
        "Community Clinic", "Specialized Medical Center",
    ]


def test_unknown_treatment_matches_nothing():
    assert _names(treatment_needs=["dermatology"]) == []


def test_empty_treatment_list_does_not_filter():
    assert len(_names(treatment_needs=[])) == 3


def test_medium_quality_admits_medium_and_high():
    assert len(_names(care_quality=CareQuality.MEDIUM)) == 3


def test_high_quality_admits_only_high():
    assert _names(care_quality=CareQuality.HIGH) == [
        "General Hospital", "Specialized Medical Center",
    ]


def test_any_quality_does_not_filter():
    assert len(_names(care_quality=CareQuality.ANY)) == 3


def test_price_range_exact_match():
    assert _names(price_range=PriceRange.LOW) == ["Community Clinic"]
    assert _names(price_range=PriceRange.MODERATE) == ["General Hospital"]


def test_any_price_does_not_filter():
    assert len(_names(price_range=PriceRange.ANY)) == 3


def test_facility_types_membership():
    assert _names(facility_types=[FacilityType.HOSPITAL, FacilityType.CLINIC]) == [
        "General Hospital", "Community Clinic",
    ]


def test_facility_type_without_reference_entry():
    assert _names(facility_types=[FacilityType.PHARMACY]) == []


def test_good_infrastructure_admits_good_and_excellent():
    assert len(_names(infrastructure=Infrastructure.GOOD)) == 3


def test_excellent_infrastructure_admits_only_excellent():
    assert _names(infrastructure=Infrastructure.EXCELLENT) == [
        "General Hospital", "Specialized Medical Center",
    ]


def test_criteria_combine_with_and():
    assert _names(
        care_quality=CareQuality.HIGH, price_range=PriceRange.MODERATE,
    ) == ["General Hospital"]


def test_conflicting_criteria_return_empty():
    assert _names(
        treatment_needs=["oncology"], facility_types=[FacilityType.HOSPITAL],
    ) == []


def test_predicates_compare_ranks():
    clinic = REFERENCE_FACILITIES[1]
    assert matches_care_quality(clinic, CareQuality.MEDIUM)
    assert not matches_care_quality(clinic, CareQuality.HIGH)
    assert matches_infrastructure(clinic, Infrastructure.GOOD)
    assert not matches_infrastructure(clinic, Infrastructure.EXCELLENT)
