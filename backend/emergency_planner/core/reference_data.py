"""Reference Data — the fixed in-memory data set behind the mock care tools.

Invariants:
    - Exactly 3 reference facilities; order is the report order
    - Facility records are frozen — filters return subsets, never copies with edits
    - Contact numbers do not vary by location

Design Decisions:
    - Static constants instead of a places lookup: the mapping provider is a
      latent integration point, not a live dependency (ADR: explicit mock boundary)
"""

from dataclasses import dataclass

from emergency_planner.core.domain_types import (
    CareQuality, FacilityType, Infrastructure, PriceRange,
)


@dataclass(frozen=True)
class Facility:
    """One candidate medical facility."""
    name: str
    address: str
    distance: str
    type: FacilityType
    treatments_available: tuple[str, ...]
    care_quality: CareQuality
    price_range: PriceRange
    infrastructure: Infrastructure


REFERENCE_FACILITIES: tuple[Facility, ...] = (
    Facility(
        name="General Hospital",
        address="123 Main St, Cityville",
        distance="2.3 km",
        type=FacilityType.HOSPITAL,
        treatments_available=("emergency", "surgery", "cardiology"),
        care_quality=CareQuality.HIGH,
        price_range=PriceRange.MODERATE,
        infrastructure=Infrastructure.EXCELLENT,
    ),
    Facility(
        name="Community Clinic",
        address="456 Oak Ave, Cityville",
        distance="3.8 km",
        type=FacilityType.CLINIC,
        treatments_available=("general practice", "pediatrics"),
        care_quality=CareQuality.MEDIUM,
        price_range=PriceRange.LOW,
        infrastructure=Infrastructure.GOOD,
    ),
    Facility(
        name="Specialized Medical Center",
        address="789 Pine St, Cityville",
        distance="5.1 km",
        type=FacilityType.SPECIALIST,
        treatments_available=("oncology", "neurology"),
        care_quality=CareQuality.HIGH,
        price_range=PriceRange.HIGH,
        infrastructure=Infrastructure.EXCELLENT,
    ),
)

# (label, number) in report order
EMERGENCY_CONTACTS: tuple[tuple[str, str], ...] = (
    ("Emergency Services", "911"),
    ("Nearest Hospital", "General Hospital - (555) 123-4567"),
    ("Poison Control", "(800) 222-1222"),
    ("Medicare Hotline", "1-800-MEDICARE"),
)

# Synthetic coverage report fields, in report order
COVERAGE_TERMS: tuple[tuple[str, str], ...] = (
    ("Coverage Status", "Covered"),
    ("Co-pay", "$25"),
    ("Deductible", "Applies"),
    ("Special Requirements", "Prior authorization needed"),
)
DEFAULT_COVERAGE_TYPE = "Standard"

TRANSPORT_ETA_MINUTES = 12
TRANSPORT_ID_PREFIX = "EMT"
TRANSPORT_ID_UPPER_BOUND = 10_000
