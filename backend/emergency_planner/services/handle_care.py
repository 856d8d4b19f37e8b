"""Care Handlers — mock facility, coverage, contact and transport tools (4 methods).

Invariants:
    - Handlers receive validated argument models and are total: they never raise
    - No IO: every report is built from core/reference_data.py
    - Facility search never calls the location service, even when an API key is configured
    - Transport ids are random per call, not persisted, not checked for uniqueness

Design Decisions:
    - Location-services key held but unused: the mock boundary is explicit and logged,
      so wiring a real places lookup later touches only this class
    - random.randrange for transport ids: synthetic reference, not an identifier
"""

import logging
import random

from emergency_planner.core.filter_facilities import filter_facilities
from emergency_planner.core.reference_data import (
    COVERAGE_TERMS, DEFAULT_COVERAGE_TYPE, EMERGENCY_CONTACTS,
    REFERENCE_FACILITIES, TRANSPORT_ETA_MINUTES, TRANSPORT_ID_PREFIX,
    TRANSPORT_ID_UPPER_BOUND, Facility,
)
from emergency_planner.schemas.care_tools import (
    CheckMedicareCoverageArgs,
    FindNearbyMedicalFacilitiesArgs,
    GetEmergencyContactsArgs,
    ScheduleEmergencyTransportArgs,
)

logger = logging.getLogger(__name__)


def _text_result(text: str) -> dict:
    return {"content": [{"type": "text", "text": text}]}


def _format_km(meters: float) -> str:
    """Meters as kilometers, shortest exact form: 10000 -> "10", 1234567 -> "1234.567"."""
    km = meters / 1000
    return str(int(km)) if km.is_integer() else repr(km)


def _format_facility(f: Facility) -> str:
    return (
        f"- {f.name} ({f.type.value})\n"
        f"  Address: {f.address}\n"
        f"  Distance: {f.distance}\n"
        f"  Treatments: {', '.join(f.treatments_available)}\n"
        f"  Quality: {f.care_quality.value}, Price: {f.price_range.value}, "
        f"Infrastructure: {f.infrastructure.value}"
    )


class CareHandlers:
    """Mock care tools — fixed data, formatted text reports."""

    def __init__(self, maps_api_key: str | None = None):
        self._maps_api_key = maps_api_key

    @property
    def location_services_configured(self) -> bool:
        return bool(self._maps_api_key)

    async def find_nearby_medical_facilities(
        self, args: FindNearbyMedicalFacilitiesArgs,
    ) -> dict:
        """Filter the reference facilities by every supplied criterion."""
        if self.location_services_configured:
            logger.debug("Location services configured but not queried; using reference data")
        facilities = filter_facilities(
            REFERENCE_FACILITIES,
            treatment_needs=args.treatment_needs,
            care_quality=args.care_quality,
            price_range=args.price_range,
            facility_types=args.facilities,
            infrastructure=args.infrastructure,
        )
        header = (
            f"Found {len(facilities)} medical facilities near {args.user_location} "
            f"within {_format_km(args.radius)} km:\n\n"
        )
        return _text_result(header + "\n\n".join(_format_facility(f) for f in facilities))

    async def check_medicare_coverage(self, args: CheckMedicareCoverageArgs) -> dict:
        """Synthetic coverage report echoing the request."""
        lines = [
            f"Medicare coverage for {args.treatment_code} in {args.state}:",
            f"Coverage Type: {args.insurance_type or DEFAULT_COVERAGE_TYPE}",
        ]
        lines.extend(f"{label}: {value}" for label, value in COVERAGE_TERMS)
        return _text_result("\n".join(lines))

    async def get_emergency_contacts(self, args: GetEmergencyContactsArgs) -> dict:
        """Static contact block; only the header mentions the location."""
        lines = [f"Emergency contacts for {args.location}:"]
        lines.extend(f"{label}: {number}" for label, number in EMERGENCY_CONTACTS)
        return _text_result("\n".join(lines))

    async def schedule_emergency_transport(
        self, args: ScheduleEmergencyTransportArgs,
    ) -> dict:
        """Synthetic dispatch confirmation with a fresh transport id."""
        transport_id = f"{TRANSPORT_ID_PREFIX}-{random.randrange(TRANSPORT_ID_UPPER_BOUND)}"
        lines = [f"Emergency transport scheduled from {args.patient_location}"]
        if args.destination:
            lines.append(f"To: {args.destination}")
        lines.extend([
            f"Urgency: {args.urgency.value}",
            f"Condition: {args.medical_condition}",
            f"ETA: {TRANSPORT_ETA_MINUTES} minutes",
            f"Transport ID: {transport_id}",
            "Please stand by and keep patient stable.",
        ])
        logger.info(
            f"Transport {transport_id} scheduled ({args.urgency.value})",
            extra={"tool_name": "schedule_emergency_transport"},
        )
        return _text_result("\n".join(lines))
