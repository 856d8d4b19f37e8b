"""Care Tool Schemas — Pydantic argument models for the four mock care tools.

Invariants:
    - Field aliases are the camelCase wire names published in tools/list
    - Enum fields use domain_types enums — no free-form strings for ordinal criteria
    - radius defaults to 10000 meters when omitted
    - model_json_schema(by_alias=True) is the published inputSchema (single source of truth)

Design Decisions:
    - One model per tool, validated by ToolDispatch before any handler runs
      (ADR: handlers are total once arguments are typed)
"""

from pydantic import BaseModel, ConfigDict, Field

from emergency_planner.core.domain_types import (
    DEFAULT_SEARCH_RADIUS_METERS,
    CareQuality, FacilityType, Infrastructure, PriceRange, Urgency,
)


class _ToolArgs(BaseModel):
    model_config = ConfigDict(extra="ignore")


class FindNearbyMedicalFacilitiesArgs(_ToolArgs):
    """find_nearby_medical_facilities arguments."""
    user_location: str = Field(
        alias="userLocation",
        description="User's current location (address or coordinates)",
    )
    radius: float = Field(
        DEFAULT_SEARCH_RADIUS_METERS, strict=True,
        description="Search radius in meters (default: 10000m = 10km)",
    )
    treatment_needs: list[str] | None = Field(
        None, alias="treatmentNeeds",
        description="Specific medical treatments or services needed",
    )
    care_quality: CareQuality | None = Field(
        None, alias="careQuality",
        description="Expected quality of medical care",
    )
    price_range: PriceRange | None = Field(
        None, alias="priceRange",
        description="Price range preference",
    )
    facilities: list[FacilityType] | None = Field(
        None,
        description="Types of medical facilities to search for",
    )
    infrastructure: Infrastructure | None = Field(
        None,
        description="Quality of infrastructure and cleanliness",
    )


class CheckMedicareCoverageArgs(_ToolArgs):
    """check_medicare_coverage arguments."""
    treatment_code: str = Field(
        alias="treatmentCode",
        description="Medicare treatment or procedure code",
    )
    state: str = Field(description="US State code (e.g., CA, NY)")
    insurance_type: str | None = Field(
        None, alias="insuranceType",
        description="Type of Medicare insurance (e.g., Part A, Part B)",
    )


class GetEmergencyContactsArgs(_ToolArgs):
    """get_emergency_contacts arguments."""
    location: str = Field(description="Location to get emergency contacts for")
    service_type: list[str] | None = Field(
        None, alias="serviceType",
        description="Types of emergency services needed",
    )


class ScheduleEmergencyTransportArgs(_ToolArgs):
    """schedule_emergency_transport arguments."""
    patient_location: str = Field(
        alias="patientLocation", description="Patient's current location",
    )
    destination: str | None = Field(
        None, description="Destination hospital or clinic",
    )
    medical_condition: str = Field(
        alias="medicalCondition",
        description="Brief description of medical condition",
    )
    urgency: Urgency = Field(description="Level of urgency")
