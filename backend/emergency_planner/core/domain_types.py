"""Domain Types — enums and ordinal scales shared by schemas, filters and tool definitions.

Invariants:
    - All valid enum values encoded as str Enums — no raw string matching in filters
    - "any" is the bottom of every ordinal scale and never narrows a search
    - Ordinal ranks are total: a higher rank always satisfies a lower request

Design Decisions:
    - str Enums: serialize to JSON and JSON Schema without custom encoders
    - Ranks as module-level dicts, not Enum methods: filters stay pure lookups
"""

from enum import Enum


# ─── Tool Names ──────────────────────────────────────────────────

class ToolName(str, Enum):
    """Wire names of every tool exposed over MCP."""
    FIND_FACILITIES = "find_nearby_medical_facilities"
    CHECK_COVERAGE = "check_medicare_coverage"
    EMERGENCY_CONTACTS = "get_emergency_contacts"
    SCHEDULE_TRANSPORT = "schedule_emergency_transport"
    SEQUENTIAL_THINKING = "sequentialthinking"


# ─── Facility Attributes ─────────────────────────────────────────

class CareQuality(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    ANY = "any"


class PriceRange(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    ANY = "any"


class FacilityType(str, Enum):
    HOSPITAL = "hospital"
    CLINIC = "clinic"
    EMERGENCY = "emergency"
    PHARMACY = "pharmacy"
    SPECIALIST = "specialist"


class Infrastructure(str, Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    ANY = "any"


class Urgency(str, Enum):
    """Transport urgency levels."""
    CRITICAL = "critical"
    URGENT = "urgent"
    STANDARD = "standard"


# ─── Ordinal Scales ──────────────────────────────────────────────

CARE_QUALITY_RANK: dict[CareQuality, int] = {
    CareQuality.ANY: 0,
    CareQuality.MEDIUM: 1,
    CareQuality.HIGH: 2,
}

INFRASTRUCTURE_RANK: dict[Infrastructure, int] = {
    Infrastructure.ANY: 0,
    Infrastructure.GOOD: 1,
    Infrastructure.EXCELLENT: 2,
}


# ─── Defaults ────────────────────────────────────────────────────

DEFAULT_SEARCH_RADIUS_METERS = 10_000
