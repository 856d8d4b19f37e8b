"""Define Care Tools — MCP tool schemas for facility search, coverage, contacts and transport.

Invariants:
    - All schemas follow MCP tools/list format (name, description, input_schema)
    - input_schema generated from the Pydantic argument model by alias: the schema a
      client sees is exactly the one ToolDispatch validates against
    - Tools are stateless: no call changes any session

Design Decisions:
    - Tool schemas in dedicated files: explicit, no auto-discovery (ADR: ExMA anti-pattern)
    - Schema generation over hand-written dicts for mock tools: argument models already
      carry descriptions and enums
"""

from pydantic import BaseModel

from emergency_planner.core.domain_types import ToolName
from emergency_planner.schemas.care_tools import (
    CheckMedicareCoverageArgs,
    FindNearbyMedicalFacilitiesArgs,
    GetEmergencyContactsArgs,
    ScheduleEmergencyTransportArgs,
)


def _input_schema(model: type[BaseModel]) -> dict:
    """JSON Schema for a tool argument model, keyed by wire names."""
    schema = model.model_json_schema(by_alias=True)
    schema.pop("title", None)
    return schema


TOOLS_CARE = [
    {
        "name": ToolName.FIND_FACILITIES.value,
        "description": (
            "Finds hospitals and clinics nearby user location that match "
            "specific requirements"
        ),
        "input_schema": _input_schema(FindNearbyMedicalFacilitiesArgs),
    },
    {
        "name": ToolName.CHECK_COVERAGE.value,
        "description": "Checks what treatments and procedures are covered by Medicare",
        "input_schema": _input_schema(CheckMedicareCoverageArgs),
    },
    {
        "name": ToolName.EMERGENCY_CONTACTS.value,
        "description": "Retrieves emergency contact information for a specific location",
        "input_schema": _input_schema(GetEmergencyContactsArgs),
    },
    {
        "name": ToolName.SCHEDULE_TRANSPORT.value,
        "description": "Arranges emergency medical transportation",
        "input_schema": _input_schema(ScheduleEmergencyTransportArgs),
    },
]

ARGUMENT_MODELS: dict[str, type[BaseModel]] = {
    ToolName.FIND_FACILITIES.value: FindNearbyMedicalFacilitiesArgs,
    ToolName.CHECK_COVERAGE.value: CheckMedicareCoverageArgs,
    ToolName.EMERGENCY_CONTACTS.value: GetEmergencyContactsArgs,
    ToolName.SCHEDULE_TRANSPORT.value: ScheduleEmergencyTransportArgs,
}
