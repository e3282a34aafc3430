import json

from interfaces.healthModels import HealthData
from logger_manager import log_error


def _load_json(value, default):
    if value is None:
        return default
    if not isinstance(value, str):
        return value
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        log_error(f"Stored health profile field is not valid JSON: {value[:50]}", e)
        return default


def profile_db_to_pydantic(db_profile) -> HealthData:
    """Convert a stored health profile to the HealthData model."""
    return HealthData(
        dietary_requirement=db_profile.dietary_requirement or "",
        allergies=_load_json(db_profile.allergies, []),
        health_conditions=_load_json(db_profile.health_conditions, []),
        additional_health_data=_load_json(db_profile.additional_health_data, {}),
    )
