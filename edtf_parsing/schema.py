"""JSON schema for serialized EDTF values and payload validation."""

from typing import Any, Dict, List, Optional, Tuple

import jsonschema

_DATE_PART_SCHEMA = {
    "type": "object",
    "required": [
        "value",
        "has_value",
        "is_uncertain",
        "is_approximate",
        "unspecified_mask",
        "insignificant_digits",
    ],
    "properties": {
        "value": {"type": "integer"},
        "has_value": {"type": "boolean"},
        "is_uncertain": {"type": "boolean"},
        "is_approximate": {"type": "boolean"},
        "unspecified_mask": {"type": "integer", "minimum": 0},
        "insignificant_digits": {"type": "integer", "minimum": 0},
    },
    "additionalProperties": False,
}

_DATE_SCHEMA = {
    "type": "object",
    "required": ["status", "year", "month", "day"],
    "properties": {
        "status": {"enum": ["normal", "open", "unknown", "unused", "invalid"]},
        "year": {"$ref": "#/definitions/date_part"},
        "month": {"$ref": "#/definitions/date_part"},
        "day": {"$ref": "#/definitions/date_part"},
        "season_qualifier": {"type": ["string", "null"]},
        "hour": {"type": "integer", "minimum": 0, "maximum": 99},
        "minute": {"type": "integer", "minimum": 0, "maximum": 99},
        "second": {"type": "integer", "minimum": 0, "maximum": 99},
        "timezone_offset": {"type": "integer"},
        "has_timezone_offset": {"type": "boolean"},
    },
    "additionalProperties": False,
}

_DATE_PAIR_SCHEMA = {
    "type": "object",
    "required": ["edtf", "status", "is_range", "start", "end"],
    "properties": {
        "edtf": {"type": "string"},
        "status": {"enum": ["normal", "open", "unknown", "unused", "invalid"]},
        "is_range": {"type": "boolean"},
        "start": {"$ref": "#/definitions/date"},
        "end": {"$ref": "#/definitions/date"},
    },
    "additionalProperties": False,
}

DATE_PAIR_LIST_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "EDTF date pair list",
    "type": "object",
    "required": ["edtf", "mode", "valid", "items"],
    "properties": {
        "edtf": {"type": "string"},
        "mode": {"enum": ["one_of_a_set", "multiple"]},
        "valid": {"type": "boolean"},
        "items": {"type": "array", "items": {"$ref": "#/definitions/date_pair"}},
    },
    "additionalProperties": False,
    "definitions": {
        "date_part": _DATE_PART_SCHEMA,
        "date": _DATE_SCHEMA,
        "date_pair": _DATE_PAIR_SCHEMA,
    },
}


def validate_payload(data: Dict[str, Any]) -> Tuple[bool, Optional[List[str]]]:
    """
    Validate a serialized DatePairList against DATE_PAIR_LIST_SCHEMA.

    Args:
        data: Output of DatePairList.to_dict(), possibly round-tripped
            through JSON

    Returns:
        Tuple of (is_valid, errors)
    """
    try:
        jsonschema.validate(instance=data, schema=DATE_PAIR_LIST_SCHEMA)
        return (True, None)
    except jsonschema.ValidationError as e:
        return (False, [str(e.message)])
    except jsonschema.SchemaError as e:
        return (False, [f"Invalid schema: {str(e)}"])
