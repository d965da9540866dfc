from __future__ import annotations

from typing import Any, Dict, List

from flask import request

from ..core.exceptions import ValidationError


def json_object_body() -> Dict[str, Any]:
    """The request's JSON object; an absent or unparsable body counts as ``{}``."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def int_list(value: Any, field_name: str) -> List[int]:
    if not isinstance(value, list) or any(isinstance(v, bool) or not isinstance(v, int) for v in value):
        raise ValidationError(f"{field_name} must be a list of integers")
    return value
