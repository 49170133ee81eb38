# student_registry/services/validation/student_validation.py
from typing import Any, Dict, Iterable, Mapping


def collect_field_errors(errors: Iterable[Mapping[str, Any]]) -> Dict[str, str]:
    """
    Turn pydantic error dicts into a {field: message} map.

    Every failing field is reported. The field name is the last string in the
    error location; errors on the body itself are reported under "body".
    When a field breaks several rules, the first message wins.
    """
    field_errors: Dict[str, str] = {}

    for error in errors:
        names = [part for part in error.get("loc", ()) if isinstance(part, str)]
        field = names[-1] if names else "body"
        field_errors.setdefault(field, error.get("msg", "Invalid value"))

    return field_errors

