"""
Field schema and validation rules for the Doctor entity.

Every construction and mutation entry point of the entity goes through
``validate_field``; adapters and API schemas read the field tuples defined
here instead of listing fields themselves.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from email_validator import EmailNotValidError, validate_email

from .errors import ValidationError

TEXT = "text"
INTEGER = "integer"
TEXT_LIST = "text_list"


@dataclass(frozen=True)
class FieldRule:
    """Constraint set for a single Doctor field."""

    kind: str
    required: bool = False
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    email: bool = False


# Declaration order is the order in which construction reports failures.
DOCTOR_FIELD_RULES: Dict[str, FieldRule] = {
    "name": FieldRule(TEXT, required=True, min_length=3, max_length=100),
    "specialty": FieldRule(TEXT, required=True, min_length=3, max_length=50),
    "email": FieldRule(TEXT, required=True, email=True),
    "password": FieldRule(TEXT, required=True, min_length=6),
    "phone": FieldRule(TEXT, required=True, min_length=10, max_length=15),
    "available_times": FieldRule(TEXT_LIST),
    "years_of_experience": FieldRule(INTEGER, min_value=0, max_value=50),
    "clinic_address": FieldRule(TEXT),
    "rating": FieldRule(INTEGER, min_value=1, max_value=5),
    "id": FieldRule(INTEGER, min_value=1),
}

DOCTOR_FIELDS = tuple(DOCTOR_FIELD_RULES)

# Fields that define equality and hashing.
IDENTITY_FIELDS = ("id", "name", "specialty", "email", "phone", "available_times")

# Fields that may leave the process (API responses, logs).
PUBLIC_FIELDS = tuple(f for f in DOCTOR_FIELDS if f != "password")

# Fields a caller may change after construction.
MUTABLE_FIELDS = tuple(f for f in DOCTOR_FIELDS if f != "id")


def _check_text(field: str, rule: FieldRule, value: Any) -> None:
    if not isinstance(value, str):
        raise ValidationError(field, "must be a string", value)

    length = len(value)
    if rule.min_length is not None and length < rule.min_length:
        if rule.max_length is not None:
            raise ValidationError(
                field,
                f"length must be between {rule.min_length} and {rule.max_length}, got {length}",
                value,
            )
        raise ValidationError(field, f"length must be at least {rule.min_length}, got {length}", value)
    if rule.max_length is not None and length > rule.max_length:
        raise ValidationError(
            field,
            f"length must be between {rule.min_length or 0} and {rule.max_length}, got {length}",
            value,
        )

    if rule.email:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise ValidationError(field, f"must be a well-formed email address ({exc})", value) from exc


def _check_integer(field: str, rule: FieldRule, value: Any) -> None:
    # bool is an int subclass but never a valid count or score
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(field, "must be an integer", value)

    if rule.min_value is not None and value < rule.min_value:
        raise ValidationError(field, _range_message(rule, value), value)
    if rule.max_value is not None and value > rule.max_value:
        raise ValidationError(field, _range_message(rule, value), value)


def _range_message(rule: FieldRule, value: int) -> str:
    if rule.max_value is None:
        return f"must be at least {rule.min_value}, got {value}"
    return f"must be between {rule.min_value} and {rule.max_value}, got {value}"


def _check_text_list(field: str, value: Any) -> None:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise ValidationError(field, "must be a list of strings", value)
    for index, token in enumerate(value):
        if not isinstance(token, str):
            raise ValidationError(field, f"entry {index} must be a string", value)


def _checked_tokens(field: str, values: Any) -> List[str]:
    if isinstance(values, (str, bytes)):
        raise ValidationError(field, "must be a list of strings", values)
    tokens = list(values)
    _check_text_list(field, tokens)
    return tokens


class AvailableTimes(list):
    """Time slot list that checks every token added to it.

    In-place changes (``append``, ``extend``, ``insert``, item assignment,
    ``+=``) raise ``ValidationError`` and leave the list unchanged when a
    token is not a string.
    """

    field = "available_times"

    def __init__(self, values: Any = ()) -> None:
        super().__init__(_checked_tokens(self.field, values))

    def append(self, token: Any) -> None:
        _checked_tokens(self.field, [token])
        super().append(token)

    def insert(self, index: int, token: Any) -> None:
        _checked_tokens(self.field, [token])
        super().insert(index, token)

    def extend(self, values: Any) -> None:
        super().extend(_checked_tokens(self.field, values))

    def __iadd__(self, values: Any) -> "AvailableTimes":
        self.extend(values)
        return self

    def __setitem__(self, index: Any, value: Any) -> None:
        if isinstance(index, slice):
            value = _checked_tokens(self.field, value)
        else:
            _checked_tokens(self.field, [value])
        super().__setitem__(index, value)


def validate_field(field: str, value: Any) -> None:
    """Check ``value`` against the rule for ``field``.

    Raises:
        ValidationError: if the field is unknown, a required value is missing,
            or the value breaks its type, length, format or range rule.
    """
    rule = DOCTOR_FIELD_RULES.get(field)
    if rule is None:
        raise ValidationError(field, "unknown field")

    if value is None:
        if rule.required:
            raise ValidationError(field, "is required")
        return

    if rule.kind == TEXT:
        _check_text(field, rule, value)
    elif rule.kind == INTEGER:
        _check_integer(field, rule, value)
    elif rule.kind == TEXT_LIST:
        _check_text_list(field, value)


def validate_doctor_fields(values: Mapping[str, Any]) -> None:
    """Validate every known field present in ``values`` in declaration order.

    Missing keys are treated as ``None``, so required fields must be present.
    """
    for field in DOCTOR_FIELDS:
        validate_field(field, values.get(field))


def normalize_available_times(value: Any) -> AvailableTimes:
    """Return a fresh checked list for the time slot tokens (``None`` -> empty)."""
    if value is None:
        return AvailableTimes()
    return AvailableTimes(value)
