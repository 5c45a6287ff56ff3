"""Doctor domain entity representing a practitioner's profile."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..doctor_schema import (
    DOCTOR_FIELD_RULES,
    DOCTOR_FIELDS,
    IDENTITY_FIELDS,
    MUTABLE_FIELDS,
    normalize_available_times,
    validate_doctor_fields,
    validate_field,
)
from ..errors import ValidationError


@dataclass(eq=False, repr=False)
class Doctor:
    """Doctor domain entity.

    Every field assignment, including the ones made by ``__init__``, is
    checked against the field schema, so an instance never holds an invalid
    value. ``available_times`` is held as an ``AvailableTimes`` list, so
    in-place changes to it are checked too. ``id`` stays ``None`` until the
    storage layer assigns it and can not change afterwards.

    Equality and hashing only look at ``IDENTITY_FIELDS``; the password,
    experience, address and rating do not take part.
    """

    name: str
    specialty: str
    email: str
    password: str
    phone: str
    available_times: List[str] = field(default_factory=list)
    years_of_experience: Optional[int] = None
    clinic_address: Optional[str] = None
    rating: Optional[int] = None
    id: Optional[int] = None

    def __setattr__(self, name: str, value: Any) -> None:
        if name in DOCTOR_FIELD_RULES:
            validate_field(name, value)
            if name == "id":
                current = self.__dict__.get("id")
                if current is not None and value != current:
                    raise ValidationError("id", "identifier is immutable once assigned", value)
            elif name == "available_times":
                value = normalize_available_times(value)
        super().__setattr__(name, value)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "Doctor":
        """Build a Doctor from a mapping; missing required keys fail validation."""
        unknown = set(values) - set(DOCTOR_FIELDS)
        if unknown:
            raise ValidationError(sorted(unknown)[0], "unknown field")
        validate_doctor_fields(values)
        return cls(**{name: values.get(name) for name in DOCTOR_FIELDS})

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def assign_id(self, doctor_id: int) -> None:
        """Set the storage identifier (storage layer only)."""
        self.id = doctor_id

    def apply_updates(self, changes: Mapping[str, Any]) -> None:
        """Apply several field changes at once.

        All values are validated before any of them is stored, so a failure
        leaves the record untouched.
        """
        for name, value in changes.items():
            if name == "id":
                raise ValidationError("id", "identifier can not be updated", value)
            if name not in MUTABLE_FIELDS:
                raise ValidationError(name, "unknown field")
            validate_field(name, value)

        for name, value in changes.items():
            setattr(self, name, value)

    def identity_key(self) -> Tuple[Any, ...]:
        """Values that define equality and the hash."""
        return tuple(
            tuple(self.available_times) if name == "available_times" else getattr(self, name)
            for name in IDENTITY_FIELDS
        )

    def to_dict(self, include_password: bool = False) -> Dict[str, Any]:
        data = {name: getattr(self, name) for name in DOCTOR_FIELDS}
        data["available_times"] = list(self.available_times)
        if not include_password:
            data.pop("password")
        return data

    def copy(self) -> "Doctor":
        return Doctor.from_dict(self.to_dict(include_password=True))

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Doctor):
            return NotImplemented
        # Unsaved records have no identity to compare.
        if self.id is None or other.id is None:
            return False
        return self.identity_key() == other.identity_key()

    def __hash__(self) -> int:
        return hash(self.identity_key())

    def __repr__(self) -> str:
        parts = ", ".join(f"{name}={getattr(self, name)!r}" for name in IDENTITY_FIELDS)
        return f"Doctor({parts})"

    __str__ = __repr__
