"""Input validators"""
from dataclasses import dataclass, field
from typing import List

REQUIRED_FIELDS = ('name', 'email', 'phone')


@dataclass
class ValidationResult:
    ok: bool
    missing: List[str] = field(default_factory=list)

    @property
    def message(self) -> str:
        if self.ok:
            return ""
        return f"Missing required field(s): {', '.join(self.missing)}"


def is_blank(value) -> bool:
    """True for None or the empty string"""
    return value is None or value == ""


def validate_contact_fields(fields: dict) -> ValidationResult:
    """Check that every required contact field is present and non-empty"""
    missing = [name for name in REQUIRED_FIELDS if is_blank(fields.get(name))]
    return ValidationResult(ok=not missing, missing=missing)
