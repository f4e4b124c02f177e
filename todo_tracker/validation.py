"""Presence checks for task records, independent of how tasks are stored."""
from dataclasses import dataclass, field
from typing import Any, List, Mapping


@dataclass(frozen=True)
class ValidationResult:
    errors: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def validate_task(fields: Mapping[str, Any]) -> ValidationResult:
    """Check a complete task record before it is written.

    ``fields`` uses attribute names (``name``, ``description``,
    ``is_completed``). Returns a result instead of raising.
    """
    errors = []

    name = fields.get("name")
    if name is None:
        errors.append("name is required")
    elif not isinstance(name, str):
        errors.append("name must be a string")
    elif name == "":
        errors.append("name must not be empty")

    description = fields.get("description")
    if description is not None and not isinstance(description, str):
        errors.append("description must be a string")

    if "is_completed" in fields and not isinstance(fields["is_completed"], bool):
        errors.append("is_completed must be a boolean")

    return ValidationResult(errors=errors)
