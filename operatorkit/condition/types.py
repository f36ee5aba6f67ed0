"""Condition data types describing the operational state of an API object."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional, Union

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class Severity(str, Enum):
    """How serious a condition with ``Status=False`` is."""

    ERROR = "Error"
    WARNING = "Warning"
    INFO = "Info"
    # Applies only to conditions with Status=True or Unknown.
    NONE = ""

    def __str__(self) -> str:
        return self.value


class ConditionStatus(str, Enum):
    """Status of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


def _coerce(enum_type: type[Enum], value: Any) -> Any:
    """Turn a known value into its enum member; leave unknown values alone."""
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        return value


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(_TIME_FORMAT)


def _parse_time(text: str) -> datetime:
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).astimezone(timezone.utc)


@dataclass
class Condition:
    """An observation of an API resource's operational state.

    ``last_transition_time`` is ``None`` until the condition is first set.
    A ``status`` or ``severity`` outside the known values is kept as given.
    """

    type: str
    status: Union[ConditionStatus, str]
    severity: Union[Severity, str] = Severity.NONE
    last_transition_time: Optional[datetime] = None
    reason: str = ""
    message: str = ""

    def __post_init__(self) -> None:
        self.status = _coerce(ConditionStatus, self.status)
        self.severity = _coerce(Severity, self.severity)

    def copy(self) -> Condition:
        """Return an independent copy of this condition."""
        return dataclasses.replace(self)

    def to_dict(self) -> dict[str, Any]:
        """Return the serialised form, leaving out empty optional fields."""
        data: dict[str, Any] = {"type": self.type, "status": str(self.status)}
        if str(self.severity):
            data["severity"] = str(self.severity)
        data["lastTransitionTime"] = (
            None
            if self.last_transition_time is None
            else _format_time(self.last_transition_time)
        )
        if self.reason:
            data["reason"] = self.reason
        if self.message:
            data["message"] = self.message
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Condition:
        """Build a condition from its serialised form."""
        try:
            condition_type = data["type"]
            status = data["status"]
        except KeyError as exc:
            raise ValueError(f"condition is missing field {exc.args[0]!r}") from exc
        raw_time = data.get("lastTransitionTime")
        return cls(
            type=condition_type,
            status=status,
            severity=data.get("severity", ""),
            last_transition_time=None if raw_time is None else _parse_time(raw_time),
            reason=data.get("reason", ""),
            message=data.get("message", ""),
        )