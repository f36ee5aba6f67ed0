"""Operations on lists of conditions: setting, querying, sorting and mirroring."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, Iterator, Optional, Union

from .constants import (
    ERROR_REASON,
    READY_CONDITION,
    READY_INIT_MESSAGE,
    READY_REASON,
    REQUESTED_REASON,
)
from .types import Condition, ConditionStatus, Severity

_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)

_FALSE_SEVERITY_ORDER = {
    Severity.ERROR: 0,
    Severity.WARNING: 1,
    Severity.INFO: 2,
}
_CATCH_ALL_GROUP = 5
_TRUE_GROUP = 4


class InvalidConditionStatusError(ValueError):
    """Raised when a condition carries a status other than True, False or Unknown."""


def _format(message_format: str, args: tuple) -> str:
    return message_format % args if args else message_format


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


def _time_key(condition: Condition) -> datetime:
    moment = condition.last_transition_time
    if moment is None:
        return _EARLIEST
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _sort_key(condition: Condition) -> tuple[bool, str]:
    # The Ready condition goes first, everything else by type.
    return (condition.type != READY_CONDITION, condition.type)


def _group_order(condition: Condition) -> int:
    if condition.status == ConditionStatus.FALSE:
        return _FALSE_SEVERITY_ORDER.get(condition.severity, _CATCH_ALL_GROUP)
    if condition.status == ConditionStatus.UNKNOWN:
        return 3
    if condition.status == ConditionStatus.TRUE:
        return _TRUE_GROUP
    return _CATCH_ALL_GROUP


@dataclass
class _ConditionGroup:
    status: Union[ConditionStatus, str]
    severity: Union[Severity, str]
    conditions: list[Condition] = field(default_factory=list)


def has_same_state(first: Condition, second: Condition) -> bool:
    """Return True if both conditions agree on everything but the transition time."""
    return (
        first.type == second.type
        and first.status == second.status
        and first.reason == second.reason
        and first.severity == second.severity
        and first.message == second.message
    )


def true_condition(condition_type: str, message_format: str, *args) -> Condition:
    """Return a condition with Status=True and the given type."""
    return Condition(
        type=condition_type,
        status=ConditionStatus.TRUE,
        reason=READY_REASON,
        severity=Severity.NONE,
        message=_format(message_format, args),
    )


def false_condition(
    condition_type: str,
    reason: str,
    severity: Union[Severity, str],
    message_format: str,
    *args,
) -> Condition:
    """Return a condition with Status=False and the given type."""
    return Condition(
        type=condition_type,
        status=ConditionStatus.FALSE,
        reason=reason,
        severity=severity,
        message=_format(message_format, args),
    )


def unknown_condition(
    condition_type: str, reason: str, message_format: str, *args
) -> Condition:
    """Return a condition with Status=Unknown and the given type."""
    return Condition(
        type=condition_type,
        status=ConditionStatus.UNKNOWN,
        reason=reason,
        severity=Severity.NONE,
        message=_format(message_format, args),
    )


class Conditions:
    """An ordered list of conditions describing the state of an API resource."""

    def __init__(self, conditions: Optional[Iterable[Condition]] = None) -> None:
        self._items: list[Condition] = [c.copy() for c in conditions or ()]

    def __iter__(self) -> Iterator[Condition]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Condition:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Conditions):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"Conditions({self._items!r})"

    def init(self, conditions: Optional[Iterable[Optional[Condition]]] = None) -> None:
        """Set the Ready condition to Unknown and add any given conditions."""
        self.set(unknown_condition(READY_CONDITION, REQUESTED_REASON, READY_INIT_MESSAGE))
        for condition in conditions or ():
            self.set(condition)

    def set(self, condition: Optional[Condition]) -> None:
        """Add or update a condition, keeping the list sorted.

        An existing condition of the same type is replaced only when its state
        differs, so its transition time survives repeated identical updates.
        """
        if condition is None:
            return
        new = condition.copy()
        if new.last_transition_time is None:
            new.last_transition_time = _now()

        for index, existing in enumerate(self._items):
            if existing.type == new.type:
                if not has_same_state(existing, new):
                    self._items[index] = new
                break
        else:
            self._items.append(new)

        self.sort()

    def remove(self, condition_type: str) -> None:
        """Drop every condition of the given type."""
        self._items = [c for c in self._items if c.type != condition_type]

    def get(self, condition_type: str) -> Optional[Condition]:
        """Return a copy of the condition of the given type, or None."""
        for condition in self._items:
            if condition.type == condition_type:
                return condition.copy()
        return None

    def has(self, condition_type: str) -> bool:
        """Return True if a condition of the given type exists."""
        return self.get(condition_type) is not None

    def mark_true(self, condition_type: str, message_format: str, *args) -> None:
        """Set Status=True for the condition of the given type."""
        self.set(true_condition(condition_type, message_format, *args))

    def mark_false(
        self,
        condition_type: str,
        reason: str,
        severity: Union[Severity, str],
        message_format: str,
        *args,
    ) -> None:
        """Set Status=False for the condition of the given type."""
        self.set(false_condition(condition_type, reason, severity, message_format, *args))

    def mark_unknown(
        self, condition_type: str, reason: str, message_format: str, *args
    ) -> None:
        """Set Status=Unknown for the condition of the given type."""
        self.set(unknown_condition(condition_type, reason, message_format, *args))

    def is_true(self, condition_type: str) -> bool:
        """Return True only if the condition exists and is True."""
        condition = self.get(condition_type)
        return condition is not None and condition.status == ConditionStatus.TRUE

    def is_false(self, condition_type: str) -> bool:
        """Return True only if the condition exists and is False."""
        condition = self.get(condition_type)
        return condition is not None and condition.status == ConditionStatus.FALSE

    def is_unknown(self, condition_type: str) -> bool:
        """Return True if the condition is Unknown or does not exist."""
        condition = self.get(condition_type)
        return condition is None or condition.status == ConditionStatus.UNKNOWN

    def all_sub_conditions_true(self) -> bool:
        """Return True if every condition other than Ready is True."""
        return all(
            c.status == ConditionStatus.TRUE
            for c in self._items
            if c.type != READY_CONDITION
        )

    def sort(self) -> None:
        """Sort with the Ready condition first and the rest by type."""
        self._items.sort(key=_sort_key)

    def sort_by_last_transition_time(self) -> None:
        """Sort with the most recently changed condition first."""
        self._items.sort(key=_time_key, reverse=True)

    def _groups(self) -> list[Optional[_ConditionGroup]]:
        groups: list[Optional[_ConditionGroup]] = [None] * 6
        for condition in self._items:
            for group in groups:
                if (
                    group is not None
                    and group.status == condition.status
                    and group.severity == condition.severity
                ):
                    group.conditions.append(condition)
                    break
            else:
                groups[_group_order(condition)] = _ConditionGroup(
                    condition.status, condition.severity, [condition]
                )
        return groups

    def mirror(self, condition_type: str) -> Optional[Condition]:
        """Summarise the list into one condition of the given type.

        A True Ready condition is mirrored as it is. Otherwise the latest
        condition of the most severe group wins, ordered False (Error,
        Warning, Info), Unknown, True.
        """
        if not self._items:
            return None

        groups = self._groups()

        true_group = groups[_TRUE_GROUP]
        if true_group is not None:
            for condition in true_group.conditions:
                if (
                    condition.type == READY_CONDITION
                    and condition.status == ConditionStatus.TRUE
                ):
                    return Condition(
                        type=condition_type,
                        status=ConditionStatus.TRUE,
                        reason=READY_REASON,
                        severity=Severity.NONE,
                        message=condition.message,
                        last_transition_time=condition.last_transition_time,
                    )

        for group in groups:
            if group is None or not group.conditions:
                continue
            latest = sorted(group.conditions, key=_time_key, reverse=True)[0]
            if latest.status == ConditionStatus.TRUE:
                return Condition(
                    type=condition_type,
                    status=ConditionStatus.TRUE,
                    reason=READY_REASON,
                    severity=Severity.NONE,
                    message=latest.message,
                    last_transition_time=latest.last_transition_time,
                )
            if latest.status == ConditionStatus.FALSE:
                return Condition(
                    type=condition_type,
                    status=ConditionStatus.FALSE,
                    reason=latest.reason,
                    severity=latest.severity,
                    message=latest.message,
                    last_transition_time=latest.last_transition_time,
                )
            if latest.status == ConditionStatus.UNKNOWN:
                return Condition(
                    type=condition_type,
                    status=ConditionStatus.UNKNOWN,
                    reason=latest.reason,
                    severity=Severity.NONE,
                    message=latest.message,
                    last_transition_time=latest.last_transition_time,
                )
            raise InvalidConditionStatusError(
                f"Condition {latest!r} has invalid status value '{latest.status}'. "
                "The only valid values are True, False, Unknown"
            )
        return None


def create_list(*args: Optional[Condition]) -> Conditions:
    """Return a conditions list of the given conditions, skipping None."""
    return Conditions(c for c in args if c is not None)


def is_error(condition: Optional[Condition]) -> bool:
    """Return True if the condition is False with the Error reason."""
    return (
        condition is not None
        and condition.status == ConditionStatus.FALSE
        and condition.reason == ERROR_REASON
    )


def get_higher_prio_condition(
    first: Optional[Condition], second: Optional[Condition]
) -> Optional[Condition]:
    """Return whichever condition takes precedence.

    Lower group order wins; on a tie the later transition time wins. If only
    one is given, that one is returned.
    """
    if first is None:
        return second
    if second is None:
        return first
    first_order = _group_order(first)
    second_order = _group_order(second)
    if first_order < second_order:
        return first
    if first_order == second_order and _time_key(first) >= _time_key(second):
        return first
    return second


def restore_last_transition_times(
    conditions: Conditions, saved_conditions: Iterable[Condition]
) -> None:
    """Copy transition times from saved conditions whose state is unchanged."""
    saved: dict[str, Condition] = {}
    for condition in saved_conditions:
        saved.setdefault(condition.type, condition)
    for condition in conditions:
        previous = saved.get(condition.type)
        if previous is not None and has_same_state(condition, previous):
            condition.last_transition_time = previous.last_transition_time