"""Ansible inventory model that serialises to YAML."""

from __future__ import annotations

import functools
import sys
from dataclasses import dataclass, field
from typing import Any

import yaml


class _InventoryDumper(yaml.SafeDumper):
    """YAML dumper that emits no aliases for scalars and indents block sequences."""

    def ignore_aliases(self, data: Any) -> bool:
        # Containers are rebuilt by _normalise, so only scalars could repeat.
        return not isinstance(data, (dict, list)) or super().ignore_aliases(data)

    def increase_indent(self, flow: bool = False, indentless: bool = False) -> None:
        return super().increase_indent(flow, False)


def _compare_keys(first: Any, second: Any) -> int:
    """Order mapping keys so that embedded numbers compare by value."""
    a, b = str(first), str(second)
    digits = False
    for i, (ca, cb) in enumerate(zip(a, b)):
        if ca == cb:
            digits = ca.isdigit()
            continue
        a_letter, b_letter = ca.isalpha(), cb.isalpha()
        if a_letter and b_letter:
            return -1 if ca < cb else 1
        if a_letter or b_letter:
            first_wins = a_letter if digits else b_letter
            return -1 if first_wins else 1
        a_num = b_num = 0
        if ca == "0" or cb == "0":
            for j in range(i - 1, -1, -1):
                if not a[j].isdigit():
                    break
                if a[j] != "0":
                    a_num = b_num = 1
                    break
        a_end = i
        while a_end < len(a) and a[a_end].isdigit():
            a_num = a_num * 10 + (ord(a[a_end]) - ord("0"))
            a_end += 1
        b_end = i
        while b_end < len(b) and b[b_end].isdigit():
            b_num = b_num * 10 + (ord(b[b_end]) - ord("0"))
            b_end += 1
        if a_num != b_num:
            return -1 if a_num < b_num else 1
        if a_end != b_end:
            return -1 if a_end < b_end else 1
        return -1 if ca < cb else 1
    if len(a) == len(b):
        return 0
    return -1 if len(a) < len(b) else 1


_key_order = functools.cmp_to_key(_compare_keys)


def _normalise(value: Any) -> Any:
    """Return ``value`` with every nested mapping ordered for output."""
    if isinstance(value, dict):
        return {key: _normalise(value[key]) for key in sorted(value, key=_key_order)}
    if isinstance(value, (list, tuple)):
        return [_normalise(item) for item in value]
    return value


@dataclass
class Host:
    """An inventory host and its variables."""

    name: str
    vars: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _normalise(self.vars)


@dataclass
class Group:
    """An inventory group holding variables, hosts and child groups."""

    name: str
    vars: dict[str, Any] = field(default_factory=dict)
    hosts: dict[str, Host] = field(default_factory=dict)
    children: dict[str, Group] = field(default_factory=dict)

    def add_host(self, name: str) -> Host:
        """Create a host named ``name`` in this group and return it."""
        host = Host(name)
        self.hosts[name] = host
        return host

    def add_child(self, group: Group) -> Group:
        """Attach ``group`` as a child of this group and return it."""
        self.children[group.name] = group
        return group

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.vars:
            data["vars"] = _normalise(self.vars)
        if self.hosts:
            data["hosts"] = {
                key: self.hosts[key].to_dict()
                for key in sorted(self.hosts, key=_key_order)
            }
        if self.children:
            data["children"] = {
                key: self.children[key].to_dict()
                for key in sorted(self.children, key=_key_order)
            }
        return data


@dataclass
class Inventory:
    """A whole inventory: a mapping of top-level group names to groups."""

    groups: dict[str, Group] = field(default_factory=dict)

    def add_group(self, name: str) -> Group:
        """Create a top-level group named ``name`` and return it."""
        group = Group(name)
        self.groups[name] = group
        return group

    def to_dict(self) -> dict[str, Any]:
        return {
            key: self.groups[key].to_dict()
            for key in sorted(self.groups, key=_key_order)
        }

    def to_yaml(self) -> str:
        """Serialise the inventory as a YAML document."""
        return yaml.dump(
            self.to_dict(),
            Dumper=_InventoryDumper,
            indent=4,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            width=sys.maxsize,
        )