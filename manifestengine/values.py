"""
Tagged view over decoded YAML and property-list trees.

Decoders hand back plain Python containers. Parsers never inspect those
directly; they wrap the root in a Node and walk it through accessors that
return None on a kind mismatch, so every traversal step has an explicit
failure branch.
"""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class NodeKind(Enum):
    NULL = "null"
    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"
    DATA = "data"
    DATE = "date"
    ARRAY = "array"
    MAP = "map"


def _kind_of(value: Any) -> NodeKind:
    # bool is a subclass of int, check it first
    if value is None:
        return NodeKind.NULL
    if isinstance(value, bool):
        return NodeKind.BOOL
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if isinstance(value, str):
        return NodeKind.STRING
    if isinstance(value, (bytes, bytearray)):
        return NodeKind.DATA
    if isinstance(value, (datetime, date)):
        return NodeKind.DATE
    if isinstance(value, (list, tuple)):
        return NodeKind.ARRAY
    if isinstance(value, dict):
        return NodeKind.MAP
    # Unknown scalar types (e.g. plistlib.UID) carry nothing we read
    return NodeKind.NULL


class Node:
    """A single decoded value tagged with its NodeKind.

    Children are wrapped on access rather than up front, so recursive
    structures produced by YAML anchors are safe to hold.
    """

    __slots__ = ('_value', '_kind')

    def __init__(self, value: Any):
        self._value = value
        self._kind = _kind_of(value)

    @property
    def kind(self) -> NodeKind:
        return self._kind

    def is_kind(self, kind: NodeKind) -> bool:
        return self._kind is kind

    def as_string(self) -> Optional[str]:
        return self._value if self._kind is NodeKind.STRING else None

    def as_list(self) -> Optional[List[Node]]:
        if self._kind is not NodeKind.ARRAY:
            return None
        return [Node(item) for item in self._value]

    def as_map(self) -> Optional[Dict[Any, Node]]:
        if self._kind is not NodeKind.MAP:
            return None
        return {key: Node(item) for key, item in self._value.items()}

    def get(self, key: Any) -> Optional[Node]:
        """Child at ``key`` for a MAP node; None for a missing key or non-map."""
        if self._kind is not NodeKind.MAP or key not in self._value:
            return None
        return Node(self._value[key])

    def items(self) -> Iterator[Tuple[Any, Node]]:
        if self._kind is not NodeKind.MAP:
            return iter(())
        return ((key, Node(item)) for key, item in self._value.items())

    def __len__(self) -> int:
        if self._kind in (NodeKind.ARRAY, NodeKind.MAP):
            return len(self._value)
        return 0

    def __repr__(self) -> str:
        return f"Node({self._kind.value}, {self._value!r})"
