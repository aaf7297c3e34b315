"""In-memory tree of game data nodes and helpers for reading their values."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

__all__ = ["NxNode", "numeric_id", "apply_options"]

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class NxNode:
    """A named node holding an optional value and any number of children.

    Values are ``None``, ``int``, ``float``, ``bool``, ``str`` or a
    two-element tuple for vectors.
    """

    name: str
    value: Any = None
    children: list[NxNode] = field(default_factory=list)

    def __iter__(self) -> Iterator[NxNode]:
        return iter(self.children)

    def find(self, path: str) -> NxNode | None:
        """The node at a slash-separated path below this one, or ``None``."""
        node: NxNode | None = self
        for part in path.split("/"):
            if not part:
                continue
            node = next((child for child in node.children if child.name == part), None)
            if node is None:
                return None
        return node

    def as_int(self, bits: int = 64, signed: bool = True) -> int:
        """The value as an integer cut to ``bits`` bits."""
        value = self.value
        if value is None:
            return 0
        if isinstance(value, (bool, int)):
            number = int(value)
        elif isinstance(value, float):
            number = int(value)
        else:
            raise TypeError(f"node {self.name!r} holds no number: {value!r}")
        mask = (1 << bits) - 1
        number &= mask
        if signed and number >> (bits - 1):
            number -= 1 << bits
        return number

    def as_byte(self) -> int:
        """The low eight bits of the value, unsigned."""
        return self.as_int(8, signed=False)

    def as_bool(self) -> bool:
        """True when the low byte of the value is not zero."""
        return self.as_byte() != 0

    def as_float(self) -> float:
        value = self.value
        if value is None:
            return 0.0
        if isinstance(value, (bool, int, float)):
            return float(value)
        raise TypeError(f"node {self.name!r} holds no number: {value!r}")

    def as_text(self) -> str:
        if isinstance(self.value, str):
            return self.value
        raise TypeError(f"node {self.name!r} holds no text: {self.value!r}")


def numeric_id(name: str) -> int:
    """The integer in a node name such as ``01002140.img``.

    Raises ``ValueError`` when the name without its extension is not a
    plain decimal number.
    """
    dot = name.rfind(".")
    base = name[:dot] if dot >= 0 else name
    if not _INTEGER.fullmatch(base):
        raise ValueError(f"not a numeric id: {name!r}")
    return int(base)


Converter = Callable[[NxNode], Any]


def apply_options(
    node: NxNode,
    target: Any,
    table: Mapping[str, tuple[tuple[str, ...], Converter]],
    ignored: Iterable[str],
    kind: str,
    logger: logging.Logger,
) -> Any:
    """Set attributes of ``target`` from the children of ``node``.

    ``table`` maps an option name to the attribute names it sets and
    the converter producing their value. Names in ``ignored`` are
    skipped quietly; any other name is logged.
    """
    skip = set(ignored)
    for option in node.children:
        entry = table.get(option.name)
        if entry is not None:
            attributes, convert = entry
            value = convert(option)
            for attribute in attributes:
                setattr(target, attribute, value)
        elif option.name not in skip:
            logger.warning("Unsupported NX %s option: %s -> %r", kind, option.name, option.value)
    return target