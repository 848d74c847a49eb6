#!/usr/bin/env python3
# CUI // SP-CTI
"""Sensitive Compartmented Information (SCI) control parsing.

An SCI segment has the shape

    CONTROL[-COMPARTMENT[ SUB SUB ...]][-COMPARTMENT ...]

e.g. ``SI-TK ALFA BRAVO-G GOLF`` is control SI with compartments G (GOLF)
and TK (ALFA, BRAVO). Compartments are keyed in ascending order whatever
order they appear in; sub-compartments keep their original order.

Splitting drops trailing empty pieces only: ``SI-TK-`` has one compartment,
``SI---`` has none, and ``-TK`` has an empty control with compartment TK.
"""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from banner_marking.controls.marking_formatter import format_sci
from banner_marking.controls.marking_syntax import (
    SCI_COMPARTMENT_DELIMITER,
    SCI_SUB_COMPARTMENT_DELIMITER,
    split_marking,
)
from banner_marking.resilience.errors import MissingMarkingError


def parse_compartments(marking: str) -> Tuple[str, Dict[str, Tuple[str, ...]]]:
    """Split an SCI segment into its control and sorted compartment map."""
    pieces = split_marking(marking, SCI_COMPARTMENT_DELIMITER)
    control = pieces[0] if pieces else ""

    compartments: Dict[str, Tuple[str, ...]] = {}
    for token in pieces[1:]:
        parts = split_marking(token, SCI_SUB_COMPARTMENT_DELIMITER)
        name = parts[0] if parts else ""
        # A repeated compartment name replaces the earlier one.
        compartments[name] = tuple(parts[1:])

    return control, {name: compartments[name] for name in sorted(compartments)}


class SciControl:
    """Parsed SCI control. Immutable; compares equal by value."""

    __slots__ = ("_control", "_compartments")

    def __init__(self, marking: str):
        if marking is None:
            raise MissingMarkingError("SciControl")
        control, compartments = parse_compartments(marking)
        self._control = control
        self._compartments: Mapping[str, Tuple[str, ...]] = MappingProxyType(compartments)

    @property
    def control(self) -> str:
        return self._control

    @property
    def compartments(self) -> Mapping[str, Tuple[str, ...]]:
        """Read-only compartment name -> sub-compartment names, sorted by name."""
        return self._compartments

    def get_control(self) -> str:
        return self._control

    def get_compartments(self) -> Mapping[str, Tuple[str, ...]]:
        return self._compartments

    def sub_compartments(self, compartment: str) -> Optional[Tuple[str, ...]]:
        """Sub-compartments of ``compartment``, or None if it is not present."""
        return self._compartments.get(compartment)

    def to_dict(self) -> dict:
        return {
            "control": self._control,
            "compartments": {k: list(v) for k, v in self._compartments.items()},
            "banner": str(self),
        }

    def _key(self) -> Tuple[str, Tuple[Tuple[str, Tuple[str, ...]], ...]]:
        return self._control, tuple(self._compartments.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SciControl):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return format_sci(self)

    def __repr__(self) -> str:
        return f"SciControl({format_sci(self)!r})"


def parse_sci_controls(markings: List[str]) -> List[SciControl]:
    """Parse several SCI segments, e.g. the pieces of ``SI-G/TK`` split on ``/``."""
    return [SciControl(m) for m in markings]
