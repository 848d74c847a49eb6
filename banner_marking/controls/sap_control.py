#!/usr/bin/env python3
# CUI // SP-CTI
"""Special Access Program (SAP) control parsing.

A SapControl is exactly one of three shapes:

  HVSACO     no programs; built with no input (``SapControl()``)
  MULTIPLE   no programs; built from the literal ``MULTIPLE PROGRAMS``
  PROGRAMS   the ``/``-separated program names of any other input

The MULTIPLE PROGRAMS match is exact. ``MULTIPLE`` alone is a single program
named MULTIPLE. Program splitting drops trailing empty pieces only, so
``BP/`` is (BP,), ``/BP`` is ("", BP) and ``BP//GB`` is (BP, "", GB). The
"at most three programs" banner convention is not enforced when parsing;
see marking_formatter.programs_for_banner.
"""

from enum import Enum
from typing import Iterable, Optional, Tuple

from banner_marking.controls.marking_formatter import format_sap, programs_for_banner
from banner_marking.controls.marking_syntax import (
    MULTIPLE_PROGRAMS,
    SAP_PROGRAM_DELIMITER,
    split_marking,
)


class SapKind(Enum):
    HVSACO = "hvsaco"
    MULTIPLE = "multiple"
    PROGRAMS = "programs"


def parse_programs(marking: str) -> Tuple[str, ...]:
    """Split a SAP program list on ``/``."""
    return tuple(split_marking(marking, SAP_PROGRAM_DELIMITER))


class SapControl:
    """Parsed SAP control. Immutable; compares equal by value.

    Args:
        marking: SAP segment text without the ``SAR-`` prefix. None (the
            default) builds the HVSACO control.
    """

    __slots__ = ("_kind", "_programs")

    def __init__(self, marking: Optional[str] = None):
        if marking is None:
            kind, programs = SapKind.HVSACO, ()
        elif marking == MULTIPLE_PROGRAMS:
            kind, programs = SapKind.MULTIPLE, ()
        else:
            kind, programs = SapKind.PROGRAMS, parse_programs(marking)
        self._kind = kind
        self._programs: Tuple[str, ...] = programs

    @classmethod
    def hvsaco(cls) -> "SapControl":
        return cls()

    @classmethod
    def multiple(cls) -> "SapControl":
        return cls(MULTIPLE_PROGRAMS)

    @classmethod
    def of_programs(cls, programs: Iterable[str]) -> "SapControl":
        """Build a PROGRAMS control from names, without re-parsing delimiters."""
        sap = cls.__new__(cls)
        sap._kind = SapKind.PROGRAMS
        sap._programs = tuple(programs)
        return sap

    @classmethod
    def for_banner(cls, programs: Iterable[str]) -> "SapControl":
        """Build the control a generated banner should carry for ``programs``.

        More than three programs become the MULTIPLE PROGRAMS control.
        """
        shown = programs_for_banner(list(programs))
        if shown == [MULTIPLE_PROGRAMS]:
            return cls.multiple()
        return cls.of_programs(shown)

    @property
    def kind(self) -> SapKind:
        return self._kind

    @property
    def programs(self) -> Tuple[str, ...]:
        return self._programs

    @property
    def is_multiple(self) -> bool:
        return self._kind is SapKind.MULTIPLE

    @property
    def is_hvsaco(self) -> bool:
        return self._kind is SapKind.HVSACO

    def get_programs(self) -> Tuple[str, ...]:
        return self._programs

    def to_dict(self) -> dict:
        return {
            "kind": self._kind.value,
            "programs": list(self._programs),
            "is_multiple": self.is_multiple,
            "is_hvsaco": self.is_hvsaco,
            "banner": str(self),
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SapControl):
            return NotImplemented
        return (self._kind, self._programs) == (other._kind, other._programs)

    def __hash__(self) -> int:
        return hash((self._kind, self._programs))

    def __str__(self) -> str:
        return format_sap(self)

    def __repr__(self) -> str:
        if self._kind is SapKind.HVSACO:
            return "SapControl()"
        if self._kind is SapKind.MULTIPLE:
            return f"SapControl({MULTIPLE_PROGRAMS!r})"
        return f"SapControl.of_programs({list(self._programs)!r})"
