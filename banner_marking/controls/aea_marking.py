#!/usr/bin/env python3
# CUI // SP-CTI
"""Atomic Energy Act (AEA) marking parsing.

An AEA segment has the shape

    TYPE[-N][-SIGMA n n ...]

TYPE is any banner or portion name of an AEA type (RD, RESTRICTED DATA,
FRD, DCNI, UCNI, TFNI, ...) and is found by prefix match. ``-N`` flags
Critical Nuclear Weapon Design Information (CNWDI). ``-SIGMA 1 2 3`` lists
SIGMA categories; ``-SG1 2 3`` and ``-SG 1`` are the short forms.
Non-numeric SIGMA values are skipped.

    RD-N                 -> RD, cnwdi, sigmas ()
    FRD-SIGMA 14         -> FRD, sigmas (14,)
    RD-SIGMA 1 ABC 3     -> RD, sigmas (1, 3)
"""

import logging
from typing import List, Optional, Tuple

from banner_marking.controls import control_vocabulary
from banner_marking.controls.control_registry import ControlEntry
from banner_marking.controls.marking_formatter import format_aea
from banner_marking.controls.marking_syntax import (
    AEA_MODIFIER_DELIMITER,
    CNWDI_MODIFIER,
    SIGMA_MODIFIER,
    SIGMA_SHORT_MODIFIER,
)
from banner_marking.resilience.errors import MarkingError

logger = logging.getLogger("banner_marking.controls.aea_marking")


def parse_sigmas(text: str) -> Tuple[int, ...]:
    """Whitespace-separated SIGMA numbers, skipping anything non-numeric."""
    sigmas: List[int] = []
    for token in text.split():
        try:
            sigmas.append(int(token))
        except ValueError:
            logger.debug("Skipping non-numeric SIGMA value %r", token)
    return tuple(sigmas)


def parse_modifiers(marking: str) -> Tuple[bool, Tuple[int, ...]]:
    """Return (cnwdi, sigmas) from the ``-`` modifiers after the AEA type."""
    cnwdi = False
    sigmas: Tuple[int, ...] = ()
    for modifier in marking.split(AEA_MODIFIER_DELIMITER)[1:]:
        modifier = modifier.strip()
        if modifier == CNWDI_MODIFIER:
            cnwdi = True
        elif modifier.startswith(SIGMA_MODIFIER):
            sigmas += parse_sigmas(modifier[len(SIGMA_MODIFIER):])
        elif modifier.startswith(SIGMA_SHORT_MODIFIER):
            sigmas += parse_sigmas(modifier[len(SIGMA_SHORT_MODIFIER):])
    return cnwdi, sigmas


class AeaMarking:
    """Parsed AEA marking. Immutable; compares equal by value.

    Raises:
        MissingMarkingError: ``marking`` is None.
        MarkingError: ``marking`` does not start with an AEA type.
    """

    __slots__ = ("_type", "_cnwdi", "_sigmas")

    def __init__(self, marking: str):
        entry: Optional[ControlEntry] = control_vocabulary.lookup_aea_type(marking)
        if entry is None:
            raise MarkingError(f"'{marking}' does not start with an AEA type", marking=marking)
        self._type = entry
        self._cnwdi, self._sigmas = parse_modifiers(marking)

    @property
    def type(self) -> ControlEntry:
        """The AEA type entry (RD, FRD, DOD_UCNI, DOE_UCNI or TFNI)."""
        return self._type

    @property
    def cnwdi(self) -> bool:
        """True for Critical Nuclear Weapon Design Information (``-N``)."""
        return self._cnwdi

    @property
    def sigmas(self) -> Tuple[int, ...]:
        return self._sigmas

    def to_dict(self) -> dict:
        return {
            "type": self._type.key,
            "name": self._type.name,
            "cnwdi": self._cnwdi,
            "sigmas": list(self._sigmas),
            "banner": str(self),
        }

    def _key(self) -> Tuple[str, bool, Tuple[int, ...]]:
        return self._type.key, self._cnwdi, self._sigmas

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AeaMarking):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return format_aea(self)

    def __repr__(self) -> str:
        return f"AeaMarking({format_aea(self)!r})"
