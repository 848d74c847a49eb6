# CUI // SP-CTI
"""Render parsed SCI, SAP and AEA controls back to banner text.

    format_sap(SapControl())                    -> "HVSACO"
    format_sap(SapControl("MULTIPLE PROGRAMS")) -> "SAR-MULTIPLE PROGRAMS"
    format_sap(SapControl("BP//GB"))            -> "SAR-BP//GB"
    format_sci(SciControl("SI-TK ALFA-G"))      -> "SI-G-TK ALFA"
    format_aea(AeaMarking("RD-N"))              -> "RESTRICTED DATA-N"
"""

from typing import List, Sequence

from banner_marking.controls.marking_syntax import (
    AEA_MODIFIER_DELIMITER,
    CNWDI_MODIFIER,
    HVSACO,
    MAX_LISTED_PROGRAMS,
    MULTIPLE_PROGRAMS,
    SAP_PROGRAM_DELIMITER,
    SAR_PREFIX,
    SCI_COMPARTMENT_DELIMITER,
    SCI_SUB_COMPARTMENT_DELIMITER,
    SIGMA_MODIFIER,
)


def format_sap(sap) -> str:
    """Banner text for a SapControl. Empty program names are kept as-is."""
    if sap.is_hvsaco:
        return HVSACO
    if sap.is_multiple:
        return SAR_PREFIX + MULTIPLE_PROGRAMS
    return SAR_PREFIX + SAP_PROGRAM_DELIMITER.join(sap.programs)


def format_sci(sci) -> str:
    """Banner text for a SciControl, compartments in sorted order.

    A compartment with an empty name and no sub-compartments (parsed from a
    blank token such as ``SI-  ``) renders as a bare trailing ``-``. Parsing
    drops trailing empty pieces, so that compartment does not survive a
    render and reparse: ``SciControl("SI-  ")`` renders as ``SI-``, which
    parses back to control SI with no compartments.
    """
    parts = [sci.control]
    for name, subs in sci.compartments.items():
        parts.append(SCI_SUB_COMPARTMENT_DELIMITER.join((name,) + tuple(subs)))
    return SCI_COMPARTMENT_DELIMITER.join(parts)


def format_aea(aea) -> str:
    """Banner text for an AeaMarking: long type name, then -N, then -SIGMA list."""
    parts = [aea.type.name]
    if aea.cnwdi:
        parts.append(CNWDI_MODIFIER)
    if aea.sigmas:
        parts.append(" ".join([SIGMA_MODIFIER] + [str(s) for s in aea.sigmas]))
    return AEA_MODIFIER_DELIMITER.join(parts)


def programs_for_banner(programs: Sequence[str]) -> List[str]:
    """Program list to show in a generated banner.

    Banners list at most three programs; longer lists are replaced by the
    MULTIPLE PROGRAMS sentinel. Parsing never applies this limit.
    """
    if len(programs) > MAX_LISTED_PROGRAMS:
        return [MULTIPLE_PROGRAMS]
    return list(programs)
