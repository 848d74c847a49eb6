# CUI // SP-CTI
"""Delimiters, sentinel literals and the segment splitter shared by the
SCI, SAP and AEA parsers and the formatter."""

from typing import List

SCI_COMPARTMENT_DELIMITER = "-"
SCI_SUB_COMPARTMENT_DELIMITER = " "
SAP_PROGRAM_DELIMITER = "/"
# Separates SCI controls within one banner segment (SI-G/TK).
SCI_CONTROL_DELIMITER = "/"

SAR_PREFIX = "SAR-"
MULTIPLE_PROGRAMS = "MULTIPLE PROGRAMS"
HVSACO = "HVSACO"

# Banners list at most this many SAP programs before collapsing to MULTIPLE PROGRAMS.
MAX_LISTED_PROGRAMS = 3

# AEA segments: TYPE[-N][-SIGMA n n ...], SG is the short form of SIGMA.
AEA_MODIFIER_DELIMITER = "-"
CNWDI_MODIFIER = "N"
SIGMA_MODIFIER = "SIGMA"
SIGMA_SHORT_MODIFIER = "SG"


def split_marking(text: str, delimiter: str) -> List[str]:
    """Split marking text on a single-character delimiter.

    Empty pieces at the end of the result are dropped; empty pieces before a
    non-empty one are kept. Text without the delimiter comes back whole.

        split_marking("BP/", "/")    -> ["BP"]
        split_marking("/BP", "/")    -> ["", "BP"]
        split_marking("BP//GB", "/") -> ["BP", "", "GB"]
        split_marking("///", "/")    -> []
        split_marking("", "/")       -> [""]
    """
    if delimiter not in text:
        return [text]
    pieces = text.split(delimiter)
    while pieces and pieces[-1] == "":
        pieces.pop()
    return pieces
