# CUI // SP-CTI
"""Tests for banner_marking.controls.marking_formatter and marking_syntax."""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from banner_marking.controls.marking_formatter import format_sap, format_sci, programs_for_banner
from banner_marking.controls.marking_syntax import split_marking
from banner_marking.controls.sap_control import SapControl
from banner_marking.controls.sci_control import SciControl


class TestSplitMarking:
    """Trailing-empty-discard splitting."""

    @pytest.mark.parametrize("text,expected", [
        ("BP", ["BP"]),
        ("", [""]),
        ("BP/", ["BP"]),
        ("BP///", ["BP"]),
        ("/BP", ["", "BP"]),
        ("BP//GB", ["BP", "", "GB"]),
        ("///", []),
        ("/", []),
    ])
    def test_split(self, text, expected):
        """Only trailing empty pieces are dropped."""
        assert split_marking(text, "/") == expected


class TestFormatSap:
    """SAP rendering."""

    def test_hvsaco(self):
        """HVSACO has no SAR- prefix."""
        assert format_sap(SapControl()) == "HVSACO"

    def test_multiple(self):
        """MULTIPLE PROGRAMS keeps the SAR- prefix."""
        assert format_sap(SapControl.multiple()) == "SAR-MULTIPLE PROGRAMS"

    def test_program_list_preserves_empties(self):
        """Empty programs round-trip as doubled slashes."""
        assert format_sap(SapControl("BP//GB")) == "SAR-BP//GB"
        assert format_sap(SapControl("/BP")) == "SAR-/BP"

    def test_empty_program_list(self):
        """A list with no programs renders as a bare prefix."""
        assert format_sap(SapControl("///")) == "SAR-"


class TestFormatSci:
    """SCI rendering."""

    def test_control_only(self):
        """A bare control renders as itself."""
        assert format_sci(SciControl("HCS")) == "HCS"

    def test_sorted_compartments(self):
        """Compartments render in sorted order."""
        assert format_sci(SciControl("SI-TK-G-HCS")) == "SI-G-HCS-TK"

    def test_sub_compartments(self):
        """Sub-compartments follow their compartment, space separated."""
        assert format_sci(SciControl("SI-TK ALFA BRAVO")) == "SI-TK ALFA BRAVO"

    def test_canonical_form_reparses_equal(self):
        """Rendering then parsing gives an equal control."""
        sci = SciControl("SI-TK BRAVO ALFA-G GOLF-HCS")
        assert SciControl(format_sci(sci)) == sci


class TestProgramsForBanner:
    """Producer-side program list convention."""

    def test_up_to_three_listed(self):
        """Three or fewer programs are listed as given."""
        assert programs_for_banner(("A", "B", "C")) == ["A", "B", "C"]
        assert programs_for_banner([]) == []

    def test_more_than_three_collapse(self):
        """Four or more programs collapse to MULTIPLE PROGRAMS."""
        assert programs_for_banner(["A", "B", "C", "D"]) == ["MULTIPLE PROGRAMS"]
