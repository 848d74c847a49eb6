#!/usr/bin/env python3
# CUI // SP-CTI
"""Banner marking control decoders.

Control registries for the fixed vocabularies (dissemination controls, other
dissemination controls, classification levels, AEA types), the SCI
compartment parser, the SAP program-list parser, the AEA marking parser and
the formatter that turns parsed controls back into banner text.
"""

from banner_marking.controls.aea_marking import AeaMarking
from banner_marking.controls.control_registry import ControlEntry, ControlRegistry, PrefixMatcher
from banner_marking.controls.control_vocabulary import (
    aea_types,
    classification_levels,
    dissem_controls,
    get_registry,
    load_vocabulary,
    lookup_aea_type,
    lookup_classification,
    lookup_classification_by_short_name,
    other_dissem_controls,
)
from banner_marking.controls.marking_formatter import (
    format_aea,
    format_sap,
    format_sci,
    programs_for_banner,
)
from banner_marking.controls.sap_control import SapControl, SapKind
from banner_marking.controls.sci_control import SciControl

__all__ = [
    "AeaMarking",
    "ControlEntry",
    "ControlRegistry",
    "PrefixMatcher",
    "SapControl",
    "SapKind",
    "SciControl",
    "aea_types",
    "classification_levels",
    "dissem_controls",
    "format_aea",
    "format_sap",
    "format_sci",
    "get_registry",
    "load_vocabulary",
    "lookup_aea_type",
    "lookup_classification",
    "lookup_classification_by_short_name",
    "other_dissem_controls",
    "programs_for_banner",
]
