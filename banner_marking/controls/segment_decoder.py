#!/usr/bin/env python3
# CUI // SP-CTI
"""Decode one banner segment into structured control data.

The caller has already split the banner on ``//`` and knows what kind of
segment it holds; this module dispatches the segment to the SCI or SAP
parser or to a control registry and returns a JSON-ready dict.

Segment kinds:
  classification   SECRET, TOP SECRET, or a short name (S, TS) with --portion
  sci              SI-TK ALFA BRAVO, or several controls joined by "/" (SI-G/TK)
  sap              BP/GB/TC, MULTIPLE PROGRAMS, HVSACO, with or without SAR-
  aea              RD-N, FRD-SIGMA 14, RD-SG1 2, DOD UCNI (type by prefix match)
  dissem           NOFORN, ORCON, ... (NF, OC with --portion)
  other-dissem     EXDIS, LIMDIS, SBU NOFORN, ... (XD, DS with --portion)

CLI:
    python -m banner_marking.controls.segment_decoder --kind sci --segment "SI-TK ALFA-G"
    python -m banner_marking.controls.segment_decoder --kind sap --segment "SAR-BP/GB" --json
    python -m banner_marking.controls.segment_decoder --kind dissem --segment NF --portion
    python -m banner_marking.controls.segment_decoder --list-registries
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Optional

BASE_DIR = Path(__file__).resolve().parent.parent.parent
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from banner_marking.controls import control_vocabulary  # noqa: E402
from banner_marking.controls.aea_marking import AeaMarking  # noqa: E402
from banner_marking.controls.marking_syntax import (  # noqa: E402
    HVSACO,
    SAR_PREFIX,
    SCI_CONTROL_DELIMITER,
    split_marking,
)
from banner_marking.controls.sap_control import SapControl  # noqa: E402
from banner_marking.controls.sci_control import parse_sci_controls  # noqa: E402
from banner_marking.resilience.errors import MarkingError, MissingMarkingError  # noqa: E402

logger = logging.getLogger("banner_marking.controls.segment_decoder")

_REGISTRY_KINDS = {
    "classification": control_vocabulary.CLASSIFICATION_LEVELS,
    "dissem": control_vocabulary.DISSEM_CONTROLS,
    "other-dissem": control_vocabulary.OTHER_DISSEM_CONTROLS,
}

SEGMENT_KINDS = ("classification", "sci", "sap", "aea", "dissem", "other-dissem")


def decode_sap_segment(segment: str) -> SapControl:
    """Parse a SAP banner segment, accepting the ``SAR-`` prefix and HVSACO."""
    if segment == HVSACO:
        return SapControl()
    if segment.startswith(SAR_PREFIX):
        segment = segment[len(SAR_PREFIX):]
    return SapControl(segment)


def decode_segment(kind: str, segment: str, portion: bool = False) -> Dict:
    """Decode a single banner segment.

    Args:
        kind: One of SEGMENT_KINDS.
        segment: The segment text, exactly as it appears between ``//``.
        portion: For registry kinds, look the segment up as a portion
            marking instead of a banner name.

    Returns:
        Dict with ``kind``, ``segment``, ``found`` and the decoded data under
        ``control`` (registry and AEA kinds), ``aea`` (the parsed AEA marking,
        or None), ``sci`` or ``sap``.

    Raises:
        ValueError: unknown ``kind``.
        MissingMarkingError: ``segment`` is None for a kind that needs text.
    """
    logger.debug("Decoding %s segment %r (portion=%s)", kind, segment, portion)
    result: Dict = {"kind": kind, "segment": segment}

    if kind == "sci":
        if segment is None:
            raise MissingMarkingError("decode_segment")
        controls = parse_sci_controls(split_marking(segment, SCI_CONTROL_DELIMITER))
        result["found"] = bool(controls)
        result["sci"] = [c.to_dict() for c in controls]
        return result

    if kind == "sap":
        sap = SapControl() if segment is None else decode_sap_segment(segment)
        result["found"] = True
        result["sap"] = sap.to_dict()
        return result

    if kind == "aea":
        entry = control_vocabulary.lookup_aea_type(segment)
        result["aea"] = AeaMarking(segment).to_dict() if entry is not None else None
    elif kind in _REGISTRY_KINDS:
        registry = control_vocabulary.get_registry(_REGISTRY_KINDS[kind])
        if portion:
            entry = registry.lookup_by_portion_name(segment)
        else:
            entry = registry.lookup_by_banner_name(segment)
    else:
        raise ValueError(f"Unknown segment kind '{kind}'. Expected one of: {', '.join(SEGMENT_KINDS)}")

    if entry is None:
        logger.debug("No %s control matches %r", kind, segment)
    result["found"] = entry is not None
    result["control"] = entry.to_dict() if entry is not None else None
    return result


def _format_human(result: Dict) -> str:
    if not result["found"]:
        return f"No {result['kind']} control matches '{result['segment']}'"
    if "sap" in result:
        sap = result["sap"]
        return f"SAP {sap['kind']}: {sap['banner']} programs={sap['programs']}"
    if "sci" in result:
        lines = []
        for sci in result["sci"]:
            lines.append(f"SCI control {sci['control']}")
            for name, subs in sci["compartments"].items():
                suffix = f" [{', '.join(subs)}]" if subs else ""
                lines.append(f"  compartment {name}{suffix}")
        return "\n".join(lines)
    if result.get("aea"):
        aea = result["aea"]
        return f"AEA {aea['type']}: {aea['banner']} cnwdi={aea['cnwdi']} sigmas={aea['sigmas']}"
    control = result["control"]
    return f"{control['key']}: {control['name']} ({control['portion_name']})"


def main(argv: Optional[list] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Decode a single classification banner segment"
    )
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--segment", type=str, help="Segment text between // delimiters")
    group.add_argument("--list-registries", action="store_true",
                       help="List the configured control vocabularies")
    parser.add_argument("--kind", choices=SEGMENT_KINDS, default="dissem",
                        help="Segment kind (default: dissem)")
    parser.add_argument("--portion", action="store_true",
                        help="Look registry segments up by portion marking")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--json", action="store_true", dest="json_output", help="JSON output")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    try:
        if args.list_registries:
            registries = control_vocabulary.list_registries()
            if args.json_output:
                print(json.dumps(registries, indent=2))
            else:
                for name, description in registries.items():
                    print(f"{name:24s} {description}")
            return 0

        result = decode_segment(args.kind, args.segment, portion=args.portion)
    except MarkingError as exc:
        logger.error("%s", exc)
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1

    if args.json_output:
        print(json.dumps(result, indent=2))
    else:
        print(_format_human(result))
    return 0 if result["found"] else 2


if __name__ == "__main__":
    sys.exit(main())
