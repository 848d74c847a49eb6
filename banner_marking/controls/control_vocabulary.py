#!/usr/bin/env python3
# CUI // SP-CTI
"""Control vocabularies loaded from args/banner_controls.yaml.

Builds one ControlRegistry per vocabulary and caches it for the life of the
process. Registries are built under a lock, so any lookup sees a fully
populated registry.

Vocabularies:
  dissem_controls         NOFORN, ORCON, RELIDO, ...
  other_dissem_controls   EXDIS, LIMDIS, SBU NOFORN, LES, ...
  classification_levels   UNCLASSIFIED (U) .. TOP SECRET (TS)
  aea_types               RD, FRD, DOD UCNI, DOE UCNI, TFNI
"""

import logging
import threading
from pathlib import Path
from typing import Dict, Optional

import yaml

from banner_marking.controls.control_registry import ControlEntry, ControlRegistry
from banner_marking.resilience.errors import ConfigurationError

BASE_DIR = Path(__file__).resolve().parent.parent
CONFIG_PATH = BASE_DIR / "args" / "banner_controls.yaml"

DISSEM_CONTROLS = "dissem_controls"
OTHER_DISSEM_CONTROLS = "other_dissem_controls"
CLASSIFICATION_LEVELS = "classification_levels"
AEA_TYPES = "aea_types"

logger = logging.getLogger("banner_marking.controls.control_vocabulary")

# Module-level caches (populated on first call)
_VOCABULARY_CACHE: Optional[Dict] = None
_REGISTRY_CACHE: Dict[str, ControlRegistry] = {}
_CACHE_LOCK = threading.RLock()


# ---------------------------------------------------------------------------
# Config loading
# ---------------------------------------------------------------------------

def load_vocabulary(config_path: Optional[Path] = None) -> Dict:
    """Load the control vocabulary YAML.

    The default file is cached after the first load; an explicit
    ``config_path`` is always read fresh.

    Returns:
        Dict keyed by registry name, each with ``description`` and ``controls``.

    Raises:
        ConfigurationError: the file is missing, is not valid YAML, or has no
            ``registries`` mapping.
    """
    global _VOCABULARY_CACHE

    if config_path is None:
        with _CACHE_LOCK:
            if _VOCABULARY_CACHE is None:
                _VOCABULARY_CACHE = _read_vocabulary(CONFIG_PATH)
            return _VOCABULARY_CACHE
    return _read_vocabulary(Path(config_path))


def _read_vocabulary(path: Path) -> Dict:
    if not path.exists():
        raise ConfigurationError(f"Control vocabulary not found: {path}", config_key=str(path))
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid YAML in {path}: {exc}", config_key=str(path)) from exc

    registries = data.get("registries") if isinstance(data, dict) else None
    if not isinstance(registries, dict):
        raise ConfigurationError(f"{path} has no 'registries' mapping", config_key="registries")
    logger.debug("Loaded %d control vocabularies from %s", len(registries), path)
    return registries


# ---------------------------------------------------------------------------
# Registry construction
# ---------------------------------------------------------------------------

def build_registry(name: str, vocabulary: Dict) -> ControlRegistry:
    """Build the registry ``name`` from a loaded vocabulary dict."""
    section = vocabulary.get(name)
    if not isinstance(section, dict) or not section.get("controls"):
        raise ConfigurationError(f"Vocabulary '{name}' has no controls", config_key=name)
    registry = ControlRegistry.from_rows(name, section["controls"])
    logger.debug("Built registry %s with %d controls", name, len(registry))
    return registry


def get_registry(name: str) -> ControlRegistry:
    """Return the cached registry ``name``, building it on first use."""
    registry = _REGISTRY_CACHE.get(name)
    if registry is not None:
        return registry
    with _CACHE_LOCK:
        if name not in _REGISTRY_CACHE:
            _REGISTRY_CACHE[name] = build_registry(name, load_vocabulary())
        return _REGISTRY_CACHE[name]


def list_registries() -> Dict[str, str]:
    """Return registry name -> description for every configured vocabulary."""
    return {
        name: (section or {}).get("description", "")
        for name, section in load_vocabulary().items()
    }


def dissem_controls() -> ControlRegistry:
    return get_registry(DISSEM_CONTROLS)


def other_dissem_controls() -> ControlRegistry:
    return get_registry(OTHER_DISSEM_CONTROLS)


def classification_levels() -> ControlRegistry:
    return get_registry(CLASSIFICATION_LEVELS)


def aea_types() -> ControlRegistry:
    return get_registry(AEA_TYPES)


# ---------------------------------------------------------------------------
# Vocabulary-specific lookups
# ---------------------------------------------------------------------------

def lookup_classification(text: Optional[str]) -> Optional[ControlEntry]:
    """Exact classification lookup by banner name (SECRET, TOP SECRET, ...)."""
    return classification_levels().lookup_by_banner_name(text)


def lookup_classification_by_short_name(text: Optional[str]) -> Optional[ControlEntry]:
    """Exact classification lookup by short name (U, C, S, TS, ...)."""
    return classification_levels().lookup_by_portion_name(text)


def lookup_aea_type(text: str) -> Optional[ControlEntry]:
    """Prefix lookup of an AEA marking such as ``RD-CNWDI`` or ``FRD SIGMA 14``.

    Returns the first AEA type, in declaration order, with a banner or
    portion alias that starts ``text``. Raises MissingMarkingError for None.
    """
    return aea_types().match_prefix(text)
