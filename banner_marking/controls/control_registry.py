#!/usr/bin/env python3
# CUI // SP-CTI
"""Fixed-vocabulary control registry.

A registry holds the entries of one control vocabulary (dissemination
controls, other dissemination controls, classification levels, AEA types).
Each entry is addressable three independent ways:

  - canonical key       (NOFORN)                            -> value_of()
  - banner-name alias   (NOFORN, NOT RELEASABLE TO FOREIGN NATIONALS)
                                                            -> lookup_by_banner_name()
  - portion-name alias  (NF)                                -> lookup_by_portion_name()

The banner and portion spaces are queried independently. A portion marking
such as NF is not a banner name, and looking it up as one returns None.

Exact lookups tolerate absent input and return None. The prefix operations
on PrefixMatcher raise MissingMarkingError for None instead; callers use the
difference to tell "no input" apart from "no match", so keep it.

Entries and registries are immutable once built and safe to share across
threads without locking.
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from banner_marking.resilience.errors import (
    ConfigurationError,
    MissingMarkingError,
    UnknownControlError,
)


@dataclass(frozen=True)
class ControlEntry:
    """One control in a vocabulary."""

    key: str
    ordinal: int
    banner_names: Tuple[str, ...]
    portion_names: Tuple[str, ...]

    @property
    def name(self) -> str:
        """Primary banner name, used for display."""
        return self.banner_names[0]

    @property
    def portion_name(self) -> str:
        return self.portion_names[0]

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "name": self.name,
            "portion_name": self.portion_name,
            "banner_names": list(self.banner_names),
            "portion_names": list(self.portion_names),
        }

    def __str__(self) -> str:
        return self.name


def _aliases(value) -> Tuple[str, ...]:
    """Accept a single alias or a list of aliases from configuration."""
    if isinstance(value, str):
        return (value,)
    return tuple(value)


class PrefixMatcher:
    """Detects a control alias at the start of an unstructured text run.

    Uses str.startswith semantics: "EXDIS-ALPHA" matches EXDIS, while
    "DISTRIBUTION" does not match "LIMITED DISTRIBUTION".
    """

    def __init__(self, entries: Iterable[ControlEntry]):
        self._entries = tuple(entries)
        self._banner_names = tuple(n for e in self._entries for n in e.banner_names)
        self._portion_names = tuple(n for e in self._entries for n in e.portion_names)

    @staticmethod
    def _require(text: Optional[str], operation: str) -> str:
        if text is None:
            raise MissingMarkingError(operation)
        return text

    def prefix_banner_match(self, text: str) -> bool:
        """True if ``text`` starts with any banner-name alias."""
        return self._require(text, "prefix_banner_match").startswith(self._banner_names)

    def prefix_portion_match(self, text: str) -> bool:
        """True if ``text`` starts with any portion-name alias."""
        return self._require(text, "prefix_portion_match").startswith(self._portion_names)

    def prefix_match(self, text: str) -> bool:
        """True if ``text`` starts with any banner-name or portion-name alias."""
        self._require(text, "prefix_match")
        return text.startswith(self._banner_names) or text.startswith(self._portion_names)

    def match(self, text: str) -> Optional[ControlEntry]:
        """Return the first entry, in declaration order, with an alias prefixing ``text``.

        Banner names of an entry are tried before its portion names.
        """
        self._require(text, "match")
        for entry in self._entries:
            if text.startswith(entry.banner_names) or text.startswith(entry.portion_names):
                return entry
        return None


class ControlRegistry:
    """Lookup engine over one fixed control vocabulary.

    Args:
        name: Registry name, used in error messages (e.g. "dissem_controls").
        entries: Entries in declaration order.

    Raises:
        ConfigurationError: if a key, banner name or portion name appears
            twice, or an entry has no aliases or an empty alias.
    """

    def __init__(self, name: str, entries: Iterable[ControlEntry]):
        self.registry_name = name
        self._entries: Tuple[ControlEntry, ...] = tuple(entries)
        self._by_key: Dict[str, ControlEntry] = {}
        self._by_banner: Dict[str, ControlEntry] = {}
        self._by_portion: Dict[str, ControlEntry] = {}

        for entry in self._entries:
            if not entry.banner_names or not entry.portion_names:
                raise ConfigurationError(
                    f"{name}: control '{entry.key}' needs at least one banner "
                    "name and one portion name",
                    config_key=entry.key,
                )
            self._index(self._by_key, entry.key, entry, "key")
            for alias in entry.banner_names:
                self._index(self._by_banner, alias, entry, "banner name")
            for alias in entry.portion_names:
                self._index(self._by_portion, alias, entry, "portion name")

        self._matcher = PrefixMatcher(self._entries)

    def _index(self, table: Dict[str, ControlEntry], alias: str,
               entry: ControlEntry, space: str) -> None:
        if not alias:
            raise ConfigurationError(
                f"{self.registry_name}: control '{entry.key}' has an empty {space}",
                config_key=entry.key,
            )
        if alias in table:
            raise ConfigurationError(
                f"{self.registry_name}: {space} '{alias}' is used by both "
                f"'{table[alias].key}' and '{entry.key}'",
                config_key=alias,
            )
        table[alias] = entry

    @classmethod
    def from_rows(cls, name: str, rows: Iterable[dict]) -> "ControlRegistry":
        """Build a registry from dict rows with key/banner_names/portion_names."""
        entries: List[ControlEntry] = []
        for ordinal, row in enumerate(rows):
            try:
                key = row["key"]
                banner_names = _aliases(row["banner_names"])
                portion_names = _aliases(row["portion_names"])
            except (KeyError, TypeError) as exc:
                raise ConfigurationError(
                    f"{name}: malformed control row #{ordinal}: {exc}",
                    config_key=str(row.get("key", "")) if isinstance(row, dict) else "",
                ) from exc
            entries.append(ControlEntry(key, ordinal, banner_names, portion_names))
        return cls(name, entries)

    # -- exact lookups -----------------------------------------------------

    def lookup_by_banner_name(self, text: Optional[str]) -> Optional[ControlEntry]:
        """Return the entry with banner alias ``text``, or None."""
        if not text:
            return None
        return self._by_banner.get(text)

    def lookup_by_portion_name(self, text: Optional[str]) -> Optional[ControlEntry]:
        """Return the entry with portion alias ``text``, or None."""
        if not text:
            return None
        return self._by_portion.get(text)

    def value_of(self, key: str) -> ControlEntry:
        """Return the entry with canonical key ``key``.

        Raises:
            UnknownControlError: ``key`` is not in this vocabulary. Matching is
                case-sensitive with no fallback.
        """
        try:
            return self._by_key[key]
        except (KeyError, TypeError):
            raise UnknownControlError(self.registry_name, key) from None

    def name(self, entry: ControlEntry) -> str:
        return entry.name

    # -- prefix matching ---------------------------------------------------

    @property
    def matcher(self) -> PrefixMatcher:
        return self._matcher

    def prefix_match(self, text: str) -> bool:
        return self._matcher.prefix_match(text)

    def prefix_banner_match(self, text: str) -> bool:
        return self._matcher.prefix_banner_match(text)

    def prefix_portion_match(self, text: str) -> bool:
        return self._matcher.prefix_portion_match(text)

    def match_prefix(self, text: str) -> Optional[ControlEntry]:
        return self._matcher.match(text)

    # -- container protocol --------------------------------------------------

    def values(self) -> Tuple[ControlEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[ControlEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def __getitem__(self, key: str) -> ControlEntry:
        return self.value_of(key)

    def __repr__(self) -> str:
        return f"ControlRegistry({self.registry_name!r}, {len(self._entries)} controls)"
