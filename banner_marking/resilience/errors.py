#!/usr/bin/env python3
# CUI // SP-CTI
"""Banner Marking — Structured Exception Hierarchy.

Every failure raised by the marking decoders is a MarkingError. Decoding is a
pure computation, so no error in this hierarchy is ever retryable: the same
input fails the same way every time.

Usage:
    from banner_marking.resilience.errors import UnknownControlError

    raise UnknownControlError("dissem_controls", "NOFORNN")
"""


class MarkingError(Exception):
    """Base exception for all banner marking errors.

    Attributes:
        marking: The marking text (or key) that caused the error, if any.
        retryable: Always False; kept so callers can treat these errors the
            same way as other structured errors.
    """

    retryable = False

    def __init__(self, message: str, marking: str = ""):
        super().__init__(message)
        self.marking = marking


class UnknownControlError(MarkingError, ValueError):
    """Canonical key lookup failed: the key is not in the fixed vocabulary.

    Signals a programming error at the call site, not bad banner text.

    Attributes:
        registry: Name of the registry that was queried.
    """

    def __init__(self, registry: str, key: str):
        super().__init__(f"No control '{key}' in registry '{registry}'", marking=key)
        self.registry = registry


class MissingMarkingError(MarkingError, TypeError):
    """An operation that requires marking text was given None.

    Raised by the prefix-match operations and the SCI parser. The exact-match
    registry lookups return None for absent input instead.
    """

    def __init__(self, operation: str):
        super().__init__(f"{operation} requires marking text, got None")
        self.operation = operation


class ConfigurationError(MarkingError):
    """Control vocabulary configuration is missing or invalid."""

    def __init__(self, message: str, config_key: str = ""):
        super().__init__(message, marking=config_key)
        self.config_key = config_key
