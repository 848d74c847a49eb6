# CUI // SP-CTI
"""Structured errors for the banner marking decoders."""
from banner_marking.resilience.errors import (  # noqa: F401
    ConfigurationError,
    MarkingError,
    MissingMarkingError,
    UnknownControlError,
)
