# CUI // SP-CTI
"""Decode classification banner marking segments into structured controls."""

__version__ = "1.0.0"
