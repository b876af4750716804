"""Correct spaces and punctuation between CJK and half-width text.

Plain-text formatting, the individual width and spacing rules, file-type
lookup, lint/format result collection and ignore-file matching.
"""

__version__ = "1.0.0"