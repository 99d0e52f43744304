"""
Text codecs: parsing decimal literals and rendering DecimalValue.
"""

from bigdec.core.text.formatting import (
    stringify,
    to_exponential,
    to_fixed,
    to_number,
    to_precision,
    to_string,
    value_of,
)
from bigdec.core.text.parsing import NUMERIC_PATTERN, number_to_text, parse_number, parse_text

__all__ = [
    # Parsing
    "NUMERIC_PATTERN",
    "parse_text",
    "parse_number",
    "number_to_text",
    # Formatting
    "stringify",
    "to_string",
    "value_of",
    "to_fixed",
    "to_exponential",
    "to_precision",
    "to_number",
]
