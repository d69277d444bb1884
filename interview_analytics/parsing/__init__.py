"""
Parsing package: turns pasted schedule text into validated raw records.
"""

from interview_analytics.parsing.parser import parse_records
from interview_analytics.parsing.validator import validate_records

__all__ = [
    "parse_records",
    "validate_records",
]
