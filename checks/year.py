"""Plausibility check for bibliography year fields."""

import datetime
import re
from typing import Optional

CONTAINS_FOUR_DIGIT = re.compile(r"(?:[^0-9]|^)[0-9]{4}(?:[^0-9]|$)")
ENDS_WITH_FOUR_DIGIT = re.compile(r"[0-9]{4}$")
PUNCTUATION_MARKS = re.compile(r"[(){},.;!?<>%&$]")
DIGITS = re.compile(r"[0-9]+")


def check_year(value: Optional[str], current_year: Optional[int] = None) -> Optional[str]:
    """
    Check that a value looks like a four-digit year.

    BibTeX accepts any year whose last four non-punctuation characters are
    numerals, such as "(about 1984)"; this check is stricter and wants the
    value to be the year itself.

    Args:
        value: The field value.
        current_year: Latest acceptable year. Defaults to this year.

    Returns:
        None if the value is acceptable or blank, otherwise a message.
    """
    if value is None or not value.strip():
        return None

    if current_year is None:
        current_year = datetime.date.today().year

    if not CONTAINS_FOUR_DIGIT.search(value.strip()):
        return "should contain a four digit number"

    if not ENDS_WITH_FOUR_DIGIT.search(PUNCTUATION_MARKS.sub("", value)):
        return "last four nonpunctuation characters should be numerals"

    if not value[0].isdigit():
        return "First character should be numeral"

    if not DIGITS.fullmatch(value):
        return "Not a year"
    year = int(value)

    if year > current_year:
        return "Year should be smaller or equal then actual year"

    return None
