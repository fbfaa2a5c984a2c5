"""
Shared text-cleaning helpers for GTFS labels (routes, headsigns, stops).

Every helper is a pure function over a string. They are written so that
running one twice gives the same result as running it once.
"""
import re
from typing import Iterable


# Whole words only; the surrounding characters are left in place
CLEAN_AND = re.compile(r'(?<!\w)and(?!\w)', re.IGNORECASE)
CLEAN_AND_REPLACEMENT = '&'

CLEAN_AT = re.compile(r'(?<!\w)at(?!\w)', re.IGNORECASE)
CLEAN_AT_REPLACEMENT = '/'

re_ends_with_via = re.compile(r'( via .*$)', re.IGNORECASE)
re_starts_with_to = re.compile(r'(^.* to )', re.IGNORECASE)

re_clean_slashes = re.compile(r'\s*/\s*')
re_clean_open_parenthesis = re.compile(r'\s*\(\s*')
re_clean_close_parenthesis = re.compile(r'\s*\)\s*')
re_clean_spaces = re.compile(r'\s+')
re_word_start = re.compile(r"(?<![\w'’])([a-z])")
re_uppercase_word = re.compile(r'\b[A-Z]{2,}\b')

_ORDINALS = {
    'first': '1st',
    'second': '2nd',
    'third': '3rd',
    'fourth': '4th',
    'fifth': '5th',
    'sixth': '6th',
    'seventh': '7th',
    'eighth': '8th',
    'ninth': '9th',
    'tenth': '10th',
}
re_ordinal_words = re.compile(r'\b(' + '|'.join(_ORDINALS) + r')\b', re.IGNORECASE)

# Abbreviation -> full street type
_STREET_TYPES = {
    'st': 'Street',
    'ave': 'Avenue',
    'av': 'Avenue',
    'rd': 'Road',
    'dr': 'Drive',
    'blvd': 'Boulevard',
    'cres': 'Crescent',
    'hwy': 'Highway',
    'pkwy': 'Parkway',
    'pl': 'Place',
    'ln': 'Lane',
    'ct': 'Court',
}
re_street_types = re.compile(r'\b(' + '|'.join(_STREET_TYPES) + r')\b\.?', re.IGNORECASE)


def normalize_uppercase_words(text: str, preserved: Iterable[str] = ()) -> str:
    """
    Title-case every ALL-CAPS word of two letters or more.

    Words listed in ``preserved`` (acronyms such as exchange or university
    abbreviations) keep their upper case. Single letters are left alone so
    compass tokens like "W" survive. Works per word, so mixed-case labels
    such as "EXCHANGE to WOODGROVE" are normalized too.

    Examples:
        "EXCHANGE to WOODGROVE" -> "Exchange to Woodgrove"
        "BC FERRIES" with preserved {"BC"} -> "BC Ferries"
    """
    preserved_words = {word.upper() for word in preserved}

    def _replace(match: re.Match) -> str:
        word = match.group(0)
        if word in preserved_words:
            return word
        return word.capitalize()

    return re_uppercase_word.sub(_replace, text)


def keep_to_and_remove_via(text: str) -> str:
    """Drop a trailing "via ..." and everything up to the last " to "."""
    text = re_ends_with_via.sub('', text)
    return re_starts_with_to.sub('', text)


def clean_slashes(text: str) -> str:
    return re_clean_slashes.sub(' / ', text)


def clean_parentheses(text: str) -> str:
    text = re_clean_open_parenthesis.sub(' (', text)
    return re_clean_close_parenthesis.sub(') ', text)


def clean_numbers(text: str) -> str:
    return re_ordinal_words.sub(lambda m: _ORDINALS[m.group(1).lower()], text)


def clean_street_types(text: str) -> str:
    return re_street_types.sub(lambda m: _STREET_TYPES[m.group(1).lower()], text)


def clean_label(text: str) -> str:
    """Collapse whitespace, trim and upper-case the first letter of each word."""
    text = re_clean_spaces.sub(' ', text).strip()
    return re_word_start.sub(lambda m: m.group(1).upper(), text)
