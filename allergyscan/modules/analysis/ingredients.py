"""Turning OCR text into ingredient strings and matching them against allergy names."""
import re
from typing import List, Sequence

_LABEL_PREFIX = re.compile(r"ingredients:", re.IGNORECASE)
_DELIMITERS = re.compile(r"[,;:]")
_LETTER = re.compile(r"[A-Za-z]")


def extract_ingredients(text: str) -> List[str]:
    """Split label text on , ; : into trimmed fragments longer than one character."""
    text = _LABEL_PREFIX.sub("", text, count=1)
    fragments = (item.strip() for item in _DELIMITERS.split(text))
    return [item for item in fragments if len(item) > 1]


def has_alphabetic_content(fragment: str) -> bool:
    return bool(_LETTER.search(fragment))


def looks_like_ingredient_list(ingredients: Sequence[str]) -> bool:
    """False when nothing was extracted or no fragment contains a letter."""
    return any(has_alphabetic_content(item) for item in ingredients)


def match_allergies(ingredients: Sequence[str], allergies: Sequence[str]) -> List[str]:
    """Allergy names found as a case-insensitive substring of at least one ingredient.

    Keeps the order of `allergies`, including repeated names.
    """
    lowered = [item.lower() for item in ingredients]
    matched = []
    for allergy in allergies:
        key = allergy.lower()
        if key and any(key in item for item in lowered):
            matched.append(allergy)
    return matched


def ingredient_matches(ingredient: str, allergies: Sequence[str]) -> bool:
    """True if this single ingredient contains any of the allergy names."""
    lowered = ingredient.lower()
    return any(a and a.lower() in lowered for a in allergies)
