"""
Locale-aware sort key for display labels.

Approximates the default collation browsers use for ``localeCompare``:
characters compare by class first (whitespace, punctuation, symbols,
currency, digits, letters), then letters without regard to accents or case.
Accents break remaining ties, then case (lowercase before uppercase).
Independent of the process locale, so sort order is the same on every host.

Not a full collation: ordering between characters of the same class is by
code point, and letters of different scripts are not interleaved.
"""

import unicodedata

# Primary weight per Unicode general-category prefix; letters and
# anything unlisted sort last.
_CLASS_WEIGHTS: dict[str, int] = {
    "Z": 0,   # whitespace
    "C": 0,   # control / format
    "P": 1,   # punctuation
    "S": 2,   # symbols (math, modifier, other)
    "Sc": 3,  # currency
    "N": 4,   # digits
}
_LETTER_WEIGHT = 5


def label_sort_key(text: str) -> tuple:
    """Sort key: (class-weighted folded chars, case-folded, lowercase-first)."""
    folded = _strip_accents(text).casefold()
    primary = tuple((_char_weight(char), char) for char in folded)
    return (primary, text.casefold(), text.swapcase())


def _char_weight(char: str) -> int:
    category = unicodedata.category(char)
    if category in _CLASS_WEIGHTS:
        return _CLASS_WEIGHTS[category]
    return _CLASS_WEIGHTS.get(category[0], _LETTER_WEIGHT)


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(char for char in decomposed if not unicodedata.combining(char))
