# ==============================================
# Entropy helpers
# ==============================================
#
# Shannon entropy (base 2) is the diversity measure used at three
# granularities by the scorer:
#   - characters inside one string
#   - distinct values across a field
#   - characters of all distinct strings of a field, concatenated
#
# ==============================================

import math
from collections import Counter
from typing import Any, Iterable

from .type_detector import TypeDetector


def shannon_entropy(counts: Iterable[int]) -> float:
    """
    Entropy of the distribution described by raw occurrence counts.

    Args:
        counts: Occurrence count of each outcome

    Returns:
        -sum(p * log2(p)), 0.0 for an empty distribution
    """
    counts = [c for c in counts if c > 0]
    total = sum(counts)
    if total == 0:
        return 0.0

    entropy = 0.0
    for count in counts:
        p = count / total
        entropy += p * math.log2(1 / p)
    return entropy


def char_entropy(text: str) -> float:
    """Entropy of the character distribution of a string."""
    return shannon_entropy(Counter(text).values())


def value_entropy(value: Any) -> float:
    """
    Entropy carried by one observed value.

    Strings use their character entropy, arrays the mean character
    entropy of their string elements. Everything else is 0.
    """
    kind = TypeDetector.detect(value)

    if kind == TypeDetector.STRING:
        return char_entropy(value)

    if kind == TypeDetector.ARRAY:
        strings = [item for item in value if isinstance(item, str)]
        if not strings:
            return 0.0
        return sum(char_entropy(s) for s in strings) / len(strings)

    return 0.0
