# ==============================================
# FieldStats
# ==============================================
#
# PURPOSE:
#   Hold every distinct value observed for a single field, with
#   how many times each was seen. This is the "evidence" that the
#   scorer uses to make decisions.
#
# CLASS: ObservedValue (dataclass)
# --------------------------------
#   - value: Any        → The leaf JSON value (scalar or array)
#   - entropy: float    → Computed once, on first insertion
#   - count: int        → How many times this exact value was pushed
#
# CLASS: FieldStats (dataclass)
# -----------------------------
#   Attributes:
#   -----------
#   - name: str                           → Flattened field path
#   - values: dict[str, ObservedValue]    → Canonical JSON text → record
#
#   Computed Properties:
#   --------------------
#   - total -> int
#       Sum of all observed value counts.
#
#   - string_frequencies -> Counter
#       One tick per distinct value occurrence of each string, bare or
#       inside an array.
#
#   - dist_entropy -> float
#       Shannon entropy of string_frequencies.
#
#   - intra_entropy -> float
#       Mean entropy of the values that carry any (entropy > 0).
#
#   - concat_entropy -> float
#       Character entropy of all distinct strings concatenated.
#
#   Methods:
#   --------
#   - push(value: Any) -> ObservedValue
#       Count one more occurrence of value.
#
# ==============================================

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator

from settings_guessr.normalization import TypeDetector, char_entropy, shannon_entropy, value_entropy


@dataclass
class ObservedValue:
    """A deduplicated value of a field and its occurrence count."""
    value: Any
    entropy: float = 0.0
    count: int = 0


@dataclass
class FieldStats:
    """
    Holds the distinct values observed for a single field across many documents.

    Two values are the same when their canonical JSON text is the same,
    so 1, 1.0 and true are three different values.
    """

    name: str  # The flattened field path (e.g., "metadata.sensor_data.version")
    values: Dict[str, ObservedValue] = field(default_factory=dict)

    # ======================================
    # Update logic
    # ======================================
    def push(self, value: Any) -> ObservedValue:
        """
        Record one occurrence of a value.

        Args:
            value: A flattened leaf value

        Returns:
            The ObservedValue that now accounts for this occurrence
        """
        key = TypeDetector.canonical_key(value)

        observed = self.values.get(key)
        if observed is None:
            # Entropy is only ever computed for the first occurrence
            observed = ObservedValue(value=value, entropy=value_entropy(value))
            self.values[key] = observed

        observed.count += 1
        return observed

    def __iter__(self) -> Iterator[ObservedValue]:
        return iter(self.values.values())

    def __len__(self) -> int:
        return len(self.values)

    # ======================================
    # Computed properties
    # ======================================
    @property
    def total(self) -> int:
        return sum(observed.count for observed in self.values.values())

    @property
    def string_frequencies(self) -> Counter:
        frequencies: Counter = Counter()
        for observed in self.values.values():
            kind = TypeDetector.detect(observed.value)
            if kind == TypeDetector.STRING:
                frequencies[observed.value] += 1
            elif kind == TypeDetector.ARRAY:
                for item in observed.value:
                    if isinstance(item, str):
                        frequencies[item] += 1
        return frequencies

    @property
    def dist_entropy(self) -> float:
        return shannon_entropy(self.string_frequencies.values())

    @property
    def intra_entropy(self) -> float:
        entropies = [observed.entropy for observed in self.values.values() if observed.entropy > 0]
        if not entropies:
            return 0.0
        return sum(entropies) / len(entropies)

    @property
    def concat_entropy(self) -> float:
        return char_entropy("".join(self.string_frequencies))
