# ==============================================
# NORMALIZATION
# ==============================================
#
# Turns raw documents into flat (field path → leaf value) pairs
# and provides the value-level helpers the analysis uses.
#
# Modules:
# --------
# - type_detector.py → JSON kind of a value, canonical identity key
# - flattener.py     → Nested document → dot-notation fields
# - entropy.py       → Shannon entropy helpers
#
# ==============================================

from .type_detector import TypeDetector
from .flattener import Flattener
from .entropy import shannon_entropy, char_entropy, value_entropy

__all__ = ["TypeDetector", "Flattener", "shannon_entropy", "char_entropy", "value_entropy"]
