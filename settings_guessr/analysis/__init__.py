# ==============================================
# ANALYSIS & SCORING
# ==============================================
#
# Observes documents and decides, per field, which search
# settings it deserves.
#
# Two-step process:
#   Step 1 (Accumulation): Observe documents → distinct values per field
#   Step 2 (Scoring):      Apply heuristics on values → settings per field
#
# Modules:
# --------
# - field_stats.py  → ObservedValue / FieldStats: values seen for one field
# - accumulator.py  → FieldAccumulator: push documents, finish() once
# - rules.py        → ClassifierRules: URL/path, UUID, numeric/date patterns
# - scorer.py       → FieldScorer: stats → signed scores → settings
# - assembler.py    → SettingsAssembler: scores → FinalSettings
# - decision.py     → Setting, FieldScore, ScoringThresholds, FinalSettings
#
# ==============================================

from .field_stats import ObservedValue, FieldStats
from .decision import Setting, FieldScore, ScoringThresholds, FinalSettings
from .rules import ClassifierRules
from .scorer import FieldScorer
from .assembler import SettingsAssembler
from .accumulator import FieldAccumulator

__all__ = [
    "ObservedValue",
    "FieldStats",
    "Setting",
    "FieldScore",
    "ScoringThresholds",
    "FinalSettings",
    "ClassifierRules",
    "FieldScorer",
    "SettingsAssembler",
    "FieldAccumulator",
]
