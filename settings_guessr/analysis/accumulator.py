# ==============================================
# FieldAccumulator
# ==============================================
#
# PURPOSE:
#   Observe documents one at a time and accumulate per-field
#   statistics (FieldStats). This is the "observation engine":
#   it watches data and builds evidence. finish() then hands
#   every field to the scorer and assembles the final settings.
#
# CLASS: FieldAccumulator
# -----------------------
#   Stateful, single use:
#     created empty → push() once per document → finish() exactly once.
#
#   Constructor:
#   ------------
#   - __init__(scorer: FieldScorer, assembler: SettingsAssembler,
#              flattener: Flattener)
#
#   Attributes:
#   -----------
#   - stats: dict[str, FieldStats]         → Per field, in discovery order
#   - total_documents: int                 → Documents pushed so far
#   - field_scores: dict[str, FieldScore]  → Filled by finish()
#
#   Methods:
#   --------
#   - push(document: dict) -> None
#       Flatten the document, then push_value() every leaf.
#
#   - push_value(field_name: str, value: Any) -> None
#       Count one occurrence of value for field_name.
#
#   - finish() -> FinalSettings
#       Score every field and assemble the result. Consumes the
#       accumulator: any later push()/finish() raises AccumulatorConsumed.
#
# ==============================================

import logging
from typing import Any, Dict, Optional

from settings_guessr.errors import AccumulatorConsumed, InvalidDocument
from settings_guessr.normalization import Flattener
from .assembler import SettingsAssembler
from .decision import FieldScore, FinalSettings
from .field_stats import FieldStats
from .scorer import FieldScorer

logger = logging.getLogger(__name__)


class FieldAccumulator:
    """
    Accumulates the distinct values of every field across a document sample.
    """

    def __init__(
        self,
        scorer: Optional[FieldScorer] = None,
        assembler: Optional[SettingsAssembler] = None,
        flattener: Optional[Flattener] = None
    ):
        self.scorer = scorer or FieldScorer()
        self.assembler = assembler or SettingsAssembler()
        self.flattener = flattener or Flattener()
        self.stats: Dict[str, FieldStats] = {}  # field path → FieldStats
        self.total_documents: int = 0
        self.field_scores: Dict[str, FieldScore] = {}
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def push(self, document: Dict[str, Any]) -> None:
        """
        Observe one document.

        Args:
            document: A decoded JSON object

        Raises:
            InvalidDocument: document is not a JSON object
            AccumulatorConsumed: finish() was already called
        """
        self._ensure_open()
        if not isinstance(document, dict):
            raise InvalidDocument(
                f"expected a JSON object, got {type(document).__name__}",
                self.total_documents,
            )

        for key, value in self.flattener.flatten(document).items():
            self.push_value(key, value)

        self.total_documents += 1

    def push_value(self, field_name: str, value: Any) -> None:
        self._ensure_open()

        if field_name not in self.stats:
            self.stats[field_name] = FieldStats(name=field_name)

        self.stats[field_name].push(value)

    def finish(self) -> FinalSettings:
        """
        Score every field and group them into the final settings.

        Returns:
            FinalSettings for the whole sample
        """
        self._ensure_open()
        self._finished = True

        for field_name, field_stats in self.stats.items():
            self.field_scores[field_name] = self.scorer.score(field_stats)

        settings = self.assembler.assemble(self.field_scores.values())
        logger.info(
            "scored %d fields from %d documents (%d searchable, %d filterable, %d sortable)",
            len(self.field_scores),
            self.total_documents,
            len(settings.searchable_attributes),
            len(settings.filterable_attributes),
            len(settings.sortable_attributes),
        )
        return settings

    def get_stats(self) -> Dict[str, FieldStats]:
        return self.stats

    def get_field_count(self) -> int:
        """Number of distinct field paths observed."""
        return len(self.stats)

    def _ensure_open(self) -> None:
        if self._finished:
            raise AccumulatorConsumed()
