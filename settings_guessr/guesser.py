# ==============================================
# SettingsGuesser: Orchestrator
# ==============================================
#
# PURPOSE:
#   Ties the pieces together into a single pipeline. Users
#   interact with this class (or the guess() shortcut) only.
#
#   ┌────────────────────────────────────────────────┐
#   │                 SettingsGuesser                │
#   │                                                │
#   │   raw bytes ──► DocumentReader  (ingest/)      │
#   │                      │ documents               │
#   │                      ▼                         │
#   │   FieldAccumulator.push()       (analysis/)    │
#   │     Flattener → FieldStats                     │
#   │                      │ finish()                │
#   │                      ▼                         │
#   │   FieldScorer → SettingsAssembler              │
#   │                      │                         │
#   │                      ▼                         │
#   │                FinalSettings                   │
#   └────────────────────────────────────────────────┘
#
# CLASS: SettingsGuesser
# ----------------------
#   - __init__(config: AppConfig | None = None, searchable_order: str | None = None)
#   - ingest(document: dict) -> None
#   - ingest_batch(documents: list[dict]) -> None
#   - ingest_buffer(buffer: bytes | str) -> int
#   - finish() -> FinalSettings
#   - get_field_scores() -> dict[str, FieldScore]
#   - get_status() -> dict
#
# FUNCTION:
# ---------
#   - guess(buffer: bytes | str, config: AppConfig | None = None) -> FinalSettings
#       One-shot entry point over a raw buffer (array or object stream).
#
# ==============================================

from typing import Any, Dict, Iterable, Optional, Union

from settings_guessr.config import AppConfig, get_config
from settings_guessr.analysis import (
    ClassifierRules,
    FieldAccumulator,
    FieldScore,
    FieldScorer,
    FinalSettings,
    ScoringThresholds,
    SettingsAssembler,
)
from settings_guessr.ingest import DocumentReader


class SettingsGuesser:
    """
    Main pipeline: documents in, search settings out.
    """

    def __init__(self, config: Optional[AppConfig] = None, searchable_order: Optional[str] = None):
        """
        Initialize the pipeline with all components.

        Args:
            config: Application configuration. If None, loads from environment.
            searchable_order: Overrides config.output.searchable_order.
        """
        self._config = config or get_config()

        # The rule table is built once and shared by every field
        self._rules = ClassifierRules.default()
        self._thresholds = ScoringThresholds.from_config(self._config.scoring)
        self._scorer = FieldScorer(self._rules, self._thresholds)
        self._assembler = SettingsAssembler(
            searchable_order or self._config.output.searchable_order
        )
        self._reader = DocumentReader()
        self._accumulator = FieldAccumulator(self._scorer, self._assembler)

        self._settings: Optional[FinalSettings] = None

    def ingest(self, document: Dict[str, Any]) -> None:
        """
        Observe a single decoded document.

        Args:
            document: A JSON object.
        """
        self._accumulator.push(document)

    def ingest_batch(self, documents: Iterable[Dict[str, Any]]) -> None:
        for document in documents:
            self._accumulator.push(document)

    def ingest_buffer(self, buffer: Union[bytes, str]) -> int:
        """
        Decode a raw buffer and observe every document in it.

        The whole buffer is decoded before anything is observed, so a
        bad document leaves the guesser untouched.

        Returns:
            Number of documents ingested from this buffer
        """
        documents = self._reader.read_all(buffer)
        self.ingest_batch(documents)
        return len(documents)

    def finish(self) -> FinalSettings:
        """
        Score every observed field. Can only be called once.

        Returns:
            The final settings.
        """
        self._settings = self._accumulator.finish()
        return self._settings

    def get_field_scores(self) -> Dict[str, FieldScore]:
        """Per-field scores, empty until finish() ran."""
        return dict(self._accumulator.field_scores)

    def get_status(self) -> dict:
        return {
            "documents_ingested": self._accumulator.total_documents,
            "fields_discovered": self._accumulator.get_field_count(),
            "finished": self._accumulator.finished,
            "fields_scored": len(self._accumulator.field_scores),
        }


def guess(buffer: Union[bytes, str], config: Optional[AppConfig] = None) -> FinalSettings:
    """
    Guess the search settings of a raw document buffer.

    Args:
        buffer: A JSON array of objects, or a stream of concatenated objects

    Returns:
        FinalSettings for the documents in the buffer

    Raises:
        EmptyInput: the buffer holds no JSON value
        InvalidDocument: a document is not a JSON object
    """
    guesser = SettingsGuesser(config)
    guesser.ingest_buffer(buffer)
    return guesser.finish()
