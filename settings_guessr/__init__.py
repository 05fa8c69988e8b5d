# ==============================================
# Settings Guessr
# ==============================================
#
# Infers, from a sample of JSON documents, which fields a search
# engine should make searchable, filterable and sortable.
#
# Package Structure:
#
# settings_guessr/
# ├── normalization/   # Flatten documents, value kinds, entropy
# ├── analysis/        # Accumulate per-field values, score, assemble
# ├── ingest/          # Input sources and document decoding
# ├── config.py        # Configuration management
# ├── errors.py        # Exception hierarchy
# ├── guesser.py       # SettingsGuesser orchestrator + guess()
# └── cli.py           # Command line entry point
#
# ==============================================

__version__ = "0.1.0"

from settings_guessr.errors import (  # noqa: E402
    SettingsGuessrError,
    EmptyInput,
    InvalidDocument,
    SourceUnavailable,
    AccumulatorConsumed,
)
from settings_guessr.analysis import FieldAccumulator, FinalSettings, Setting  # noqa: E402
from settings_guessr.guesser import SettingsGuesser, guess  # noqa: E402

__all__ = [
    "__version__",
    "SettingsGuessrError",
    "EmptyInput",
    "InvalidDocument",
    "SourceUnavailable",
    "AccumulatorConsumed",
    "FieldAccumulator",
    "FinalSettings",
    "Setting",
    "SettingsGuesser",
    "guess",
]
