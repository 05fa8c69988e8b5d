# ==============================================
# Decision (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of scoring, and the
#   thresholds that control how scores turn into settings.
#
# ENUMS:
# ------
# - Setting(Enum): DISPLAYED, SEARCHABLE, FILTERABLE, SORTABLE
#     Capability tags. Not exclusive, a field may carry several.
#
# CLASSES:
# --------
# - FieldScore (dataclass)
#     The scoring result for a single field: the three signed
#     scores, the occurrence total, the entropy aggregates and
#     the accepted settings.
#
# - ScoringThresholds (dataclass)
#     Acceptance percentage, update_by divisor and entropy bands.
#
# - FinalSettings (dataclass)
#     Accepted fields grouped by setting. This is what gets printed.
#
# ==============================================

from enum import Enum
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple

from settings_guessr.config import ScoringConfig


class Setting(Enum):
    """
    Capability tag a search engine uses to decide how to treat a field.

    - DISPLAYED: returned in results (reserved, never assigned by scoring)
    - SEARCHABLE: full-text searched
    - FILTERABLE: usable in filter expressions / facets
    - SORTABLE: usable as a sort criterion
    """
    DISPLAYED = "displayed"
    SEARCHABLE = "searchable"
    FILTERABLE = "filterable"
    SORTABLE = "sortable"


@dataclass
class FieldScore:
    """
    Scoring result for a single field.

    Scores are signed integers; a percentage is score / total * 100.
    """

    field_name: str
    total: int = 0  # Sum of all observed value counts

    # --- Signed scores ---
    searchable: int = 0
    filterable: int = 0
    sortable: int = 0

    # --- Entropy aggregates ---
    dist_entropy: float = 0.0  # Distribution of distinct string occurrences
    intra_entropy: float = 0.0  # Mean per-value character entropy
    concat_entropy: float = 0.0  # Character entropy of all distinct strings

    settings: List[Setting] = field(default_factory=list)

    def percent(self, score: int) -> float:
        if self.total == 0:
            return 0.0
        return score / self.total * 100

    @property
    def searchable_percent(self) -> float:
        return self.percent(self.searchable)

    @property
    def filterable_percent(self) -> float:
        return self.percent(self.filterable)

    @property
    def sortable_percent(self) -> float:
        return self.percent(self.sortable)

    def has(self, setting: Setting) -> bool:
        return setting in self.settings

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize the score for the --stats output.

        Returns:
            A JSON-serializable dictionary representation
        """
        return {
            "total": self.total,
            "scores": {
                "searchable": self.searchable,
                "filterable": self.filterable,
                "sortable": self.sortable,
            },
            "percentages": {
                "searchable": round(self.searchable_percent, 2),
                "filterable": round(self.filterable_percent, 2),
                "sortable": round(self.sortable_percent, 2),
            },
            "entropy": {
                "distribution": round(self.dist_entropy, 4),
                "intra_value": round(self.intra_entropy, 4),
                "concatenated": round(self.concat_entropy, 4),
            },
            "settings": [s.value for s in self.settings],
        }


@dataclass
class ScoringThresholds:
    """
    Configurable thresholds that control the scoring logic.

    Bands are half-open [low, high) intervals.
    """

    accept_percent: float = 80.0
    """A setting is accepted when its percentage is strictly above this."""

    update_divisor: int = 20
    """update_by = total // update_divisor, the step of the name and entropy nudges."""

    # --- Bands favouring Searchable ---
    concat_band: Tuple[float, float] = (4.0, 5.5)
    intra_band: Tuple[float, float] = (3.0, 4.0)
    dist_band: Tuple[float, float] = (12.0, 20.0)

    # --- Ceilings favouring Filterable + Sortable ---
    concat_ceiling: float = 4.85
    intra_ceiling: float = 2.85
    dist_ceiling: float = 13.0

    def __post_init__(self):
        if self.update_divisor <= 0:
            raise ValueError(f"update_divisor must be positive, got {self.update_divisor}")

    @classmethod
    def from_config(cls, config: Optional[ScoringConfig] = None) -> "ScoringThresholds":
        if config is None:
            return cls()
        return cls(
            accept_percent=config.accept_percent,
            update_divisor=config.update_divisor,
        )


@dataclass
class FinalSettings:
    """Accepted fields grouped by setting."""

    displayed_attributes: List[str] = field(default_factory=list)
    searchable_attributes: List[str] = field(default_factory=list)
    filterable_attributes: List[str] = field(default_factory=list)
    sortable_attributes: List[str] = field(default_factory=list)

    def attributes(self, setting: Setting) -> List[str]:
        return getattr(self, f"{setting.value}_attributes")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "displayed_attributes": list(self.displayed_attributes),
            "searchable_attributes": list(self.searchable_attributes),
            "filterable_attributes": list(self.filterable_attributes),
            "sortable_attributes": list(self.sortable_attributes),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinalSettings":
        return cls(
            displayed_attributes=list(data.get("displayed_attributes", [])),
            searchable_attributes=list(data.get("searchable_attributes", [])),
            filterable_attributes=list(data.get("filterable_attributes", [])),
            sortable_attributes=list(data.get("sortable_attributes", [])),
        )
