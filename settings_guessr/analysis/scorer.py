# ==============================================
# FieldScorer
# ==============================================
#
# PURPOSE:
#   Takes the FieldStats of one field and turns its value
#   distribution into three signed scores (searchable, filterable,
#   sortable), then thresholds each against the field's total
#   occurrence count. This is the "brain" of the guesser.
#
# CLASS: FieldScorer
# ------------------
#   Stateless: stats in, FieldScore out. Fields never influence
#   each other, so they can be scored in any order.
#
#   Constructor:
#   ------------
#   - __init__(rules: ClassifierRules, thresholds: ScoringThresholds)
#
#   Methods:
#   --------
#   - score(stats: FieldStats) -> FieldScore
#       Applies, in order:
#
#       STEP 1: VALUE COMPOSITION
#         bool / number → filterable += w, sortable += w
#         array         → sortable -= w, then each element:
#                         number → filterable += w
#                         string → string rule with weight w
#         string        → string rule with weight w
#         (w = occurrence count of the observed value)
#
#       STEP 2: FIELD NAME
#         "id_*" / "*_id" → searchable -= 5u, filterable += u
#         "id*"  / "*id"  → searchable -= u,  filterable += u
#         (u = update_by = total // 20, both rules stack)
#
#       STEP 3: ENTROPY BANDS
#         Six tests over the concatenated, intra-value and
#         distribution entropies, each nudging by update_by.
#
#       STEP 4: THRESHOLD
#         score / total * 100 > 80 → setting accepted
#
# ==============================================

import logging
from typing import List, Optional

from settings_guessr.normalization import TypeDetector
from .decision import FieldScore, ScoringThresholds, Setting
from .field_stats import FieldStats, ObservedValue
from .rules import ClassifierRules

logger = logging.getLogger(__name__)

# A canonical UUID is 36 characters long
UUID_LENGTH = 36
PROSE_MIN_LENGTH = 100
PROSE_MIN_ALPHA_RATIO = 0.8
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class FieldScorer:
    """
    Applies heuristic rules to FieldStats to produce a FieldScore.
    """

    def __init__(
        self,
        rules: Optional[ClassifierRules] = None,
        thresholds: Optional[ScoringThresholds] = None
    ):
        """
        Initialize the scorer.

        Args:
            rules: String classification patterns. Defaults to ClassifierRules.default().
            thresholds: Acceptance and entropy thresholds. Defaults to ScoringThresholds().
        """
        self.rules = rules or ClassifierRules.default()
        self.thresholds = thresholds or ScoringThresholds()

    def score(self, stats: FieldStats) -> FieldScore:
        """
        Score a single field.

        Args:
            stats: The accumulated values of the field

        Returns:
            A FieldScore with the accepted settings filled in
        """
        result = FieldScore(field_name=stats.name, total=stats.total)

        # Nothing observed, nothing to decide
        if result.total == 0:
            return result

        for observed in stats:
            self._score_value(observed, result)

        update_by = result.total // self.thresholds.update_divisor
        self._apply_name_heuristics(stats.name, update_by, result)

        result.dist_entropy = stats.dist_entropy
        result.intra_entropy = stats.intra_entropy
        result.concat_entropy = stats.concat_entropy
        self._apply_entropy_tests(update_by, result)

        result.settings = self._accepted_settings(result)

        logger.debug(
            "field %r: total=%d searchable=%.1f%% filterable=%.1f%% sortable=%.1f%% → %s",
            result.field_name,
            result.total,
            result.searchable_percent,
            result.filterable_percent,
            result.sortable_percent,
            [s.value for s in result.settings],
        )
        return result

    # ======================================
    # Step 1: value composition
    # ======================================
    def _score_value(self, observed: ObservedValue, result: FieldScore) -> None:
        weight = observed.count
        kind = TypeDetector.detect(observed.value)

        if kind in (TypeDetector.BOOL, TypeDetector.NUMBER):
            result.filterable += weight
            result.sortable += weight

        elif kind == TypeDetector.ARRAY:
            # Arrays are never sortable
            result.sortable -= weight
            for item in observed.value:
                item_kind = TypeDetector.detect(item)
                if item_kind == TypeDetector.NUMBER:
                    result.filterable += weight
                elif item_kind == TypeDetector.STRING:
                    self._score_string(item, weight, result, bare=False)

        elif kind == TypeDetector.STRING:
            self._score_string(observed.value, weight, result, bare=True)

    def _score_string(self, text: str, weight: int, result: FieldScore, bare: bool) -> None:
        if looks_like_id(text):
            result.searchable -= weight
            result.filterable += weight
        else:
            result.searchable += weight
            if len(text) > UUID_LENGTH:
                result.searchable += weight
                result.filterable -= 2 * weight
                result.sortable -= 2 * weight
            if len(text) > PROSE_MIN_LENGTH and alpha_ratio(text) > PROSE_MIN_ALPHA_RATIO:
                result.searchable += 2 * weight

        # One flat point per distinct occurrence, whatever its count
        result.filterable += 1

        if self.rules.is_display_only(text):
            result.searchable -= 10 * weight
            result.filterable -= weight
            if bare:
                result.sortable -= 1

        if self.rules.is_filter_not_search(text):
            result.filterable += weight
            result.searchable -= 10 * weight

        if self.rules.is_sort_and_filter(text):
            result.filterable += weight
            result.sortable += weight
            result.searchable -= 10 * weight

    # ======================================
    # Step 2: field name
    # ======================================
    def _apply_name_heuristics(self, name: str, update_by: int, result: FieldScore) -> None:
        if name.startswith("id_") or name.endswith("_id"):
            result.searchable -= 5 * update_by
            result.filterable += update_by

        # Stacks with the rule above: "id_user" matches both
        if name.startswith("id") or name.endswith("id"):
            result.searchable -= update_by
            result.filterable += update_by

    # ======================================
    # Step 3: entropy bands
    # ======================================
    def _apply_entropy_tests(self, update_by: int, result: FieldScore) -> None:
        t = self.thresholds

        favour_searchable = (
            _in_band(result.concat_entropy, t.concat_band),
            _in_band(result.intra_entropy, t.intra_band),
            _in_band(result.dist_entropy, t.dist_band),
        )
        for matched in favour_searchable:
            if matched:
                result.searchable += update_by
                result.filterable -= update_by
                result.sortable -= update_by
            else:
                result.searchable -= update_by

        favour_filtering = (
            result.concat_entropy < t.concat_ceiling,
            result.intra_entropy < t.intra_ceiling,
            result.dist_entropy < t.dist_ceiling,
        )
        for matched in favour_filtering:
            if matched:
                result.filterable += update_by
                result.sortable += update_by
            else:
                result.searchable -= update_by

    # ======================================
    # Step 4: threshold
    # ======================================
    def _accepted_settings(self, result: FieldScore) -> List[Setting]:
        candidates = (
            (Setting.SEARCHABLE, result.searchable),
            (Setting.FILTERABLE, result.filterable),
            (Setting.SORTABLE, result.sortable),
        )
        return [
            setting for setting, score in candidates
            if result.percent(score) > self.thresholds.accept_percent
        ]


def looks_like_id(text: str) -> bool:
    """True when hex digits outnumber alphabetic characters."""
    if not text:
        return False
    hex_count = sum(1 for c in text if c in HEX_DIGITS)
    alpha_count = sum(1 for c in text if c.isalpha())
    return hex_count > alpha_count


def alpha_ratio(text: str) -> float:
    if not text:
        return 0.0
    return sum(1 for c in text if c.isalpha()) / len(text)


def _in_band(value: float, band) -> bool:
    low, high = band
    return low <= value < high
