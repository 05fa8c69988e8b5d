from typing import Iterable, List

from .decision import FieldScore, FinalSettings, Setting


class SettingsAssembler:
    """
    Groups scored fields by accepted setting.

    Searchable keeps the order in which fields were scored (first
    discovery order) unless searchable_order is "sorted". Filterable
    and sortable are always sorted and unique. Displayed is reserved:
    no scoring rule assigns it, so it stays empty.
    """

    def __init__(self, searchable_order: str = "discovery"):
        self.searchable_order = searchable_order

    def assemble(self, scores: Iterable[FieldScore]) -> FinalSettings:
        searchable: List[str] = []
        filterable = set()
        sortable = set()
        displayed: List[str] = []

        for score in scores:
            if score.has(Setting.SEARCHABLE) and score.field_name not in searchable:
                searchable.append(score.field_name)
            if score.has(Setting.FILTERABLE):
                filterable.add(score.field_name)
            if score.has(Setting.SORTABLE):
                sortable.add(score.field_name)
            if score.has(Setting.DISPLAYED) and score.field_name not in displayed:
                displayed.append(score.field_name)

        if self.searchable_order == "sorted":
            searchable.sort()

        return FinalSettings(
            displayed_attributes=displayed,
            searchable_attributes=searchable,
            filterable_attributes=sorted(filterable),
            sortable_attributes=sorted(sortable),
        )
