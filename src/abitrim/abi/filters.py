"""Filtros de exibição para itens da ABI."""

from dataclasses import dataclass

from abitrim.abi.identity import get_item_id
from abitrim.abi.models import AbiItem


@dataclass(frozen=True)
class ItemFilters:
    """Critérios de filtro. Afetam apenas o que é exibido, nunca a seleção."""

    type: str | None = None
    search_term: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.type and not self.search_term


def matches_filters(item: AbiItem, filters: ItemFilters) -> bool:
    """
    Verifica se um item passa pelos filtros.

    O tipo precisa bater exatamente; o termo de busca é comparado sem
    diferenciar maiúsculas contra o nome e contra a chave do item.
    """
    matches_type = not filters.type or item.category == filters.type
    if not matches_type:
        return False

    if not filters.search_term:
        return True

    term = filters.search_term.lower()
    return term in (item.name or "").lower() or term in get_item_id(item).lower()


def filter_items(items: list[AbiItem], filters: ItemFilters) -> list[AbiItem]:
    """Retorna os itens que passam pelos filtros, mantendo a ordem."""
    return [item for item in items if matches_filters(item, filters)]
