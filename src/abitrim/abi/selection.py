"""Estado de seleção de itens de uma ABI parseada."""

import logging
from typing import Iterable

from abitrim.abi.filters import ItemFilters, filter_items
from abitrim.abi.identity import get_item_id
from abitrim.abi.models import AbiItem
from abitrim.abi.parser import AbiParseError, parse_abi
from abitrim.abi.trimmer import trim_abi_items
from abitrim.render.renderer import (
    AbiStats,
    FormatOptions,
    FormatType,
    abi_stats,
    render_abi,
)

logger = logging.getLogger(__name__)


class AbiSession:
    """
    Mantém a ABI parseada, a seleção atual e as opções de exibição.

    A seleção é um conjunto de chaves (ver ``get_item_id``) e é sempre um
    subconjunto das chaves dos itens parseados.

    Exemplo:
        session = AbiSession()
        if session.parse(text):
            session.trim_selection()
            print(session.render(FormatType.HUMAN))
    """

    def __init__(self, format_options: FormatOptions | None = None):
        self.abi_input = ""
        self.items: list[AbiItem] = []
        self.selected: set[str] = set()
        self.error = ""
        self.filters = ItemFilters()
        self.format_options = format_options or FormatOptions()

    @property
    def item_ids(self) -> list[str]:
        """Chaves dos itens parseados, na ordem da ABI."""
        return [get_item_id(item) for item in self.items]

    def parse(self, text: str | None = None) -> bool:
        """
        Parseia o texto de entrada e substitui os itens atuais.

        Em caso de sucesso todos os itens ficam selecionados. Em caso de
        erro a mensagem fica em ``self.error`` e itens e seleção são limpos.

        Returns:
            True se a ABI foi parseada com sucesso
        """
        if text is not None:
            self.abi_input = text

        try:
            items = parse_abi(self.abi_input)
        except AbiParseError as e:
            logger.warning("Falha ao parsear ABI: %s", e)
            self.error = str(e)
            self.items = []
            self.selected = set()
            return False

        self.items = items
        self.selected = set(self.item_ids)
        self.error = ""
        return True

    def reset(self) -> None:
        """Volta ao estado inicial."""
        self.abi_input = ""
        self.items = []
        self.selected = set()
        self.error = ""
        self.filters = ItemFilters()
        self.format_options = FormatOptions()

    def toggle(self, item_id: str) -> bool:
        """
        Inverte a seleção de um item.

        Returns:
            True se o item ficou selecionado

        Raises:
            KeyError: Se a chave não pertence à ABI atual
        """
        known = set(self.item_ids)
        if item_id not in known:
            raise KeyError(item_id)

        if item_id in self.selected:
            self.selected.discard(item_id)
            return False
        self.selected.add(item_id)
        return True

    def select(self, item_ids: Iterable[str]) -> list[str]:
        """Adiciona chaves à seleção. Retorna as chaves desconhecidas."""
        known = set(self.item_ids)
        item_ids = list(item_ids)
        unknown = [item_id for item_id in item_ids if item_id not in known]
        self.selected |= known.intersection(item_ids)
        return unknown

    def deselect(self, item_ids: Iterable[str]) -> list[str]:
        """Remove chaves da seleção. Retorna as chaves desconhecidas."""
        known = set(self.item_ids)
        item_ids = list(item_ids)
        self.selected -= set(item_ids)
        return [item_id for item_id in item_ids if item_id not in known]

    def select_all(self) -> None:
        self.selected = set(self.item_ids)

    def deselect_all(self) -> None:
        self.selected = set()

    def trim_selection(self) -> int:
        """
        Aplica o enxugamento sobre os itens selecionados.

        Returns:
            Quantidade de chaves removidas da seleção
        """
        before = len(self.selected)
        self.selected = {get_item_id(item) for item in trim_abi_items(self.selected_items)}
        removed = before - len(self.selected)
        logger.info("Enxugamento removeu %d itens da seleção", removed)
        return removed

    @property
    def selected_items(self) -> list[AbiItem]:
        """Itens selecionados, na ordem da ABI."""
        return [item for item in self.items if get_item_id(item) in self.selected]

    @property
    def visible_items(self) -> list[AbiItem]:
        """Itens que passam pelos filtros atuais."""
        return filter_items(self.items, self.filters)

    def render(self, format_type: FormatType = FormatType.JSON) -> str:
        """Renderiza a seleção atual com as opções de formatação da sessão."""
        return render_abi(self.selected_items, format_type, self.format_options)

    def stats(self) -> AbiStats:
        return abi_stats(self.selected_items, self.format_options)
