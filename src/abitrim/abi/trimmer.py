"""Remoção heurística de itens administrativos da ABI."""

import logging

from abitrim.abi.constants import ROLE_SUFFIX, is_unused_event, is_unused_function
from abitrim.abi.models import AbiItem

logger = logging.getLogger(__name__)

_ALWAYS_REMOVED = frozenset({"constructor", "fallback", "receive"})


def should_keep(item: AbiItem) -> bool:
    """Decide se um item sobrevive ao enxugamento."""
    category = item.category

    if category in _ALWAYS_REMOVED:
        return False

    if category == "event":
        return not is_unused_event(item.name)

    if category in ("error", "function"):
        name = item.name or ""
        return not (is_unused_function(name) or name.endswith(ROLE_SUFFIX))

    return False


def trim_abi_items(items: list[AbiItem]) -> list[AbiItem]:
    """
    Remove itens administrativos e de boilerplate da ABI.

    Remove construtor, fallback e receive; eventos conhecidos de ownership,
    access control, pausable, proxy e diamond; funções e erros dessas mesmas
    categorias e qualquer função/erro terminando em ``_ROLE``.

    Args:
        items: Itens da ABI (normalmente a seleção atual)

    Returns:
        Nova lista com os itens mantidos, na ordem original
    """
    kept = [item for item in items if should_keep(item)]
    logger.debug("Enxugamento manteve %d de %d itens", len(kept), len(items))
    return kept
