"""Detalhes de um item da ABI para listagem no terminal."""

from dataclasses import dataclass

from abitrim.abi.identity import get_item_id
from abitrim.abi.models import AbiItem, AbiParameter

NO_PARAMS = "nenhum"


@dataclass
class ItemDetails:
    """Campos de exibição de um item."""

    item_id: str
    tag: str
    name: str
    mutability: str | None
    inputs: str
    outputs: str | None  # None para eventos e erros


def describe_params(params: tuple[AbiParameter, ...]) -> str:
    """Formata parâmetros como ``nome: tipo, ...``."""
    if not params:
        return NO_PARAMS
    return ", ".join(f"{p.name or ''}: {p.type}" for p in params)


def describe_item(item: AbiItem) -> ItemDetails:
    """Monta os detalhes de exibição de um item."""
    outputs: str | None = None
    if item.category not in ("event", "error"):
        outputs = describe_params(item.outputs)

    return ItemDetails(
        item_id=get_item_id(item),
        tag=item.category.upper(),
        name=item.name or "",
        mutability=item.state_mutability,
        inputs=describe_params(item.inputs),
        outputs=outputs,
    )
