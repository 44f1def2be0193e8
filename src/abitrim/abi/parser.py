"""Parser de ABIs em formato JSON."""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from abitrim.abi.models import ABI_ADAPTER, AbiItem

logger = logging.getLogger(__name__)

INVALID_ABI_MESSAGE = "ABI inválida. Verifique a entrada."


class AbiParseError(ValueError):
    """Erro ao interpretar o texto de uma ABI."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{INVALID_ABI_MESSAGE} ({detail})")


def parse_abi(text: str) -> list[AbiItem]:
    """
    Parseia o texto de uma ABI JSON.

    Args:
        text: Conteúdo JSON (uma lista de itens)

    Returns:
        Lista de itens na ordem declarada

    Raises:
        AbiParseError: Se o JSON for inválido ou algum item não tiver o
            formato esperado
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise AbiParseError(f"JSON inválido: {e.msg} na linha {e.lineno}") from e
    except RecursionError as e:
        raise AbiParseError("JSON aninhado demais") from e

    if not isinstance(data, list):
        raise AbiParseError(f"esperada uma lista de itens, recebido {type(data).__name__}")

    try:
        items = ABI_ADAPTER.validate_python(data)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise AbiParseError(f"item {location}: {first['msg']}") from e

    logger.debug("ABI parseada com %d itens", len(items))
    return items


def load_abi(path: str | Path) -> list[AbiItem]:
    """Carrega e parseia uma ABI de um arquivo JSON."""
    path = Path(path)
    return parse_abi(path.read_text(encoding="utf-8"))
