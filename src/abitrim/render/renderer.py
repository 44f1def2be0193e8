"""Renderizador da seleção de ABI para JSON ou formato human-readable."""

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from rich.syntax import Syntax
from rich.text import Text

from abitrim.abi.models import AbiItem, item_to_dict
from abitrim.render.formatter import format_abi

logger = logging.getLogger(__name__)


class FormatType(str, Enum):
    """Formatos de saída suportados."""

    JSON = "json"
    HUMAN = "human"


# Nome padrão do arquivo de saída para cada formato
DEFAULT_FILENAMES: dict[FormatType, str] = {
    FormatType.JSON: "selected-abi.json",
    FormatType.HUMAN: "selected-abi.txt",
}


class FormatOptions(BaseModel):
    """Opções cosméticas de formatação. Não alteram quais itens são exportados."""

    model_config = ConfigDict(frozen=True)

    indentation: int = Field(default=2, ge=0, le=8, description="Espaços de indentação")
    minified: bool = Field(default=False, description="Gera JSON sem espaços")
    word_wrap: bool = Field(default=True, description="Quebra linhas longas no preview")


def _dumps(data: list, options: FormatOptions) -> str:
    # Indentação 0 equivale a minificado (mesmo comportamento do JSON.stringify)
    if options.minified or options.indentation == 0:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    return json.dumps(data, indent=options.indentation, ensure_ascii=False)


def render_abi(
    items: list[AbiItem],
    format_type: FormatType = FormatType.JSON,
    options: FormatOptions | None = None,
) -> str:
    """
    Renderiza os itens selecionados para texto.

    Args:
        items: Itens selecionados
        format_type: JSON (estrutural) ou HUMAN (assinaturas)
        options: Opções de formatação (padrão: indentação 2)

    Returns:
        Texto serializado. No formato HUMAN é uma lista JSON de assinaturas.
    """
    options = options or FormatOptions()

    if format_type == FormatType.JSON:
        data = [item_to_dict(item) for item in items]
    else:
        data = format_abi(items)

    return _dumps(data, options)


def highlight_abi(
    items: list[AbiItem],
    format_type: FormatType = FormatType.JSON,
    options: FormatOptions | None = None,
) -> Syntax | Text:
    """
    Gera o preview do texto renderizado para exibição no terminal.

    O word wrap só afeta a exibição; o texto é o mesmo de ``render_abi``.
    Conteúdo minificado não recebe destaque de sintaxe.
    """
    options = options or FormatOptions()
    content = render_abi(items, format_type, options)

    if options.minified:
        return Text(content, no_wrap=not options.word_wrap, overflow="fold")
    # O formato human também é uma lista JSON (de assinaturas)
    return Syntax(content, "json", word_wrap=options.word_wrap, theme="ansi_dark")


@dataclass
class AbiStats:
    """Estatísticas da seleção e do tamanho de cada formato."""

    type_counts: list[tuple[str, int]] = field(default_factory=list)
    functions: int = 0
    events: int = 0
    size_kb: dict[FormatType, str] = field(default_factory=dict)
    chars: dict[FormatType, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(count for _, count in self.type_counts)


def count_by_type(items: list[AbiItem]) -> list[tuple[str, int]]:
    """Conta itens por categoria, do mais frequente para o menos frequente."""
    counts: dict[str, int] = {}
    for item in items:
        counts[item.category] = counts.get(item.category, 0) + 1
    return sorted(counts.items(), key=lambda pair: pair[1], reverse=True)


def abi_stats(items: list[AbiItem], options: FormatOptions | None = None) -> AbiStats:
    """Calcula contagens e tamanho (KB e caracteres) dos dois formatos."""
    options = options or FormatOptions()
    stats = AbiStats(
        type_counts=count_by_type(items),
        functions=sum(1 for item in items if item.category == "function"),
        events=sum(1 for item in items if item.category == "event"),
    )

    for format_type in FormatType:
        content = render_abi(items, format_type, options)
        stats.size_kb[format_type] = f"{len(content.encode('utf-8')) / 1024:.2f}"
        stats.chars[format_type] = len(content)

    return stats


def describe_selection(items: list[AbiItem]) -> str:
    """
    Resumo textual da seleção.

    Exemplo: ``Selecionados: 3 functions, 1 event``
    """
    if not items:
        return "Nenhum item da ABI selecionado"

    parts = [
        f"{count} {item_type}{'s' if count > 1 else ''}"
        for item_type, count in count_by_type(items)
    ]
    return "Selecionados: " + ", ".join(parts)


def save_abi(
    items: list[AbiItem],
    format_type: FormatType = FormatType.JSON,
    options: FormatOptions | None = None,
    path: str | Path | None = None,
) -> Path:
    """
    Salva os itens renderizados em arquivo.

    Args:
        items: Itens selecionados
        format_type: Formato de saída
        options: Opções de formatação
        path: Arquivo ou diretório de destino. Se for um diretório (ou None,
            usando o diretório atual) o nome padrão do formato é usado.

    Returns:
        Caminho do arquivo gravado
    """
    target = Path(path) if path is not None else Path.cwd()
    if target.is_dir():
        target = target / DEFAULT_FILENAMES[format_type]

    content = render_abi(items, format_type, options)
    target.write_text(content, encoding="utf-8")
    logger.info("ABI salva em %s (%d itens)", target, len(items))
    return target
