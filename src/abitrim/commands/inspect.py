"""Comando inspect para listar os itens de uma ABI."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from abitrim.abi.constants import EXCLUSION_CATEGORIES
from abitrim.abi.filters import ItemFilters
from abitrim.abi.identity import get_item_id
from abitrim.abi.models import ITEM_TYPES
from abitrim.abi.trimmer import trim_abi_items
from abitrim.commands.common import console, err_console, load_session
from abitrim.render.details import describe_item
from abitrim.render.renderer import describe_selection

# Cores por tipo de item
TYPE_STYLES = {
    "function": "cyan",
    "event": "magenta",
    "error": "red",
    "constructor": "yellow",
    "fallback": "yellow",
    "receive": "yellow",
}


def inspect(
    abi_file: Path = typer.Argument(
        ...,
        help="Arquivo JSON com a ABI (use '-' para ler do stdin)",
        exists=True,
        readable=True,
        dir_okay=False,
        allow_dash=True,
    ),
    item_type: Optional[str] = typer.Option(
        None,
        "--type",
        "-t",
        help=f"Mostra apenas itens de um tipo ({', '.join(ITEM_TYPES)})",
    ),
    search: Optional[str] = typer.Option(
        None,
        "--search",
        "-s",
        help="Busca no nome ou na chave do item (sem diferenciar maiúsculas)",
    ),
    show_exclusions: bool = typer.Option(
        False,
        "--show-exclusions",
        help="Mostra as listas de eventos e funções removidos pelo enxugamento",
    ),
) -> None:
    """
    Lista os itens de uma ABI com suas chaves.

    A coluna "Trim" indica se o item sobrevive ao enxugamento.

    Exemplos:

        abitrim inspect ./Token.json

        abitrim inspect ./Token.json --type event --search transfer
    """
    if item_type is not None and item_type not in ITEM_TYPES:
        err_console.print(f"[red]Erro:[/red] Tipo desconhecido: {item_type}")
        err_console.print(f"Tipos suportados: {', '.join(ITEM_TYPES)}")
        raise typer.Exit(1)

    session = load_session(abi_file)
    session.filters = ItemFilters(type=item_type, search_term=search)

    kept = {get_item_id(item) for item in trim_abi_items(session.items)}
    visible = session.visible_items

    table = Table(title=f"ABI: {abi_file.name} ({len(visible)}/{len(session.items)} itens)")
    table.add_column("Chave", style="dim", overflow="fold")
    table.add_column("Tipo")
    table.add_column("Nome", style="bold")
    table.add_column("Mutabilidade")
    table.add_column("Inputs", overflow="fold")
    table.add_column("Outputs", overflow="fold")
    table.add_column("Trim", justify="center")

    for item in visible:
        details = describe_item(item)
        style = TYPE_STYLES.get(item.category, "white")
        table.add_row(
            escape(details.item_id),
            f"[{style}]{details.tag}[/{style}]",
            escape(details.name) or "-",
            details.mutability or "-",
            escape(details.inputs),
            escape(details.outputs) if details.outputs is not None else "-",
            "[green]✓[/green]" if details.item_id in kept else "[red]✗[/red]",
        )

    console.print(table)
    console.print(f"[dim]{describe_selection(session.selected_items)}[/dim]")

    if show_exclusions:
        _show_exclusions_table()


def _show_exclusions_table() -> None:
    """Mostra as listas estáticas usadas pelo enxugamento."""
    table = Table(title="Listas de exclusão")
    table.add_column("Categoria", style="bold")
    table.add_column("Eventos")
    table.add_column("Funções")

    for category, (events, functions) in EXCLUSION_CATEGORIES.items():
        table.add_row(
            category,
            ", ".join(sorted(events)) or "-",
            ", ".join(sorted(functions)) or "-",
        )

    console.print(table)
    console.print("[dim]Funções e erros terminando em _ROLE também são removidos.[/dim]")
