"""Comando trim para selecionar, enxugar e exportar uma ABI."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.markup import escape
from rich.panel import Panel

from abitrim.commands.common import console, err_console, load_session
from abitrim.render.renderer import (
    FormatOptions,
    FormatType,
    abi_stats,
    describe_selection,
    highlight_abi,
    save_abi,
)


def trim(
    abi_file: Path = typer.Argument(
        ...,
        help="Arquivo JSON com a ABI (use '-' para ler do stdin)",
        exists=True,
        readable=True,
        dir_okay=False,
        allow_dash=True,
    ),
    apply_trim: bool = typer.Option(
        True,
        "--trim/--no-trim",
        help="Remove funções e eventos administrativos (owner, roles, pause, ...)",
    ),
    only: Optional[list[str]] = typer.Option(
        None,
        "--only",
        help="Seleciona apenas as chaves informadas (ex: 'function-transfer(address,uint256)')",
    ),
    exclude: Optional[list[str]] = typer.Option(
        None,
        "--exclude",
        "-x",
        help="Remove uma chave da seleção (pode repetir)",
    ),
    format_type: FormatType = typer.Option(
        FormatType.JSON,
        "--format",
        "-f",
        help="Formato de saída: json (estrutural) ou human (assinaturas)",
    ),
    indent: int = typer.Option(
        2,
        "--indent",
        "-i",
        help="Espaços de indentação",
    ),
    minify: bool = typer.Option(
        False,
        "--minify",
        "-m",
        help="Gera saída compacta (sem indentação)",
    ),
    wrap: bool = typer.Option(
        True,
        "--wrap/--no-wrap",
        help="Quebra linhas longas no preview",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Arquivo ou diretório de saída (padrão: selected-abi.json / selected-abi.txt)",
    ),
    stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Imprime o resultado no stdout ao invés de salvar",
    ),
    preview: bool = typer.Option(
        False,
        "--preview",
        "-p",
        help="Mostra o resultado com destaque de sintaxe no terminal",
    ),
) -> None:
    """
    Seleciona itens de uma ABI e exporta o resultado.

    Por padrão todos os itens são selecionados e o enxugamento remove
    construtor, fallback, receive e itens administrativos conhecidos.

    Exemplos:

        abitrim trim ./Token.json

        abitrim trim ./Token.json --format human --stdout

        abitrim trim ./Token.json --no-trim -x 'function-mint(address,uint256)'
    """
    try:
        options = FormatOptions(indentation=indent, minified=minify, word_wrap=wrap)
    except ValidationError as e:
        err_console.print(f"[red]Erro:[/red] Opções de formatação inválidas: {e}")
        raise typer.Exit(1)

    session = load_session(abi_file, options)
    total = len(session.items)

    # Monta a seleção
    if only:
        session.deselect_all()
        _warn_unknown(session.select(only))

    if exclude:
        _warn_unknown(session.deselect(exclude))

    removed = session.trim_selection() if apply_trim else 0

    # Imprime no stdout sem decoração
    if stdout:
        typer.echo(session.render(format_type))
        return

    if preview:
        console.print(highlight_abi(session.selected_items, format_type, options))
        console.print()

    try:
        saved_path = save_abi(session.selected_items, format_type, options, output)
    except OSError as e:
        err_console.print(f"[red]Erro ao salvar:[/red] {e}")
        raise typer.Exit(1)

    stats = abi_stats(session.selected_items, options)

    console.print(
        Panel(
            f"[green]✓[/green] ABI exportada com sucesso!\n\n"
            f"[bold]Arquivo:[/bold] {saved_path}\n"
            f"[bold]Formato:[/bold] {format_type.value}\n"
            f"[bold]Itens:[/bold] {stats.total} de {total}"
            f" ({removed} removidos pelo enxugamento)\n"
            f"[bold]{describe_selection(session.selected_items)}[/bold]\n"
            f"[bold]Tamanho:[/bold] {stats.size_kb[format_type]}KB"
            f" • {stats.chars[format_type]} caracteres",
            title="[bold blue]abitrim trim[/bold blue]",
            border_style="blue",
        )
    )


def _warn_unknown(item_ids: list[str]) -> None:
    for item_id in item_ids:
        err_console.print(
            f"[yellow]Aviso:[/yellow] chave não encontrada na ABI: {escape(item_id)}"
        )
