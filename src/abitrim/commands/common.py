"""Funções compartilhadas pelos comandos da CLI."""

import sys
from pathlib import Path

import typer
from rich.console import Console

from abitrim.abi.selection import AbiSession
from abitrim.render.renderer import FormatOptions

console = Console()
err_console = Console(stderr=True)


def read_source(abi_file: Path) -> str:
    """Lê a ABI de um arquivo ou do stdin (quando o caminho é ``-``)."""
    try:
        if str(abi_file) == "-":
            return sys.stdin.read()
        return abi_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        err_console.print(f"[red]Erro ao ler '{abi_file}':[/red] {e}")
        raise typer.Exit(1)


def load_session(abi_file: Path, options: FormatOptions | None = None) -> AbiSession:
    """Cria uma sessão com a ABI parseada ou encerra com erro."""
    session = AbiSession(format_options=options)

    if not session.parse(read_source(abi_file)):
        err_console.print(f"[red]Erro:[/red] {session.error}")
        raise typer.Exit(1)

    return session
