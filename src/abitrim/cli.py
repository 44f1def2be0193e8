"""CLI principal do abitrim."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from abitrim import __version__
from abitrim.commands import inspect, trim

app = typer.Typer(
    name="abitrim",
    help="CLI para selecionar, enxugar e exportar ABIs de smart contracts",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Mostra a versão e sai."""
    if value:
        console.print(f"[bold blue]abitrim[/bold blue] version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False) -> None:
    """Configura o logging com saída no stderr via rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Mostra a versão do abitrim",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Mostra mensagens de debug",
    ),
) -> None:
    """abitrim - seleciona, enxuga e exporta ABIs de smart contracts."""
    setup_logging(verbose)


# Registra os comandos
app.command(name="inspect")(inspect.inspect)
app.command(name="trim")(trim.trim)


if __name__ == "__main__":
    app()
