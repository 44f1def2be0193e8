"""Renderização da seleção de ABI em JSON e formato human-readable."""

from abitrim.render.details import ItemDetails, describe_item
from abitrim.render.formatter import format_abi, format_abi_item
from abitrim.render.renderer import (
    AbiStats,
    FormatOptions,
    FormatType,
    abi_stats,
    describe_selection,
    highlight_abi,
    render_abi,
    save_abi,
)

__all__ = [
    "AbiStats",
    "FormatOptions",
    "FormatType",
    "ItemDetails",
    "abi_stats",
    "describe_item",
    "describe_selection",
    "format_abi",
    "format_abi_item",
    "highlight_abi",
    "render_abi",
    "save_abi",
]
