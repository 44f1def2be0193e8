"""Modelos, identidade, filtros e enxugamento de itens de ABI."""

from abitrim.abi.filters import ItemFilters, filter_items, matches_filters
from abitrim.abi.identity import get_item_id
from abitrim.abi.models import (
    Abi,
    AbiConstructor,
    AbiError,
    AbiEvent,
    AbiFallback,
    AbiFunction,
    AbiItem,
    AbiParameter,
    AbiReceive,
)
from abitrim.abi.parser import AbiParseError, load_abi, parse_abi
from abitrim.abi.selection import AbiSession
from abitrim.abi.trimmer import trim_abi_items

__all__ = [
    "Abi",
    "AbiConstructor",
    "AbiError",
    "AbiEvent",
    "AbiFallback",
    "AbiFunction",
    "AbiItem",
    "AbiParameter",
    "AbiParseError",
    "AbiReceive",
    "AbiSession",
    "ItemFilters",
    "filter_items",
    "get_item_id",
    "load_abi",
    "matches_filters",
    "parse_abi",
    "trim_abi_items",
]
