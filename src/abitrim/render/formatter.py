"""Formatação de itens da ABI em assinaturas legíveis (human-readable ABI)."""

import re

from abitrim.abi.models import (
    AbiConstructor,
    AbiError,
    AbiEvent,
    AbiFallback,
    AbiFunction,
    AbiItem,
    AbiParameter,
    AbiReceive,
)

# tuple, tuple[], tuple[2][] ...
_TUPLE_REGEX = re.compile(r"^tuple(?P<array>(\[(\d*)\])*)$")


def format_abi_parameter(param: AbiParameter) -> str:
    """
    Formata um parâmetro como ``tipo [indexed] [nome]``.

    Tuplas com ``components`` são expandidas recursivamente, mantendo o
    sufixo de array: ``(address to, uint256 amount)[]``.
    """
    param_type = param.type

    match = _TUPLE_REGEX.match(param_type)
    if match and param.components is not None:
        inner = ", ".join(format_abi_parameter(c) for c in param.components)
        param_type = f"({inner}){match.group('array')}"

    if param.indexed:
        param_type = f"{param_type} indexed"
    if param.name:
        return f"{param_type} {param.name}"
    return param_type


def format_abi_parameters(params: tuple[AbiParameter, ...]) -> str:
    """Formata uma lista de parâmetros separados por vírgula."""
    return ", ".join(format_abi_parameter(p) for p in params)


def format_abi_item(item: AbiItem) -> str:
    """
    Formata um item como assinatura human-readable.

    Exemplos:
        function transfer(address to, uint256 amount) returns (bool)
        function balanceOf(address) view returns (uint256)
        event Transfer(address indexed from, address indexed to, uint256 value)
        receive() external payable
    """
    if isinstance(item, AbiFunction):
        signature = f"function {item.name}({format_abi_parameters(item.inputs)})"
        if item.state_mutability and item.state_mutability != "nonpayable":
            signature += f" {item.state_mutability}"
        if item.outputs:
            signature += f" returns ({format_abi_parameters(item.outputs)})"
        return signature

    if isinstance(item, AbiEvent):
        return f"event {item.name}({format_abi_parameters(item.inputs)})"

    if isinstance(item, AbiError):
        return f"error {item.name}({format_abi_parameters(item.inputs)})"

    if isinstance(item, AbiConstructor):
        signature = f"constructor({format_abi_parameters(item.inputs)})"
        if item.state_mutability == "payable":
            signature += " payable"
        return signature

    if isinstance(item, AbiFallback):
        if item.state_mutability == "payable":
            return "fallback() external payable"
        return "fallback() external"

    if isinstance(item, AbiReceive):
        return "receive() external payable"

    raise TypeError(f"Item de ABI desconhecido: {type(item).__name__}")


def format_abi(items: list[AbiItem]) -> list[str]:
    """Formata todos os itens, um para um, mantendo a ordem."""
    return [format_abi_item(item) for item in items]
