"""Modelos de dados para itens de uma ABI de smart contract."""

from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

ItemType = Literal["function", "event", "error", "constructor", "fallback", "receive"]

ITEM_TYPES: tuple[str, ...] = (
    "function",
    "event",
    "error",
    "constructor",
    "fallback",
    "receive",
)


class _AbiModel(BaseModel):
    """Base imutável que preserva campos extras da ABI original."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class AbiParameter(_AbiModel):
    """Representa um parâmetro de entrada ou saída."""

    name: str | None = None
    type: str
    indexed: bool | None = None  # Apenas em eventos
    components: tuple["AbiParameter", ...] | None = None  # Para tuple/struct
    internal_type: str | None = Field(default=None, alias="internalType")


class _AbiItemBase(_AbiModel):
    """Campos e comportamento comuns a todos os itens da ABI."""

    type: ItemType

    @property
    def category(self) -> str:
        """Retorna a categoria do item (function, event, error, ...)."""
        return self.type


class AbiFunction(_AbiItemBase):
    """Função do contrato."""

    type: Literal["function"]
    name: str = ""
    inputs: tuple[AbiParameter, ...] = ()
    outputs: tuple[AbiParameter, ...] = ()
    state_mutability: str | None = Field(default=None, alias="stateMutability")


class AbiEvent(_AbiItemBase):
    """Evento emitido pelo contrato."""

    type: Literal["event"]
    name: str = ""
    inputs: tuple[AbiParameter, ...] = ()
    outputs: ClassVar[tuple[AbiParameter, ...]] = ()
    state_mutability: ClassVar[None] = None
    anonymous: bool | None = None


class AbiError(_AbiItemBase):
    """Erro customizado (revert com dados)."""

    type: Literal["error"]
    name: str = ""
    inputs: tuple[AbiParameter, ...] = ()
    outputs: ClassVar[tuple[AbiParameter, ...]] = ()
    state_mutability: ClassVar[None] = None


class AbiConstructor(_AbiItemBase):
    """Construtor do contrato. Não tem nome."""

    type: Literal["constructor"]
    name: ClassVar[None] = None
    inputs: tuple[AbiParameter, ...] = ()
    outputs: ClassVar[tuple[AbiParameter, ...]] = ()
    state_mutability: str | None = Field(default=None, alias="stateMutability")


class AbiFallback(_AbiItemBase):
    """Função fallback. Não tem nome nem parâmetros."""

    type: Literal["fallback"]
    name: ClassVar[None] = None
    inputs: ClassVar[tuple[AbiParameter, ...]] = ()
    outputs: ClassVar[tuple[AbiParameter, ...]] = ()
    state_mutability: str | None = Field(default=None, alias="stateMutability")


class AbiReceive(_AbiItemBase):
    """Função receive. Sempre payable."""

    type: Literal["receive"]
    name: ClassVar[None] = None
    inputs: ClassVar[tuple[AbiParameter, ...]] = ()
    outputs: ClassVar[tuple[AbiParameter, ...]] = ()
    state_mutability: str | None = Field(default=None, alias="stateMutability")


AbiItem = Annotated[
    Union[AbiFunction, AbiEvent, AbiError, AbiConstructor, AbiFallback, AbiReceive],
    Field(discriminator="type"),
]

Abi = list[AbiItem]

# Adapter compartilhado para validar/serializar listas de itens
ABI_ADAPTER: TypeAdapter[list[AbiItem]] = TypeAdapter(list[AbiItem])


def item_to_dict(item: AbiItem) -> dict:
    """Converte um item para dicionário com os mesmos campos da entrada."""
    return item.model_dump(mode="json", by_alias=True, exclude_unset=True)
