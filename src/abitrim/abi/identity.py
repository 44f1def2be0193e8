"""Identidade estável de itens da ABI."""

from abitrim.abi.models import AbiItem


def get_item_id(item: AbiItem) -> str:
    """
    Gera a chave de um item no formato ``{categoria}-{nome}({tipos})``.

    Os tipos dos inputs são usados na ordem declarada e sem normalização,
    então overloads de uma mesma função recebem chaves diferentes.

    Exemplo:
        function-transfer(address,uint256)
    """
    signature = ",".join(param.type for param in item.inputs)
    return f"{item.category}-{item.name or ''}({signature})"
