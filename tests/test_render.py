"""Testes para o módulo render."""

import json

import pytest
from pydantic import ValidationError
from rich.syntax import Syntax
from rich.text import Text

from abitrim.abi.models import item_to_dict
from abitrim.abi.parser import parse_abi
from abitrim.render.details import describe_item
from abitrim.render.formatter import format_abi, format_abi_item, format_abi_parameter
from abitrim.render.renderer import (
    DEFAULT_FILENAMES,
    FormatOptions,
    FormatType,
    abi_stats,
    describe_selection,
    highlight_abi,
    render_abi,
    save_abi,
)

ERC20_ABI = [
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "to", "type": "address", "internalType": "address"},
            {"name": "amount", "type": "uint256", "internalType": "uint256"},
        ],
        "outputs": [{"name": "", "type": "bool", "internalType": "bool"}],
        "stateMutability": "nonpayable",
    },
    {
        "type": "function",
        "name": "balanceOf",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
        "stateMutability": "view",
    },
    {
        "type": "event",
        "name": "Transfer",
        "inputs": [
            {"name": "from", "type": "address", "indexed": True},
            {"name": "to", "type": "address", "indexed": True},
            {"name": "value", "type": "uint256", "indexed": False},
        ],
        "anonymous": False,
    },
]


def _parse(abi: list[dict]):
    return parse_abi(json.dumps(abi))


def _format_one(entry: dict) -> str:
    return format_abi_item(_parse([entry])[0])


def test_format_function():
    """Testa a assinatura de funções."""
    items = _parse(ERC20_ABI)

    assert format_abi_item(items[0]) == "function transfer(address to, uint256 amount) returns (bool)"
    assert (
        format_abi_item(items[1]) == "function balanceOf(address account) view returns (uint256)"
    )


def test_format_function_mutability_and_outputs():
    """Testa mutabilidade e cláusula returns."""
    assert _format_one({"type": "function", "name": "deposit", "stateMutability": "payable"}) == (
        "function deposit() payable"
    )
    assert _format_one(
        {
            "type": "function",
            "name": "pair",
            "inputs": [{"type": "uint256"}],
            "outputs": [{"type": "address"}, {"name": "ok", "type": "bool"}],
            "stateMutability": "pure",
        }
    ) == "function pair(uint256) pure returns (address, bool ok)"


def test_format_event_and_error():
    """Testa a assinatura de eventos e erros."""
    items = _parse(ERC20_ABI)

    assert format_abi_item(items[2]) == (
        "event Transfer(address indexed from, address indexed to, uint256 value)"
    )
    assert _format_one(
        {"type": "error", "name": "InsufficientBalance", "inputs": [{"name": "needed", "type": "uint256"}]}
    ) == "error InsufficientBalance(uint256 needed)"


def test_format_special_entries():
    """Testa construtor, fallback e receive."""
    assert _format_one({"type": "constructor", "inputs": [{"name": "owner", "type": "address"}]}) == (
        "constructor(address owner)"
    )
    assert _format_one({"type": "constructor", "inputs": [], "stateMutability": "payable"}) == (
        "constructor() payable"
    )
    assert _format_one({"type": "fallback", "stateMutability": "nonpayable"}) == "fallback() external"
    assert _format_one({"type": "fallback", "stateMutability": "payable"}) == (
        "fallback() external payable"
    )
    assert _format_one({"type": "receive", "stateMutability": "payable"}) == (
        "receive() external payable"
    )


def test_format_tuple_parameters():
    """Testa a expansão de tuplas e arrays de tuplas."""
    item = _parse(
        [
            {
                "type": "function",
                "name": "fill",
                "inputs": [
                    {
                        "name": "orders",
                        "type": "tuple[]",
                        "components": [
                            {"name": "maker", "type": "address"},
                            {
                                "name": "fee",
                                "type": "tuple",
                                "components": [{"name": "bps", "type": "uint16"}],
                            },
                        ],
                    }
                ],
            }
        ]
    )[0]

    assert format_abi_parameter(item.inputs[0]) == "(address maker, (uint16 bps) fee)[] orders"
    assert format_abi_item(item) == "function fill((address maker, (uint16 bps) fee)[] orders)"


def test_format_abi_is_one_to_one():
    """Testa que cada item gera exatamente uma assinatura."""
    items = _parse(ERC20_ABI)

    assert len(format_abi(items)) == len(items)


def test_render_json_preserves_fields():
    """Testa que o formato estrutural preserva os campos de entrada."""
    items = _parse(ERC20_ABI)

    data = json.loads(render_abi(items, FormatType.JSON))

    assert data == ERC20_ABI
    assert [item_to_dict(item) for item in items] == ERC20_ABI


def test_render_human_format():
    """Testa que o formato human é uma lista JSON de assinaturas."""
    items = _parse(ERC20_ABI)

    text = render_abi(items, FormatType.HUMAN)

    assert json.loads(text) == format_abi(items)


def test_render_formats_differ():
    """Testa que os dois formatos produzem textos diferentes e não vazios."""
    items = _parse(ERC20_ABI)

    json_text = render_abi(items, FormatType.JSON)
    human_text = render_abi(items, FormatType.HUMAN)

    assert json_text
    assert human_text
    assert json_text != human_text


def test_render_indentation_and_minified():
    """Testa as opções de indentação e minificação."""
    items = _parse(ERC20_ABI)

    indented = render_abi(items, FormatType.JSON, FormatOptions(indentation=4))
    assert indented.splitlines()[1] == "    {"

    minified = render_abi(items, FormatType.JSON, FormatOptions(minified=True))
    assert "\n" not in minified
    assert ": " not in minified
    assert json.loads(minified) == json.loads(indented)

    zero = render_abi(items, FormatType.HUMAN, FormatOptions(indentation=0))
    assert "\n" not in zero


def test_render_empty_selection():
    """Testa a renderização de uma seleção vazia."""
    assert render_abi([], FormatType.JSON) == "[]"
    assert render_abi([], FormatType.HUMAN) == "[]"


def test_word_wrap_does_not_change_content():
    """Testa que o word wrap só afeta o preview."""
    items = _parse(ERC20_ABI)

    wrapped = render_abi(items, FormatType.JSON, FormatOptions(word_wrap=True))
    unwrapped = render_abi(items, FormatType.JSON, FormatOptions(word_wrap=False))
    assert wrapped == unwrapped

    preview = highlight_abi(items, FormatType.JSON, FormatOptions(word_wrap=False))
    assert isinstance(preview, Syntax)
    assert preview.word_wrap is False

    minified_preview = highlight_abi(items, FormatType.JSON, FormatOptions(minified=True))
    assert isinstance(minified_preview, Text)


def test_format_options_validation():
    """Testa os limites das opções de formatação."""
    options = FormatOptions()
    assert options.indentation == 2
    assert options.minified is False
    assert options.word_wrap is True

    with pytest.raises(ValidationError):
        FormatOptions(indentation=-1)
    with pytest.raises(ValidationError):
        FormatOptions(indentation=20)


def test_abi_stats():
    """Testa as estatísticas da seleção."""
    items = _parse(ERC20_ABI)

    stats = abi_stats(items)

    assert stats.type_counts == [("function", 2), ("event", 1)]
    assert stats.functions == 2
    assert stats.events == 1
    assert stats.total == 3
    assert stats.chars[FormatType.JSON] == len(render_abi(items, FormatType.JSON))
    assert stats.chars[FormatType.HUMAN] == len(render_abi(items, FormatType.HUMAN))
    assert stats.size_kb[FormatType.HUMAN].count(".") == 1


def test_describe_selection():
    """Testa o resumo textual da seleção."""
    items = _parse(ERC20_ABI)

    assert describe_selection(items) == "Selecionados: 2 functions, 1 event"
    assert describe_selection([]) == "Nenhum item da ABI selecionado"


def test_describe_item():
    """Testa os detalhes de exibição de um item."""
    items = _parse(ERC20_ABI + [{"type": "receive", "stateMutability": "payable"}])

    details = describe_item(items[0])
    assert details.item_id == "function-transfer(address,uint256)"
    assert details.tag == "FUNCTION"
    assert details.mutability == "nonpayable"
    assert details.inputs == "to: address, amount: uint256"
    assert details.outputs == ": bool"

    event = describe_item(items[2])
    assert event.outputs is None
    assert event.mutability is None

    receive = describe_item(items[3])
    assert receive.name == ""
    assert receive.inputs == "nenhum"
    assert receive.outputs == "nenhum"


def test_save_abi_default_filenames(tmp_path):
    """Testa os nomes padrão dos arquivos de saída."""
    items = _parse(ERC20_ABI)

    json_path = save_abi(items, FormatType.JSON, path=tmp_path)
    human_path = save_abi(items, FormatType.HUMAN, path=tmp_path)

    assert json_path == tmp_path / "selected-abi.json"
    assert human_path == tmp_path / "selected-abi.txt"
    assert DEFAULT_FILENAMES[FormatType.JSON] == "selected-abi.json"
    assert json.loads(json_path.read_text(encoding="utf-8")) == ERC20_ABI
    assert json.loads(human_path.read_text(encoding="utf-8")) == format_abi(items)


def test_save_abi_explicit_file(tmp_path):
    """Testa a gravação em um arquivo informado."""
    items = _parse(ERC20_ABI)
    target = tmp_path / "token.abi.json"

    saved = save_abi(items, FormatType.JSON, FormatOptions(minified=True), target)

    assert saved == target
    assert "\n" not in target.read_text(encoding="utf-8")


def test_render_does_not_mutate_inputs():
    """Testa que renderizar não altera itens nem opções."""
    items = _parse(ERC20_ABI)
    options = FormatOptions(indentation=4)
    before = [item_to_dict(item) for item in items]

    render_abi(items, FormatType.HUMAN, options)
    render_abi(items, FormatType.JSON, options)

    assert [item_to_dict(item) for item in items] == before
    assert options.indentation == 4
