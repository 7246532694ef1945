from __future__ import annotations

from collections.abc import Iterable
from io import StringIO

import pytest
from rich.console import Console

from create_interwoven_app.chains.registry import normalize_chains
from create_interwoven_app.cli.prompts import Prompter


class ScriptedPrompt:
    """Returns canned answers in order and records each question asked."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = iter(answers)
        self.questions: list[tuple[str, str | None]] = []

    def __call__(self, message: str, *, default: str | None = None) -> str:
        self.questions.append((message, default))
        return next(self._answers)


def _prompter(answers: Iterable[str]) -> tuple[Prompter, ScriptedPrompt, StringIO]:
    stream = StringIO()
    script = ScriptedPrompt(answers)
    return Prompter(console=Console(file=stream, width=200), prompt_fn=script), script, stream


CHAINS = normalize_chains(
    [
        {"chain_id": "initiation-2", "chain_name": "initia", "pretty_name": "Initia"},
        {"chain_id": "minimove-2", "chain_name": "minimove", "pretty_name": "Minimove"},
        {"chain_id": "miniwasm-2", "chain_name": "miniwasm", "pretty_name": "Miniwasm"},
    ],
    "testnet",
)


def test_ask_reprompts_until_valid() -> None:
    prompter, script, stream = _prompter(["", "  ok  "])

    value = prompter.ask("Anything?", validate=lambda v: True if v else "Required")

    assert value == "ok"
    assert len(script.questions) == 2
    assert "Required" in stream.getvalue()


def test_ask_uses_default_for_blank_answer() -> None:
    prompter, _, _ = _prompter([""])
    assert prompter.ask("Prefix", default="init") == "init"


def test_choose_returns_value_and_highlights_default() -> None:
    prompter, script, _ = _prompter(["", "9", "1"])

    assert prompter.choose("Pick", [("A", "a"), ("B", "b")], default="b") == "b"
    assert script.questions[0] == ("Select an option", "2")

    assert prompter.choose("Pick", [("A", "a"), ("B", "b")]) == "a"


def test_choose_requires_options() -> None:
    prompter, _, _ = _prompter([])
    with pytest.raises(ValueError):
        prompter.choose("Pick", [])


def test_prompt_project_name_validates() -> None:
    prompter, _, stream = _prompter(["", "node_modules", "-bad", "my-dapp"])

    assert prompter.prompt_project_name() == "my-dapp"
    output = stream.getvalue()
    assert "Project name is required!" in output
    assert "reserved name" in output
    assert "cannot start or end" in output


def test_prompt_network_type_defaults_to_testnet() -> None:
    prompter, _, _ = _prompter([""])
    assert prompter.prompt_network_type() == "testnet"

    prompter, _, _ = _prompter(["4"])
    assert prompter.prompt_network_type() == "custom"


def test_prompt_chain_searches_then_picks() -> None:
    prompter, script, stream = _prompter(["nope", "mini", "2"])

    chain = prompter.prompt_chain(CHAINS, "testnet")

    assert chain.chain_id == "miniwasm-2"
    assert "No chains match" in stream.getvalue()
    assert script.questions[0][1] == ""


def test_prompt_chain_defaults_to_canonical_chain() -> None:
    prompter, script, _ = _prompter(["", ""])

    chain = prompter.prompt_chain(CHAINS, "testnet")

    assert chain.chain_id == "initiation-2"
    assert script.questions[-1] == ("Select an option", "1")


def test_prompt_custom_chain_collects_all_fields() -> None:
    answers = [
        "bad id!",
        "my-chain-1",
        "my-chain",
        "My Chain",
        "not-a-url",
        "https://rpc.my-chain.com",
        "https://rest.my-chain.com",
        "grpc.my-chain.com",
        "grpc.my-chain.com:443",
        "https://indexer.my-chain.com",
        "umy",
        "-1",
        "0.015",
        "",
        "1",
    ]
    prompter, _, stream = _prompter(answers)

    chain = prompter.prompt_custom_chain()

    assert chain.is_custom
    assert chain.chain_id == "my-chain-1"
    assert chain.pretty_name == "My Chain"
    assert chain.network_type == "mainnet"
    spec = chain.custom_chain
    assert spec is not None
    assert spec.bech32_prefix == "init"
    assert spec.first_address("rpc") == "https://rpc.my-chain.com"
    assert spec.first_address("grpc") == "grpc.my-chain.com:443"
    assert spec.fees.fee_tokens[0].denom == "umy"
    assert spec.fees.fee_tokens[0].fixed_min_gas_price == pytest.approx(0.015)

    output = stream.getvalue()
    assert "Chain ID can only contain" in output
    assert "Please enter a valid URL" in output
    assert "should include port" in output
    assert "valid positive number" in output
