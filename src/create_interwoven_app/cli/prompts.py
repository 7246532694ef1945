"""Interactive question flow helpers."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

import typer
from rich.console import Console

from create_interwoven_app.chains.models import (
    DEFAULT_BECH32_PREFIX,
    ChainDescriptor,
    build_custom_chain,
    is_absolute_url,
    is_grpc_endpoint,
    is_valid_bech32_prefix,
    is_valid_chain_id,
    parse_gas_price,
)
from create_interwoven_app.chains.registry import ChainChoice, default_choice, filter_chains
from create_interwoven_app.core.validators import validate_project_name

from .branding import themed_console

T = TypeVar("T")

PromptFn = Callable[..., str]
# A validator returns True when the answer is acceptable, else the message to show.
Validator = Callable[[str], bool | str]

NETWORK_TYPE_OPTIONS: tuple[tuple[str, str], ...] = (
    ("Mainnet", "mainnet"),
    ("Testnet", "testnet"),
    ("All", "all"),
    ("Custom Chain", "custom"),
)
CUSTOM_NETWORK_OPTIONS: tuple[tuple[str, str], ...] = (
    ("Mainnet", "mainnet"),
    ("Testnet", "testnet"),
)


def _required(label: str, check: Validator | None = None) -> Validator:
    def _validate(value: str) -> bool | str:
        if not value:
            return f"{label} is required"
        if check is not None:
            return check(value)
        return True

    return _validate


def _url(value: str) -> bool | str:
    return True if is_absolute_url(value) else "Please enter a valid URL"


class Prompter:
    """Asks questions through ``typer.prompt`` and re-asks on invalid answers."""

    def __init__(self, console: Console | None = None, prompt_fn: PromptFn | None = None) -> None:
        self.console = console or themed_console()
        self._prompt = prompt_fn or self._default_prompt

    def ask(self, message: str, *, validate: Validator | None = None, default: str | None = None) -> str:
        while True:
            raw = self._prompt(message) if default is None else self._prompt(message, default=default)
            value = (raw or "").strip()
            if not value and default is not None:
                value = default
            if validate is None:
                return value
            outcome = validate(value)
            if outcome is True:
                return value
            self.console.print(f"[red]✖ {outcome}[/red]")

    def choose(self, message: str, options: Sequence[tuple[str, T]], *, default: T | None = None) -> T:
        """Show a numbered list and return the value of the picked entry."""
        if not options:
            raise ValueError("choose() needs at least one option")
        self.console.print(message)
        default_index = 1
        for index, (label, value) in enumerate(options, start=1):
            if default is not None and value == default:
                default_index = index
            self.console.print(f"  [cyan]{index}[/cyan]) {label}")

        def _in_range(answer: str) -> bool | str:
            if answer.isdigit() and 1 <= int(answer) <= len(options):
                return True
            return f"Please enter a number between 1 and {len(options)}"

        picked = self.ask("Select an option", validate=_in_range, default=str(default_index))
        return options[int(picked) - 1][1]

    def prompt_project_name(self) -> str:
        def _validate(value: str) -> bool | str:
            if not value:
                return "Project name is required!"
            outcome = validate_project_name(value)
            return True if outcome.is_valid else (outcome.error or "Invalid project name")

        return self.ask("What is the name of your project?", validate=_validate)

    def prompt_network_type(self) -> str:
        return self.choose(
            "Which network type would you like to use?",
            NETWORK_TYPE_OPTIONS,
            default="testnet",
        )

    def prompt_chain(self, choices: Sequence[ChainChoice], network: str) -> ChainDescriptor:
        """Search ``choices`` by a free-text term, then pick one of the matches."""
        label = network if network in {"mainnet", "testnet"} else "all"
        while True:
            term = self.ask(f"Search {label} chains by name or chain ID (leave empty to list all)", default="")
            matches = filter_chains(choices, term)
            if matches:
                break
            self.console.print(f"[yellow]⚠ No chains match {term!r}. Try another search.[/yellow]")

        preferred = default_choice(matches, network)
        picked = self.choose(
            "Select a chain:",
            [(choice.name, choice.value) for choice in matches],
            default=preferred.value if preferred is not None else None,
        )
        return picked

    def prompt_custom_chain(self) -> ChainDescriptor:
        """Collect a hand-written chain configuration."""
        self.console.print("[blue]ℹ[/blue] Configure your custom chain:")
        self.console.print(
            "[blue]ℹ[/blue] This information will be used to create the InterwovenKit provider configuration."
        )
        self.console.print()

        chain_id = self.ask(
            'Chain ID (e.g., "my-chain-1")',
            validate=_required(
                "Chain ID",
                lambda v: True
                if is_valid_chain_id(v)
                else "Chain ID can only contain letters, numbers, hyphens, and underscores",
            ),
        )
        chain_name = self.ask('Chain name (e.g., "My Chain")', validate=_required("Chain name"))
        pretty_name = self.ask(
            'Pretty name (display name, e.g., "My Custom Chain")', validate=_required("Pretty name")
        )
        rpc_url = self.ask('RPC URL (e.g., "https://rpc.my-chain.com")', validate=_required("RPC URL", _url))
        rest_url = self.ask('REST/LCD URL (e.g., "https://rest.my-chain.com")', validate=_required("REST URL", _url))
        grpc_url = self.ask(
            'gRPC URL (e.g., "grpc.my-chain.com:443")',
            validate=_required(
                "gRPC URL",
                lambda v: True
                if is_grpc_endpoint(v)
                else 'gRPC URL should include port (e.g., "grpc.example.com:443")',
            ),
        )
        indexer_url = self.ask(
            'Indexer URL (e.g., "https://indexer.my-chain.com")', validate=_required("Indexer URL", _url)
        )
        fee_denom = self.ask('Fee denomination (e.g., "uinit", "stake")', validate=_required("Fee denomination"))
        gas_price = self.ask(
            'Fixed minimum gas price (e.g., "0.015")',
            validate=_required(
                "Gas price",
                lambda v: True if parse_gas_price(v) is not None else "Please enter a valid positive number",
            ),
        )
        bech32_prefix = self.ask(
            f'Bech32 prefix (default: "{DEFAULT_BECH32_PREFIX}")',
            default=DEFAULT_BECH32_PREFIX,
            validate=_required(
                "Bech32 prefix",
                lambda v: True
                if is_valid_bech32_prefix(v)
                else "Bech32 prefix should contain only lowercase letters",
            ),
        )
        network_type = self.choose("Network type:", CUSTOM_NETWORK_OPTIONS, default="testnet")

        return build_custom_chain(
            chain_id=chain_id,
            chain_name=chain_name,
            pretty_name=pretty_name,
            rpc_url=rpc_url,
            rest_url=rest_url,
            grpc_url=grpc_url,
            indexer_url=indexer_url,
            fee_denom=fee_denom,
            gas_price=gas_price,
            bech32_prefix=bech32_prefix,
            network_type=network_type,  # type: ignore[arg-type]
        )

    @staticmethod
    def _default_prompt(message: str, *, default: str | None = None) -> str:
        if default is not None:
            return typer.prompt(message, default=default, show_default=bool(default))
        return typer.prompt(message)


__all__ = ["CUSTOM_NETWORK_OPTIONS", "NETWORK_TYPE_OPTIONS", "Prompter", "PromptFn", "Validator"]
