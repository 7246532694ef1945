"""Initia chain-registry client.

Fetches the mainnet and testnet chain lists and normalizes them into
:class:`ChainChoice` entries for the interactive picker. Any network or
payload problem falls back to a static single-entry list per network.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx
from pydantic import ValidationError

from .models import (
    DEFAULT_CHAIN_NAME,
    DEFAULT_PRETTY_NAME,
    MAINNET_CHAIN_ID,
    TESTNET_CHAIN_ID,
    ChainDescriptor,
    NetworkType,
)

logger = logging.getLogger(__name__)

MAINNET_REGISTRY_URL = "https://registry.initia.xyz/chains.json"
TESTNET_REGISTRY_URL = "https://registry.testnet.initia.xyz/chains.json"


class RegistryError(RuntimeError):
    """Raised when a registry payload cannot be fetched or understood."""


@dataclass(frozen=True, slots=True)
class ChainChoice:
    """A selectable chain as shown in the picker."""

    name: str
    value: ChainDescriptor
    short: str
    searchable_text: str


@dataclass(slots=True)
class ChainCatalog:
    mainnet: list[ChainChoice] = field(default_factory=list)
    testnet: list[ChainChoice] = field(default_factory=list)
    from_fallback: bool = False

    @property
    def all(self) -> list[ChainChoice]:
        return [*self.mainnet, *self.testnet]

    def for_network(self, network: str) -> list[ChainChoice]:
        if network == "mainnet":
            return list(self.mainnet)
        if network == "testnet":
            return list(self.testnet)
        return self.all


def make_choice(descriptor: ChainDescriptor) -> ChainChoice:
    pretty = descriptor.pretty_name or descriptor.chain_name
    searchable = f"{pretty} {descriptor.chain_id} {descriptor.description}".lower()
    return ChainChoice(
        name=f"{pretty} ({descriptor.chain_id})",
        value=descriptor,
        short=pretty,
        searchable_text=searchable,
    )


def normalize_chains(payload: Any, network: NetworkType) -> list[ChainChoice]:
    """Turn a raw ``chains.json`` payload into sorted choices."""
    if not isinstance(payload, list):
        raise RegistryError(f"Expected a list of chains for {network}, got {type(payload).__name__}")
    choices: list[ChainChoice] = []
    for item in payload:
        if not isinstance(item, dict):
            raise RegistryError(f"Malformed {network} registry entry: {item!r}")
        chain_name = item.get("chain_name") or ""
        try:
            descriptor = ChainDescriptor(
                chain_id=item["chain_id"],
                chain_name=chain_name,
                pretty_name=item.get("pretty_name") or chain_name,
                network_type=network,
                description=item.get("description") or "",
            )
        except (KeyError, ValidationError) as exc:
            raise RegistryError(f"Malformed {network} registry entry: {exc}") from exc
        choices.append(make_choice(descriptor))
    choices.sort(key=lambda choice: choice.short.lower())
    return choices


def fallback_catalog() -> ChainCatalog:
    mainnet = ChainDescriptor(
        chain_id=MAINNET_CHAIN_ID,
        chain_name=DEFAULT_CHAIN_NAME,
        pretty_name=DEFAULT_PRETTY_NAME,
        network_type="mainnet",
        description="Initia Mainnet",
    )
    testnet = ChainDescriptor(
        chain_id=TESTNET_CHAIN_ID,
        chain_name=DEFAULT_CHAIN_NAME,
        pretty_name=DEFAULT_PRETTY_NAME,
        network_type="testnet",
        description="Initia Testnet",
    )
    return ChainCatalog(mainnet=[make_choice(mainnet)], testnet=[make_choice(testnet)], from_fallback=True)


class ChainRegistryClient:
    """Reads the public Initia chain registries."""

    def __init__(
        self,
        *,
        mainnet_url: str = MAINNET_REGISTRY_URL,
        testnet_url: str = TESTNET_REGISTRY_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.mainnet_url = mainnet_url
        self.testnet_url = testnet_url
        self.timeout = timeout
        self._transport = transport

    async def fetch_all_chains(self) -> ChainCatalog:
        """Return both networks' chains, or the static fallback on any failure."""
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                mainnet_raw, testnet_raw = await asyncio.gather(
                    self._fetch_json(client, self.mainnet_url),
                    self._fetch_json(client, self.testnet_url),
                )
            return ChainCatalog(
                mainnet=normalize_chains(mainnet_raw, "mainnet"),
                testnet=normalize_chains(testnet_raw, "testnet"),
            )
        except (httpx.HTTPError, RegistryError) as exc:
            logger.warning("Failed to fetch chains from registry, using fallback options: %s", exc)
            return fallback_catalog()

    async def _fetch_json(self, client: httpx.AsyncClient, url: str) -> Any:
        response = await client.get(url)
        response.raise_for_status()
        try:
            return response.json()
        except ValueError as exc:
            raise RegistryError(f"Failed to parse JSON from {url}: {exc}") from exc


def filter_chains(chains: Sequence[ChainChoice], term: str | None) -> list[ChainChoice]:
    """Case-insensitive search across ids, names, descriptions and display text."""
    if not term or not term.strip():
        return list(chains)
    needle = term.strip().lower()
    matches: list[ChainChoice] = []
    for choice in chains:
        chain = choice.value
        haystack = (
            chain.chain_id,
            chain.chain_name,
            chain.pretty_name,
            chain.description,
            choice.name,
            choice.searchable_text,
        )
        if any(needle in text.lower() for text in haystack):
            matches.append(choice)
    return matches


def default_choice(choices: Iterable[ChainChoice], network: str) -> ChainChoice | None:
    """Prefer the canonical Initia chain for the network, else the first entry."""
    options = list(choices)
    preferred = {"testnet": TESTNET_CHAIN_ID, "mainnet": MAINNET_CHAIN_ID}.get(network)
    for choice in options:
        if preferred and choice.value.chain_id == preferred:
            return choice
    return options[0] if options else None


__all__ = [
    "ChainCatalog",
    "ChainChoice",
    "ChainRegistryClient",
    "MAINNET_REGISTRY_URL",
    "RegistryError",
    "TESTNET_REGISTRY_URL",
    "default_choice",
    "fallback_catalog",
    "filter_chains",
    "make_choice",
    "normalize_chains",
]
