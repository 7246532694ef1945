from __future__ import annotations

import httpx
import pytest

from create_interwoven_app.chains.models import ChainDescriptor
from create_interwoven_app.chains.registry import (
    MAINNET_REGISTRY_URL,
    TESTNET_REGISTRY_URL,
    ChainRegistryClient,
    RegistryError,
    default_choice,
    fallback_catalog,
    filter_chains,
    make_choice,
    normalize_chains,
)

MAINNET_PAYLOAD = [
    {"chain_id": "interwoven-1", "chain_name": "initia", "pretty_name": "Initia", "description": "Initia L1"},
    {"chain_id": "echelon-1", "chain_name": "echelon", "pretty_name": "Echelon"},
]
TESTNET_PAYLOAD = [
    {"chain_id": "minimove-2", "chain_name": "minimove", "pretty_name": "minimove", "description": "Move rollup"},
    {"chain_id": "initiation-2", "chain_name": "initia", "pretty_name": "Initia", "description": "Initia Testnet"},
    {"chain_id": "miniwasm-2", "chain_name": "miniwasm"},
]


def _transport(routes: dict[str, httpx.Response]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        return routes[str(request.url)]

    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_fetch_all_chains_sorts_by_display_name() -> None:
    transport = _transport(
        {
            MAINNET_REGISTRY_URL: httpx.Response(200, json=MAINNET_PAYLOAD),
            TESTNET_REGISTRY_URL: httpx.Response(200, json=TESTNET_PAYLOAD),
        }
    )
    client = ChainRegistryClient(transport=transport)

    catalog = await client.fetch_all_chains()

    assert not catalog.from_fallback
    assert [choice.short for choice in catalog.mainnet] == ["Echelon", "Initia"]
    assert [choice.short for choice in catalog.testnet] == ["Initia", "minimove", "miniwasm"]
    assert [choice.value.network_type for choice in catalog.all] == ["mainnet"] * 2 + ["testnet"] * 3
    assert catalog.testnet[2].value.pretty_name == "miniwasm"
    assert catalog.mainnet[1].name == "Initia (interwoven-1)"


@pytest.mark.asyncio
async def test_fetch_all_chains_falls_back_on_http_error() -> None:
    transport = _transport(
        {
            MAINNET_REGISTRY_URL: httpx.Response(503),
            TESTNET_REGISTRY_URL: httpx.Response(200, json=TESTNET_PAYLOAD),
        }
    )

    catalog = await ChainRegistryClient(transport=transport).fetch_all_chains()

    assert catalog.from_fallback
    assert [choice.value.chain_id for choice in catalog.mainnet] == ["interwoven-1"]
    assert [choice.value.chain_id for choice in catalog.testnet] == ["initiation-2"]
    assert all(choice.value.pretty_name == "Initia" for choice in catalog.all)


@pytest.mark.asyncio
async def test_fetch_all_chains_falls_back_on_bad_json() -> None:
    transport = _transport(
        {
            MAINNET_REGISTRY_URL: httpx.Response(200, content=b"<html>"),
            TESTNET_REGISTRY_URL: httpx.Response(200, json=TESTNET_PAYLOAD),
        }
    )

    catalog = await ChainRegistryClient(transport=transport).fetch_all_chains()

    assert catalog.from_fallback


@pytest.mark.asyncio
async def test_fetch_all_chains_falls_back_on_connection_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("offline", request=request)

    client = ChainRegistryClient(transport=httpx.MockTransport(handler), mainnet_url="https://a", testnet_url="https://b")

    catalog = await client.fetch_all_chains()

    assert catalog.from_fallback
    assert len(catalog.all) == 2


def test_normalize_chains_rejects_wrong_shapes() -> None:
    with pytest.raises(RegistryError):
        normalize_chains({"chains": []}, "mainnet")
    with pytest.raises(RegistryError):
        normalize_chains(["initia"], "mainnet")
    with pytest.raises(RegistryError):
        normalize_chains([{"chain_name": "no-id"}], "testnet")


def _choices() -> list:
    return normalize_chains(TESTNET_PAYLOAD, "testnet") + normalize_chains(MAINNET_PAYLOAD, "mainnet")


def test_filter_chains_empty_term_returns_everything() -> None:
    chains = _choices()
    assert filter_chains(chains, "") == chains
    assert filter_chains(chains, "   ") == chains
    assert filter_chains(chains, None) == chains


def test_filter_chains_is_case_insensitive() -> None:
    chains = _choices()

    by_name = filter_chains(chains, "INITIA")
    assert {choice.value.chain_id for choice in by_name} == {"initiation-2", "interwoven-1"}

    assert [c.value.chain_id for c in filter_chains(chains, "initiation")] == ["initiation-2"]
    assert [c.value.chain_id for c in filter_chains(chains, "rollup")] == ["minimove-2"]
    assert {c.value.chain_id for c in filter_chains(chains, "mini")} == {"minimove-2", "miniwasm-2"}
    assert filter_chains(chains, "nothing-like-this") == []


def test_default_choice_prefers_canonical_chain() -> None:
    testnet = normalize_chains(TESTNET_PAYLOAD, "testnet")
    mainnet = normalize_chains(MAINNET_PAYLOAD, "mainnet")

    assert default_choice(testnet, "testnet").value.chain_id == "initiation-2"  # type: ignore[union-attr]
    assert default_choice(mainnet, "mainnet").value.chain_id == "interwoven-1"  # type: ignore[union-attr]
    assert default_choice(testnet, "all") is testnet[0]
    assert default_choice([], "testnet") is None


def test_fallback_catalog_shape() -> None:
    catalog = fallback_catalog()
    assert catalog.for_network("mainnet")[0].value.description == "Initia Mainnet"
    assert catalog.for_network("testnet")[0].value.description == "Initia Testnet"
    assert len(catalog.for_network("all")) == 2


def test_make_choice_builds_search_text() -> None:
    choice = make_choice(ChainDescriptor(chain_id="echelon-1", chain_name="echelon", pretty_name="Echelon"))
    assert choice.searchable_text == "echelon echelon-1 "
