"""Chain descriptors and the network selection handed to the replacement builder."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

NetworkType = Literal["mainnet", "testnet"]

CHAIN_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
BECH32_PREFIX_PATTERN = re.compile(r"^[a-z]+$")
DEFAULT_BECH32_PREFIX = "init"

MAINNET_CHAIN_ID = "interwoven-1"
TESTNET_CHAIN_ID = "initiation-2"
DEFAULT_CHAIN_NAME = "initia"
DEFAULT_PRETTY_NAME = "Initia"


def is_absolute_url(value: str) -> bool:
    parsed = urlparse(value.strip())
    return bool(parsed.scheme) and bool(parsed.netloc)


def is_grpc_endpoint(value: str) -> bool:
    """gRPC endpoints are ``host:port``; only the separator is checked."""
    return ":" in value.strip()


def is_valid_chain_id(value: str) -> bool:
    return bool(CHAIN_ID_PATTERN.match(value.strip()))


def is_valid_bech32_prefix(value: str) -> bool:
    return bool(BECH32_PREFIX_PATTERN.match(value.strip()))


def parse_gas_price(value: str | float) -> float | None:
    """Return the gas price as a float, or ``None`` when it is not a non-negative number."""
    try:
        parsed = float(str(value).strip())
    except ValueError:
        return None
    if parsed != parsed or parsed < 0:  # NaN or negative
        return None
    return parsed


class ApiEndpoint(BaseModel):
    address: str


class ChainApis(BaseModel):
    rpc: list[ApiEndpoint] = Field(default_factory=list)
    rest: list[ApiEndpoint] = Field(default_factory=list)
    grpc: list[ApiEndpoint] = Field(default_factory=list)
    indexer: list[ApiEndpoint] = Field(default_factory=list)


class FeeToken(BaseModel):
    denom: str
    fixed_min_gas_price: float = Field(ge=0)

    @field_serializer("fixed_min_gas_price")
    def _serialize_gas_price(self, value: float) -> int | float:
        # whole numbers are written without a trailing ".0"
        return int(value) if value.is_integer() else value


class ChainFees(BaseModel):
    fee_tokens: list[FeeToken] = Field(default_factory=list)


class CustomChainSpec(BaseModel):
    """A user-authored chain entry, shaped like a chain-registry record."""

    chain_id: str
    chain_name: str = ""
    apis: ChainApis = Field(default_factory=ChainApis)
    fees: ChainFees = Field(default_factory=ChainFees)
    bech32_prefix: str = DEFAULT_BECH32_PREFIX
    network_type: NetworkType = "testnet"

    @field_validator("chain_id")
    @classmethod
    def _check_chain_id(cls, value: str) -> str:
        if not is_valid_chain_id(value):
            raise ValueError("Chain ID can only contain letters, numbers, hyphens, and underscores")
        return value.strip()

    @field_validator("bech32_prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        if not is_valid_bech32_prefix(value):
            raise ValueError("Bech32 prefix should contain only lowercase letters")
        return value.strip()

    def first_address(self, api: Literal["rpc", "rest", "grpc", "indexer"]) -> str | None:
        endpoints = getattr(self.apis, api)
        return endpoints[0].address if endpoints else None


class ChainDescriptor(BaseModel):
    """Normalized description of the network a project targets."""

    model_config = ConfigDict(frozen=True)

    chain_id: str
    chain_name: str = DEFAULT_CHAIN_NAME
    pretty_name: str = DEFAULT_PRETTY_NAME
    network_type: NetworkType = "testnet"
    description: str = ""
    custom_chain: CustomChainSpec | None = None

    @property
    def is_custom(self) -> bool:
        return self.custom_chain is not None


def build_custom_chain(
    *,
    chain_id: str,
    chain_name: str,
    pretty_name: str,
    rpc_url: str,
    rest_url: str,
    grpc_url: str,
    indexer_url: str,
    fee_denom: str,
    gas_price: str | float,
    bech32_prefix: str = DEFAULT_BECH32_PREFIX,
    network_type: NetworkType = "testnet",
) -> ChainDescriptor:
    """Assemble a custom-chain descriptor from flat user answers.

    Raises ``ValueError`` (``pydantic.ValidationError`` for model-level checks)
    when an endpoint or numeric field is malformed.
    """
    for label, url in (("RPC URL", rpc_url), ("REST URL", rest_url), ("Indexer URL", indexer_url)):
        if not is_absolute_url(url):
            raise ValueError(f"{label} must be an absolute URL: {url!r}")
    if not is_grpc_endpoint(grpc_url):
        raise ValueError(f"gRPC URL should include a port (e.g. grpc.example.com:443): {grpc_url!r}")
    price = parse_gas_price(gas_price)
    if price is None:
        raise ValueError(f"Gas price must be a non-negative number: {gas_price!r}")

    spec = CustomChainSpec(
        chain_id=chain_id.strip(),
        chain_name=chain_name.strip(),
        apis=ChainApis(
            rpc=[ApiEndpoint(address=rpc_url.strip())],
            rest=[ApiEndpoint(address=rest_url.strip())],
            grpc=[ApiEndpoint(address=grpc_url.strip())],
            indexer=[ApiEndpoint(address=indexer_url.strip())],
        ),
        fees=ChainFees(fee_tokens=[FeeToken(denom=fee_denom.strip(), fixed_min_gas_price=price)]),
        bech32_prefix=bech32_prefix.strip() or DEFAULT_BECH32_PREFIX,
        network_type=network_type,
    )
    return ChainDescriptor(
        chain_id=spec.chain_id,
        chain_name=spec.chain_name,
        pretty_name=pretty_name.strip(),
        network_type=network_type,
        description=f"Custom {network_type} chain",
        custom_chain=spec,
    )


@dataclass(frozen=True, slots=True)
class NamedNetwork:
    """Legacy ``testnet``/``mainnet`` keyword selection."""

    network: NetworkType


@dataclass(frozen=True, slots=True)
class RegistryChain:
    """A chain picked from the remote registry."""

    descriptor: ChainDescriptor


@dataclass(frozen=True, slots=True)
class CustomChain:
    """A chain configured by hand and embedded literally in the project."""

    descriptor: ChainDescriptor

    def __post_init__(self) -> None:
        if self.descriptor.custom_chain is None:
            raise ValueError(f"Chain {self.descriptor.chain_id!r} has no custom chain configuration")

    @property
    def spec(self) -> CustomChainSpec:
        return self.descriptor.custom_chain  # type: ignore[return-value]


NetworkSelection = NamedNetwork | RegistryChain | CustomChain


def selection_from(value: NetworkSelection | ChainDescriptor | str) -> NetworkSelection:
    """Normalize a network keyword or descriptor into a :data:`NetworkSelection`."""
    if isinstance(value, (NamedNetwork, RegistryChain, CustomChain)):
        return value
    if isinstance(value, ChainDescriptor):
        if value.is_custom:
            return CustomChain(value)
        return RegistryChain(value)
    if isinstance(value, str):
        return NamedNetwork("mainnet" if value == "mainnet" else "testnet")
    raise TypeError(f"Unsupported network selection: {value!r}")


__all__ = [
    "ApiEndpoint",
    "ChainApis",
    "ChainDescriptor",
    "ChainFees",
    "CustomChain",
    "CustomChainSpec",
    "DEFAULT_BECH32_PREFIX",
    "DEFAULT_CHAIN_NAME",
    "DEFAULT_PRETTY_NAME",
    "FeeToken",
    "MAINNET_CHAIN_ID",
    "NamedNetwork",
    "NetworkSelection",
    "NetworkType",
    "RegistryChain",
    "TESTNET_CHAIN_ID",
    "build_custom_chain",
    "is_absolute_url",
    "is_grpc_endpoint",
    "is_valid_bech32_prefix",
    "is_valid_chain_id",
    "parse_gas_price",
    "selection_from",
]
