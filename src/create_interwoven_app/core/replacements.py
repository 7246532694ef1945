"""Builds the placeholder -> value mapping for one project-creation run."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from types import MappingProxyType

from create_interwoven_app.chains.models import (
    DEFAULT_CHAIN_NAME,
    DEFAULT_PRETTY_NAME,
    MAINNET_CHAIN_ID,
    TESTNET_CHAIN_ID,
    ChainDescriptor,
    CustomChain,
    NamedNetwork,
    NetworkSelection,
    RegistryChain,
    selection_from,
)

from .naming import to_camel_case, to_kebab_case, to_pascal_case

ReplacementSet = Mapping[str, str]

PLACEHOLDER_KEYS: tuple[str, ...] = (
    "PROJECT_NAME",
    "PROJECT_NAME_KEBAB",
    "PROJECT_NAME_CAMEL",
    "PROJECT_NAME_PASCAL",
    "PROJECT_NAME_CLEAN",
    "NETWORK_CONFIG",
    "NETWORK_CONFIG_IMPORT",
    "CHAIN_ID",
    "CHAIN_NAME",
    "CHAIN_PRETTY_NAME",
    "IS_CUSTOM_CHAIN",
)

_SCOPE_PREFIX = re.compile(r"^@[^/]+/")


def clean_project_name(project_name: str) -> str:
    """Drop a leading ``@scope/`` segment from a package name."""
    return _SCOPE_PREFIX.sub("", project_name, count=1)


def _config_type(network: str) -> str:
    return "MAINNET" if network == "mainnet" else "TESTNET"


def _network_fields(selection: NetworkSelection) -> dict[str, str]:
    if isinstance(selection, CustomChain):
        descriptor = selection.descriptor
        spec_json = json.dumps(selection.spec.model_dump(mode="json"), indent=2)
        return {
            "NETWORK_CONFIG": (
                "{\n"
                f'  defaultChainId: "{descriptor.chain_id}",\n'
                f"  customChain: {spec_json}\n"
                "}"
            ),
            "NETWORK_CONFIG_IMPORT": "",
            "CHAIN_ID": descriptor.chain_id,
            "CHAIN_NAME": descriptor.chain_name or DEFAULT_CHAIN_NAME,
            "CHAIN_PRETTY_NAME": descriptor.pretty_name or DEFAULT_PRETTY_NAME,
            "IS_CUSTOM_CHAIN": "true",
        }

    if isinstance(selection, RegistryChain):
        descriptor = selection.descriptor
        config_type = _config_type(descriptor.network_type)
        return {
            "NETWORK_CONFIG": f"{{...{config_type}}}",
            "NETWORK_CONFIG_IMPORT": config_type,
            "CHAIN_ID": descriptor.chain_id,
            "CHAIN_NAME": descriptor.chain_name or DEFAULT_CHAIN_NAME,
            "CHAIN_PRETTY_NAME": descriptor.pretty_name or DEFAULT_PRETTY_NAME,
            "IS_CUSTOM_CHAIN": "false",
        }

    if isinstance(selection, NamedNetwork):
        config_type = _config_type(selection.network)
        return {
            "NETWORK_CONFIG": f"{{...{config_type}}}",
            "NETWORK_CONFIG_IMPORT": config_type,
            "CHAIN_ID": MAINNET_CHAIN_ID if selection.network == "mainnet" else TESTNET_CHAIN_ID,
            "CHAIN_NAME": DEFAULT_CHAIN_NAME,
            "CHAIN_PRETTY_NAME": DEFAULT_PRETTY_NAME,
            "IS_CUSTOM_CHAIN": "false",
        }

    raise TypeError(f"Unsupported network selection: {selection!r}")


def build_replacements(
    project_name: str,
    network_or_chain: NetworkSelection | ChainDescriptor | str = "testnet",
) -> ReplacementSet:
    """Return the read-only replacement set for ``project_name``.

    ``network_or_chain`` may be the legacy ``"testnet"``/``"mainnet"`` keyword,
    a registry or custom :class:`ChainDescriptor`, or an explicit selection.
    Casing transforms use the name without its npm scope.
    """
    clean_name = clean_project_name(project_name)
    values = {
        "PROJECT_NAME": project_name,
        "PROJECT_NAME_KEBAB": to_kebab_case(clean_name),
        "PROJECT_NAME_CAMEL": to_camel_case(clean_name),
        "PROJECT_NAME_PASCAL": to_pascal_case(clean_name),
        "PROJECT_NAME_CLEAN": clean_name,
    }
    values.update(_network_fields(selection_from(network_or_chain)))
    return MappingProxyType({key: str(values[key]) for key in PLACEHOLDER_KEYS})


__all__ = ["PLACEHOLDER_KEYS", "ReplacementSet", "build_replacements", "clean_project_name"]
