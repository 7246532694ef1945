"""Chain descriptors and the Initia chain-registry client."""

from .models import (
    ChainDescriptor,
    CustomChain,
    CustomChainSpec,
    NamedNetwork,
    NetworkSelection,
    RegistryChain,
    build_custom_chain,
    selection_from,
)
from .registry import (
    ChainCatalog,
    ChainChoice,
    ChainRegistryClient,
    default_choice,
    fallback_catalog,
    filter_chains,
)

__all__ = [
    "ChainCatalog",
    "ChainChoice",
    "ChainDescriptor",
    "ChainRegistryClient",
    "CustomChain",
    "CustomChainSpec",
    "NamedNetwork",
    "NetworkSelection",
    "RegistryChain",
    "build_custom_chain",
    "default_choice",
    "fallback_catalog",
    "filter_chains",
    "selection_from",
]
