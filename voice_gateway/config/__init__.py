"""Process-wide configuration: environment settings and the provider catalog."""

from .catalog import (
    PROVIDER_CATALOG,
    AdapterKind,
    Capability,
    ModelDescriptor,
    ProviderDescriptor,
    ProvidersCatalog,
)
from .settings import ProviderCredentials, Settings, StorageConfig, settings

__all__ = [
    "PROVIDER_CATALOG",
    "AdapterKind",
    "Capability",
    "ModelDescriptor",
    "ProviderDescriptor",
    "ProvidersCatalog",
    "ProviderCredentials",
    "Settings",
    "StorageConfig",
    "settings",
]
