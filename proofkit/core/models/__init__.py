"""
Domain models — catalog enums and the pydantic build config.

    from proofkit.core.models import Adapter, Platform, BuildConfig
"""

from proofkit.core.models.catalog import (
    ADAPTERS,
    ANDROID_ARCHS,
    IOS_ARCHS,
    PLATFORMS,
    Adapter,
    CatalogError,
    Platform,
    arch_from_index,
    contains_adapter,
    contains_circom,
    contains_halo2,
)
from proofkit.core.models.config import BuildConfig

__all__ = [
    # catalog.py
    "ADAPTERS",
    "ANDROID_ARCHS",
    "Adapter",
    # config.py
    "BuildConfig",
    "CatalogError",
    "IOS_ARCHS",
    "PLATFORMS",
    "Platform",
    "arch_from_index",
    "contains_adapter",
    "contains_circom",
    "contains_halo2",
]
