"""
Catalog — the compiled-in registry of adapters, platforms and architectures.

Every catalog is an ordered tuple of labels; the position of a label is its
index.  Conversions between index, label and enum member are total: an
index or label outside the catalog raises ``CatalogError``.  These values
are constants, so a bad lookup is a programming error (or a corrupted
config) and is never clamped or skipped.
"""

from __future__ import annotations

from enum import StrEnum

ADAPTERS: tuple[str, ...] = ("circom", "halo2")
PLATFORMS: tuple[str, ...] = ("ios", "android", "web")

IOS_ARCHS: tuple[str, ...] = (
    "aarch64-apple-ios",
    "aarch64-apple-ios-sim",
    "x86_64-apple-ios",
)
ANDROID_ARCHS: tuple[str, ...] = (
    "x86_64-linux-android",
    "i686-linux-android",
    "armv7-linux-androideabi",
    "aarch64-linux-android",
)


class CatalogError(LookupError):
    """Raised when an index or label is not part of a catalog."""


def _lookup_index(catalog: tuple[str, ...], index: int, kind: str) -> str:
    # Negative indices would silently wrap around on a tuple.
    if isinstance(index, bool) or not isinstance(index, int):
        raise CatalogError(f"{kind} index must be an int, got {index!r}")
    if not 0 <= index < len(catalog):
        raise CatalogError(
            f"{kind} index {index} out of range (0..{len(catalog) - 1})"
        )
    return catalog[index]


class Adapter(StrEnum):
    """Proof-system backend.

    ``position`` is the member's index in ``ADAPTERS``.
    """

    CIRCOM = "circom"
    HALO2 = "halo2"

    @classmethod
    def from_label(cls, label: str) -> Adapter:
        try:
            return cls(label)
        except ValueError:
            raise CatalogError(
                f"Unknown adapter {label!r}. Valid: {', '.join(ADAPTERS)}"
            ) from None

    @classmethod
    def from_index(cls, index: int) -> Adapter:
        return cls(_lookup_index(ADAPTERS, index, "Adapter"))

    @property
    def position(self) -> int:
        return ADAPTERS.index(self.value)


class Platform(StrEnum):
    """Deployment target.

    ``archs`` is the platform's architecture catalog.  A platform without
    one (web) never takes part in architecture selection.
    """

    IOS = "ios"
    ANDROID = "android"
    WEB = "web"

    @classmethod
    def from_label(cls, label: str) -> Platform:
        try:
            return cls(label)
        except ValueError:
            raise CatalogError(
                f"Unknown platform {label!r}. Valid: {', '.join(PLATFORMS)}"
            ) from None

    @classmethod
    def from_index(cls, index: int) -> Platform:
        return cls(_lookup_index(PLATFORMS, index, "Platform"))

    @property
    def position(self) -> int:
        return PLATFORMS.index(self.value)

    @property
    def archs(self) -> tuple[str, ...]:
        return _PLATFORM_ARCHS.get(self.value, ())

    @property
    def has_archs(self) -> bool:
        return bool(self.archs)


_PLATFORM_ARCHS: dict[str, tuple[str, ...]] = {
    "ios": IOS_ARCHS,
    "android": ANDROID_ARCHS,
}


def arch_from_index(platform: Platform, index: int) -> str:
    """Resolve an index into a platform's architecture catalog."""
    if not platform.has_archs:
        raise CatalogError(f"Platform {platform.value!r} has no architectures")
    return _lookup_index(platform.archs, index, f"{platform.value} architecture")


def contains_adapter(path: str, adapter: Adapter) -> bool:
    """Check whether a path mentions an adapter (case-insensitive)."""
    return adapter.value in path.lower()


def contains_circom(path: str) -> bool:
    return contains_adapter(path, Adapter.CIRCOM)


def contains_halo2(path: str) -> bool:
    return contains_adapter(path, Adapter.HALO2)
