"""
Selectors — turn raw picks or stored config into validated selections.

Both selectors are immutable snapshots built either from raw values
(``construct``, used when replaying stored config) or interactively
(``select``).  Every raw value goes through the catalog, so an invalid
index or label raises ``CatalogError`` instead of being dropped.

Interactive flow, in call order:

    1. AdapterSelector.select()
    2. PlatformSelector.select(config)   defaults from config.target_platforms
    3. PlatformSelector.select_archs()   one pass per platform with archs
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from proofkit.core.models.catalog import (
    ADAPTERS,
    PLATFORMS,
    Adapter,
    Platform,
    arch_from_index,
)
from proofkit.core.models.config import BuildConfig
from proofkit.core.services.prompt import MultiSelectPrompt, resolve_prompt

logger = logging.getLogger(__name__)


class AdapterSelector:
    """Ordered adapter picks."""

    def __init__(self, adapters: Sequence[Adapter]) -> None:
        self._adapters = tuple(adapters)

    @property
    def adapters(self) -> tuple[Adapter, ...]:
        return self._adapters

    @classmethod
    def construct(cls, selections: Sequence[int]) -> AdapterSelector:
        """Build from catalog indices, keeping their order."""
        return cls([Adapter.from_index(i) for i in selections])

    @classmethod
    def select(cls, prompt: MultiSelectPrompt | None = None) -> AdapterSelector:
        """Ask the user which adapters to use. Nothing is pre-checked."""
        picked = resolve_prompt(prompt)(
            "Pick the adapters you want to use (multiple selection with space)",
            "No adapters selected. Use space to select an adapter",
            list(ADAPTERS),
            [False] * len(ADAPTERS),
        )
        selector = cls.construct(picked)
        logger.info("Adapters selected: %s", selector.labels())
        return selector

    def selections(self) -> list[int]:
        """Catalog indices of the stored adapters, in stored order."""
        return [a.position for a in self._adapters]

    def labels(self) -> list[str]:
        return [a.value for a in self._adapters]

    def contains(self, adapter: Adapter) -> bool:
        return adapter in self._adapters

    def __repr__(self) -> str:
        return f"AdapterSelector({self.labels()!r})"


class PlatformSelector:
    """Ordered platform picks.

    Note: ``eq`` compares positionally.  ``[ios, android]`` and
    ``[android, ios]`` are *not* equal; sort both sides first if set
    equality is what you need.
    """

    def __init__(self, platforms: Sequence[Platform]) -> None:
        self._platforms = tuple(platforms)

    @property
    def platforms(self) -> tuple[Platform, ...]:
        return self._platforms

    @classmethod
    def construct(cls, selections: Sequence[str]) -> PlatformSelector:
        """Build from platform labels, keeping their order."""
        return cls([Platform.from_label(s) for s in selections])

    @classmethod
    def select(
        cls,
        config: BuildConfig,
        prompt: MultiSelectPrompt | None = None,
    ) -> PlatformSelector:
        """Ask the user which platforms to build for.

        Platforms chosen in the previous run (``config.target_platforms``)
        come pre-checked.
        """
        defaults = [label in config.target_platforms for label in PLATFORMS]
        logger.debug("Platform defaults from config: %s", defaults)

        picked = resolve_prompt(prompt)(
            "Select platform(s) to build for (multiple selection with space)",
            "No platforms selected. Please select at least one platform.",
            list(PLATFORMS),
            defaults,
        )
        selector = cls([Platform.from_index(i) for i in picked])
        logger.info("Platforms selected: %s", selector.labels())
        return selector

    def eq(self, platforms: Sequence[Platform]) -> bool:
        """Order-sensitive comparison against another platform sequence."""
        return list(self._platforms) == list(platforms)

    def contains(self, platform: Platform) -> bool:
        return platform in self._platforms

    def labels(self) -> list[str]:
        return [p.value for p in self._platforms]

    def select_archs(
        self, prompt: MultiSelectPrompt | None = None
    ) -> dict[str, list[str]]:
        """Ask for architectures of every stored platform that has any.

        Prompts run one at a time, in stored platform order.  Platforms
        without an architecture catalog get no entry.
        """
        prompt = resolve_prompt(prompt)
        archs: dict[str, list[str]] = {}
        for platform in self._platforms:
            if not platform.has_archs:
                continue
            picked = self.select_multi_archs(platform.value, platform.archs, prompt)
            archs[platform.value] = [arch_from_index(platform, i) for i in picked]
            logger.info("%s architectures: %s", platform.value, archs[platform.value])
        return archs

    @staticmethod
    def select_multi_archs(
        platform: str,
        archs: Sequence[str],
        prompt: MultiSelectPrompt | None = None,
    ) -> list[int]:
        """Prompt over one architecture catalog, everything pre-checked."""
        return resolve_prompt(prompt)(
            f"Select {platform} architecture(s) to compile (default: all)",
            f"No architectures selected for {platform}. "
            "Please select at least one architecture.",
            list(archs),
            [True] * len(archs),
        )

    def __repr__(self) -> str:
        return f"PlatformSelector({self.labels()!r})"
