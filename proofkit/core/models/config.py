"""
Build configuration model — the persisted choices of a previous run.

Loaded from proofkit.yml.  Labels are kept as plain strings so that a
config written by hand (or by an older version) still loads; the
selectors and ``config check`` resolve them against the catalog.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from proofkit.core.models.catalog import Platform


class BuildConfig(BaseModel):
    """Adapters, platforms and per-platform architectures to build for."""

    model_config = ConfigDict(frozen=True)

    build_mode: Literal["debug", "release"] = "debug"
    target_adapters: list[str] = Field(default_factory=list)
    target_platforms: list[str] = Field(default_factory=list)
    ios: list[str] = Field(default_factory=list)
    android: list[str] = Field(default_factory=list)

    def archs_for(self, platform: Platform) -> list[str]:
        """Stored architectures for a platform (empty if it has none)."""
        if not platform.has_archs:
            return []
        return list(getattr(self, platform.value, []))

    def with_selection(
        self,
        adapters: list[str],
        platforms: list[str],
        archs: dict[str, list[str]],
    ) -> BuildConfig:
        """Return a copy carrying a new selection.

        Every platform with an architecture catalog takes its list from
        ``archs``; a platform absent from ``archs`` ends up with none.
        """
        update: dict = {
            "target_adapters": list(adapters),
            "target_platforms": list(platforms),
        }
        for platform in Platform:
            if platform.has_archs:
                update[platform.value] = list(archs.get(platform.value, []))
        return self.model_copy(update=update)
