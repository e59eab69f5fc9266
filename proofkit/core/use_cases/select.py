"""
Select use case — the adapter → platform → architecture flow.

Loads the previous config (if any) for defaults, runs the selectors and
returns everything a config writer needs.  With ``reuse=True`` no prompt
is shown: the stored config is replayed through the selectors'
``construct`` so that stale or corrupted entries fail loudly.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from proofkit.core.config.loader import ConfigError, find_config_file, load_config
from proofkit.core.models.catalog import Adapter, CatalogError, Platform
from proofkit.core.models.config import BuildConfig
from proofkit.core.services.prompt import MultiSelectPrompt
from proofkit.core.services.selection import AdapterSelector, PlatformSelector

logger = logging.getLogger(__name__)


@dataclass
class SelectionResult:
    """Outcome of one selection run."""

    adapters: AdapterSelector | None = None
    platforms: PlatformSelector | None = None
    archs: dict[str, list[str]] = field(default_factory=dict)
    platforms_changed: bool = False
    config_path: Path | None = None
    config: BuildConfig | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "error": self.error,
            "config_path": str(self.config_path) if self.config_path else None,
            "adapters": self.adapters.labels() if self.adapters else [],
            "adapter_indices": self.adapters.selections() if self.adapters else [],
            "platforms": self.platforms.labels() if self.platforms else [],
            "archs": self.archs,
            "platforms_changed": self.platforms_changed,
            "config": self.config.model_dump(mode="json") if self.config else None,
        }


def run_selection(
    config_path: Path | None = None,
    prompt: MultiSelectPrompt | None = None,
    reuse: bool = False,
) -> SelectionResult:
    """Run the selection flow.

    Args:
        config_path: Explicit proofkit.yml. If None, searches upward. A
            config that does not exist yet means no defaults; only
            ``reuse`` treats it as an error.
        prompt: Multi-select implementation (default: terminal prompt).
        reuse: Rebuild the selection from the stored config instead of
            asking.

    Returns:
        SelectionResult. Config and catalog errors land in ``error``.
    """
    result = SelectionResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        logger.info("No config found — starting without defaults")
        config = BuildConfig()
    elif not reuse and not config_path.exists():
        logger.info("%s does not exist yet — starting without defaults", config_path)
        config = BuildConfig()
        result.config_path = config_path
    else:
        try:
            config = load_config(config_path)
        except ConfigError as e:
            result.error = str(e)
            return result
        result.config_path = config_path

    try:
        if reuse:
            adapters, platforms, archs = _replay(config)
        else:
            adapters = AdapterSelector.select(prompt)
            platforms = PlatformSelector.select(config, prompt)
            archs = platforms.select_archs(prompt)
    except (CatalogError, ConfigError) as e:
        result.error = str(e)
        return result

    result.adapters = adapters
    result.platforms = platforms
    result.archs = archs
    result.platforms_changed = not platforms.eq(_previous_platforms(config))
    result.config = config.with_selection(adapters.labels(), platforms.labels(), archs)

    if result.platforms_changed:
        logger.info("Platform selection differs from the stored config")
    return result


def _replay(
    config: BuildConfig,
) -> tuple[AdapterSelector, PlatformSelector, dict[str, list[str]]]:
    """Rebuild selectors from the stored config without prompting."""
    if not config.target_adapters or not config.target_platforms:
        raise ConfigError("Nothing stored to reuse: pick adapters and platforms first.")

    adapters = AdapterSelector.construct(
        [Adapter.from_label(label).position for label in config.target_adapters]
    )
    platforms = PlatformSelector.construct(config.target_platforms)

    archs: dict[str, list[str]] = {}
    for platform in platforms.platforms:
        if not platform.has_archs:
            continue
        stored = config.archs_for(platform)
        unknown = [a for a in stored if a not in platform.archs]
        if unknown:
            raise CatalogError(
                f"Unknown {platform.value} architecture(s): {', '.join(unknown)}"
            )
        # Nothing stored means the default: every architecture
        archs[platform.value] = stored or list(platform.archs)
    return adapters, platforms, archs


def _previous_platforms(config: BuildConfig) -> list[Platform]:
    try:
        return list(PlatformSelector.construct(config.target_platforms).platforms)
    except CatalogError as e:
        logger.warning("Ignoring stored platforms: %s", e)
        return []
