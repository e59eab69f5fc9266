"""
Config check use case — validate proofkit.yml against the catalog.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from proofkit.core.config.loader import (
    CONFIG_FILE,
    ConfigError,
    find_config_file,
    load_config,
)
from proofkit.core.models.catalog import ADAPTERS, PLATFORMS, Platform
from proofkit.core.models.config import BuildConfig


@dataclass
class ConfigCheckResult:
    """Result of configuration validation."""

    valid: bool = False
    config: BuildConfig | None = None
    config_path: Path | None = None
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "valid": self.valid,
            "config_path": str(self.config_path) if self.config_path else None,
            "errors": self.errors,
            "warnings": self.warnings,
            "adapters": self.config.target_adapters if self.config else [],
            "platforms": self.config.target_platforms if self.config else [],
        }


def check_config(config_path: Path | None = None) -> ConfigCheckResult:
    """Validate the build configuration and report issues."""
    result = ConfigCheckResult()

    if config_path is None:
        config_path = find_config_file()

    if config_path is None:
        result.errors.append(f"No {CONFIG_FILE} found.")
        return result

    result.config_path = config_path

    try:
        config = load_config(config_path)
    except ConfigError as e:
        result.errors.append(str(e))
        return result
    result.config = config

    _check_labels(result, "adapter", config.target_adapters, ADAPTERS)
    _check_labels(result, "platform", config.target_platforms, PLATFORMS)

    if not config.target_adapters:
        result.warnings.append("No adapters selected.")
    if not config.target_platforms:
        result.warnings.append("No platforms selected.")

    for platform in Platform:
        if not platform.has_archs:
            continue
        stored = config.archs_for(platform)
        _check_labels(result, f"{platform.value} architecture", stored, platform.archs)
        if stored and platform.value not in config.target_platforms:
            result.warnings.append(
                f"Architectures set for '{platform.value}' but it is not a target platform."
            )

    result.valid = len(result.errors) == 0
    return result


def _check_labels(
    result: ConfigCheckResult,
    kind: str,
    labels: list[str],
    catalog: tuple[str, ...],
) -> None:
    unknown = [label for label in labels if label not in catalog]
    if unknown:
        result.errors.append(
            f"Unknown {kind}(s): {', '.join(unknown)}. Valid: {', '.join(catalog)}"
        )

    dupes = sorted({label for label in labels if labels.count(label) > 1})
    if dupes:
        result.errors.append(f"Duplicate {kind}(s): {', '.join(dupes)}")
