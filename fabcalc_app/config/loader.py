"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    DefaultConfig,
    DiscountParams,
    GridParams,
    RoundingParams,
    ShadowParams,
    get_default_config,
)


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_accounts(self) -> dict[str, Any]:
        """Load every account override block from accounts.yaml."""
        accounts_file = self.config_dir / "accounts.yaml"

        if not accounts_file.exists():
            return {}

        with open(accounts_file) as f:
            accounts_config = yaml.safe_load(f) or {}

        return accounts_config.get("accounts", {}) or {}  # type: ignore[no-any-return]

    def load_account_config(self, account_id: str) -> dict[str, Any]:
        """Load account-specific configuration overrides."""
        return self.load_accounts().get(account_id, {}) or {}

    def merge_config(
        self,
        account_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Account-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        account_config = self.load_account_config(account_id)
        config = self._deep_merge(config, account_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def build_config(
        self,
        account_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge configuration and return it as a DefaultConfig."""
        merged = self.merge_config(account_id, overrides)

        return DefaultConfig(
            rounding=RoundingParams(**merged["rounding"]),
            discount=DiscountParams(
                fabric_keywords=tuple(merged["discount"]["fabric_keywords"])
            ),
            grid=GridParams(**merged["grid"]),
            shadow=ShadowParams(
                tolerance_pct=merged["shadow"]["tolerance_pct"],
                categories=tuple(merged["shadow"]["categories"]),
            ),
        )

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
