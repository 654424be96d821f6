"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rounding_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate rounding parameters."""
        errors = []

        if "decimals" in params:
            value = params["decimals"]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0 or value > 6:
                errors.append(ConfigIssue(
                    field="decimals",
                    message="Must be an integer between 0 and 6",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_discount_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate discount parameters."""
        errors = []

        if "fabric_keywords" in params:
            value = params["fabric_keywords"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(isinstance(k, str) and k.strip() for k in value)):
                errors.append(ConfigIssue(
                    field="fabric_keywords",
                    message="Must be a non-empty list of non-empty strings",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_grid_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate pricing grid parameters."""
        errors = []

        if "mm_threshold" in params:
            value = params["mm_threshold"]
            if not isinstance(value, (int, float)) or value <= 0:
                errors.append(ConfigIssue(
                    field="mm_threshold",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_shadow_params(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate shadow comparison parameters."""
        errors = []

        if "tolerance_pct" in params:
            value = params["tolerance_pct"]
            if not isinstance(value, (int, float)) or value < 0 or value > 1:
                errors.append(ConfigIssue(
                    field="tolerance_pct",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        if "categories" in params:
            value = params["categories"]
            if not isinstance(value, (list, tuple)) or not all(isinstance(c, str) for c in value):
                errors.append(ConfigIssue(
                    field="categories",
                    message="Must be a list of category identifiers",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        errors = []

        if "rounding" in config:
            errors.extend(ConfigValidator.validate_rounding_params(config["rounding"]))

        if "discount" in config:
            errors.extend(ConfigValidator.validate_discount_params(config["discount"]))

        if "grid" in config:
            errors.extend(ConfigValidator.validate_grid_params(config["grid"]))

        if "shadow" in config:
            errors.extend(ConfigValidator.validate_shadow_params(config["shadow"]))

        return errors
