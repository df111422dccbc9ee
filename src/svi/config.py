"""Configuration and variable file loading for svi."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from svi.models import DelimiterStyle
from svi.redaction import DEFAULT_MASK_FORMAT


class LoggingConfig(BaseModel):
    """Configuration for logging output."""

    level: str = "info"


class SviConfig(BaseModel):
    """Top-level svi configuration."""

    style: DelimiterStyle = Field(
        default=DelimiterStyle.DOUBLE_BRACKETS,
        description="Delimiter style: double_brackets or double_curly_braces",
    )
    fail_on_missing: bool = Field(
        default=True,
        description="Fail on undefined variables instead of leaving them in place",
    )
    mask_format: str = Field(
        default=DEFAULT_MASK_FORMAT,
        description="Format of redacted values, with a {key} field",
    )
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> SviConfig:
    """Load svi configuration from a YAML file.

    Args:
        path: Path to the YAML config file. If None, uses 'svi.yaml'
              in the current directory, falling back to defaults.

    Returns:
        A validated SviConfig instance.
    """
    path = Path("svi.yaml") if path is None else Path(path)

    if path.exists():
        with open(path) as f:
            raw: dict[str, Any] = yaml.safe_load(f) or {}
        return SviConfig.model_validate(raw)

    return SviConfig()


def load_variables(path: str | Path) -> dict[str, str]:
    """Load a YAML mapping of variable names to values.

    Scalars are kept as the text written in the file, so values such as
    0123, yes or 1.10 are not reinterpreted as numbers or booleans. An empty
    value becomes an empty string.

    Raises:
        ValueError: The document is not a mapping, or a value is not a scalar.
    """
    with open(path) as f:
        raw = yaml.load(f, Loader=yaml.BaseLoader)

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ValueError(f"Variables file must contain a mapping: {path}")

    variables: dict[str, str] = {}
    for key, value in raw.items():
        if isinstance(value, (dict, list)):
            raise ValueError(f"Variable {key!r} in {path} must be a scalar value")
        variables[key] = value
    return variables
