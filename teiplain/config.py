"""Configuration model and loaders for teiplain.

Responsibilities:
- Define conversion settings as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `TeiplainConfig`: normalized settings for one conversion run.
- `ConfigLoader`: static construction helpers for `TeiplainConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import (
    normalize_locale,
    normalize_optional_string,
    parse_non_negative_int,
    parse_permissive_boolean,
)

_DEFAULT_LOCALE = "en"


@dataclass(slots=True)
class TeiplainConfig:
    """Settings for one conversion run.

    Attributes:
        input_path: Path to the TEI XML source.
        output_path: Optional file receiving the rendered text.
        locale: Two-letter code selecting quotation marks; other codes use
            straight quotes.
        max_length: Optional teaser length; `None` disables truncation.
        element: Optional local element name selecting the rendered node list.
        normalize: Whether rendered text is passed through the normalizer.
    """

    input_path: Path
    output_path: Path | None = None
    locale: str = _DEFAULT_LOCALE
    max_length: int | None = None
    element: str | None = None
    normalize: bool = False

    def validate(self) -> None:
        """Validate configuration values before conversion."""

        if self.max_length is not None and self.max_length < 0:
            raise ValueError("`max_length` must be a non-negative integer.")
        if self.element is not None and not self.element.strip():
            raise ValueError("`element` must not be blank.")


class ConfigLoader:
    """Factory methods for creating validated config objects."""

    _SUPPORTED_YAML_KEYS = frozenset(
        {
            "input_path",
            "output_path",
            "locale",
            "max_length",
            "element",
            "normalize",
        }
    )
    _REQUIRED_YAML_KEYS = frozenset({"input_path"})

    @staticmethod
    def from_yaml(path: Path) -> TeiplainConfig:
        """Create a validated config from a YAML file."""

        payload = yaml.safe_load(path.read_text(encoding="utf-8"))
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_mapping(payload: Mapping[str, Any], source_label: str) -> TeiplainConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            raise ValueError(f"{source_label} includes unsupported key(s): {', '.join(unknown)}.")
        missing = sorted(key for key in ConfigLoader._REQUIRED_YAML_KEYS if key not in payload)
        if missing:
            raise ValueError(f"{source_label} is missing required key(s): {', '.join(missing)}.")

        input_value = normalize_optional_string(payload.get("input_path"))
        if input_value is None:
            raise ValueError(f"{source_label} requires non-empty `input_path`.")
        output_value = normalize_optional_string(payload.get("output_path"))

        config = TeiplainConfig(
            input_path=Path(input_value),
            output_path=Path(output_value) if output_value is not None else None,
            locale=normalize_locale(payload.get("locale")) or _DEFAULT_LOCALE,
            max_length=ConfigLoader._field(
                parse_non_negative_int, payload.get("max_length"), "max_length", source_label
            ),
            element=normalize_optional_string(payload.get("element")),
            normalize=ConfigLoader._optional_boolean(payload, "normalize", source_label),
        )
        config.validate()
        return config

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TeiplainConfig:
        """Create a validated config from `TEIPLAIN_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        input_value = normalize_optional_string(env_map.get("TEIPLAIN_INPUT"))
        if input_value is None:
            raise ValueError("Environment variable `TEIPLAIN_INPUT` is required.")
        output_value = normalize_optional_string(env_map.get("TEIPLAIN_OUTPUT"))
        normalize_flag = parse_permissive_boolean(env_map.get("TEIPLAIN_NORMALIZE"))
        if "TEIPLAIN_NORMALIZE" in env_map and normalize_flag is None:
            raise ValueError(
                "Environment variable `TEIPLAIN_NORMALIZE` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )

        config = TeiplainConfig(
            input_path=Path(input_value),
            output_path=Path(output_value) if output_value is not None else None,
            locale=normalize_locale(env_map.get("TEIPLAIN_LOCALE")) or _DEFAULT_LOCALE,
            max_length=parse_non_negative_int(
                env_map.get("TEIPLAIN_MAX_LENGTH"), "TEIPLAIN_MAX_LENGTH"
            ),
            element=normalize_optional_string(env_map.get("TEIPLAIN_ELEMENT")),
            normalize=bool(normalize_flag),
        )
        config.validate()
        return config

    @staticmethod
    def _field(parser: Any, value: object, key: str, source_label: str) -> Any:
        """Run a value parser and prefix its error with the config source."""

        try:
            return parser(value, key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field {exc}") from exc

    @staticmethod
    def _optional_boolean(payload: Mapping[str, Any], key: str, source_label: str) -> bool:
        """Read and validate an optional boolean field, defaulting to `False`."""

        if key not in payload:
            return False
        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
