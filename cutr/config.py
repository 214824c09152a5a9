"""Configuration model and loaders for cutr.

Responsibilities:
- Define command configuration as a typed dataclass.
- Validate the field delimiter.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `CutrConfig`: normalized settings for one command invocation.
- `ConfigLoader`: static construction helpers for `CutrConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .io.readers import STDIN_NAME
from .models.datatypes import Extract, ExtractMode
from .parsing import normalize_string_list

DEFAULT_DELIMITER = "\t"
DELIMITER_ENV_KEY = "CUTR_DELIMITER"


def validate_delimiter(delimiter: str) -> str:
    """Return `delimiter` if it encodes to exactly one UTF-8 byte.

    Raises:
        ValueError: If the delimiter is empty or wider than one byte.
    """

    if len(delimiter.encode("utf-8")) != 1:
        raise ValueError(f'delimiter "{delimiter}" is invalid. It must be a single byte')
    return delimiter


@dataclass(slots=True)
class CutrConfig:
    """Settings for one cutr invocation.

    Attributes:
        files: Input names in processing order; `-` reads standard input.
        delimiter: Single-byte field delimiter.
        extract: Parsed selection and mode, or `None` when not configured yet.
    """

    files: list[str] = field(default_factory=lambda: [STDIN_NAME])
    delimiter: str = DEFAULT_DELIMITER
    extract: Extract | None = None

    def validate(self) -> None:
        """Validate configuration values before extraction."""

        if not self.files:
            raise ValueError("`files` must list at least one input.")
        validate_delimiter(self.delimiter)


class ConfigLoader:
    """Factory helpers for `CutrConfig` construction."""

    _SELECTION_KEYS = tuple(mode.value for mode in ExtractMode)
    _SUPPORTED_YAML_KEYS = frozenset({"files", "delimiter", *_SELECTION_KEYS})

    @staticmethod
    def from_yaml(path: Path, defaults: CutrConfig | None = None) -> CutrConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep their value from `defaults`.
        """

        payload = ConfigLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        return ConfigLoader.from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            defaults=defaults,
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> CutrConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        delimiter = env_map.get(DELIMITER_ENV_KEY) or DEFAULT_DELIMITER
        try:
            validate_delimiter(delimiter)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{DELIMITER_ENV_KEY}`: {exc}") from exc
        return CutrConfig(delimiter=delimiter)

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        defaults: CutrConfig | None = None,
    ) -> CutrConfig:
        """Build a validated config from a mapping payload."""

        ConfigLoader._validate_keys(payload, source_label)
        config = replace(defaults) if defaults is not None else CutrConfig()

        if "files" in payload:
            try:
                config.files = normalize_string_list(payload["files"], "files")
            except ValueError as exc:
                raise ValueError(f"{source_label} field {exc}") from exc

        if "delimiter" in payload:
            delimiter = payload["delimiter"]
            if not isinstance(delimiter, str):
                raise ValueError(f"{source_label} field `delimiter` must be a string.")
            config.delimiter = delimiter

        extract = ConfigLoader._optional_extract(payload, source_label)
        if extract is not None:
            config.extract = extract

        try:
            config.validate()
        except ValueError as exc:
            raise ValueError(f"{source_label}: {exc}") from exc
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        # BaseLoader keeps scalars as written, e.g. `fields: 010` stays "010".
        payload = yaml.load(raw_text, Loader=yaml.BaseLoader)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject unsupported keys and conflicting selection keys."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        selected = sorted(key for key in ConfigLoader._SELECTION_KEYS if key in payload)
        if len(selected) > 1:
            key_list = ", ".join(selected)
            raise ValueError(
                f"{source_label} may define only one of `fields`, `bytes`, or `chars` "
                f"(found: {key_list})."
            )

    @staticmethod
    def _optional_extract(payload: Mapping[str, Any], source_label: str) -> Extract | None:
        """Parse the selection key of a payload, if any.

        Selection text is passed to the parser exactly as written.
        """

        for mode in ExtractMode:
            if mode.value not in payload:
                continue
            raw_value = payload[mode.value]
            if not isinstance(raw_value, str):
                raise ValueError(
                    f"{source_label} field `{mode.value}` must be a selection list string."
                )
            try:
                return Extract.from_selection(mode, raw_value)
            except ValueError as exc:
                raise ValueError(f"{source_label} field `{mode.value}`: {exc}") from exc
        return None
