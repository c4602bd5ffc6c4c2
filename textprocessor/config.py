"""Configuration model and loaders for Text Processor.

Responsibilities:
- Define runtime configuration as a typed dataclass.
- Provide loader entry points for YAML- and environment-based configuration.

Key types:
- `TextProcessorConfig`: normalized runtime settings for one invocation.
- `ConfigLoader`: static construction helpers for `TextProcessorConfig`.

Precedence, lowest to highest: defaults, environment, YAML file, CLI flags.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_encoding, parse_log_level


_DEFAULT_HISTORY_FILE = Path("history.json")
_DEFAULT_ENCODING = "utf-8"
_DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True, slots=True)
class TextProcessorConfig:
    """Runtime configuration for one CLI invocation.

    Attributes:
        history_file: JSON file holding the statistics history.
        encoding: Encoding used for input, output, and history files.
        log_level: Minimum loguru level emitted by the run logger.
    """

    history_file: Path = _DEFAULT_HISTORY_FILE
    encoding: str = _DEFAULT_ENCODING
    log_level: str = _DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before use."""

        if not str(self.history_file).strip():
            raise ValueError("`history_file` must be a non-empty path.")
        parse_encoding(self.encoding, "encoding")
        parse_log_level(self.log_level, "log_level")


class ConfigLoader:
    """Factory methods for creating `TextProcessorConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"history_file", "encoding", "log_level"})
    _ENV_KEYS = {
        "history_file": "TEXTPROCESSOR_HISTORY_FILE",
        "encoding": "TEXTPROCESSOR_ENCODING",
        "log_level": "TEXTPROCESSOR_LOG_LEVEL",
    }

    @staticmethod
    def from_env(
        env: Mapping[str, str] | None = None,
        base: TextProcessorConfig | None = None,
    ) -> TextProcessorConfig:
        """Create a validated config from environment variables over `base`."""

        env_map: Mapping[str, str] = os.environ if env is None else env
        config = base if base is not None else TextProcessorConfig()

        history_file = ConfigLoader._optional_env_string(env_map, "history_file")
        if history_file is not None:
            config = replace(config, history_file=Path(history_file))

        encoding = ConfigLoader._optional_env_string(env_map, "encoding")
        if encoding is not None:
            config = replace(
                config,
                encoding=parse_encoding(encoding, ConfigLoader._ENV_KEYS["encoding"]),
            )

        log_level = ConfigLoader._optional_env_string(env_map, "log_level")
        if log_level is not None:
            config = replace(
                config,
                log_level=parse_log_level(log_level, ConfigLoader._ENV_KEYS["log_level"]),
            )

        config.validate()
        return config

    @staticmethod
    def from_yaml(path: Path, base: TextProcessorConfig | None = None) -> TextProcessorConfig:
        """Create a validated config from a YAML file over `base`."""

        payload = ConfigLoader._parse_yaml_payload(path.read_text(encoding="utf-8"), path)
        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            base=base if base is not None else TextProcessorConfig(),
        )

    @staticmethod
    def resolve(
        config_path: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> TextProcessorConfig:
        """Resolve defaults, environment, and an optional YAML file in precedence order."""

        config = ConfigLoader.from_env(env)
        if config_path is None:
            return config
        return ConfigLoader.from_yaml(config_path, base=config)

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        payload = yaml.safe_load(raw_text)
        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        base: TextProcessorConfig,
    ) -> TextProcessorConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        config = base
        history_file = normalize_optional_string(payload.get("history_file"))
        if history_file is not None:
            config = replace(config, history_file=Path(history_file))

        encoding = normalize_optional_string(payload.get("encoding"))
        if encoding is not None:
            config = replace(config, encoding=parse_encoding(encoding, "encoding"))

        log_level = normalize_optional_string(payload.get("log_level"))
        if log_level is not None:
            config = replace(config, log_level=parse_log_level(log_level, "log_level"))

        config.validate()
        return config

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], field_name: str) -> str | None:
        """Read and normalize the environment variable backing `field_name`."""

        return normalize_optional_string(env.get(ConfigLoader._ENV_KEYS[field_name]))
