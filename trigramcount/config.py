"""Configuration model and loaders for trigramcount.

Responsibilities:
- Define run configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `TrigramConfig`: normalized settings for one run.
- `ConfigLoader`: static construction helpers for `TrigramConfig`.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_required_positive_int

DEFAULT_TOP_N = 100
DEFAULT_ENCODING = "utf-8"
DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(slots=True)
class TrigramConfig:
    """Settings for one trigram run.

    Attributes:
        files: Input names in the order given; empty means standard input.
        threads: Raw requested worker count, resolved leniently at run time.
        top_n: Maximum number of ranked lines printed per unit.
        encoding: Text encoding used to read input files.
        log_level: Minimum `loguru` level for phase logs.
    """

    files: list[str] = field(default_factory=list)
    threads: str | None = None
    top_n: int = DEFAULT_TOP_N
    encoding: str = DEFAULT_ENCODING
    log_level: str = DEFAULT_LOG_LEVEL

    def validate(self) -> None:
        """Validate configuration values before a run."""

        parse_required_positive_int(self.top_n, "top_n")
        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            raise ValueError(f"`encoding` names an unknown codec: `{self.encoding}`.") from exc
        if self.log_level.upper() not in _SUPPORTED_LOG_LEVELS:
            levels = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(f"`log_level` must be one of: {levels}.")


class ConfigLoader:
    """Factory methods for building `TrigramConfig` instances."""

    _SUPPORTED_YAML_KEYS = frozenset({"files", "threads", "top_n", "encoding", "log_level"})

    @staticmethod
    def from_yaml(path: Path, base: TrigramConfig | None = None) -> TrigramConfig:
        """Create a validated config from a YAML file layered over `base` defaults."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        return ConfigLoader._build_config_from_mapping(
            payload,
            source_label=f"YAML `{path}`",
            base=base or TrigramConfig(),
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> TrigramConfig:
        """Create a validated config from `TRIGRAMCOUNT_*` environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        top_n = ConfigLoader._optional_env_positive_int(env_map, "TRIGRAMCOUNT_TOP_N")
        encoding = ConfigLoader._optional_env_string(env_map, "TRIGRAMCOUNT_ENCODING")
        log_level = ConfigLoader._optional_env_string(env_map, "TRIGRAMCOUNT_LOG_LEVEL")

        config = TrigramConfig(
            top_n=top_n or DEFAULT_TOP_N,
            encoding=encoding or DEFAULT_ENCODING,
            log_level=(log_level or DEFAULT_LOG_LEVEL).upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any], source_label: str, base: TrigramConfig
    ) -> TrigramConfig:
        """Build a validated config from a parsed mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        files = ConfigLoader._optional_string_list(payload, "files", source_label)
        threads = normalize_optional_string(payload.get("threads"))
        top_n = base.top_n
        if "top_n" in payload:
            try:
                top_n = parse_required_positive_int(payload["top_n"], "top_n")
            except ValueError as exc:
                raise ValueError(f"{source_label} field {exc}") from exc
        encoding = normalize_optional_string(payload.get("encoding")) or base.encoding
        log_level = normalize_optional_string(payload.get("log_level")) or base.log_level

        config = TrigramConfig(
            files=files if files is not None else list(base.files),
            threads=threads if threads is not None else base.threads,
            top_n=top_n,
            encoding=encoding,
            log_level=log_level.upper(),
        )
        config.validate()
        return config

    @staticmethod
    def _optional_string_list(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> list[str] | None:
        """Read an optional list of non-empty strings from a payload."""

        if key not in payload or payload[key] is None:
            return None

        raw = payload[key]
        if isinstance(raw, str):
            raw = [raw]
        if not isinstance(raw, list):
            raise ValueError(f"{source_label} field `{key}` must be a list of paths.")

        values: list[str] = []
        for item in raw:
            value = normalize_optional_string(item)
            if value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank entry.")
            values.append(value)
        return values

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        try:
            parsed = int(raw_value)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc
        if parsed <= 0:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.")
        return parsed
