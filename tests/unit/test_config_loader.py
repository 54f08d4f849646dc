"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from trigramcount.config import ConfigLoader, TrigramConfig


def test_config_loader_from_yaml_loads_and_normalizes_values(tmp_path: Path) -> None:
    config_path = tmp_path / "trigramcount.yml"
    config_path.write_text(
        """
files:
  - " a.txt "
  - b.txt
threads: 3
top_n: " 25 "
encoding: " latin-1 "
log_level: info
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.files == ["a.txt", "b.txt"]
    assert config.threads == "3"
    assert config.top_n == 25
    assert config.encoding == "latin-1"
    assert config.log_level == "INFO"


def test_config_loader_from_yaml_keeps_base_values_for_missing_keys(tmp_path: Path) -> None:
    config_path = tmp_path / "partial.yml"
    config_path.write_text("files: single.txt\n", encoding="utf-8")
    base = TrigramConfig(top_n=7, encoding="utf-16", log_level="DEBUG")

    config = ConfigLoader.from_yaml(config_path, base=base)

    assert config.files == ["single.txt"]
    assert config.threads is None
    assert config.top_n == 7
    assert config.encoding == "utf-16"
    assert config.log_level == "DEBUG"


def test_config_loader_from_yaml_accepts_empty_file(tmp_path: Path) -> None:
    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == TrigramConfig()


@pytest.mark.parametrize(
    ("payload", "message"),
    [
        ("unknown_key: 1\n", "unsupported key"),
        ("- a\n- b\n", "top-level mapping"),
        ("top_n: 0\n", "`top_n` must be a positive integer"),
        ("files: 3\n", "must be a list of paths"),
        ("files: ['a.txt', ' ']\n", "contains a blank entry"),
        ("encoding: not-a-codec\n", "unknown codec"),
        ("log_level: loud\n", "`log_level` must be one of"),
        ("files: [a.txt\n", "not valid YAML"),
    ],
)
def test_config_loader_from_yaml_rejects_invalid_payloads(
    tmp_path: Path, payload: str, message: str
) -> None:
    config_path = tmp_path / "invalid.yml"
    config_path.write_text(payload, encoding="utf-8")

    with pytest.raises(ValueError, match=message):
        ConfigLoader.from_yaml(config_path)


def test_config_loader_from_env_reads_prefixed_variables() -> None:
    config = ConfigLoader.from_env(
        {
            "TRIGRAMCOUNT_TOP_N": "10",
            "TRIGRAMCOUNT_ENCODING": "latin-1",
            "TRIGRAMCOUNT_LOG_LEVEL": "debug",
            "UNRELATED": "value",
        }
    )

    assert config.top_n == 10
    assert config.encoding == "latin-1"
    assert config.log_level == "DEBUG"
    assert config.files == []


def test_config_loader_from_env_uses_defaults_for_blank_values() -> None:
    config = ConfigLoader.from_env({"TRIGRAMCOUNT_TOP_N": "  ", "TRIGRAMCOUNT_ENCODING": ""})

    assert config == TrigramConfig()


@pytest.mark.parametrize("value", ["zero", "0", "-5"])
def test_config_loader_from_env_rejects_invalid_top_n(value: str) -> None:
    with pytest.raises(ValueError, match="TRIGRAMCOUNT_TOP_N"):
        ConfigLoader.from_env({"TRIGRAMCOUNT_TOP_N": value})
