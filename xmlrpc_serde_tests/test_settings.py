import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

from xmlrpc_serde.conf import DEFAULT_SETTINGS, CodecSettings
from xmlrpc_serde.conf.settings import FRAMES_PER_LEVEL


def test_defaults() -> None:
    assert DEFAULT_SETTINGS.STRICT_FIELDS is False
    assert DEFAULT_SETTINGS.MISSING_OPTIONAL_AS_NONE is True
    assert DEFAULT_SETTINGS.DOUBLE_ACCEPTS_INT is True
    assert DEFAULT_SETTINGS.MAX_DEPTH == 128


def test_from_yaml(tmp_path: Path) -> None:
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('STRICT_FIELDS: true\nMAX_DEPTH: 32\n')
    settings = CodecSettings.from_yaml(filepath=filepath)
    assert settings.STRICT_FIELDS is True
    assert settings.MAX_DEPTH == 32
    assert settings.DOUBLE_ACCEPTS_INT is True


def test_from_empty_yaml(tmp_path: Path) -> None:
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('')
    assert CodecSettings.from_yaml(filepath=str(filepath)) == DEFAULT_SETTINGS


def test_from_yaml_not_a_file(tmp_path: Path) -> None:
    with pytest.raises(ValueError):
        CodecSettings.from_yaml(filepath=tmp_path / 'missing.yml')


def test_from_yaml_not_a_dict(tmp_path: Path) -> None:
    filepath = tmp_path / 'codec.yml'
    filepath.write_text('- STRICT_FIELDS\n')
    with pytest.raises(ValueError):
        CodecSettings.from_yaml(filepath=filepath)


def test_invalid_settings() -> None:
    with pytest.raises(ValidationError):
        CodecSettings(MAX_DEPTH=0)
    with pytest.raises(ValidationError):
        CodecSettings(UNKNOWN_OPTION=True)  # type: ignore[call-arg]


def test_frozen() -> None:
    with pytest.raises(ValidationError):
        DEFAULT_SETTINGS.MAX_DEPTH = 1  # type: ignore[misc]


def test_max_depth_bounded_by_recursion_limit() -> None:
    upper_bound = sys.getrecursionlimit() // FRAMES_PER_LEVEL
    assert DEFAULT_SETTINGS.MAX_DEPTH <= upper_bound
    assert CodecSettings(MAX_DEPTH=upper_bound).MAX_DEPTH == upper_bound
    with pytest.raises(ValidationError):
        CodecSettings(MAX_DEPTH=upper_bound + 1)
    with pytest.raises(ValidationError):
        CodecSettings(MAX_DEPTH=100_000)
