import pytest
from models.algorithm import Algorithm, Mode
from services.hashing_service import DEFAULT_CHUNK_SIZE
from utils.exceptions import ConfigurationError
from utils.polysum_config import get_config_value, load_configuration, load_settings, write_temp_config


def test_load_configuration_missing_file_uses_defaults(tmp_path):
    config = load_configuration(str(tmp_path / "nope.ini"))
    assert config == {}
    settings = load_settings(config)
    assert settings.algorithm is Algorithm.BLAKE3
    assert settings.chunk_size == DEFAULT_CHUNK_SIZE


def test_load_configuration_reads_file(tmp_path):
    path = write_temp_config({"Hashing": {"algorithm": "sha3-256", "mode": "binary", "prefix": "yes",
                                          "chunk_size": "4096", "max_workers": "3"}}, tmp_path)
    settings = load_settings(load_configuration(str(path)))
    assert settings.algorithm is Algorithm.SHA3_256
    assert settings.mode is Mode.BINARY
    assert settings.prefix is True
    assert settings.chunk_size == 4096
    assert settings.max_workers == 3


def test_env_overrides_file(tmp_path, monkeypatch):
    path = write_temp_config({"hashing": {"algorithm": "sha1"}}, tmp_path)
    monkeypatch.setenv("POLYSUM_ALGORITHM", "md5")
    monkeypatch.setenv("POLYSUM_PREFIX", "off")
    settings = load_settings(load_configuration(str(path)))
    assert settings.algorithm is Algorithm.MD5
    assert settings.prefix is False


def test_env_without_file(tmp_path, monkeypatch):
    monkeypatch.setenv("POLYSUM_MODE", "binary")
    assert load_settings(load_configuration(None)).mode is Mode.BINARY


def test_invalid_ini_raises(tmp_path):
    path = tmp_path / "broken.ini"
    path.write_text("this is not [an ini file\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_configuration(str(path))


@pytest.mark.parametrize("values", [
    {"algorithm": "sha256"},
    {"mode": "hex"},
    {"chunk_size": "0"},
    {"chunk_size": "big"},
    {"max_workers": "0"},
    {"prefix": "maybe"},
])
def test_invalid_settings_raise(values):
    with pytest.raises(ConfigurationError):
        load_settings({"hashing": values})


def test_blank_values_fall_back():
    settings = load_settings({"hashing": {"algorithm": "  ", "max_workers": ""}})
    assert settings.algorithm is Algorithm.BLAKE3
    assert settings.max_workers is None


def test_get_config_value_case_insensitive():
    config = {"hashing": {"algorithm": " md5 "}}
    assert get_config_value(config, "Hash", "ALGORITHM") == "md5"
    assert get_config_value(config, "hashing", "missing", fallback="x") == "x"
    assert get_config_value(None, "hashing", "algorithm", fallback="y") == "y"


@pytest.mark.parametrize("raw, expected", [("true", True), ("On", True), ("1", True), ("no", False), ("disabled", False)])
def test_get_config_value_bool(raw, expected):
    assert get_config_value({"hashing": {"prefix": raw}}, "hashing", "prefix", value_type=bool) is expected


def test_get_config_value_int_error_mentions_key():
    with pytest.raises(ConfigurationError, match=r"\[hashing\]\.chunk_size"):
        get_config_value({"hashing": {"chunk_size": "1k"}}, "hashing", "chunk_size", value_type=int)
