import json

import pytest

from appkey import config
from appkey.errors import ConfigDecodeError, ConfigReadError, ConfigWriteError


def test_missing_file_is_empty(tmp_path):
    assert config.load_config(tmp_path / "config.json") == {}


def test_config_path_joins_filename(tmp_path):
    assert config.config_path(tmp_path) == tmp_path / "config.json"
    assert config.config_path(str(tmp_path)) == tmp_path / "config.json"


def test_save_creates_parent_and_roundtrips(tmp_path):
    path = tmp_path / "nested" / "dir" / "config.json"
    config.save_config(path, {"theme": "dark", "name": "café"})
    assert config.load_config(path) == {"theme": "dark", "name": "café"}
    assert not path.with_suffix(".tmp").exists()
    assert "café" in path.read_text(encoding="utf-8")


def test_corrupt_json_raises_decode_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigDecodeError) as info:
        config.load_config(path)
    assert info.value.path == path
    assert "line 1" in str(info.value)


def test_non_object_json_raises_decode_error(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(["a", "b"]), encoding="utf-8")
    with pytest.raises(ConfigDecodeError, match="JSON object"):
        config.load_config(path)


def test_directory_in_place_of_file_raises_read_error(tmp_path):
    path = tmp_path / "config.json"
    path.mkdir()
    with pytest.raises(ConfigReadError):
        config.load_config(path)


def test_write_failure_raises_and_cleans_tmp(tmp_path, monkeypatch):
    path = tmp_path / "config.json"

    def _boom(self, target):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(config.Path, "replace", _boom)
    with pytest.raises(ConfigWriteError) as info:
        config.save_config(path, {"a": 1})
    assert info.value.path == path
    assert not path.exists()
    assert not path.with_suffix(".tmp").exists()


def test_update_config_merges(tmp_path):
    path = tmp_path / "config.json"
    config.save_config(path, {"theme": "dark", "lang": "en"})
    merged = config.update_config(path, lang="es", api_key="k")
    assert merged == {"theme": "dark", "lang": "es", "api_key": "k"}
    assert json.loads(path.read_text(encoding="utf-8")) == merged
