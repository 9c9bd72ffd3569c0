import json

from mediarenamer.config import SettingsManager


def test_defaults_when_file_missing(tmp_path):
    mgr = SettingsManager(tmp_path / "settings.json")

    assert mgr.get("mapping_file_name") == "RenameMapping.txt"
    assert mgr.get("report_file_name") == "RenameReport.txt"
    assert mgr.get("recursive") is True
    assert mgr.get("log_level") == "WARNING"


def test_saved_values_override_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"recursive": False}), encoding="utf-8")

    mgr = SettingsManager(path)

    assert mgr.get("recursive") is False
    assert mgr.get("log_level") == "WARNING"


def test_unknown_key_uses_given_default(tmp_path):
    mgr = SettingsManager(tmp_path / "settings.json")

    assert mgr.get("nonexistent", 42) == 42


def test_malformed_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")

    assert SettingsManager(path).get("mapping_file_name") == "RenameMapping.txt"


def test_non_object_file_falls_back_to_defaults(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("[1, 2]", encoding="utf-8")

    assert SettingsManager(path).get("recursive") is True
