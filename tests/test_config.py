import os

import pytest

import pathlog.core.config as config_module
from pathlog.core.config import LoggerConfig, split_path
from pathlog.core.exceptions import CustomError, InvalidPathError, PathErrorType


def test_defaults_follow_working_directory():
    config = LoggerConfig()

    assert config.get_root_path() == os.getcwd()
    assert config.get_colored_log() is False
    assert config.get_log_debug_level() is False


def test_split_path_accepts_both_separators():
    assert split_path("C:\\a/b\\c") == ["C:", "a", "b", "c"]
    assert split_path("/a/b") == ["", "a", "b"]


def test_set_root_path_round_trip(tmp_path):
    config = LoggerConfig()
    config.set_root_path(str(tmp_path))

    assert config.get_root_path() == str(tmp_path)
    assert config.root_path_segments == split_path(str(tmp_path))


def test_set_root_path_accepts_path_objects(tmp_path):
    config = LoggerConfig(root_path=tmp_path)

    assert config.get_root_path() == str(tmp_path)


def test_relative_root_path_is_made_absolute(tmp_path, monkeypatch):
    (tmp_path / "src").mkdir()
    monkeypatch.chdir(tmp_path)
    config = LoggerConfig()
    config.set_root_path("src")

    assert config.get_root_path() == os.path.join(os.getcwd(), "src")


def test_file_is_rejected_and_root_kept(tmp_path):
    target = tmp_path / "module.py"
    target.write_text("")
    config = LoggerConfig(root_path=str(tmp_path))

    with pytest.raises(InvalidPathError) as excinfo:
        config.set_root_path(str(target))

    assert excinfo.value.error_type is PathErrorType.PATH_IS_FILE
    assert str(excinfo.value) == "The specified path is a file."
    assert config.get_root_path() == str(tmp_path)


def test_missing_path_is_rejected_and_root_kept(tmp_path):
    config = LoggerConfig(root_path=str(tmp_path))

    with pytest.raises(InvalidPathError) as excinfo:
        config.set_root_path(str(tmp_path / "missing"))

    assert excinfo.value.error_type is PathErrorType.PATH_NOT_FOUND
    assert str(excinfo.value) == "The specified path was not found."
    assert config.get_root_path() == str(tmp_path)


def test_path_below_a_file_is_not_found(tmp_path):
    target = tmp_path / "module.py"
    target.write_text("")
    config = LoggerConfig()

    with pytest.raises(InvalidPathError) as excinfo:
        config.set_root_path(str(target / "child"))

    assert excinfo.value.error_type is PathErrorType.PATH_NOT_FOUND


@pytest.mark.parametrize(
    "raised, error_type, message",
    [
        (PermissionError, PathErrorType.PERMISSION_DENIED, "Permission denied."),
        (OSError, PathErrorType.UNKNOWN, "An unknown error occurred."),
    ],
)
def test_stat_failures_are_mapped(tmp_path, monkeypatch, raised, error_type, message):
    config = LoggerConfig(root_path=str(tmp_path))

    def failing_stat(path):
        raise raised("stat failed")

    monkeypatch.setattr(config_module.os, "stat", failing_stat)
    with pytest.raises(InvalidPathError) as excinfo:
        config.set_root_path("/anywhere")

    assert excinfo.value.error_type is error_type
    assert str(excinfo.value) == message
    assert isinstance(excinfo.value.__cause__, raised)
    assert config.get_root_path() == str(tmp_path)


def test_invalid_path_error_is_a_custom_error():
    assert isinstance(InvalidPathError(PathErrorType.UNKNOWN), CustomError)
    assert InvalidPathError("PATH_IS_FILE").error_type is PathErrorType.PATH_IS_FILE


def test_flags_are_plain_accessors():
    config = LoggerConfig()
    config.set_colored_log(True)
    config.set_log_debug_level(True)

    assert config.get_colored_log() is True
    assert config.get_log_debug_level() is True
