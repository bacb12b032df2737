# tests/test_core.py

import json
import logging
import threading
from pathlib import Path

import pytest

from zfinder.core.icon_classifier import (
    CATEGORY_EXTENSIONS, CATEGORY_SYMBOLS, ExtensionCategory, classify, classify_path,
    normalize_extension, symbol_for
)
from zfinder.core.opener import SystemOpener, default_open_command
from zfinder.core.pins import Pin, PinBoard
from zfinder.core.settings import AppSettings, load_settings, save_settings


# --- Tests for icon_classifier.py ---

@pytest.mark.parametrize("extension, expected", [
    ("jpg", ExtensionCategory.PHOTO),
    ("JPG", ExtensionCategory.PHOTO),
    (".Jpeg", ExtensionCategory.PHOTO),
    ("svg", ExtensionCategory.PHOTO),
    ("pdf", ExtensionCategory.DOCUMENT),
    ("json", ExtensionCategory.SPREADSHEET),
    ("tsv", ExtensionCategory.SPREADSHEET),
    ("key", ExtensionCategory.PRESENTATION),
    ("flac", ExtensionCategory.AUDIO),
    ("MKV", ExtensionCategory.VIDEO),
    ("7z", ExtensionCategory.ARCHIVE),
    ("sh", ExtensionCategory.EXECUTABLE),
    ("", ExtensionCategory.GENERIC),
])
def test_classify_known_extensions(extension, expected):
    """The table lookups and their case/dot variants."""
    assert classify(extension) == expected


@pytest.mark.parametrize("extension", ["gz", "py", "xyz", "jpgg", "tar.gz", ".", "..jpg", " jpg"])
def test_classify_unknown_extensions_are_generic(extension):
    assert classify(extension) == ExtensionCategory.GENERIC


def test_classify_is_case_insensitive_for_every_table_entry():
    for category, extensions in CATEGORY_EXTENSIONS.items():
        for ext in extensions:
            assert classify(ext.upper()) == classify(ext) == category
            assert classify("." + ext) == category


def test_each_extension_belongs_to_one_category():
    seen = {}
    for category, extensions in CATEGORY_EXTENSIONS.items():
        for ext in extensions:
            assert ext not in seen, f"'{ext}' is listed under {seen.get(ext)} and {category}"
            seen[ext] = category
    assert ExtensionCategory.GENERIC not in CATEGORY_EXTENSIONS


def test_classify_is_deterministic():
    assert [classify("Mp3") for _ in range(5)] == [ExtensionCategory.AUDIO] * 5


def test_classify_tolerates_none():
    assert classify(None) == ExtensionCategory.GENERIC


def test_normalize_extension():
    assert normalize_extension(".TAR") == "tar"
    assert normalize_extension("Doc") == "doc"
    assert normalize_extension("") == ""


def test_every_category_has_a_symbol():
    assert set(CATEGORY_SYMBOLS) == set(ExtensionCategory)
    assert symbol_for("png") == "photo"
    assert symbol_for("zip") == "doc.zipper"
    assert symbol_for("nothing") == "doc"


def test_classify_path_uses_the_last_suffix(tmp_path):
    assert classify_path(tmp_path / "holiday.PNG") == ExtensionCategory.PHOTO
    assert classify_path("backup.tar.gz") == ExtensionCategory.GENERIC
    assert classify_path("Makefile") == ExtensionCategory.GENERIC
    # A path that does not exist is still classified.
    assert classify_path(tmp_path / "missing" / "song.wav") == ExtensionCategory.AUDIO


# --- Tests for pins.py ---

def test_pin_properties(tmp_path):
    report = tmp_path / "report.PDF"
    report.touch()
    pin = Pin.from_path(report)

    assert pin.path == str(report)
    assert pin.name == "report.PDF"
    assert pin.category == ExtensionCategory.DOCUMENT
    assert pin.exists()


def test_pin_label_overrides_name(tmp_path):
    pin = Pin.from_path(tmp_path, label="Workspace")
    assert pin.name == "Workspace"
    assert pin.category == ExtensionCategory.GENERIC


def test_pin_for_missing_path(tmp_path):
    pin = Pin.from_path(tmp_path / "gone.zip")
    assert not pin.exists()
    assert pin.category == ExtensionCategory.ARCHIVE


def test_pins_on_the_same_path_are_distinct(tmp_path):
    first = Pin.from_path(tmp_path / "a.txt")
    second = Pin.from_path(tmp_path / "a.txt")
    assert first.path == second.path
    assert first != second
    assert first == first


def test_pin_from_relative_path_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    pin = Pin.from_path("notes.txt")
    assert pin.path == str(Path.cwd() / "notes.txt")


def test_pin_board_add_and_remove(tmp_path):
    board = PinBoard()
    changes = []
    board.subscribe(changes.append)

    first = board.add_path(tmp_path / "one.txt")
    second = board.add_path(tmp_path / "two.txt")
    board.add(first)  # already pinned

    assert board.pins == (first, second)
    assert len(changes) == 2

    assert board.remove(first) is True
    assert board.remove(first) is False
    assert list(board) == [second]
    assert changes[-1] == (second,)


def test_pin_board_keeps_two_pins_on_one_path(tmp_path):
    board = PinBoard()
    board.add_path(tmp_path / "same.txt")
    board.add_path(tmp_path / "same.txt")
    assert len(board) == 2


# --- Tests for opener.py ---

class FakePopen:
    """Records launches instead of spawning processes."""
    calls = []
    returncode = 0

    def __init__(self, args, **kwargs):
        FakePopen.calls.append(args)

    def wait(self):
        return FakePopen.returncode


@pytest.fixture
def fake_popen(monkeypatch):
    FakePopen.calls = []
    FakePopen.returncode = 0
    monkeypatch.setattr("zfinder.core.opener.subprocess.Popen", FakePopen)
    return FakePopen


def test_default_open_command_per_platform(monkeypatch):
    monkeypatch.setattr("zfinder.core.opener.sys.platform", "darwin")
    assert default_open_command() == ["open"]
    monkeypatch.setattr("zfinder.core.opener.sys.platform", "win32")
    assert default_open_command() == ["explorer"]
    monkeypatch.setattr("zfinder.core.opener.sys.platform", "linux")
    assert default_open_command() == ["xdg-open"]


def test_system_opener_appends_the_path(fake_popen):
    opener = SystemOpener(["open", "-R"])
    opener("/tmp/some file.txt")
    assert fake_popen.calls == [["open", "-R", "/tmp/some file.txt"]]


def test_system_opener_uses_settings_command(fake_popen):
    opener = SystemOpener.from_settings(AppSettings(open_command=["nautilus"]))
    opener("/srv")
    assert fake_popen.calls == [["nautilus", "/srv"]]


def test_system_opener_swallows_launch_failures(monkeypatch, caplog):
    def broken_popen(args, **kwargs):
        raise FileNotFoundError("no such program")

    monkeypatch.setattr("zfinder.core.opener.subprocess.Popen", broken_popen)
    with caplog.at_level(logging.WARNING):
        SystemOpener(["no-such-browser"])("/tmp")
    assert "no-such-browser" in caplog.text


def test_system_opener_splits_a_string_command(fake_popen):
    SystemOpener("open -R")("/tmp/a b")
    assert fake_popen.calls == [["open", "-R", "/tmp/a b"]]


class ExitedProcess:
    def __init__(self, returncode):
        self.returncode = returncode

    def wait(self):
        return self.returncode


def test_reaper_warns_on_non_zero_exit(caplog):
    with caplog.at_level(logging.WARNING, logger="zfinder.core.opener"):
        SystemOpener._reap(ExitedProcess(3), "/tmp/gone")
    assert "status 3" in caplog.text
    assert "/tmp/gone" in caplog.text


def test_reaper_is_quiet_on_success(caplog):
    with caplog.at_level(logging.WARNING, logger="zfinder.core.opener"):
        SystemOpener._reap(ExitedProcess(0), "/tmp")
    assert caplog.records == []


def test_failed_browser_exit_is_logged_from_the_reaper_thread(fake_popen, monkeypatch, caplog):
    fake_popen.returncode = 1
    threads = []

    class RecordingThread(threading.Thread):
        def start(self):
            threads.append(self)
            super().start()

    monkeypatch.setattr("zfinder.core.opener.threading.Thread", RecordingThread)
    with caplog.at_level(logging.WARNING, logger="zfinder.core.opener"):
        SystemOpener(["open"])("/tmp/missing")
        for thread in threads:
            thread.join(timeout=5)

    assert len(threads) == 1
    assert "status 1" in caplog.text


# --- Tests for settings.py ---

def test_load_settings_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "settings.json")
    assert settings == AppSettings()


def test_load_settings_reads_values_and_ignores_unknown_keys(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({
        "open_command": ["open", "-R"],
        "window_width": 800,
        "theme": "dark",
    }))

    settings = load_settings(settings_file)

    assert settings.open_command == ["open", "-R"]
    assert settings.window_width == 800
    assert settings.window_height == AppSettings().window_height


@pytest.mark.parametrize("content", ["{not json", "[1, 2, 3]", '{"window_width": 1, "log_level": "INFO"'])
def test_load_settings_malformed_file_gives_defaults(tmp_path, content):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(content)
    assert load_settings(settings_file) == AppSettings()


def test_load_settings_accepts_a_string_open_command(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"open_command": "open -R"}))

    settings = load_settings(settings_file)

    assert settings.open_command == ["open", "-R"]
    assert SystemOpener.from_settings(settings).command == ["open", "-R"]


@pytest.mark.parametrize("key, value", [
    ("open_command", 42),
    ("open_command", ["open", 1]),
    ("log_level", ""),
    ("log_file", None),
    ("window_width", "wide"),
    ("window_height", 0),
    ("window_width", True),
    ("shake_amount", -1),
    ("shakes_per_unit", 2.5),
])
def test_invalid_setting_values_fall_back_to_defaults(tmp_path, caplog, key, value):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({key: value}))

    with caplog.at_level(logging.WARNING, logger="zfinder.core.settings"):
        settings = load_settings(settings_file)

    assert getattr(settings, key) == getattr(AppSettings(), key)
    assert key in caplog.text


def test_one_bad_setting_does_not_discard_the_others(tmp_path):
    settings_file = tmp_path / "settings.json"
    settings_file.write_text(json.dumps({"window_width": "wide", "window_height": 640}))

    settings = load_settings(settings_file)

    assert settings.window_width == AppSettings().window_width
    assert settings.window_height == 640


def test_numeric_settings_are_accepted_as_ints_or_floats():
    settings = AppSettings.from_dict({"shake_amount": 8, "window_width": 640})
    assert settings.shake_amount == 8.0
    assert isinstance(settings.shake_amount, float)
    assert settings.window_width == 640


def test_save_settings_keeps_a_backup(tmp_path):
    settings_file = tmp_path / "config" / "settings.json"

    assert save_settings(AppSettings(window_width=700), settings_file)
    assert save_settings(AppSettings(window_width=900), settings_file)

    assert load_settings(settings_file).window_width == 900
    backup = json.loads(settings_file.with_suffix(".json.bak").read_text())
    assert backup["window_width"] == 700
