import logging

from PyQt6.QtCore import QSettings

from pugaipadam.storage.settings_store import ViewerSettings, load_settings, save_settings


def ini_settings(tmp_path, name="settings.ini") -> QSettings:
    return QSettings(str(tmp_path / name), QSettings.Format.IniFormat)


def test_defaults_when_empty(tmp_path):
    cfg = load_settings(ini_settings(tmp_path))
    assert cfg == ViewerSettings()
    assert cfg.nav_wrap_ends is True
    assert cfg.dir_sort_mode == "fs"


def test_round_trip(tmp_path):
    cfg = ViewerSettings(
        nav_wrap_ends=False,
        dir_sort_mode="natural",
        accept_svg=False,
        log_level="DEBUG",
        custom_keys={"show_next_image": ["N", "Space"]},
    )
    save_settings(ini_settings(tmp_path), cfg)
    assert load_settings(ini_settings(tmp_path)) == cfg


def test_invalid_values_fall_back(tmp_path, caplog):
    s = ini_settings(tmp_path)
    s.setValue("dir/sort_mode", "shuffle")
    s.setValue("log/level", "LOUD")
    s.setValue("nav/wrap_ends", "maybe")
    s.setValue("open/accept_svg", "perhaps")
    with caplog.at_level(logging.WARNING, logger="pugaipadam"):
        cfg = load_settings(s)
    assert cfg.dir_sort_mode == "fs"
    assert cfg.log_level == "INFO"
    assert cfg.nav_wrap_ends is True
    assert cfg.accept_svg is True
    warned = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    for key in ("dir/sort_mode", "log/level", "nav/wrap_ends", "open/accept_svg"):
        assert any(f"key={key} " in m for m in warned), key


def test_bool_strings_are_parsed(tmp_path):
    s = ini_settings(tmp_path)
    s.setValue("nav/wrap_ends", "false")
    s.setValue("open/accept_svg", "0")
    cfg = load_settings(s)
    assert cfg.nav_wrap_ends is False
    assert cfg.accept_svg is False
