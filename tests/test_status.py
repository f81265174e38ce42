"""Tests for status reporting"""

import json
import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from wgtoggle.vpn.errors import StoreWriteError
from wgtoggle.vpn.status import StatusReport, build_status, make_report


class TestStatusReport:
    def test_json_keys_and_order(self, settings):
        report = make_report("wg0", "", settings)
        line = report.to_json()
        assert "\n" not in line
        assert list(json.loads(line)) == ["text", "alt", "tooltip", "class", "percentage"]

    def test_icon_is_not_escaped(self, settings):
        settings.icon = "\uf023"
        assert "\uf023" in make_report(None, "work", settings).to_json()

    def test_percentage_bounds(self):
        with pytest.raises(ValidationError):
            StatusReport(text="", alt="", tooltip="", css_class="x", percentage=101)

    def test_accepts_class_alias(self):
        report = StatusReport.model_validate(
            {"text": "", "alt": "", "tooltip": "", "class": "connected", "percentage": 100}
        )
        assert report.connected


class TestMakeReport:
    def test_connected(self, settings):
        report = make_report("wg0", "", settings)
        assert report.css_class == "connected"
        assert report.alt == "connected"
        assert report.percentage == 100
        assert "wg0" in report.text
        assert report.tooltip == "AmneziaWG Connected: wg0"

    def test_disconnected(self, settings):
        report = make_report(None, "work", settings)
        assert report.css_class == "disconnected"
        assert report.alt == "disconnected"
        assert report.percentage == 0
        assert report.text == "* work"
        assert report.tooltip == "AmneziaWG Disconnected. Selected: work"

    def test_wireguard_label(self, settings):
        settings.tool = "wg"
        assert make_report("wg0", "", settings).tooltip == "WireGuard Connected: wg0"


class TestBuildStatus:
    def test_auto_selects_first_config(self, fake_control, store, settings, state_path):
        report = build_status(fake_control, store, settings)
        assert report.text == "* a"
        assert state_path.read_text() == "a"

    def test_keeps_existing_selection(self, fake_control, store, settings):
        store.save("c")
        assert build_status(fake_control, store, settings).text == "* c"
        assert store.load() == "c"

    def test_active_interface_wins(self, fake_control, store, settings):
        fake_control.active = "wg0"
        report = build_status(fake_control, store, settings)
        assert report.css_class == "connected"
        assert "wg0" in report.text

    def test_unreadable_directory_degrades(self, fake_control, store, settings, tmp_path):
        settings.config_dir = tmp_path / "missing"
        report = build_status(fake_control, store, settings)
        assert report.css_class == "disconnected"
        assert report.text == "* "
        assert store.load() == ""

    def test_failed_auto_save_still_reports(self, fake_control, store, settings):
        with patch.object(store, "save", side_effect=StoreWriteError(store.path, "read-only")):
            report = build_status(fake_control, store, settings)
        assert report.text == "* a"

    def test_undecodable_config_name_does_not_abort(self, fake_control, store, tmp_path, settings):
        settings.config_dir = tmp_path / "odd"
        settings.config_dir.mkdir()
        (settings.config_dir / os.fsdecode(b"\xff.conf")).write_text("")
        report = build_status(fake_control, store, settings)
        assert report.css_class == "disconnected"
        assert report.text == "* "
