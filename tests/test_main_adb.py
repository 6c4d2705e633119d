"""Tests for the ADB connection check and command building.

subprocess.run is replaced with a scripted fake; no adb binary or device is needed.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest

import main_adb
from utils.adb_screenshot import run_adb_command

ADB_CONFIG = {"adb_path": "adb", "device_address": "127.0.0.1:5555"}
NO_DEVICES = "List of devices attached\n\n"
ONE_DEVICE = "List of devices attached\n127.0.0.1:5555\tdevice\n"


class FakeAdb:
    """Answers `adb devices` from a script and records every command."""

    def __init__(self, devices_outputs):
        self.devices_outputs = list(devices_outputs)
        self.commands = []

    def __call__(self, command, **kwargs):
        self.commands.append(command[1:])
        if command[1] == "devices":
            return SimpleNamespace(stdout=self.devices_outputs.pop(0), stderr="")
        if command[1] == "connect":
            return SimpleNamespace(stdout=f"connected to {command[2]}", stderr="")
        return SimpleNamespace(stdout="", stderr="")

    def subcommands(self):
        return [command[0] for command in self.commands]


@pytest.fixture
def adb_config():
    with patch("main_adb.load_adb_config", return_value=dict(ADB_CONFIG)), \
         patch("main_adb.time.sleep"):
        yield


class TestCheckAdbConnection:
    def test_device_already_listed(self, adb_config):
        fake = FakeAdb([ONE_DEVICE])
        with patch("main_adb.subprocess.run", side_effect=fake):
            assert main_adb.check_adb_connection() is True

        assert fake.subcommands() == ["devices"]

    def test_connects_to_configured_address(self, adb_config):
        fake = FakeAdb([NO_DEVICES, ONE_DEVICE])
        with patch("main_adb.subprocess.run", side_effect=fake):
            assert main_adb.check_adb_connection() is True

        assert fake.subcommands() == ["devices", "connect", "devices"]
        assert fake.commands[1] == ["connect", "127.0.0.1:5555"]

    def test_restarts_server_and_retries_once(self, adb_config):
        fake = FakeAdb([NO_DEVICES, NO_DEVICES, ONE_DEVICE])
        with patch("main_adb.subprocess.run", side_effect=fake):
            assert main_adb.check_adb_connection() is True

        assert fake.subcommands() == [
            "devices", "connect", "devices", "kill-server", "start-server", "connect", "devices",
        ]

    def test_gives_up_after_retry(self, adb_config):
        fake = FakeAdb([NO_DEVICES, NO_DEVICES, NO_DEVICES])
        with patch("main_adb.subprocess.run", side_effect=fake):
            assert main_adb.check_adb_connection() is False

        assert fake.subcommands().count("connect") == 2

    def test_adb_missing(self, adb_config):
        with patch("main_adb.subprocess.run", side_effect=FileNotFoundError("adb")):
            assert main_adb.check_adb_connection() is False

    def test_no_address_configured(self):
        fake = FakeAdb([NO_DEVICES])
        with patch("main_adb.load_adb_config", return_value={"adb_path": "adb", "device_address": ""}), \
             patch("main_adb.subprocess.run", side_effect=fake):
            assert main_adb.check_adb_connection() is False

        assert "connect" not in fake.subcommands()


class TestMain:
    def test_connection_failure_alerts_and_exits(self):
        with patch("main_adb.check_adb_connection", return_value=False), \
             patch("main_adb.show_alert") as alert:
            with pytest.raises(SystemExit):
                main_adb.main()

        alert.assert_called_once()
        assert alert.call_args[0][0] == "ADB connection failed"


class TestRunAdbCommand:
    def test_targets_configured_device(self):
        completed = SimpleNamespace(stdout=" Physical size: 1080x1920 \n")
        with patch("utils.adb_screenshot.load_adb_config", return_value=dict(ADB_CONFIG)), \
             patch("utils.adb_screenshot.subprocess.run", return_value=completed) as run:
            output = run_adb_command(["shell", "wm", "size"])

        assert output == "Physical size: 1080x1920"
        assert run.call_args[0][0] == ["adb", "-s", "127.0.0.1:5555", "shell", "wm", "size"]

    def test_no_device_address(self):
        completed = SimpleNamespace(stdout=b"\x00")
        with patch("utils.adb_screenshot.load_adb_config", return_value={"adb_path": "/opt/adb"}), \
             patch("utils.adb_screenshot.subprocess.run", return_value=completed) as run:
            assert run_adb_command(["exec-out", "screencap"], binary=True) == b"\x00"

        assert run.call_args[0][0] == ["/opt/adb", "exec-out", "screencap"]

    def test_failed_command_returns_none(self):
        error = main_adb.subprocess.CalledProcessError(1, ["adb"])
        with patch("utils.adb_screenshot.load_adb_config", return_value=dict(ADB_CONFIG)), \
             patch("utils.adb_screenshot.subprocess.run", side_effect=error):
            assert run_adb_command(["shell", "true"]) is None
