import json
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from slashschema.build import OptionBuilder
from slashschema.exceptions import ParsingError
from slashschema.utils import create_logger


class TestCreateLogger:
    def test_writes_json_to_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "slashschema.log"
        logger = create_logger(level="debug", log_file=str(log_file))

        logger.info("option_loaded", name="color")

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["event"] == "option_loaded"
        assert entry["name"] == "color"
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_filters_below_level(self, tmp_path: Path) -> None:
        log_file = tmp_path / "slashschema.log"
        logger = create_logger(level="warning", log_file=str(log_file))

        logger.info("ignored")
        logger.warning("kept")

        lines = log_file.read_text().splitlines()
        assert len(lines) == 1
        assert "kept" in lines[0]

    def test_text_format(self, tmp_path: Path) -> None:
        log_file = tmp_path / "slashschema.log"
        logger = create_logger(level="info", log_format="text", log_file=str(log_file))

        logger.info("command_parsed", name="ping")

        content = log_file.read_text()
        assert "command_parsed" in content
        assert "name=ping" in content

    def test_rotating_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "rotating.log"
        logger = create_logger(
            level="info", log_file=str(log_file), max_bytes=1024, backup_count=1
        )

        logger.info("rotated_event")

        assert "rotated_event" in log_file.read_text()


class TestLoadLogging:
    def test_load_emits_debug_event(self, mocker: MockerFixture) -> None:
        logger = mocker.MagicMock()

        OptionBuilder.load(
            {"type": 3, "name": "color", "description": "pick"}, logger=logger
        )

        logger.debug.assert_called_once()
        assert logger.debug.call_args.args == ("option_loaded",)
        assert logger.debug.call_args.kwargs["name"] == "color"

    def test_rejected_payload_emits_warning(self, mocker: MockerFixture) -> None:
        logger = mocker.MagicMock()

        with pytest.raises(ParsingError):
            OptionBuilder.load({"type": 3, "name": "color"}, logger=logger)

        logger.warning.assert_called_once()
        assert logger.warning.call_args.kwargs["key"] == "description"


class TestSharedLogger:
    def test_quiet_without_log_file(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.delenv("SLASHSCHEMA_LOG_FILE", raising=False)

        with pytest.raises(ParsingError):
            OptionBuilder.load({"type": 3, "name": "color"})

        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_writes_to_configured_log_file(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "logs" / "slashschema.log"
        monkeypatch.setenv("SLASHSCHEMA_LOG_FILE", str(log_file))
        for name in ("SLASHSCHEMA_LOG_LEVEL", "SLASHSCHEMA_LOG_FORMAT", "SLASHSCHEMA_DEBUG"):
            monkeypatch.delenv(name, raising=False)

        with pytest.raises(ParsingError):
            OptionBuilder.load({"type": 3, "name": "color"})

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["event"] == "payload_rejected"
        assert entry["component"] == "slashschema"
        assert entry["key"] == "description"
