from unittest.mock import patch

import pytest

from lumberjack import main as main_module


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for key in ("AWS_REGION", "AWS_DEFAULT_REGION", "AWS_PROFILE", "LUMBERJACK_POLL_INTERVAL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("LUMBERJACK_LOG_DIR", str(tmp_path / "logs"))


@pytest.fixture
def quiet_logging(tmp_path):
    with patch.object(main_module, "configure_logging", return_value=tmp_path / "lumberjack.log") as mock:
        yield mock


def test_flags_reach_settings(quiet_logging):
    with patch("lumberjack.UI.run_app") as run_app:
        assert main_module.main(["--region", "us-west-2", "--profile", "dev", "--poll-interval", "5"]) == 0

    settings = run_app.call_args[0][0]
    assert settings.region == "us-west-2"
    assert settings.profile == "dev"
    assert settings.poll_interval == 5.0


def test_keyboard_interrupt_exits_cleanly(quiet_logging, capsys):
    with patch("lumberjack.UI.run_app", side_effect=KeyboardInterrupt):
        assert main_module.main([]) == 0
    assert "terminated by user" in capsys.readouterr().out


def test_unexpected_error_exits_with_one(quiet_logging, capsys):
    with patch("lumberjack.UI.run_app", side_effect=RuntimeError("kaboom")):
        assert main_module.main([]) == 1
    assert "kaboom" in capsys.readouterr().out


def test_invalid_configuration(quiet_logging, capsys):
    assert main_module.main(["--poll-interval", "-1"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err
    quiet_logging.assert_not_called()
