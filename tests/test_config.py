"""Tests for toolbar configuration loading."""

from ontop.config import OnTopConfig

ENV_VARS = (
    "ONTOP_TOOLBAR_TIMEOUT_MS",
    "ONTOP_UI",
    "ONTOP_SIMULATE_CALL",
    "ONTOP_AUDIO_AVAILABLE",
    "ONTOP_VIDEO_AVAILABLE",
    "ONTOP_AUDIO_MUTED",
    "ONTOP_VIDEO_MUTED",
)


def test_config_defaults(monkeypatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)

    config = OnTopConfig.from_env()
    assert config.toolbar_timeout == 4.0
    assert config.ui == "console"
    assert config.simulate_call is True
    assert config.audio_available is True
    assert config.video_available is True
    assert config.audio_muted is False
    assert config.video_muted is False


def test_config_overrides(monkeypatch) -> None:
    monkeypatch.setenv("ONTOP_TOOLBAR_TIMEOUT_MS", "1500")
    monkeypatch.setenv("ONTOP_UI", " Qt ")
    monkeypatch.setenv("ONTOP_SIMULATE_CALL", "no")
    monkeypatch.setenv("ONTOP_AUDIO_AVAILABLE", "0")
    monkeypatch.setenv("ONTOP_VIDEO_AVAILABLE", "false")
    monkeypatch.setenv("ONTOP_AUDIO_MUTED", "YES")
    monkeypatch.setenv("ONTOP_VIDEO_MUTED", "1")

    config = OnTopConfig.from_env()
    assert config.toolbar_timeout == 1.5
    assert config.ui == "qt"
    assert config.simulate_call is False
    assert config.audio_available is False
    assert config.video_available is False
    assert config.audio_muted is True
    assert config.video_muted is True
