import pytest

from yt_rank import cli
from yt_rank.errors import NotFoundError


@pytest.fixture
def no_network(monkeypatch):
    def boom(*args, **kwargs):
        raise AssertionError("network should not be touched")

    monkeypatch.setattr("yt_rank.pipeline.aiohttp.ClientSession", boom)


def test_missing_api_key_exits_1_without_network(monkeypatch, capsys, no_network):
    monkeypatch.delenv("YOUTUBE_API_KEY", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--handle", "@foo"])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "YOUTUBE_API_KEY" in err
    assert "console.cloud.google.com" in err


def test_success_runs_pipeline_with_settings(monkeypatch, tmp_path):
    seen = {}

    async def fake_run(settings):
        seen["settings"] = settings
        return []

    monkeypatch.setenv("YOUTUBE_API_KEY", "env-key")
    monkeypatch.setattr(cli, "run", fake_run)
    out = tmp_path / "x.json"
    assert cli.main(["--handle", "foo", "--output", str(out), "--max-retries", "2"]) == 0
    s = seen["settings"]
    assert (s.api_key, s.handle, s.output_path, s.max_retries) == ("env-key", "foo", str(out), 2)


def test_pipeline_error_exits_1(monkeypatch, caplog):
    async def fake_run(settings):
        raise NotFoundError("Canal não encontrado: @ghost")

    monkeypatch.setattr(cli, "run", fake_run)
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--api-key", "k", "--handle", "@ghost"])
    assert excinfo.value.code == 1
    assert "ghost" in caplog.text


def test_other_configuration_error_skips_key_instructions(monkeypatch, capsys, no_network):
    monkeypatch.setenv("YOUTUBE_API_KEY", "k")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--handle", "@", "--max-pages", "0"])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert "console.cloud.google.com" not in err


def test_api_key_help_does_not_depend_on_message(monkeypatch, capsys):
    def fail(*args, **kwargs):
        raise cli.MissingCredentialError("sem chave")

    monkeypatch.setattr(cli.Settings, "from_env", fail)
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 1
    assert "console.cloud.google.com" in capsys.readouterr().err
