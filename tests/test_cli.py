"""Tests for the Typer command-line interface."""

import pytest
from typer.testing import CliRunner

from pokefetch import __version__
from pokefetch.api.client import PokeAPIClient
from pokefetch.cli import app as app_module
from pokefetch.exceptions import UnexpectedStatusError
from pokefetch.media.downloader import SpriteDownloader
from tests.conftest import make_payload, payload_bytes

runner = CliRunner()


@pytest.fixture(autouse=True)
def config_file(tmp_path, monkeypatch):
    path = tmp_path / "config" / "config.ini"
    monkeypatch.setattr(app_module, "CONFIG_DIR", path.parent)
    monkeypatch.setattr(app_module, "CONFIG_FILE", path)
    return path


@pytest.fixture
def fake_api(monkeypatch):
    requested = []

    async def fetch_resource(self, url):
        requested.append(url)
        return payload_bytes(make_payload())

    async def download_sprite(self, url):
        return f"image from {url}".encode()

    monkeypatch.setattr(PokeAPIClient, "fetch_resource", fetch_resource)
    monkeypatch.setattr(SpriteDownloader, "download_sprite", download_sprite)
    return requested


def test_version():
    result = runner.invoke(app_module.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_fetch_prints_and_saves_sprites(fake_api, tmp_path):
    out = tmp_path / "out"

    result = runner.invoke(app_module.app, ["fetch", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert fake_api == ["https://pokeapi-proxy.freecodecamp.rocks/api/pokemon/1/"]
    assert "bulbasaur" in result.output
    assert (out / "bulbasaur_front.png").read_bytes() == (
        b"image from https://sprites.example/sprites/front.png"
    )
    assert (out / "bulbasaur_back.png").is_file()
    assert "2 saved" in result.output


def test_fetch_uses_identifier_and_api_url(fake_api, tmp_path):
    result = runner.invoke(
        app_module.app,
        [
            "fetch",
            "Pikachu",
            "--api-url",
            "https://pokeapi.co/api/v2/",
            "--no-sprites",
            "-o",
            str(tmp_path),
        ],
    )

    assert result.exit_code == 0, result.output
    assert fake_api == ["https://pokeapi.co/api/v2/pokemon/pikachu/"]
    assert not list(tmp_path.glob("*.png"))
    assert "Sprites:" not in result.output


def test_fetch_reads_config_file(fake_api, config_file, tmp_path):
    config_file.parent.mkdir(parents=True)
    config_file.write_text(f"[DEFAULT]\nidentifier = 25\noutput_dir = {tmp_path}\n")

    result = runner.invoke(app_module.app, ["fetch"])

    assert result.exit_code == 0, result.output
    assert fake_api == ["https://pokeapi-proxy.freecodecamp.rocks/api/pokemon/25/"]


def test_fetch_error_exits_with_code_1(monkeypatch, tmp_path):
    async def fetch_resource(self, url):
        raise UnexpectedStatusError(404)

    monkeypatch.setattr(PokeAPIClient, "fetch_resource", fetch_resource)

    result = runner.invoke(app_module.app, ["fetch", "-o", str(tmp_path)])

    assert result.exit_code == 1
    assert "unexpected status code: 404" in result.output
    assert not list(tmp_path.glob("*.png"))


def test_fetch_invalid_option_exits_with_code_1(fake_api):
    result = runner.invoke(app_module.app, ["fetch", "--timeout", "0"])

    assert result.exit_code == 1
    assert fake_api == []


def test_init_writes_config(config_file):
    result = runner.invoke(app_module.app, ["init"])

    assert result.exit_code == 0, result.output
    assert config_file.is_file()
    assert "identifier = 1" in config_file.read_text()


def test_init_does_not_overwrite_without_confirmation(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nidentifier = mew\n")

    result = runner.invoke(app_module.app, ["init"], input="n\n")

    assert result.exit_code == 1
    assert "identifier = mew" in config_file.read_text()


def test_init_force_overwrites(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nidentifier = mew\n")

    result = runner.invoke(app_module.app, ["init", "--force"])

    assert result.exit_code == 0, result.output
    assert "identifier = 1" in config_file.read_text()


def test_show_config(config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\nidentifier = mew\n")

    result = runner.invoke(app_module.app, ["--show-config"])

    assert result.exit_code == 0, result.output
    assert "identifier = mew" in result.output


def test_diagnose_reports_failure(monkeypatch):
    async def fetch_resource(self, url):
        raise UnexpectedStatusError(503)

    monkeypatch.setattr(PokeAPIClient, "fetch_resource", fetch_resource)

    result = runner.invoke(app_module.app, ["diagnose"])

    assert result.exit_code == 1
    assert "unexpected status code: 503" in result.output


def test_diagnose_passes(fake_api):
    result = runner.invoke(app_module.app, ["diagnose"])

    assert result.exit_code == 0, result.output
    assert "All checks passed" in result.output


def test_diagnose_uses_configured_timeout(monkeypatch, config_file):
    config_file.parent.mkdir(parents=True)
    config_file.write_text("[DEFAULT]\ntimeout = 7\n")
    timeouts = []

    async def fetch_resource(self, url):
        timeouts.append(self.timeout)
        return payload_bytes(make_payload())

    monkeypatch.setattr(PokeAPIClient, "fetch_resource", fetch_resource)

    result = runner.invoke(app_module.app, ["diagnose"])

    assert result.exit_code == 0, result.output
    assert timeouts == [7.0]
