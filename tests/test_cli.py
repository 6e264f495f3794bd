"""End-to-end tests for the swap command (CliRunner + in-memory directory)."""

import pytest
from typer.testing import CliRunner

from cli import main as cli_main
from core.domain.models import LicenseTier
from helpers import FakeDirectory, make_user

runner = CliRunner()

CREDENTIALS = ["-k", "key", "-s", "secret"]


@pytest.fixture
def no_delays(clean_env, monkeypatch):
    monkeypatch.setenv("ZOOM_SWAP_DONOR_DELAY_SECONDS", "0")
    monkeypatch.setenv("ZOOM_SWAP_VERIFY_DELAY_SECONDS", "0")


@pytest.fixture
def fake_client(monkeypatch, directory, no_delays):
    built = []

    def build(api_key, api_secret, settings):
        built.append((api_key, api_secret, settings))
        return directory

    monkeypatch.setattr(cli_main, "build_zoom_client", build)
    return built


def test_scenario_a_exits_zero(fake_client, directory):
    result = runner.invoke(cli_main.app, [*CREDENTIALS, "-d", "a@x.com", "-r", "b@x.com"])

    assert result.exit_code == 0, result.output
    assert directory.updates == [
        ("update_user", "1", LicenseTier.BASIC),
        ("update_user", "2", LicenseTier.PRO),
    ]
    assert directory.closed
    assert "FIN" in result.output
    assert fake_client[0][:2] == ("key", "secret")


def test_scenario_b_unknown_donor(fake_client, directory):
    result = runner.invoke(cli_main.app, [*CREDENTIALS, "-d", "nobody@x.com", "-r", "b@x.com"])

    assert result.exit_code == 1
    assert directory.updates == []


def test_scenario_c_licensed_recipient(monkeypatch, no_delays):
    directory = FakeDirectory(
        [
            make_user("1", "a@x.com", LicenseTier.PRO),
            make_user("2", "b@x.com", LicenseTier.CORPORATE),
        ]
    )
    monkeypatch.setattr(cli_main, "build_zoom_client", lambda *args: directory)

    result = runner.invoke(cli_main.app, [*CREDENTIALS, "-d", "a@x.com", "-r", "b@x.com"])

    assert result.exit_code == 1
    assert directory.updates == []


@pytest.mark.parametrize(
    "args",
    [
        ["-k", "key"],
        ["-s", "secret"],
        ["-k", " ", "-s", "secret"],
        [],
    ],
)
def test_missing_credentials_fail_before_network(fake_client, args):
    result = runner.invoke(cli_main.app, [*args, "-d", "a@x.com", "-r", "b@x.com"])

    assert result.exit_code == 2
    assert fake_client == []


@pytest.mark.parametrize(
    "name, value",
    [("ZOOM_SWAP_PAGE_SIZE", "abc"), ("ZOOM_SWAP_WAIT_MODE", "sometimes")],
)
def test_invalid_settings_are_configuration_errors(fake_client, monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    result = runner.invoke(cli_main.app, [*CREDENTIALS, "-d", "a@x.com", "-r", "b@x.com"])

    assert result.exit_code == 2
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "configuration_error" in result.output
    assert fake_client == []


def test_verification_failure_exits_one(fake_client, directory):
    directory.update_results["2"] = False

    result = runner.invoke(cli_main.app, [*CREDENTIALS, "-d", "a@x.com", "-r", "b@x.com"])

    assert result.exit_code == 1


def test_interactive_menus(fake_client, directory):
    result = runner.invoke(cli_main.app, CREDENTIALS, input="0\n1\ny\n")

    assert result.exit_code == 0, result.output
    assert "You've selected a@x.com as donor" in result.output
    assert "You've selected b@x.com as recipient" in result.output
    assert len(directory.updates) == 2


def test_interactive_declined(fake_client, directory):
    result = runner.invoke(cli_main.app, CREDENTIALS, input="0\n1\nn\n")

    assert result.exit_code == 1
    assert directory.updates == []


def test_interactive_yes_skips_confirmation(fake_client, directory):
    result = runner.invoke(cli_main.app, [*CREDENTIALS, "--yes"], input="0\n1\n")

    assert result.exit_code == 0, result.output


def test_single_hint_falls_back_to_menus(fake_client, directory):
    result = runner.invoke(cli_main.app, [*CREDENTIALS, "-d", "a@x.com", "-y"], input="0\n1\n")

    assert result.exit_code == 0, result.output
    assert "Select existing license holder" in result.output


def test_wait_mode_flag_overrides_settings(fake_client, monkeypatch):
    monkeypatch.setenv("ZOOM_SWAP_POLL_INITIAL_SECONDS", "0.001")

    result = runner.invoke(
        cli_main.app,
        [*CREDENTIALS, "-d", "a@x.com", "-r", "b@x.com", "--wait-mode", "poll"],
    )

    assert result.exit_code == 0, result.output
    assert fake_client[0][2].wait_mode.value == "poll"


def test_help_lists_short_options():
    result = runner.invoke(cli_main.app, ["-h"])

    assert result.exit_code == 0
    for flag in ("--secret", "--key", "--donor", "--recipient"):
        assert flag in result.output
