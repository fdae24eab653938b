"""Tests for CLI commands via click.testing.CliRunner."""

from __future__ import annotations

import json

import yaml
from click.testing import CliRunner

from envshell import __version__
from envshell.cli import cli


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_help():
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for command in ("list", "get", "export", "decode", "check", "shells"):
        assert command in result.output


# ---------------------------------------------------------------------------
# list / get / decode
# ---------------------------------------------------------------------------

def test_list_masks_values(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["--path", str(sample_env), "list"])
    assert result.exit_code == 0
    assert "TWILIO_API_SID" in result.output
    assert "ACx****xxx" in result.output
    assert "my secret token" not in result.output


def test_list_show(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["--path", str(sample_env), "list", "--show"])
    assert result.exit_code == 0
    assert "twilio" in result.output


def test_list_uses_default_path(sample_env):
    """sample_env lives at ./.env, the default path."""
    runner = CliRunner()
    result = runner.invoke(cli, ["list"])
    assert result.exit_code == 0
    assert "MESSAGING_PROVIDER" in result.output


def test_get(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "get", "API_URL"])
    assert result.exit_code == 0
    assert result.output.strip() == "https://example.com/api"


def test_get_missing_key(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "get", "NOPE"])
    assert result.exit_code != 0
    assert "not found" in result.output


def test_get_missing_file(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(tmp_path / "missing.env"), "get", "ANY"])
    assert result.exit_code != 0
    assert "Cannot read" in result.output


def test_path_from_env_var(tmp_path):
    env_file = tmp_path / "from_env.env"
    env_file.write_text("FROM_ENV=ok\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["get", "FROM_ENV"], env={"ENVSHELL_PATH": str(env_file)})
    assert result.exit_code == 0
    assert result.output.strip() == "ok"


def test_no_incremental(sample_env, monkeypatch):
    monkeypatch.delenv("BASE_URL", raising=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "--no-incremental", "get", "API_URL"])
    assert result.exit_code == 0
    assert result.output.strip() == "/api"


def test_quote_aware_comments_flag(tmp_path):
    env_file = tmp_path / "q.env"
    env_file.write_text("MSG='hello #world'\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(env_file), "get", "MSG"])
    assert result.output.strip() == "hello"
    result = runner.invoke(cli, ["-f", str(env_file), "--quote-aware-comments", "get", "MSG"])
    assert result.exit_code == 0
    assert result.output.strip() == "hello #world"


def test_decode():
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", "'$HOME' # comment"])
    assert result.exit_code == 0
    assert result.output.strip() == "$HOME"


def test_decode_substitutes_from_environment():
    runner = CliRunner()
    result = runner.invoke(cli, ["decode", '"$ENVSHELL_CLI_VAR"/bin'], env={"ENVSHELL_CLI_VAR": "/opt"})
    assert result.exit_code == 0
    assert result.output.strip() == "/opt/bin"


# ---------------------------------------------------------------------------
# export / unexport
# ---------------------------------------------------------------------------

def test_export_dotenv(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "export"])
    assert result.exit_code == 0
    assert "MESSAGING_PROVIDER=twilio" in result.output
    assert "SINGLE_QUOTED=hello\\ world" in result.output
    assert "HASH_IN_VALUE=color\\#fff" in result.output


def test_export_dotenv_round_trips(sample_env, tmp_path):
    out_file = tmp_path / "exported.env"
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "export", "-o", str(out_file)])
    assert result.exit_code == 0
    assert "Exported 11 variable(s)" in result.output
    result = runner.invoke(cli, ["-f", str(out_file), "get", "LITERAL"])
    assert result.output.strip() == "${BASE_URL}"


def test_export_dotenv_rejects_line_breaks(tmp_path):
    env_file = tmp_path / "multi.env"
    env_file.write_text("A=$ENVSHELL_MULTI\nB=plain\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(env_file), "export"], env={"ENVSHELL_MULTI": "x\ny"})
    assert result.exit_code != 0
    assert "Cannot export A as dotenv" in result.output
    result = runner.invoke(
        cli, ["-f", str(env_file), "export", "--format", "json"], env={"ENVSHELL_MULTI": "x\ny"},
    )
    assert result.exit_code == 0
    assert json.loads(result.output)["A"] == "x\ny"


def test_export_unix(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "export", "--format", "unix"])
    assert result.exit_code == 0
    assert "export SINGLE_QUOTED='hello world'" in result.output
    assert "export MESSAGING_PROVIDER=twilio" in result.output


def test_export_win(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "export", "--format", "win"])
    assert result.exit_code == 0
    assert "$env:MESSAGING_PROVIDER = 'twilio'" in result.output


def test_export_json(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "export", "--format", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["API_URL"] == "https://example.com/api"
    assert list(data)[0] == "TWILIO_API_SID"


def test_export_yaml(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "export", "--format", "yaml"])
    assert result.exit_code == 0
    data = yaml.safe_load(result.output)
    assert data["TWILIO_AUTH_TOKEN"] == "my secret token"


def test_unexport(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "unexport"])
    assert result.exit_code == 0
    assert "unset TWILIO_API_SID" in result.output
    result = runner.invoke(cli, ["-f", str(sample_env), "unexport", "--format", "win"])
    assert "Remove-Item Env:TWILIO_API_SID" in result.output


# ---------------------------------------------------------------------------
# check / error policy
# ---------------------------------------------------------------------------

def test_check_clean_file(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "check"])
    assert result.exit_code == 0
    assert "no errors" in result.output


def test_check_summary_is_not_wrapped(tmp_path):
    deep = tmp_path / ("nested-directory-" * 4) / ("another-long-segment-" * 3)
    deep.mkdir(parents=True)
    env_file = deep / ".env"
    env_file.write_text("A=1\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(env_file), "check"])
    assert result.exit_code == 0
    assert f"{env_file}: 1 variable(s), no errors" in result.output


def test_check_reports_malformed_lines(bad_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(bad_env), "check"])
    assert result.exit_code == 1
    assert "no_equals" in result.output
    assert "1 malformed line(s)" in result.output


def test_malformed_line_fails_by_default(bad_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(bad_env), "list"])
    assert result.exit_code != 0
    assert "line 2" in result.output


def test_on_error_skip(bad_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(bad_env), "--on-error", "skip", "get", "ALSO_GOOD"])
    assert result.exit_code == 0
    assert "yes" in result.output


# ---------------------------------------------------------------------------
# shells / config
# ---------------------------------------------------------------------------

def test_shells():
    runner = CliRunner()
    result = runner.invoke(cli, ["shells"])
    assert result.exit_code == 0
    assert "basic" in result.output
    assert "bash" in result.output
    assert "Built-in" in result.output


def test_unknown_shell(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-f", str(sample_env), "--shell", "fish", "list"])
    assert result.exit_code != 0
    assert "Unknown shell" in result.output


def test_config_option(tmp_path, sample_env):
    cfg = tmp_path / "envshell.toml"
    cfg.write_text(f'[envshell]\npath = "{sample_env.as_posix()}"\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg), "get", "MESSAGING_PROVIDER"])
    assert result.exit_code == 0
    assert result.output.strip() == "twilio"


def test_invalid_config(tmp_path):
    cfg = tmp_path / "broken.toml"
    cfg.write_text('[envshell]\non_error = "maybe"\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(cfg), "list"])
    assert result.exit_code != 0
    assert "Invalid config" in result.output


def test_verbose_logs_parsed_keys(sample_env):
    runner = CliRunner()
    result = runner.invoke(cli, ["-v", "-f", str(sample_env), "get", "BASE_URL"])
    assert result.exit_code == 0
    assert "https://example.com" in result.output
    assert "Parsed BASE_URL" in result.output


def test_logging_reset_without_verbose(sample_env):
    runner = CliRunner()
    runner.invoke(cli, ["-v", "-f", str(sample_env), "get", "BASE_URL"])
    result = runner.invoke(cli, ["-f", str(sample_env), "get", "BASE_URL"])
    assert result.output.strip() == "https://example.com"
