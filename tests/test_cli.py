"""
Tests for the command line flow, driven end to end with FakeClient.

Run with:
    pytest tests/test_cli.py -v
"""

import re
import subprocess

import pytest

import commitgen.cli.main as cli_main
import commitgen.cli.utils as cli_utils
from commitgen.cli.args import parse_args
from commitgen.config import Config
from commitgen.errors import HttpStatusError, LLMTimeoutError, NoCandidatesError
from commitgen.llm import FakeClient
from commitgen.output import colorize_commit_type, display_message
from commitgen.styles import CommitStyle

ANSI_RE = re.compile(r'\033\[[0-9;]*m')


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ("GCM_MODEL", "GCM_STYLE", "GCM_TIMEOUT"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def config(monkeypatch):
    """Fresh defaults instead of whatever .gcmrc the developer has."""
    cfg = Config()
    monkeypatch.setattr(cli_main, "load_config", lambda: cfg)
    return cfg


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(cli_main, "load_api_key", lambda: "test-key")


@pytest.fixture
def fake(monkeypatch):
    """Install a FakeClient behind get_client and return a setter for its outcome."""
    built = {}

    def _install(message=None, error=None):
        client = FakeClient(message, error=error)

        def _get_client(cfg, key):
            built["config"] = cfg
            built["api_key"] = key
            return client

        monkeypatch.setattr(cli_main, "get_client", _get_client)
        built["client"] = client
        return built

    return _install


@pytest.fixture
def no_client(monkeypatch):
    """Fail the test if anything tries to build a client."""
    def _explode(*args, **kwargs):
        raise AssertionError("client must not be constructed")
    monkeypatch.setattr(cli_main, "get_client", _explode)


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------

class TestParseArgs:

    def test_description_and_default_style(self):
        args = parse_args(["add login endpoint"])
        assert args.description == "add login endpoint"
        assert args.style is None

    @pytest.mark.parametrize("flag, expected", [
        ("gitmoji", CommitStyle.GITMOJI),
        ("conventional commit", CommitStyle.CONVENTIONAL),
        ("DETAILED", CommitStyle.DETAILED),
    ])
    def test_style_flag(self, flag, expected):
        assert parse_args(["x", "--style", flag]).style is expected

    def test_bogus_style_exits_2(self, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["x", "--style", "bogus"])
        assert exc.value.code == 2
        assert "Unknown style 'bogus'" in capsys.readouterr().err

    def test_description_required(self):
        with pytest.raises(SystemExit) as exc:
            parse_args([])
        assert exc.value.code == 2

    def test_description_optional_for_display_config(self):
        assert parse_args(["--display-config"]).description is None

    def test_timeout_must_be_positive(self):
        with pytest.raises(SystemExit):
            parse_args(["x", "--timeout", "0"])


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

class TestMain:

    def test_success_prints_raw_message_when_piped(self, capsys, config, api_key, fake):
        built = fake("feat(auth): add login endpoint")

        code = cli_main.main(["add login endpoint"])

        assert code == 0
        assert capsys.readouterr().out == "feat(auth): add login endpoint\n"
        prompt, style = built["client"].calls[0]
        assert "add login endpoint" in prompt
        assert style is CommitStyle.CONVENTIONAL
        assert built["api_key"] == "test-key"

    def test_style_flag_reaches_client(self, capsys, config, api_key, fake):
        built = fake("✨ add login endpoint")
        assert cli_main.main(["add login endpoint", "-s", "gitmoji"]) == 0
        prompt, style = built["client"].calls[0]
        assert style is CommitStyle.GITMOJI
        assert "<gitmoji>" in prompt

    def test_cli_overrides_config(self, capsys, config, api_key, fake):
        config.style = "simple"
        built = fake("Add login endpoint")
        cli_main.main(["add login", "--model", "gemini-2.5-pro", "--timeout", "9", "--no-body"])
        assert built["config"].model == "gemini-2.5-pro"
        assert built["config"].timeout == 9.0
        assert built["config"].include_body is False
        assert built["client"].calls[0][1] is CommitStyle.SIMPLE

    def test_env_overrides_config_file(self, capsys, config, api_key, fake, monkeypatch):
        monkeypatch.setenv("GCM_STYLE", "detailed")
        built = fake("feat: add login\n\n- add endpoint")
        cli_main.main(["add login"])
        assert built["client"].calls[0][1] is CommitStyle.DETAILED

    @pytest.mark.parametrize("error", [
        HttpStatusError(500, "boom"),
        LLMTimeoutError(30),
        NoCandidatesError("SAFETY"),
    ])
    def test_llm_error_exits_1(self, capsys, config, api_key, fake, error):
        fake(error=error)
        code = cli_main.main(["add login endpoint"])
        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert str(error) in captured.err

    def test_http_500_message(self, capsys, config, api_key, fake):
        fake(error=HttpStatusError(500))
        assert cli_main.main(["add login"]) == 1
        assert "HTTP 500" in capsys.readouterr().err

    def test_bogus_style_never_builds_client(self, config, api_key, no_client):
        with pytest.raises(SystemExit) as exc:
            cli_main.main(["add login", "--style", "bogus"])
        assert exc.value.code != 0

    def test_blank_description_exits_1(self, capsys, config, api_key, no_client):
        assert cli_main.main(["   "]) == 1
        assert "Description is empty" in capsys.readouterr().err

    def test_missing_api_key_exits_1(self, capsys, config, no_client, monkeypatch):
        monkeypatch.setattr(cli_main, "load_api_key", lambda: None)
        assert cli_main.main(["add login"]) == 1
        assert "GEMINI_API_KEY" in capsys.readouterr().err

    def test_display_config(self, capsys, config, api_key, no_client):
        assert cli_main.main(["--display-config"]) == 0
        out = ANSI_RE.sub('', capsys.readouterr().out)
        assert "style:              conventional" in out
        assert "gemini-2.5-flash" in out

    def test_copy_flag_keeps_piped_stdout_raw(self, capsys, config, api_key, fake, monkeypatch):
        copied = []
        monkeypatch.setattr(cli_main, "copy_to_clipboard", lambda text: (copied.append(text) or True, ""))
        fake("fix: handle empty input")

        assert cli_main.main(["handle empty input", "--copy"]) == 0

        captured = capsys.readouterr()
        assert copied == ["fix: handle empty input"]
        assert captured.out == "fix: handle empty input\n"
        assert "Copied to clipboard" in captured.err

    def test_copy_failure_is_reported_not_fatal(self, capsys, config, api_key, fake, monkeypatch):
        monkeypatch.setattr(cli_main, "copy_to_clipboard", lambda text: (False, "No clipboard tool found"))
        fake("fix: handle empty input")

        assert cli_main.main(["handle empty input", "-c"]) == 0

        captured = capsys.readouterr()
        assert captured.out == "fix: handle empty input\n"
        assert "No clipboard tool found" in captured.err

    def test_timeout_error_adds_cli_hint(self, capsys, config, api_key, fake):
        fake(error=LLMTimeoutError(30))
        assert cli_main.main(["add login"]) == 1
        assert "--timeout" in capsys.readouterr().err

    def test_bogus_env_style_exits_1(self, capsys, config, api_key, no_client, monkeypatch):
        monkeypatch.setenv("GCM_STYLE", "bogus")
        assert cli_main.main(["add login"]) == 1
        assert "Unknown style 'bogus'" in capsys.readouterr().err

    def test_bogus_config_file_style_exits_1(self, capsys, config, api_key, no_client):
        config.style = "fancy"
        assert cli_main.main(["add login"]) == 1
        assert "Unknown style 'fancy'" in capsys.readouterr().err

    def test_style_flag_overrides_bogus_env_style(self, capsys, config, api_key, fake, monkeypatch):
        monkeypatch.setenv("GCM_STYLE", "bogus")
        built = fake("Add login")
        assert cli_main.main(["add login", "-s", "simple"]) == 0
        assert built["client"].calls[0][1] is CommitStyle.SIMPLE


# ---------------------------------------------------------------------------
# Message display
# ---------------------------------------------------------------------------

class TestDisplay:

    def test_display_message_rules_match_width(self, capsys):
        display_message("feat(auth): add login\n\n- add endpoint")
        lines = ANSI_RE.sub('', capsys.readouterr().out).split('\n')
        assert lines[1] == lines[5]
        assert len(lines[1]) == len("feat(auth): add login")
        assert lines[2] == "feat(auth): add login"

    def test_colorize_leaves_text_intact(self):
        message = "fix(api): handle timeout\n\n- retry once"
        assert ANSI_RE.sub('', colorize_commit_type(message)) == message

    def test_colorize_ignores_gitmoji(self):
        assert ANSI_RE.sub('', colorize_commit_type("✨ add login")) == "✨ add login"


# ---------------------------------------------------------------------------
# Clipboard
# ---------------------------------------------------------------------------

class TestCopyToClipboard:

    @pytest.fixture
    def runs(self, monkeypatch):
        """Record subprocess.run calls; commands named in `missing` do not exist."""
        calls = []
        missing = set()

        def _run(command, **kwargs):
            calls.append((command, kwargs["input"]))
            if command[0] in missing:
                raise FileNotFoundError(command[0])
            return subprocess.CompletedProcess(command, 0)

        monkeypatch.setattr(cli_utils.subprocess, "run", _run)
        return calls, missing

    def test_macos_uses_pbcopy(self, runs):
        calls, _ = runs
        assert cli_utils.copy_to_clipboard("feat: add login", platform="darwin") == (True, "")
        assert calls == [(["pbcopy"], b"feat: add login")]

    def test_linux_falls_through_missing_tools(self, runs):
        calls, missing = runs
        missing.update({"wl-copy", "xclip"})
        assert cli_utils.copy_to_clipboard("fix: x", platform="linux") == (True, "")
        assert [c[0][0] for c in calls] == ["wl-copy", "xclip", "xsel"]

    def test_no_tool_found(self, runs):
        _, missing = runs
        missing.update({"wl-copy", "xclip", "xsel"})
        copied, reason = cli_utils.copy_to_clipboard("fix: x", platform="linux")
        assert copied is False
        assert "No clipboard tool found" in reason

    def test_failing_tool_reports_reason(self, monkeypatch):
        def _fail(command, **kwargs):
            raise subprocess.CalledProcessError(1, command)
        monkeypatch.setattr(cli_utils.subprocess, "run", _fail)
        copied, reason = cli_utils.copy_to_clipboard("fix: x", platform="win32")
        assert copied is False
        assert reason.startswith("clip failed")
