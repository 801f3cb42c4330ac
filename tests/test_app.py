"""Tests for the command line dispatcher."""

import pytest

from jfcli.app import App
from jfcli.command_registry import build_registry
from jfcli.commands.models import Command
from jfcli.constants import VERSION
from jfcli.models import ExitCode, UsageError


@pytest.fixture
def calls():
    "Records the contexts the actions receive"
    return []


@pytest.fixture
def app(make_app, scenario_commands, calls):
    "An app over the scenario commands"

    def action(ctx):
        calls.append(ctx)
        return 0

    return make_app(build_registry(scenario_commands(action)))


def output(app: App) -> str:
    return app.out.getvalue()


class TestGlobalFlags:
    """Tests for the application level flags."""

    @pytest.mark.parametrize("argv", [[], ["--help"], ["-h"]])
    def test_app_help(self, app, argv):
        """Test the application help lists the visible commands."""
        assert app.run(argv) == ExitCode.SUCCESS
        text = output(app)
        assert text.startswith("NAME:\n   jf - ")
        assert "artifactory, rt" in text
        assert "config, c" in text
        assert f"VERSION:\n   {VERSION}" in text

    @pytest.mark.parametrize("flag", ["--version", "-v"])
    def test_version(self, app, flag):
        """Test printing the version."""
        assert app.run([flag]) == ExitCode.SUCCESS
        assert output(app) == f"jf version {VERSION}\n"

    def test_unknown_global_flag(self, app):
        """Test unknown global flags are usage errors."""
        assert app.run(["--nope"]) == ExitCode.ERROR


class TestCommandNotFound:
    """Tests for unknown commands."""

    def test_top_level_suggestion(self, app):
        """Test the message and the single suggestion."""
        assert app.run(["confi"]) == ExitCode.ERROR
        assert output(app) == "'jf confi' is not a jf command. See --help\nThe most similar command is:\n\tjf config\n"

    def test_exact_subcommand_suggestion(self, app):
        """Test a subcommand typed without its namespace."""
        assert app.run(["upload"]) == ExitCode.ERROR
        assert output(app).endswith("The most similar command is:\n\tjf artifactory upload\n")

    def test_no_suggestion(self, app):
        """Test only the message is printed without similar commands."""
        assert app.run(["xyz"]) == ExitCode.ERROR
        assert output(app) == "'jf xyz' is not a jf command. See --help\n"

    def test_several_suggestions(self, app):
        """Test several suggestions are sorted."""
        assert app.run(["xx"]) == ExitCode.ERROR
        assert output(app).endswith("The most similar commands are:\n\tjf c\n\tjf rt\n")

    def test_unknown_subcommand(self, app):
        """Test suggestions are searched among the namespace subcommands."""
        assert app.run(["rt", "uplod"]) == ExitCode.ERROR
        assert output(app) == "'jf artifactory uplod' is not a jf command. See --help\nThe most similar command is:\n\tjf artifactory upload\n"

    def test_unknown_namespace_flag(self, app):
        """Test flags are not accepted by namespaces."""
        assert app.run(["rt", "--nope"]) == ExitCode.ERROR


class TestDispatch:
    """Tests for running commands."""

    @pytest.mark.parametrize("argv", [["rt"], ["rt", "--help"], ["artifactory", "-h"]])
    def test_namespace_help(self, app, argv):
        """Test the namespace help lists its subcommands."""
        assert app.run(argv) == ExitCode.SUCCESS
        text = output(app)
        assert "jf artifactory - Artifactory commands." in text
        assert "upload, u" in text

    def test_command_help(self, app, calls):
        """Test --help after a command prints its help instead of running it."""
        assert app.run(["rt", "u", "--help"]) == ExitCode.SUCCESS
        text = output(app)
        assert "jf artifactory upload - Upload files." in text
        assert "--threads=<int>" in text
        assert calls == []

    def test_flags_and_args(self, app, calls):
        """Test flags and positional arguments may be interleaved."""
        assert app.run(["rt", "u", "a.zip", "--threads", "5", "repo/", "--flat", "--props=k=v"]) == ExitCode.SUCCESS
        (ctx,) = calls
        assert ctx.command.full_name == "artifactory upload"
        assert ctx.args == ["a.zip", "repo/"]
        assert ctx.get_int("threads") == 5
        assert ctx.get_bool("flat") is True
        assert ctx.get_string("props") == "k=v"
        assert ctx.settings is app.settings
        assert ctx.app is app

    def test_flag_defaults(self, app, calls):
        """Test unset flags fall back to their defaults."""
        app.run(["rt", "upload"])
        (ctx,) = calls
        assert ctx.get_int("threads") == 3
        assert ctx.get_bool("flat") is False
        assert ctx.get_string("props") == ""
        assert not ctx.is_set("threads")
        with pytest.raises(KeyError):
            ctx.get("missing")

    def test_bool_flag_values(self, app, calls):
        """Test explicit boolean values."""
        app.run(["rt", "u", "--flat=false"])
        app.run(["rt", "u", "--no-flat"])
        app.run(["rt", "u", "--flat=true"])
        assert [ctx.get_bool("flat") for ctx in calls] == [False, False, True]
        assert all(ctx.is_set("flat") for ctx in calls)

    def test_invalid_flag_value(self, app, calls):
        """Test bad flag values are usage errors."""
        assert app.run(["rt", "u", "--threads=many"]) == ExitCode.ERROR
        assert app.run(["rt", "u", "--flat=maybe"]) == ExitCode.ERROR
        assert app.run(["rt", "u", "--unknown"]) == ExitCode.ERROR
        assert calls == []

    def test_top_level_action(self, app, calls):
        """Test a top-level command with an action."""
        assert app.run(["c"]) == ExitCode.SUCCESS
        assert calls[0].command.name == "config"

    def test_action_exit_code(self, make_app):
        """Test the action result is the exit status."""
        app = make_app(build_registry([Command(name="two", action=lambda ctx: 2), Command(name="none", action=lambda ctx: None)]))
        assert app.run(["two"]) == 2
        assert app.run(["none"]) == 0

    def test_error_logged(self, make_app, mocker):
        """Test JfError raised by actions are logged and turned into an exit status."""

        def action(ctx):
            raise UsageError("bad usage")

        app = make_app(build_registry([Command(name="bad", action=action)]))
        error = mocker.spy(app.log, "error")
        assert app.run(["bad"]) == ExitCode.ERROR
        error.assert_called_once_with("bad usage")

    def test_help_only_command(self, make_app):
        """Test a command without action prints its help."""
        app = make_app(build_registry([Command(name="old", help_name="\nName:\n\tjf old - moved\n", skip_flag_parsing=True)]))
        assert app.run(["old", "anything"]) == ExitCode.SUCCESS
        assert "jf old - moved" in output(app)

    def test_skip_flag_parsing(self, make_app):
        """Test raw arguments are passed through."""
        received = []
        command = Command(name="raw", help_name="help of raw", skip_flag_parsing=True, action=lambda ctx: received.append(ctx))
        app = make_app(build_registry([command]))
        assert app.run(["raw", "--x=1", "-h", "y"]) == ExitCode.SUCCESS
        assert received[0].args == ["--x=1", "-h", "y"]
        assert received[0].flags == {}

    def test_skip_flag_parsing_help(self, make_app):
        """Test a lone --help shows the help of a documented raw command."""
        received = []
        command = Command(name="raw", help_name="help of raw", skip_flag_parsing=True, action=lambda ctx: received.append(ctx))
        app = make_app(build_registry([command]))
        assert app.run(["raw", "--help"]) == ExitCode.SUCCESS
        assert "help of raw" in output(app)
        assert received == []

    def test_hidden_invocable(self, make_app):
        """Test hidden commands can still be run."""
        app = make_app(build_registry([Command(name="secret", hidden=True, action=lambda ctx: 5)]))
        assert app.run(["secret"]) == 5


class TestBefore:
    """Tests for the before hook."""

    def test_trace_id(self, app):
        """Test a 16 hexadecimal chars trace id is generated per run."""
        app.run(["c"])
        first = app.trace_id
        assert len(first) == 16
        int(first, 16)
        app.run(["c"])
        assert app.trace_id != first

    def test_debug_logs(self, app, mocker):
        """Test the version and platform are logged at debug level."""
        debug = mocker.spy(app.log, "debug")
        app.run(["c"])
        messages = [call.args[0] for call in debug.call_args_list]
        assert "JFrog CLI version: %s" in messages
        assert "OS/Arch: %s/%s" in messages

    def test_not_run_for_help(self, app):
        """Test help and version do not need a trace id."""
        app.run(["--version"])
        assert app.trace_id == ""


def test_exit_codes():
    assert [(code.name, int(code)) for code in ExitCode] == [("SUCCESS", 0), ("ERROR", 1)]
