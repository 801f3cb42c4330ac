import io
import re

import pytest

from jfcli.commands.models import Command, Context, Flag, FlagKind
from jfcli.utils import (
    ask_yes_no,
    generate_trace_id,
    get_build_name,
    get_build_number,
    get_env_exclude,
    get_interactive_value,
    get_or_default_env,
    get_quiet_value,
    print_title,
)


@pytest.fixture
def make_ctx(settings, make_app, scenario_registry):
    command = Command(
        name="remove",
        flags=[Flag("quiet", "Quiet.", FlagKind.BOOL), Flag("interactive", "Interactive.", FlagKind.BOOL, True)],
    )

    def _make(flags=None, ci=False):
        settings.ci = ci
        return Context(make_app(scenario_registry), command, [], flags or {})

    return _make


@pytest.mark.parametrize(
    ("flags", "ci", "expected"),
    [
        ({}, False, False),
        ({}, True, True),
        ({"quiet": False}, True, False),
        ({"quiet": True}, False, True),
    ],
)
def test_quiet_value(make_ctx, flags, ci, expected):
    assert get_quiet_value(make_ctx(flags, ci)) is expected


@pytest.mark.parametrize(
    ("flags", "ci", "expected"),
    [
        ({}, False, True),
        ({}, True, False),
        ({"interactive": True}, True, True),
        ({"interactive": False}, False, False),
    ],
)
def test_interactive_value(make_ctx, flags, ci, expected):
    assert get_interactive_value(make_ctx(flags, ci)) is expected


def test_env_fallbacks():
    environ = {
        "JFROG_CLI_BUILD_NAME": "env-build",
        "JFROG_CLI_BUILD_NUMBER": "42",
        "JFROG_CLI_ENV_EXCLUDE": "*secret*",
    }
    assert get_build_name("", environ) == "env-build"
    assert get_build_name("my-build", environ) == "my-build"
    assert get_build_number("", environ) == "42"
    assert get_env_exclude("", environ) == "*secret*"
    assert get_or_default_env("", "UNSET_VARIABLE", environ) == ""


def test_env_fallback_os_environ(monkeypatch):
    monkeypatch.setenv("JFROG_CLI_BUILD_NUMBER", "7")
    assert get_build_number("") == "7"


def test_trace_id():
    first = generate_trace_id()
    assert re.fullmatch(r"[0-9a-f]{16}", first)
    assert generate_trace_id() != first


@pytest.mark.parametrize(("answer", "default", "expected"), [(True, False, True), (False, True, False), (None, True, True), (None, False, False)])
def test_ask_yes_no(mocker, answer, default, expected):
    confirm = mocker.patch("jfcli.utils.questionary.confirm")
    confirm.return_value.ask.return_value = answer
    assert ask_yes_no("Continue?", default=default) is expected
    confirm.assert_called_once_with("Continue?", default=default)


def test_print_title(make_ctx, monkeypatch):
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    ctx = make_ctx()
    print_title(ctx, "Hello")
    assert isinstance(ctx.out, io.StringIO)
    # StringIO is not a terminal: no escape codes
    assert ctx.out.getvalue() == "Hello\n"
