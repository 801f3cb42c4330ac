" generic fixtures "
import io
from pathlib import Path

import pytest

from jfcli.app import App
from jfcli.command_registry import CommandRegistry, build_registry
from jfcli.commands.models import Command, Flag, FlagKind
from jfcli.config import Settings


def pytest_configure():
    "Runs once before all"
    from jfcli.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


def make_scenario_commands(action=None):
    "artifactory [rt] {upload [u]}, config [c]"
    upload = Command(
        name="upload",
        aliases=["u"],
        usage="Upload files.",
        action=action,
        flags=[
            Flag("threads", "Number of threads.", FlagKind.INT, 3),
            Flag("flat", "Flat upload.", FlagKind.BOOL),
            Flag("props", "Properties."),
        ],
    )
    artifactory = Command(name="artifactory", aliases=["rt"], usage="Artifactory commands.", category="Command Namespaces", subcommands=[upload])
    config = Command(name="config", aliases=["c"], usage="Config commands.", action=action)
    return [artifactory, config]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    "Settings with a temporary home directory"
    return Settings(home_dir=tmp_path / "home", plugins_dir=tmp_path / "home" / "plugins")


@pytest.fixture
def scenario_registry() -> CommandRegistry:
    "The registry of the documented scenario"
    return build_registry(make_scenario_commands())


@pytest.fixture
def make_app(settings):
    "Build an App writing to a StringIO"

    def _make(registry: CommandRegistry) -> App:
        return App(registry, settings, out=io.StringIO())

    return _make


@pytest.fixture
def scenario_commands():
    "Factory of the scenario commands, with an optional action"
    return make_scenario_commands
