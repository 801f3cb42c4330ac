"""End to end tests of the `jf` command line."""

import json

import pytest

from jfcli.commands.models import NAMESPACES_CATEGORY, OTHER_CATEGORY
from jfcli.constants import VERSION
from jfcli.main import create_registry, get_builtin_commands, main, run


def test_builtin_order():
    names = [command.name for command in get_builtin_commands()]
    assert names[:8] == ["artifactory", "mc", "ds", "pl", "completion", "plugin", "config", "project"]
    assert names[8:] == ["ci-setup", "setup", "intro", "options", "login", "access-token-create", "dumpjson"]


def test_registry(settings):
    registry = create_registry(settings)
    names = [command.name for command in registry]
    assert names == sorted(names)
    assert registry.find("rt") is registry.find("artifactory")
    assert registry.find("audit") is not None
    assert registry.find("mvn") is not None
    assert registry.find("rbc") is not None
    assert registry.resolve(["rt", "u"]).full_name == "artifactory upload"
    assert registry.find("login").category == OTHER_CATEGORY
    assert registry.find("mc").category == NAMESPACES_CATEGORY


def test_version(settings, capsys):
    assert run(["--version"], settings) == 0
    assert capsys.readouterr().out == f"jf version {VERSION}\n"


def test_help(settings, capsys):
    assert run([], settings) == 0
    text = capsys.readouterr().out
    assert "artifactory, rt" in text
    assert "dumpjson" not in text


def test_dumpjson(settings, capsys):
    assert run(["dumpjson"], settings) == 0
    catalog = json.loads(capsys.readouterr().out)
    assert NAMESPACES_CATEGORY in catalog
    namespaces = {entry["name"]: entry for entry in catalog[NAMESPACES_CATEGORY]}
    assert namespaces["artifactory"]["shortName"] == "rt"
    other = [entry["name"] for entry in catalog[OTHER_CATEGORY]]
    assert "options" in other
    assert "dumpjson" not in other


def test_options(settings, capsys):
    assert run(["options"], settings) == 0
    text = capsys.readouterr().out
    assert "JFROG_CLI_LOG_LEVEL" in text
    assert "JFROG_CLI_HOME_DIR" in text


class TestIntro:
    """Tests for the welcome message."""

    def test_without_servers(self, settings, capsys):
        """Test the next steps are shown when no server is configured."""
        assert run(["intro"], settings) == 0
        text = capsys.readouterr().out
        assert f"Thank you for installing version {VERSION}" in text
        assert "jf login\n" in text
        assert "jf c add\n" in text

    def test_with_servers(self, settings, capsys):
        """Test the next steps are skipped once a server is configured."""
        settings.home_dir.mkdir(parents=True)
        (settings.home_dir / "jfrog-cli.conf.v6").write_text(json.dumps({"servers": [{"serverId": "main"}]}))
        assert run(["intro"], settings) == 0
        text = capsys.readouterr().out
        assert "Thank you" in text
        assert "jf login" not in text

    def test_ci(self, settings, capsys):
        """Test nothing is shown in CI."""
        settings.ci = True
        assert run(["intro"], settings) == 0
        assert capsys.readouterr().out == ""


def test_unknown_command(settings, capsys):
    assert run(["uplod"], settings) == 1
    assert "'jf uplod' is not a jf command. See --help" in capsys.readouterr().out


def test_unknown_subcommand(settings, capsys):
    assert run(["rt", "uplod"], settings) == 1
    text = capsys.readouterr().out
    assert "'jf artifactory uplod' is not a jf command" in text
    assert "upload" in text


def test_usage_error(settings, mocker):
    load = mocker.patch("jfcli.services.load_service_handler")
    assert run(["rt", "upload", "only-one-is-not-enough-but-three", "b", "c"], settings) == 1
    load.assert_not_called()


def test_delegated(settings, mocker):
    handler = mocker.Mock(return_value=0)
    mocker.patch("jfcli.services.load_service_handler", return_value=handler)
    assert run(["rt", "u", "build/*.zip", "repo/path/", "--flat"], settings) == 0
    (ctx,), kwargs = handler.call_args
    assert ctx.command.full_name == "artifactory upload"
    spec = kwargs["spec"].files[0]
    assert spec.pattern == "build/*.zip"
    assert spec.target == "repo/path/"
    assert spec.flat == "true"


class TestConfiguredModules:
    """Tests for the modules listed in jfcli.toml."""

    def test_missing_namespace_module(self, settings):
        """Test an unknown namespace module stops the startup."""
        settings.namespaces = ["no_such_jf_namespace_module"]
        assert run(["--version"], settings) == 1

    def test_not_a_plugin(self, settings):
        """Test an embedded plugin module must provide get_app()."""
        settings.embedded_plugins = ["json"]
        assert run(["--version"], settings) == 1

    def test_not_a_provider(self, settings):
        """Test a namespace module must provide get_commands()."""
        settings.namespaces = ["json"]
        assert run(["--version"], settings) == 1


class TestPluginUninstall:
    """Tests for `jf plugin uninstall`."""

    @pytest.fixture
    def plugin_dir(self, settings):
        """An installed plugin directory"""
        path = settings.plugins_dir / "hello"
        path.mkdir(parents=True)
        return path

    def test_quiet(self, settings, plugin_dir, mocker):
        """Test no question is asked with --quiet."""
        ask = mocker.patch("jfcli.namespaces.plugin.ask_yes_no")
        assert run(["plugin", "uninstall", "hello", "--quiet"], settings) == 0
        assert not plugin_dir.exists()
        ask.assert_not_called()

    def test_ci_is_quiet(self, settings, plugin_dir, mocker):
        """Test CI mode skips the question."""
        settings.ci = True
        ask = mocker.patch("jfcli.namespaces.plugin.ask_yes_no")
        assert run(["plugin", "ui", "hello"], settings) == 0
        assert not plugin_dir.exists()
        ask.assert_not_called()

    @pytest.mark.parametrize(("answer", "removed"), [(True, True), (False, False)])
    def test_confirmation(self, settings, plugin_dir, mocker, answer, removed):
        """Test the plugin is removed only once confirmed."""
        mocker.patch("jfcli.namespaces.plugin.ask_yes_no", return_value=answer)
        assert run(["plugin", "uninstall", "hello"], settings) == 0
        assert plugin_dir.exists() is not removed

    def test_not_installed(self, settings):
        """Test uninstalling an unknown plugin fails."""
        assert run(["plugin", "uninstall", "nope", "--quiet"], settings) == 1


def test_main(mocker, monkeypatch):
    monkeypatch.setattr("sys.argv", ["jf", "--version"])
    init_logger = mocker.patch("jfcli.main.init_logger")
    mocker.patch("jfcli.main.run", return_value=0)
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 0
    init_logger.assert_called_once()


@pytest.mark.parametrize("error", [KeyboardInterrupt, RuntimeError("boom")])
def test_main_failure(mocker, monkeypatch, error):
    monkeypatch.setattr("sys.argv", ["jf"])
    mocker.patch("jfcli.main.init_logger")
    mocker.patch("jfcli.main.run", side_effect=error)
    with pytest.raises(SystemExit) as excinfo:
        main()
    assert excinfo.value.code == 1
