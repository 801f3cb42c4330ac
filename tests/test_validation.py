"""Tests for the command tree integrity checks."""

import pytest

from jfcli.commands.models import Command
from jfcli.models import DuplicateAliasError, ExitCode
from jfcli.validation import validate_aliases


class TestValidateAliases:
    """Tests for validate_aliases."""

    def test_scenario_valid(self, scenario_registry):
        """Test the scenario registry has no duplicates."""
        validate_aliases(scenario_registry)

    def test_empty(self):
        """Test an empty tree is valid."""
        validate_aliases([])

    def test_sibling_duplicate(self):
        """Test two sibling subcommands sharing an alias."""
        namespace = Command(
            name="artifactory",
            subcommands=[
                Command(name="upload", aliases=["u"]),
                Command(name="unlink", aliases=["u"]),
            ],
        )
        with pytest.raises(DuplicateAliasError) as excinfo:
            validate_aliases([namespace])
        assert excinfo.value.alias == "u"
        assert excinfo.value.namespace == "artifactory"
        assert excinfo.value.subcommand == "unlink"
        assert str(excinfo.value) == "Duplicate alias 'u' found on artifactory unlink command."
        assert excinfo.value.exit_code == ExitCode.ERROR

    def test_same_alias_other_namespace(self):
        """Test the same alias under two namespaces is allowed."""
        validate_aliases(
            [
                Command(name="rt", subcommands=[Command(name="ping", aliases=["p"])]),
                Command(name="plugin", subcommands=[Command(name="publish", aliases=["p"])]),
            ]
        )

    def test_top_level_aliases_not_checked(self):
        """Test only subcommands of a namespace are compared."""
        validate_aliases([Command(name="a", aliases=["x"]), Command(name="b", aliases=["x"])])

    def test_first_duplicate_reported(self):
        """Test validation stops at the first duplicate."""
        namespace = Command(
            name="ns",
            subcommands=[
                Command(name="one", aliases=["a", "b"]),
                Command(name="two", aliases=["b"]),
                Command(name="three", aliases=["a"]),
            ],
        )
        with pytest.raises(DuplicateAliasError) as excinfo:
            validate_aliases([namespace])
        assert excinfo.value.subcommand == "two"
        assert excinfo.value.alias == "b"

    def test_deeper_levels_ignored(self):
        """Test subcommands of subcommands are not compared."""
        nested = Command(
            name="ns",
            subcommands=[
                Command(name="group", subcommands=[Command(name="x", aliases=["d"]), Command(name="y", aliases=["d"])]),
            ],
        )
        validate_aliases([nested])


class TestBuiltinCommands:
    """Integrity of the commands shipped with the CLI."""

    def test_no_duplicate_aliases(self, settings):
        """Test the complete command tree passes the alias validation."""
        from jfcli.main import create_registry

        validate_aliases(create_registry(settings))

    def test_no_duplicate_names_or_aliases_anywhere(self, settings):
        """Test every level of the tree only has unique invocation tokens."""
        from jfcli.commands.tree import iter_commands
        from jfcli.main import create_registry

        registry = create_registry(settings)
        for parent in [None, *iter_commands(registry)]:
            siblings = registry if parent is None else parent.subcommands
            tokens = [token for command in siblings for token in command.names()]
            assert len(tokens) == len(set(tokens)), parent.full_name if parent else "top level"

    def test_unique_flags(self, settings):
        """Test no command declares the same flag twice."""
        from jfcli.commands.tree import iter_commands
        from jfcli.main import create_registry

        for command in iter_commands(create_registry(settings)):
            names = [flag.name for flag in command.flags]
            assert len(names) == len(set(names)), command.full_name
