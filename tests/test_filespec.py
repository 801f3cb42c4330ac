"""Tests for file specs."""

import json

import pytest

from jfcli.commands.models import Context
from jfcli.filespec import (
    FileSpec,
    SpecFiles,
    get_file_system_spec,
    get_spec,
    load_spec,
    override_fields_if_set,
    spec_from_args,
    spec_vars_to_dict,
)
from jfcli.models import SpecError, UsageError
from jfcli.namespaces import artifactory


@pytest.fixture
def rt_commands():
    "The rt subcommands, by name"
    return {command.name: command for command in artifactory.get_commands()}


def write_spec(tmp_path, files, name="spec.json"):
    path = tmp_path / name
    path.write_text(json.dumps({"files": files}))
    return path


class TestSpecVars:
    """Tests for spec_vars_to_dict."""

    def test_parse(self):
        """Test semicolon separated key=value pairs."""
        assert spec_vars_to_dict("a=1;b=x=y;c=") == {"a": "1", "b": "x=y", "c": ""}

    def test_ignored(self):
        """Test empty and malformed entries are ignored."""
        assert spec_vars_to_dict("") == {}
        assert spec_vars_to_dict("novalue;;=x") == {}


class TestLoadSpec:
    """Tests for load_spec."""

    def test_load(self, tmp_path):
        """Test fields are read from their camelCase keys."""
        path = write_spec(tmp_path, [{"pattern": "repo/*.zip", "target": "out/", "flat": True, "sortBy": ["name"], "limit": "5", "targetProps": "a=b"}])
        spec = load_spec(path)
        (entry,) = spec.files
        assert entry.pattern == "repo/*.zip"
        assert entry.flat == "true"
        assert entry.sort_by == ["name"]
        assert entry.limit == 5
        assert entry.target_props == "a=b"

    def test_variables(self, tmp_path):
        """Test ${key} placeholders are replaced."""
        path = write_spec(tmp_path, [{"pattern": "${repo}/${dir}/*", "target": "${dir}/"}])
        spec = load_spec(path, {"repo": "libs", "dir": "v1"})
        assert spec.files[0].pattern == "libs/v1/*"
        assert spec.files[0].target == "v1/"

    def test_missing_file(self, tmp_path):
        """Test unreadable spec files."""
        with pytest.raises(SpecError, match="Can't read spec file"):
            load_spec(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        """Test malformed JSON."""
        path = tmp_path / "bad.json"
        path.write_text("{files: ")
        with pytest.raises(SpecError, match="Invalid JSON syntax"):
            load_spec(path)

    @pytest.mark.parametrize(
        "content",
        [
            {"nofiles": []},
            {"files": {}},
            {"files": ["pattern"]},
            {"files": [{"pattern": "a", "unknownKey": 1}]},
            {"files": [{"pattern": "a", "exclusions": "x"}]},
            {"files": [{"pattern": "a", "offset": "first"}]},
        ],
    )
    def test_invalid_structure(self, tmp_path, content):
        """Test structural errors."""
        path = tmp_path / "spec.json"
        path.write_text(json.dumps(content))
        with pytest.raises(SpecError):
            load_spec(path)

    def test_to_dict(self):
        """Test the JSON form omits empty fields."""
        spec = SpecFiles([FileSpec(pattern="a/*", exclude_props="x=y", offset=2)])
        assert spec.to_dict() == {"files": [{"pattern": "a/*", "excludeProps": "x=y", "offset": 2}]}


class TestOverrides:
    """Tests for the command line overrides."""

    def test_override(self, rt_commands):
        """Test list, int, bool and string flags override the spec."""
        ctx = Context(
            app=None,
            command=rt_commands["download"],
            flags={"exclusions": "*.tmp;*.log", "limit": 10, "flat": True, "recursive": False, "props": "k=v", "gpg-key": "key.asc"},
        )
        entry = FileSpec(pattern="a/*", props="old", limit=1)
        override_fields_if_set(entry, ctx)
        assert entry.exclusions == ["*.tmp", "*.log"]
        assert entry.limit == 10
        assert entry.flat == "true"
        assert entry.recursive == "false"
        assert entry.props == "k=v"
        assert entry.public_gpg_key == "key.asc"

    def test_unset_flags_keep_spec(self, rt_commands):
        """Test only flags given on the command line override."""
        ctx = Context(app=None, command=rt_commands["download"])
        entry = FileSpec(pattern="a/*", recursive="false", sort_by=["name"])
        override_fields_if_set(entry, ctx)
        assert entry.recursive == "false"
        assert entry.sort_by == ["name"]

    def test_unknown_flags_ignored(self, rt_commands):
        """Test flags the command does not declare are ignored."""
        ctx = Context(app=None, command=rt_commands["upload"], flags={"limit": 3})
        entry = FileSpec(pattern="a")
        override_fields_if_set(entry, ctx)
        assert entry.limit == 0


class TestGetSpec:
    """Tests for get_spec and get_file_system_spec."""

    def test_download_trims_pattern(self, tmp_path, rt_commands):
        """Test a leading slash is removed from download patterns."""
        path = write_spec(tmp_path, [{"pattern": "/repo/${name}", "target": "/local/"}])
        ctx = Context(app=None, command=rt_commands["download"], flags={"spec": str(path), "spec-vars": "name=a.zip", "flat": True})
        (entry,) = get_spec(ctx, is_download=True).files
        assert entry.pattern == "repo/a.zip"
        assert entry.target == "/local/"
        assert entry.flat == "true"

    def test_not_download_keeps_pattern(self, tmp_path, rt_commands):
        """Test patterns are kept for other commands."""
        path = write_spec(tmp_path, [{"pattern": "/repo/a"}])
        ctx = Context(app=None, command=rt_commands["delete"], flags={"spec": str(path)})
        assert get_spec(ctx, is_download=False).files[0].pattern == "/repo/a"

    def test_upload_trims_target(self, tmp_path, rt_commands):
        """Test a leading slash is removed from upload targets."""
        path = write_spec(tmp_path, [{"pattern": "/local/*.zip", "target": "/repo/dir/"}])
        ctx = Context(app=None, command=rt_commands["upload"], flags={"spec": str(path), "target-props": "a=1"})
        (entry,) = get_file_system_spec(ctx).files
        assert entry.pattern == "/local/*.zip"
        assert entry.target == "repo/dir/"
        assert entry.target_props == "a=1"


class TestSpecFromArgs:
    """Tests for spec_from_args."""

    def test_upload(self, rt_commands):
        """Test pattern and target arguments of an upload."""
        ctx = Context(app=None, command=rt_commands["upload"], args=["build/*.jar", "/libs/"], flags={"threads": 8})
        (entry,) = spec_from_args(ctx).files
        assert entry.pattern == "build/*.jar"
        assert entry.target == "libs/"

    def test_download(self, rt_commands):
        """Test a download without target."""
        ctx = Context(app=None, command=rt_commands["download"], args=["/libs/a.jar"])
        (entry,) = spec_from_args(ctx, is_download=True).files
        assert entry.pattern == "libs/a.jar"
        assert entry.target == ""

    @pytest.mark.parametrize("args", [[], ["a", "b", "c"]])
    def test_wrong_args(self, rt_commands, args):
        """Test the number of arguments is checked."""
        ctx = Context(app=None, command=rt_commands["upload"], args=args)
        with pytest.raises(UsageError, match="Wrong number of arguments"):
            spec_from_args(ctx)
