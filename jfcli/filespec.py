"""File specs: JSON descriptions of the files a command works on.

A spec file looks like::

    {"files": [{"pattern": "repo/path/*.zip", "target": "out/", "flat": "true"}]}

`${key}` placeholders are replaced using the --spec-vars flag
("key1=value1;key2=value2"), and flags given on the command line override the
matching fields of every file.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .models import SpecError, UsageError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .commands.models import Context

__all__ = [
    "FileSpec",
    "SpecFiles",
    "get_file_system_spec",
    "get_spec",
    "load_spec",
    "override_fields_if_set",
    "spec_from_args",
    "spec_vars_to_dict",
]


@dataclass
class FileSpec:
    """One entry of a file spec. Values are kept as strings, like in the JSON."""

    pattern: str = ""
    target: str = ""
    aql: dict[str, Any] | None = None
    props: str = ""
    target_props: str = ""
    exclude_props: str = ""
    exclusions: list[str] = field(default_factory=list)
    sort_by: list[str] = field(default_factory=list)
    sort_order: str = ""
    offset: int = 0
    limit: int = 0
    build: str = ""
    project: str = ""
    exclude_artifacts: str = ""
    include_deps: str = ""
    bundle: str = ""
    recursive: str = ""
    flat: str = ""
    explode: str = ""
    regexp: str = ""
    include_dirs: str = ""
    validate_symlinks: str = ""
    symlinks: str = ""
    transitive: str = ""
    public_gpg_key: str = ""

    @staticmethod
    def _json_key(name: str) -> str:
        head, *tail = name.split("_")
        return head + "".join(part.capitalize() for part in tail)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FileSpec:
        """Create a file entry from its JSON form (camelCase keys).

        Raises:
            SpecError: On unknown keys or values of the wrong type
        """
        by_key = {cls._json_key(f.name): f.name for f in fields(cls)}
        unknown = sorted(set(data) - set(by_key))
        if unknown:
            raise SpecError(f"Unknown file spec field(s): {', '.join(unknown)}")
        values: dict[str, Any] = {}
        for key, value in data.items():
            name = by_key[key]
            if name in ("exclusions", "sort_by"):
                if not isinstance(value, list):
                    raise SpecError(f"File spec field '{key}' must be a list")
                value = [str(item) for item in value]
            elif name in ("offset", "limit"):
                try:
                    value = int(value)
                except (TypeError, ValueError) as e:
                    raise SpecError(f"File spec field '{key}' must be a number") from e
            elif name != "aql":
                value = str(value).lower() if isinstance(value, bool) else str(value)
            values[name] = value
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form, empty fields omitted."""
        return {self._json_key(f.name): getattr(self, f.name) for f in fields(self) if getattr(self, f.name)}


@dataclass
class SpecFiles:
    """A complete file spec."""

    files: list[FileSpec] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON form."""
        return {"files": [f.to_dict() for f in self.files]}


# (FileSpec attribute, flag name)
_STRING_OVERRIDES = (
    ("sort_order", "sort-order"),
    ("props", "props"),
    ("target_props", "target-props"),
    ("exclude_props", "exclude-props"),
    ("build", "build"),
    ("project", "project"),
    ("exclude_artifacts", "exclude-artifacts"),
    ("include_deps", "include-deps"),
    ("bundle", "bundle"),
    ("recursive", "recursive"),
    ("flat", "flat"),
    ("explode", "explode"),
    ("regexp", "regexp"),
    ("include_dirs", "include-dirs"),
    ("validate_symlinks", "validate-symlinks"),
    ("symlinks", "symlinks"),
    ("transitive", "transitive"),
    ("public_gpg_key", "gpg-key"),
)
_LIST_OVERRIDES = (("exclusions", "exclusions"), ("sort_by", "sort-by"))
_INT_OVERRIDES = (("offset", "offset"), ("limit", "limit"))


def spec_vars_to_dict(spec_vars: str) -> dict[str, str]:
    """Parse "key1=value1;key2=value2". Entries without "=" are ignored."""
    result: dict[str, str] = {}
    for item in spec_vars.split(";"):
        key, sep, value = item.partition("=")
        if sep and key.strip():
            result[key.strip()] = value
    return result


def load_spec(path: str | Path, spec_vars: dict[str, str] | None = None) -> SpecFiles:
    """Read a spec file, replacing the `${key}` placeholders first.

    Raises:
        SpecError: If the file can't be read or is not a valid spec
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise SpecError(f"Can't read spec file {path}: {e}") from e
    for key, value in (spec_vars or {}).items():
        content = content.replace(f"${{{key}}}", value)
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise SpecError(f"Invalid JSON syntax in spec file {path}: {e.args[0]}") from e
    if not isinstance(data, dict) or not isinstance(data.get("files"), list):
        raise SpecError(f"Spec file {path} must contain a 'files' list")
    entries = []
    for entry in data["files"]:
        if not isinstance(entry, dict):
            raise SpecError(f"Spec file {path}: every 'files' entry must be an object")
        entries.append(FileSpec.from_dict(entry))
    return SpecFiles(entries)


def _is_set(ctx: Context, flag_name: str) -> bool:
    return ctx.command.find_flag(flag_name) is not None and ctx.is_set(flag_name)


def override_fields_if_set(spec: FileSpec, ctx: Context) -> None:
    """Override the spec fields with the flags given on the command line.

    List flags are split on ";", boolean flags are written "true" or "false".
    """
    for attr, flag_name in _LIST_OVERRIDES:
        if _is_set(ctx, flag_name):
            setattr(spec, attr, ctx.get_string(flag_name).split(";"))
    for attr, flag_name in _INT_OVERRIDES:
        if _is_set(ctx, flag_name):
            setattr(spec, attr, ctx.get_int(flag_name))
    for attr, flag_name in _STRING_OVERRIDES:
        if _is_set(ctx, flag_name):
            value = ctx.get(flag_name)
            setattr(spec, attr, str(value).lower() if isinstance(value, bool) else str(value))


def _load_spec_from_flags(ctx: Context) -> SpecFiles:
    spec_vars = ctx.get_string("spec-vars") if _is_set(ctx, "spec-vars") else ""
    return load_spec(ctx.get_string("spec"), spec_vars_to_dict(spec_vars))


def get_spec(ctx: Context, is_download: bool) -> SpecFiles:
    """Load the --spec file of a remote-sourced command, applying the flag overrides.

    Download patterns are relative to the repositories root: a leading "/" is removed.
    """
    spec = _load_spec_from_flags(ctx)
    for file_spec in spec.files:
        if is_download:
            file_spec.pattern = file_spec.pattern.removeprefix("/")
        override_fields_if_set(file_spec, ctx)
    return spec


def get_file_system_spec(ctx: Context) -> SpecFiles:
    """Load the --spec file of a file-system-sourced command (upload), applying the flag overrides.

    Upload targets are relative to the repositories root: a leading "/" is removed.
    """
    spec = _load_spec_from_flags(ctx)
    for file_spec in spec.files:
        file_spec.target = file_spec.target.removeprefix("/")
        override_fields_if_set(file_spec, ctx)
    return spec


def spec_from_args(ctx: Context, is_download: bool = False, args: Sequence[str] | None = None) -> SpecFiles:
    """Build a single-file spec from `<pattern> [target]` arguments and the flags.

    Args:
        ctx: The invocation
        is_download: True if the pattern is a repository path
        args: The pattern and target (defaults to the command arguments)

    Raises:
        UsageError: On a wrong number of arguments
    """
    args = list(ctx.args if args is None else args)
    if not 1 <= len(args) <= 2:
        raise UsageError(f"Wrong number of arguments ({len(args)}) for '{ctx.command.full_name}': expected <pattern> [target]")
    pattern = args[0]
    target = args[1] if len(args) == 2 else ""
    file_spec = FileSpec(pattern=pattern.removeprefix("/") if is_download else pattern, target=target if is_download else target.removeprefix("/"))
    override_fields_if_set(file_spec, ctx)
    return SpecFiles([file_spec])
