"""Package managers and build tools integration.

Module-level namespace provider: `get_commands()` returns the build tool
commands, `get_help_commands()` the help-only entries of retired commands.
"""

from __future__ import annotations


from ..commands.models import Command
from ..constants import BUILD_NAME_ENV, BUILD_NUMBER_ENV
from ..help import create_usage
from .common import bool_flag, leaf, string_flag

__all__ = ["PACKAGE_MANAGERS_CATEGORY", "get_commands", "get_help_commands"]

PACKAGE_MANAGERS_CATEGORY = "Package Managers"

# (name, alias of the config command, display name)
_TOOLS = (
    ("mvn", "mvnc", "Maven"),
    ("gradle", "gradlec", "Gradle"),
    ("npm", "npmc", "npm"),
    ("yarn", "", "Yarn"),
    ("go", "", "Go"),
    ("pip", "pipc", "pip"),
    ("pipenv", "pipec", "Pipenv"),
    ("poetry", "poc", "Poetry"),
    ("nuget", "nugetc", "NuGet"),
    ("dotnet", "dotnetc", ".NET"),
    ("terraform", "tfc", "Terraform"),
)

# retired command -> replacement
_RETIRED = {
    "npmi": "npm install",
    "npm-install": "npm install",
    "npmci": "npm ci",
    "npm-ci": "npm ci",
    "npmp": "npm publish",
    "npm-publish": "npm publish",
    "gp": "go publish",
    "go-publish": "go publish",
}

_CONFIG_FLAGS = [
    bool_flag("global", "Set to true if you'd like the configuration to be global (for all projects)."),
    string_flag("server-id-resolve", "Artifactory server ID for resolution."),
    string_flag("server-id-deploy", "Artifactory server ID for deployment."),
    string_flag("repo-resolve", "Repository for dependencies resolution."),
    string_flag("repo-deploy", "Repository for artifacts deployment."),
]


def _tool_commands(tool: str, config_alias: str, display_name: str) -> list[Command]:
    config = leaf(
        "",
        f"{tool}-config",
        f"Generate {display_name} configuration.",
        aliases=[config_alias] if config_alias else [],
        usages=["[command options]"],
        flags=_CONFIG_FLAGS,
    )
    run = leaf(
        "",
        tool,
        f"Run {display_name} command.",
        usages=[f"{tool}-command [command options]"],
        arguments=f"\t{tool} command\n\t\tThe {display_name} command and arguments to run, as with the native client.\n\n",
        env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
        skip_flag_parsing=True,
    )
    return [config, run]


def get_commands() -> list[Command]:
    """Return the build tool commands."""
    commands: list[Command] = []
    for tool, config_alias, display_name in _TOOLS:
        commands.extend(_tool_commands(tool, config_alias, display_name))
    commands.append(
        leaf(
            "",
            "docker",
            "Run Docker command.",
            usages=["docker-command [command options]"],
            env_vars=[BUILD_NAME_ENV, BUILD_NUMBER_ENV],
            skip_flag_parsing=True,
        )
    )
    for command in commands:
        command.category = PACKAGE_MANAGERS_CATEGORY
    return commands


def get_help_commands() -> list[Command]:
    """Return hidden entries showing where retired commands moved."""
    return [
        Command(
            name=name,
            usage=f"Use 'jf {replacement}' instead.",
            help_name=create_usage(name, f"This command was removed. Use 'jf {replacement}' instead.", [f"jf {replacement} [command options]"]),
            skip_flag_parsing=True,
            hidden=True,
        )
        for name, replacement in _RETIRED.items()
    ]
