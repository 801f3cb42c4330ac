"""The security plugin, embedded in the CLI.

Scanning itself is done by the service client registered for each command,
this module only describes the commands.
"""

from __future__ import annotations

from ..services import load_service_handler
from .interface import PluginAction, PluginApp, PluginArgument, PluginCommand, PluginContext, PluginFlag, PluginNamespace

__all__ = ["SECURITY_CATEGORY", "get_app"]

SECURITY_CATEGORY = "Security"

_SERVER_FLAGS = [
    PluginFlag("url", "JFrog URL."),
    PluginFlag("user", "JFrog username."),
    PluginFlag("access-token", "JFrog access token."),
    PluginFlag("server-id", "Server ID configured using the config command."),
]
_RESULTS_FLAGS = [
    PluginFlag("format", "Defines the output format of the command. Acceptable values are: table, json, simple-json and sarif.", default="table"),
    PluginFlag("watches", "A comma-separated list of Xray watches, to determine Xray's violations creation."),
    PluginFlag("project", "JFrog Artifactory project key, to enable Xray to determine security violations accordingly."),
    PluginFlag("licenses", "Set to true if you'd like to receive licenses from Xray scanning.", kind="bool", default=False),
    PluginFlag("fail", "Set to false if you do not wish the command to return exit code 3, even if the 'Fail Build' rule is matched by Xray.", kind="bool", default=True),
]


def _delegated(operation: str) -> PluginAction:
    def _action(ctx: PluginContext) -> int | None:
        return load_service_handler(operation)(ctx)

    return _action


def get_app() -> PluginApp:
    """Describe the security commands."""
    return PluginApp(
        name="security",
        description="Security scanning with JFrog Xray and JFrog Advanced Security.",
        version="1.0.0",
        commands=[
            PluginCommand(
                name="audit",
                aliases=["aud"],
                description="Audit your local project's dependencies by generating a dependency tree and scanning it with Xray.",
                category=SECURITY_CATEGORY,
                usage_options=["[command options]"],
                flags=[
                    *_RESULTS_FLAGS,
                    PluginFlag("working-dirs", "A comma-separated list of relative working directories, to determine the audit targets."),
                    PluginFlag("exclusions", "List of semicolon-separated exclusions, used to exclude files from the scan."),
                    *_SERVER_FLAGS,
                ],
                env_vars=["JFROG_CLI_LOG_LEVEL"],
                action=_delegated("security.audit"),
            ),
            PluginCommand(
                name="scan",
                aliases=["s"],
                description="Scan files located on the local file system with Xray.",
                category=SECURITY_CATEGORY,
                usage_options=["[command options] <source pattern>"],
                arguments=[PluginArgument("source pattern", "Specifies the local file system path of the files to be scanned.")],
                flags=[*_RESULTS_FLAGS, PluginFlag("recursive", "Set to false if you do not wish to collect artifacts in sub-folders.", kind="bool", default=True), *_SERVER_FLAGS],
                action=_delegated("security.scan"),
            ),
            PluginCommand(
                name="curation-audit",
                aliases=["ca"],
                description="Audit your local project's dependencies using JFrog Curation.",
                category=SECURITY_CATEGORY,
                usage_options=["[command options]"],
                flags=[PluginFlag("format", "Defines the output format of the command. Acceptable values are: table, json.", default="table"), PluginFlag("threads", "Number of working threads.", default="3"), *_SERVER_FLAGS],
                action=_delegated("security.curation-audit"),
            ),
        ],
        subcommands=[
            PluginNamespace(
                name="xr",
                description="Xray commands.",
                commands=[
                    PluginCommand(
                        name="curl",
                        aliases=["cl"],
                        description="Execute a cUrl command, using the configured Xray details.",
                        usage_options=["[command options] <curl command>"],
                        skip_flag_parsing=True,
                        action=_delegated("xr.curl"),
                    ),
                    PluginCommand(
                        name="offline-update",
                        aliases=["ou"],
                        description="Download Xray offline updates.",
                        usage_options=["--license-id=<license id> [command options]"],
                        flags=[
                            PluginFlag("license-id", "Xray license ID.", mandatory=True),
                            PluginFlag("from", "From update date in YYYY-MM-DD format."),
                            PluginFlag("to", "To update date in YYYY-MM-DD format."),
                            PluginFlag("version", "Xray API version."),
                            PluginFlag("target", "Target directory to download the updates to.", default="./"),
                        ],
                        action=_delegated("xr.offline-update"),
                    ),
                ],
            ),
        ],
    )
