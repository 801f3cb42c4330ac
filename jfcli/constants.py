"""Shared constants for jfcli."""

__all__ = [
    "APP_NAME",
    "APP_USAGE",
    "BUILD_NAME_ENV",
    "BUILD_NUMBER_ENV",
    "BUILD_URL_ENV",
    "CI_ENV",
    "CLIENT_AGENT",
    "CONFIG_FILE_NAME",
    "DOCUMENTATION_URL",
    "ENV_EXCLUDE_ENV",
    "ENV_VARS",
    "HOME_DIR_ENV",
    "LOG_LEVEL_ENV",
    "MAX_SUGGESTION_DISTANCE",
    "PLUGINS_DIR_ENV",
    "SERVERS_CONFIG_FILE_NAME",
    "SUPPORTED_SHELLS",
    "USER_AGENT_ENV",
    "VERSION",
]

VERSION = "2.52.0"

APP_NAME = "jf"
CLIENT_AGENT = "jfrog-cli-py"
DOCUMENTATION_URL = "https://docs.jfrog-applications.jfrog.io/jfrog-applications/jfrog-cli"
APP_USAGE = f"See {DOCUMENTATION_URL} for full documentation."

# Environment variables
HOME_DIR_ENV = "JFROG_CLI_HOME_DIR"
LOG_LEVEL_ENV = "JFROG_CLI_LOG_LEVEL"
PLUGINS_DIR_ENV = "JFROG_CLI_PLUGINS_DIR"
USER_AGENT_ENV = "JFROG_CLI_USER_AGENT"
BUILD_NAME_ENV = "JFROG_CLI_BUILD_NAME"
BUILD_NUMBER_ENV = "JFROG_CLI_BUILD_NUMBER"
BUILD_URL_ENV = "JFROG_CLI_BUILD_URL"
ENV_EXCLUDE_ENV = "JFROG_CLI_ENV_EXCLUDE"
CI_ENV = "CI"

# Files under the CLI home directory
CONFIG_FILE_NAME = "jfcli.toml"
SERVERS_CONFIG_FILE_NAME = "jfrog-cli.conf.v6"

# Largest edit distance for a command to count as "similar"
MAX_SUGGESTION_DISTANCE = 2

# Shells supported by `jf completion`
SUPPORTED_SHELLS = ("bash", "zsh", "tcsh")

# Documented environment variables: name -> (default, description)
ENV_VARS: dict[str, tuple[str, str]] = {
    LOG_LEVEL_ENV: ("INFO", "This variable determines the log level of the JFrog CLI. Possible values are: DEBUG, INFO, WARN and ERROR."),
    HOME_DIR_ENV: ("~/.jfrog", "Defines the JFrog CLI home directory path."),
    PLUGINS_DIR_ENV: ("$JFROG_CLI_HOME_DIR/plugins", "Directory holding the installed JFrog CLI plugins."),
    USER_AGENT_ENV: ("jfrog-cli-py/<version>", "User agent sent with every request, in the name/version format."),
    CI_ENV: ("false", "If true, disables interactive prompts and progress bar."),
    BUILD_NAME_ENV: ("", "Build name to be used by commands which expect a build name, unless sent as a command argument or option."),
    BUILD_NUMBER_ENV: ("", "Build number to be used by commands which expect a build number, unless sent as a command argument or option."),
    BUILD_URL_ENV: ("", "Sets the CI server build URL in the build-info."),
    ENV_EXCLUDE_ENV: ("*password*;*psw*;*secret*;*key*;*token*;*auth*", "List of case insensitive patterns of variables to exclude from the build-info."),
}
