"""Built-in command namespaces.

Each module exposes `get_commands()`, returning the subcommands of a
namespace (or, for providers, top-level commands).
"""
