"""jfcli - command-line front-end for the artifact platform.

Assembles the `jf` command tree from built-in namespaces, embedded plugins,
installed plugins and third-party namespace providers, then dispatches the
typed command. Business logic lives in external service clients.
"""
