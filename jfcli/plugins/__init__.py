"""Plugin support: the plugin command model, embedded plugins and installed plugins."""
