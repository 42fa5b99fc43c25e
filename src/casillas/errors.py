"""Exception classes for Casillas.

Provides standardized exceptions for error handling throughout Casillas.
The task list pass itself never raises: structural anomalies in a token
stream are skipped. Only configuration and registration can fail.
"""

from __future__ import annotations


class CasillasError(Exception):
    """Base exception for all Casillas errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(CasillasError):
    """Invalid task list option.

    Raised when an option has the wrong type or an unusable value.
    """

    def __init__(self, option: str, message: str) -> None:
        """Initialize config error.

        Args:
            option: Name of the offending option (e.g., "list_class")
            message: Description of the problem
        """
        self.option = option
        super().__init__(f"Option '{option}': {message}")


class PluginError(CasillasError):
    """Error in plugin registration.

    Raised when the plugin cannot attach itself to a Markdown engine.
    """

    def __init__(self, plugin_name: str, message: str) -> None:
        """Initialize plugin error.

        Args:
            plugin_name: Name of the failing plugin
            message: Description of the error
        """
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
