"""secvarctl — command-line management of platform secure-boot variables.

Detects which secure-variable backend the platform advertises and routes
subcommands to that backend's command table.
"""

from secvarctl.version import __version__

__all__: list[str] = ["__version__"]
