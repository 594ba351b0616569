"""Usage and help text for the top-level ``secvarctl`` command."""

from __future__ import annotations

from secvarctl.cli.console import output

USAGE_TEXT: str = """
USAGE:
\t$ secvarctl [MODE] [COMMAND]
MODEs:
-m, --mode\tsupports both the Guest and Host secure boot variables in two different modes
\t\tand either -m host or -m guest are acceptable values.
COMMANDs:
\t--help/--usage
\tread\t\tprints info on secure variables,
\t\t\tuse 'secvarctl [MODE] read --help' for more information
\twrite\t\tupdates secure variable with new auth,
\t\t\tuse 'secvarctl [MODE] write --help' for more information
\tvalidate\tvalidates format of given esl/cert/auth (not available in this build)
\tverify\t\tcompares proposed variable to the current variables (not available in this build)
"""

HELP_TEXT: str = """
HELP:
\tA command line tool for simplifying the reading and writing of secure boot variables.
\tCommands are:
\t\tread - print out information on their current secure variables
\t\twrite - update the given variable's key value, committed upon reboot
\t\tvalidate - checks format requirements are met for the given file type (not available)
\t\tverify - checks that the given files are correctly signed by the current variables (not available)
"""


def print_usage() -> None:
    output.print(USAGE_TEXT, markup=False)


def print_help() -> None:
    output.print(HELP_TEXT, markup=False)
    print_usage()
