"""Shared constants for git-reporter."""

# Bit 15 of an index entry's 16-bit flag field marks a frozen file.
FROZEN_FLAG = 1 << 15

# Sentinels shown in the report
UNKNOWN_BRANCH = "unknown branch"
NO_USER = "None"

# Subcommands understood by the CLI; "report" is used when none is given
COMMAND_REPORT = "report"
COMMAND_FREEZE = "freeze"
COMMAND_UNFREEZE = "unfreeze"
COMMAND_COMPLETION = "completion"
COMMANDS = [COMMAND_REPORT, COMMAND_FREEZE, COMMAND_UNFREEZE, COMMAND_COMPLETION]


# Report colors (Rich style names)
REPORT_COLORS = {
    "path": "bright_yellow underline",
    "remote_name": "green",
    "remote_url": "cyan",
    "label": "green",
    "user": "cyan",
    "none": "red",
    "branch": "bright_cyan",
    "unknown_branch": "magenta",
    "state_clean": "bright_green",
    "state_busy": "bright_red",
    "staged": "green",
    "changed": "magenta",
    "frozen": "cyan",
    "stashed": "yellow",
}
