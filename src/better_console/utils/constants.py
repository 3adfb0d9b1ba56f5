"""Constants used throughout better-console."""

# Prompt shown when no question is given
DEFAULT_QUESTION = "Please choose an option:"

# Printed by the interrupt handler before exiting
FAREWELL_MESSAGE = "\nGoodbye!"

# Exit status used by the interrupt handler
EXIT_SUCCESS = 0

# Name of the option appended to every menu
EXIT_OPTION_NAME = "Exit"

# Row prefixes, same width so names stay aligned
SELECTED_MARKER = "> "
UNSELECTED_MARKER = "  "
