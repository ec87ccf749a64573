"""Constants used throughout linemenu."""

# Printed before every menu item
ITEM_INDENT = "  "

# Printed between an item's label and the item itself
DEFAULT_ITEM_SUFFIX = ") "

# Width labels are right-aligned to
LABEL_WIDTH = 2

# Exit status when the user aborts a prompt (Ctrl+C / Ctrl+D)
EXIT_ABORTED = 130


class LabelStyle:
    """Label style names accepted in config and on the command line."""

    NUMBERS = "numbers"
    LETTERS = "letters"
    ROMAN = "roman"

    ALL = (NUMBERS, LETTERS, ROMAN)
