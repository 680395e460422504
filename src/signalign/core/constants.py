"""Characters used when flattening special signs for comparison."""

SPACE_CHARACTER = " "
VACAT_CHARACTER = "V"
BREAK_CHARACTER = "X"

# Stand-in for a letter whose character is unknown (empty)
UNKNOWN_CHARACTER = "?"
