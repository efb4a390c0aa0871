# Storage
BITS_PER_WORD = 8

# Demo grid dimensions
DEFAULT_WIDTH = 20
DEFAULT_HEIGHT = 40

# Animation
DEFAULT_DELAY_MS = 100
DEFAULT_ON_SYMBOL = "O"
DEFAULT_OFF_SYMBOL = "."
ANIMATION_TITLE = "GAME OF LIFE"

# ANSI: clear screen, cursor home
CLEAR_SCREEN = "\033[2J\033[H"
