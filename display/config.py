"""
Display configuration for Tic Tac Toe.
All the settings for the window, colours, and result dialog.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the game.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_MIN_WIDTH = 360
    WINDOW_MIN_HEIGHT = 460

    # ==================== COLOURS ====================
    PRIMARY_COLOR = "#1E90FF"      # Board border, current turn, X
    ACCENT_COLOR = "#32CD32"       # Winner indicator, O
    SECONDARY_COLOR = "#FFFFFF"    # Background
    CELL_HOVER_COLOR = "#F0F8FF"   # Very light blue
    BORDER_COLOR = "#E5E7EB"
    STATUS_COLOR = "#22223b"       # Status text while no one has won

    # Mark symbol -> text colour
    MARK_COLORS = {
        "X": PRIMARY_COLOR,
        "O": ACCENT_COLOR,
    }

    # ==================== FONTS ====================
    FONT_FAMILY = "Segoe UI"
    TITLE_FONT = (FONT_FAMILY, 22, "bold")
    STATUS_FONT = (FONT_FAMILY, 14, "bold")
    CELL_FONT = (FONT_FAMILY, 28, "bold")
    BUTTON_FONT = (FONT_FAMILY, 11, "bold")
    HINT_FONT = (FONT_FAMILY, 10)

    # ==================== BOARD ====================
    CELL_WIDTH = 4    # Tk text units
    CELL_HEIGHT = 2
    CELL_PADDING = 2

    # ==================== CONTROLS ====================
    # Restart button text on an untouched board, and once play has started
    START_LABEL = "Start New Game"
    RESTART_LABEL = "Restart Game"

    # ==================== RESULT DIALOG ====================
    # Delay between the deciding move and the result dialog (ms)
    RESULT_DIALOG_DELAY_MS = 250
    CLOSE_LABEL = "Close"
