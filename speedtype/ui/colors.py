"""Theme colors and color utilities for the UI."""


class HomeColors:
    """Light theme palette."""

    BG_TOP = "#e0f7fa"
    BG_BOTTOM = "#80deea"

    PRIMARY = "#00838f"
    PRIMARY_LIGHT = "#4fb3bf"
    PRIMARY_DARK = "#005662"

    CORAL = "#ff8a65"

    CARD_BG = "rgba(255, 255, 255, 0.85)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"

    TEXT_PRIMARY = "#1a3a3a"
    TEXT_SECONDARY = "#4a6572"
    TEXT_MUTED = "#78909c"

    # Passage characters
    CHAR_CORRECT = "#2e7d32"
    CHAR_INCORRECT = "#c62828"
    CHAR_INCORRECT_BG = "#ffebee"
    CHAR_UNTYPED = "#78909c"


def _mix(a: str, b: str, t: float) -> str:
    """Linear mix of two #RRGGBB colours. t=0 -> a, t=1 -> b."""
    channels = []
    for i in (1, 3, 5):
        start, end = int(a[i:i + 2], 16), int(b[i:i + 2], 16)
        channels.append(int(start + (end - start) * t))
    return "#{:02X}{:02X}{:02X}".format(*channels)


def countdown_color(remaining_seconds: int, duration_seconds: int) -> str:
    """Timer colour: primary while plenty of time is left, fading to coral in the last quarter."""
    if duration_seconds <= 0:
        return HomeColors.PRIMARY
    fraction_left = max(0.0, min(1.0, remaining_seconds / duration_seconds))
    if fraction_left >= 0.25:
        return HomeColors.PRIMARY
    return _mix(HomeColors.PRIMARY, HomeColors.CORAL, 1.0 - fraction_left / 0.25)
