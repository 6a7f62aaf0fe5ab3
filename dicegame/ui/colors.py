"""Theme colors and color utilities for the UI."""


class GameColors:
    """Light theme palette."""

    BG_TOP = "#e8eaf6"
    BG_MIDDLE = "#c5cae9"
    BG_BOTTOM = "#9fa8da"

    PRIMARY = "#3949ab"
    PRIMARY_LIGHT = "#6f74dd"
    PRIMARY_DARK = "#00227b"

    SUCCESS = "#2e7d32"
    SUCCESS_LIGHT = "#60ad5e"
    ERROR = "#c62828"
    ERROR_LIGHT = "#ff5f52"

    CARD_BG = "rgba(255, 255, 255, 0.88)"
    CARD_BORDER = "rgba(255, 255, 255, 0.6)"
    ROW_HIGHLIGHT = "rgba(57, 73, 171, 0.08)"

    TEXT_PRIMARY = "#1a237e"
    TEXT_SECONDARY = "#4a5072"
    TEXT_MUTED = "#7986a0"
    DIVIDER = "#e0e3f0"


def result_colors(won: bool) -> tuple[str, str]:
    """Return (light, dark) colors for a win or loss."""
    if won:
        return GameColors.SUCCESS_LIGHT, GameColors.SUCCESS
    return GameColors.ERROR_LIGHT, GameColors.ERROR


def blend_hex(a: str, b: str, t: float) -> str:
    """Blend two #RRGGBB colors. t=0 -> a, t=1 -> b."""
    try:
        a = a.strip()
        b = b.strip()
        if not (a.startswith("#") and b.startswith("#") and len(a) == 7 and len(b) == 7):
            return a
        t = max(0.0, min(1.0, float(t)))
        ar, ag, ab = int(a[1:3], 16), int(a[3:5], 16), int(a[5:7], 16)
        br, bg, bb = int(b[1:3], 16), int(b[3:5], 16), int(b[5:7], 16)
        r = int(ar + (br - ar) * t)
        g = int(ag + (bg - ag) * t)
        bl = int(ab + (bb - ab) * t)
        return f"#{r:02X}{g:02X}{bl:02X}"
    except ValueError:
        return a
