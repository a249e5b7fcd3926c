"""
StateLab Theme - Shared color palette for both demo apps.

Both demos use the same palette so the only visible difference between them
is how their state is held.
"""

import flet as ft

# =============================================================================
# PRIMARY ACCENT COLORS
# =============================================================================
CYAN_PRIMARY = "#48b0f7"       # Main accent, seed color
TEAL_PRIMARY = "#4ECDC4"       # Counter values
GOLD_PRIMARY = "#3D60C8"       # Titles
RED_PRIMARY = "#FF6B6B"        # Decrement

# =============================================================================
# TEXT COLORS
# =============================================================================
TEXT_BRIGHT = "#AFC5D6"
TEXT_MUTED = "#8A9BA8"

# =============================================================================
# BACKGROUND / BORDER COLORS
# =============================================================================
BG_PAGE = "#000000"
BG_CARD = "rgba(255,255,255,0.025)"
BORDER_MEDIUM = "rgba(255,255,255,0.1)"

# =============================================================================
# SEMANTIC UI TOKENS
# =============================================================================
TEXT_TITLE = GOLD_PRIMARY             # AppBar titles
TEXT_COUNTER = TEAL_PRIMARY           # "Counter Value: N"
TEXT_LABEL = TEXT_MUTED               # Display labels, status bar
TEXT_PLACEHOLDER = TEXT_MUTED         # Unmounted display placeholder
BUTTON_INCREMENT = CYAN_PRIMARY
BUTTON_DECREMENT = RED_PRIMARY
CARD_BORDER = BORDER_MEDIUM


def apply_theme(page: ft.Page, seed_color: str = CYAN_PRIMARY, theme_mode: str = "dark") -> None:
    """Apply the shared Material 3 theme to a page."""
    page.theme = ft.Theme(
        color_scheme_seed=seed_color,
        use_material3=True,
    )
    page.theme_mode = ft.ThemeMode.LIGHT if theme_mode == "light" else ft.ThemeMode.DARK
    page.bgcolor = BG_PAGE
    page.padding = 0
