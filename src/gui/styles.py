"""
Dark bluish theme stylesheet for the Proctor Lab dashboard.
"""

from gui.design_tokens import PALETTE

COLORS = {
    'background': PALETTE['bg_primary'],
    'card': PALETTE['bg_secondary'],
    'panel': PALETTE['bg_tertiary'],
    'border': PALETTE['border_default'],
    'text': PALETTE['text_primary'],
    'text_secondary': PALETTE['text_secondary'],
    'muted': PALETTE['text_muted'],
    'accent': PALETTE['accent_primary'],
    'accent_light': PALETTE['accent_secondary'],
    'accent_hover': PALETTE['accent_hover'],
    'hover': PALETTE['bg_hover'],
    'selected': PALETTE['accent_selected'],
    'danger': PALETTE['error'],
}

DARK_THEME_STYLESHEET = f"""
/* ==================== GLOBAL STYLES ==================== */
QWidget {{
    background-color: {COLORS['background']};
    color: {COLORS['text']};
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
    font-size: 14px;
    font-weight: 400;
}}

QMainWindow {{
    background-color: {COLORS['background']};
}}

/* ==================== TOP BAR ==================== */
#topBar {{
    background-color: {COLORS['card']};
    border-bottom: 1px solid {COLORS['border']};
}}

#topBarTitle {{
    background-color: transparent;
    font-size: 18px;
    font-weight: 600;
}}

#railToggle {{
    background-color: transparent;
    color: {COLORS['text']};
    border: none;
    font-size: 20px;
    padding: 4px 10px;
}}

#railToggle:hover {{
    color: {COLORS['accent_light']};
}}

/* ==================== NAVIGATION RAIL ==================== */
#navigationRail {{
    background-color: {COLORS['card']};
    border-right: 1px solid {COLORS['border']};
}}

#railButton {{
    background-color: transparent;
    color: {COLORS['muted']};
    border: none;
    border-radius: 6px;
    padding: 10px 12px;
    text-align: left;
    font-weight: 500;
}}

#railButton:hover {{
    color: {COLORS['text']};
    background-color: {COLORS['hover']};
}}

#railButton:checked {{
    color: {COLORS['text']};
    background-color: {COLORS['selected']};
    font-weight: 600;
}}

/* ==================== PANELS ==================== */
#panelHeadline {{
    font-size: 22px;
    font-weight: 600;
    color: {COLORS['text']};
}}

#panelPlaceholder {{
    color: {COLORS['muted']};
    font-size: 14px;
}}

#panelError {{
    color: {COLORS['danger']};
    font-size: 14px;
}}

#metricCard {{
    background-color: {COLORS['card']};
    border: 1px solid {COLORS['border']};
    border-radius: 8px;
}}

#metricLabel {{
    background-color: transparent;
    color: {COLORS['muted']};
    font-size: 12px;
}}

#metricValue {{
    background-color: transparent;
    color: {COLORS['accent_light']};
    font-size: 22px;
    font-weight: 600;
}}

#detailField {{
    color: {COLORS['text_secondary']};
}}

/* ==================== PROCTOR LIST ==================== */
QListWidget#proctorList {{
    background-color: {COLORS['background']};
    border: none;
    outline: none;
}}

QListWidget#proctorList::item {{
    border-bottom: 1px solid {COLORS['border']};
    padding: 4px;
}}

QListWidget#proctorList::item:selected {{
    background-color: {COLORS['selected']};
}}

#proctorRowTitle {{
    background-color: transparent;
    font-weight: 600;
}}

#proctorRowText {{
    background-color: transparent;
    color: {COLORS['text_secondary']};
    font-size: 13px;
}}

/* ==================== BUTTONS ==================== */
QPushButton {{
    background-color: {COLORS['accent']};
    color: white;
    border: none;
    border-radius: 6px;
    padding: 8px 16px;
    font-weight: 500;
}}

QPushButton:hover {{
    background-color: {COLORS['accent_hover']};
}}

QPushButton:disabled {{
    background-color: {COLORS['border']};
    color: {COLORS['muted']};
}}

#secondaryAction {{
    background-color: {COLORS['card']};
    color: {COLORS['text']};
    border: 1px solid {COLORS['border']};
}}

#secondaryAction:hover {{
    border-color: {COLORS['accent']};
    color: {COLORS['accent']};
}}

/* ==================== INPUT FIELDS ==================== */
QLineEdit, QDoubleSpinBox, QComboBox, QDateEdit {{
    background-color: {COLORS['background']};
    border: 1px solid {COLORS['border']};
    border-radius: 6px;
    padding: 6px 10px;
    color: {COLORS['text']};
}}

QLineEdit:focus, QDoubleSpinBox:focus, QComboBox:focus, QDateEdit:focus {{
    border: 1px solid {COLORS['accent']};
}}

/* ==================== SPLIT HANDLES ==================== */
#splitHandle {{
    background-color: {COLORS['panel']};
}}

#splitHandle:hover {{
    background-color: {COLORS['accent_hover']};
}}

/* ==================== DIALOG ==================== */
QDialog {{
    background-color: {COLORS['card']};
    border: 1px solid {COLORS['border']};
    border-radius: 8px;
}}

QDialogButtonBox QPushButton {{
    min-width: 80px;
    font-weight: 500;
}}

/* ==================== STATUS BAR ==================== */
QStatusBar {{
    background-color: {COLORS['card']};
    color: {COLORS['muted']};
    border-top: 1px solid {COLORS['border']};
}}
"""


def status_chip_style(background: str, foreground: str) -> str:
    """Inline stylesheet for a status chip label."""
    return (
        f"background-color: {background}; color: {foreground}; "
        "border-radius: 4px; padding: 2px 8px; font-size: 12px; font-weight: 500;"
    )


def get_stylesheet():
    """Return the complete dark theme stylesheet."""
    return DARK_THEME_STYLESHEET
