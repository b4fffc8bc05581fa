"""Design tokens shared by the stylesheet and custom-painted widgets."""

from __future__ import annotations

from typing import Dict, Final

# Color palette
PALETTE: Final[Dict[str, str]] = {
    "bg_primary": "#0a0c10",
    "bg_secondary": "#161b22",
    "bg_tertiary": "#1c2128",
    "bg_hover": "rgba(255, 255, 255, 0.03)",
    "text_primary": "#d1d5db",
    "text_secondary": "#9ca3af",
    "text_muted": "#7f8b9a",
    "accent_primary": "#4a7d89",
    "accent_secondary": "#67e8f9",
    "accent_hover": "rgba(74, 125, 137, 0.18)",
    "accent_selected": "rgba(74, 125, 137, 0.12)",
    "border_default": "#2c313a",
    "border_subtle": "rgba(255, 255, 255, 0.05)",
    "success": "#10b981",
    "warning": "#f59e0b",
    "error": "#ef4444",
    "info": "#3b82f6",
}

# Spacing scale (4px increments)
SPACING: Final[Dict[str, int]] = {
    "xxs": 4,
    "xs": 8,
    "sm": 12,
    "md": 16,
    "lg": 24,
    "xl": 32,
}

# Typography sizes (px)
TYPOGRAPHY: Final[Dict[str, int]] = {
    "tiny": 12,
    "small": 13,
    "body": 14,
    "subheader": 18,
    "header": 24,
}

# Status chip colors: (background, text)
STATUS_COLORS: Final[Dict[str, tuple]] = {
    "Completed": ("rgba(16, 185, 129, 0.15)", PALETTE["success"]),
    "In Progress": ("rgba(59, 130, 246, 0.15)", PALETTE["info"]),
    "Pending Review": ("rgba(245, 158, 11, 0.15)", PALETTE["warning"]),
}


def status_colors(status: str) -> tuple:
    """Return (background, foreground) for a proctor status chip."""
    return STATUS_COLORS.get(status, (PALETTE["bg_tertiary"], PALETTE["text_secondary"]))
