"""QSS stylesheet and mode colors for epomo."""

from __future__ import annotations

from ..timer.engine import PomodoroMode

# ── mode colors ─────────────────────────────────────────────────────────

MODE_COLORS: dict[PomodoroMode, str] = {
    PomodoroMode.WORK:        "#3ABFF0",   # rgb(58, 191, 240)
    PomodoroMode.SHORT_BREAK: "#F0E73A",   # rgb(240, 231, 58)
    PomodoroMode.LONG_BREAK:  "#F08C3A",   # rgb(240, 140, 58)
}

# ── default palette ──────────────────────────────────────────────────────

DEFAULT_PALETTE: dict[str, str] = {
    "bg":           "#1B1B1B",
    "bg_secondary": "#2A2A2A",
    "text":         "#DCDCDC",
    "text_muted":   "#8C8C8C",
    "accent":       "#3ABFF0",
    "border":       "#3C3C3C",
}


def mode_color(mode: PomodoroMode) -> str:
    return MODE_COLORS[mode]


# ── QSS builder ───────────────────────────────────────────────────────


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or DEFAULT_PALETTE
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-size: 13px;
    }}

    QLabel#heading {{
        font-size: 18px;
        font-weight: 700;
    }}

    QLabel#caption {{
        color: {p['text_muted']};
    }}

    QLabel#countdown {{
        font-size: 18px;
        font-weight: 700;
    }}

    QPushButton {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 4px;
        padding: 4px 12px;
    }}

    QPushButton:hover {{
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
    }}

    QSlider::groove:horizontal {{
        height: 4px;
        background: {p['border']};
        border-radius: 2px;
    }}

    QSlider::handle:horizontal {{
        width: 12px;
        margin: -5px 0;
        border-radius: 6px;
        background: {p['accent']};
    }}

    QSlider::handle:horizontal:disabled {{
        background: {p['text_muted']};
    }}
    """
