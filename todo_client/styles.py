"""
To-Do List: light and dark stylesheets (QSS).
Both themes share one template; only the palette differs.
"""

from __future__ import annotations

# ── palettes ──────────────────────────────────────────
LIGHT_PALETTE = {
    "BG_PRIMARY": "#ffffff",
    "BG_SECONDARY": "#f7f7fb",
    "BG_TERTIARY": "#ffffff",
    "BG_INPUT": "#ffffff",
    "SURFACE": "#f0eefc",
    "TEXT_PRIMARY": "#000000",
    "TEXT_SECONDARY": "#55536e",
    "TEXT_MUTED": "#888888",
    "TEXT_DONE": "#808080",
    "BORDER": "#cccccc",
    "BORDER_SUBTLE": "#e4e4ee",
}

DARK_PALETTE = {
    "BG_PRIMARY": "#333333",
    "BG_SECONDARY": "#2b2b2b",
    "BG_TERTIARY": "#3a3a3a",
    "BG_INPUT": "#555555",
    "SURFACE": "#444444",
    "TEXT_PRIMARY": "#ffffff",
    "TEXT_SECONDARY": "#cccccc",
    "TEXT_MUTED": "#aaaaaa",
    "TEXT_DONE": "#9a9a9a",
    "BORDER": "#5a5a5a",
    "BORDER_SUBTLE": "#444444",
}

ACCENT = "#8b5cf6"
ACCENT_GLOW = "#a78bfa"
ACCENT_DEEP = "#6d28d9"
SUCCESS = "#10b981"
DANGER = "#ef4444"
WARNING = "#f59e0b"

_TEMPLATE = """
/* ── base ── */
QWidget {{
    background-color: {BG_PRIMARY};
    color: {TEXT_PRIMARY};
    font-family: "Segoe UI Variable", "Segoe UI", "Helvetica Neue", sans-serif;
    font-size: 13px;
}}
QWidget#contentPanel {{
    background-color: {BG_PRIMARY};
}}

/* ── header ── */
QLabel#headerLabel {{
    color: {TEXT_PRIMARY};
    font-size: 24px;
    font-weight: 700;
    padding: 4px 0px 8px 0px;
}}
QCheckBox#darkModeSwitch {{
    color: {TEXT_PRIMARY};
    font-size: 14px;
    spacing: 8px;
}}
QPushButton#helpButton,
QPushButton#refreshButton,
QPushButton#dueButton {{
    background-color: rgba(139, 92, 246, 0.1);
    border: 1px solid {BORDER};
    border-radius: 8px;
    padding: 0px;
}}
QPushButton#dueButton {{
    color: {TEXT_PRIMARY};
    font-size: 12px;
    padding: 0px 10px;
    text-align: left;
}}
QPushButton#helpButton {{
    color: {ACCENT};
    font-weight: 700;
}}
QPushButton#helpButton:hover,
QPushButton#refreshButton:hover,
QPushButton#dueButton:hover {{
    background-color: rgba(139, 92, 246, 0.2);
    border-color: {ACCENT};
}}
QPushButton#dueButton[dueOverdue="true"] {{
    background-color: rgba(239, 68, 68, 0.16);
    border-color: rgba(239, 68, 68, 0.48);
}}

/* ── creation form ── */
QLineEdit#taskInput {{
    background-color: {BG_INPUT};
    border: 1px solid {BORDER};
    border-radius: 6px;
    padding: 8px 10px;
    color: {TEXT_PRIMARY};
    selection-background-color: {ACCENT};
    selection-color: white;
}}
QLineEdit#taskInput:focus {{
    border: 1px solid {ACCENT};
}}
QPushButton#primaryButton {{
    background-color: {ACCENT};
    color: white;
    border: none;
    border-radius: 6px;
    padding: 8px 14px;
    font-weight: 600;
}}
QPushButton#primaryButton:hover {{
    background-color: {ACCENT_DEEP};
}}
QPushButton#secondaryButton,
QPushButton#rowButton {{
    background-color: transparent;
    color: {TEXT_SECONDARY};
    border: 1px solid {BORDER};
    border-radius: 6px;
    padding: 6px 12px;
}}
QPushButton#secondaryButton:hover,
QPushButton#rowButton:hover {{
    color: {ACCENT};
    border-color: {ACCENT};
}}
QPushButton#rowDangerButton {{
    background-color: transparent;
    color: {DANGER};
    border: 1px solid rgba(239, 68, 68, 0.4);
    border-radius: 6px;
    padding: 6px 12px;
}}
QPushButton#rowDangerButton:hover {{
    background-color: rgba(239, 68, 68, 0.12);
}}

/* ── filters ── */
QPushButton#filterButton {{
    background-color: transparent;
    color: {TEXT_SECONDARY};
    border: 1px solid {BORDER_SUBTLE};
    border-radius: 14px;
    padding: 5px 14px;
}}
QPushButton#filterButton[active="true"] {{
    background-color: {ACCENT};
    border-color: {ACCENT};
    color: white;
    font-weight: 600;
}}

/* ── list ── */
QLabel#counterLabel {{
    color: {TEXT_SECONDARY};
    font-size: 11px;
    padding: 2px 0px;
}}
QLabel#emptyLabel {{
    color: {TEXT_MUTED};
    padding: 30px 10px;
}}
QScrollArea {{
    background: transparent;
    border: none;
}}
QScrollArea > QWidget > QWidget {{
    background: transparent;
}}
QFrame#taskItem, QFrame#taskItemDone {{
    background-color: {BG_TERTIARY};
    border: 1px solid {BORDER_SUBTLE};
    border-radius: 8px;
}}
QFrame#taskItem:hover {{
    background-color: {SURFACE};
}}
QLabel#taskTitle {{
    color: {TEXT_PRIMARY};
    font-size: 15px;
}}
QLabel#taskTitleDone {{
    color: {TEXT_DONE};
    font-size: 15px;
    text-decoration: line-through;
}}
QLabel#taskDeadline {{
    color: {TEXT_SECONDARY};
    font-size: 11px;
}}
QLabel#taskDeadline[overdue="true"] {{
    color: {DANGER};
    font-weight: bold;
}}

/* ── sync indicator ── */
QProgressBar#syncProgress {{
    min-height: 3px;
    max-height: 3px;
    border: none;
    background-color: rgba(139, 92, 246, 0.08);
}}
QProgressBar#syncProgress::chunk {{
    background: qlineargradient(x1:0, y1:0, x2:1, y2:0,
        stop:0 {ACCENT}, stop:1 {ACCENT_GLOW});
}}

/* ── dialogs ── */
QDialog {{
    background-color: {BG_SECONDARY};
}}
QLabel#errorLabel {{
    color: {DANGER};
}}
QToolTip {{
    background-color: {BG_TERTIARY};
    color: {TEXT_PRIMARY};
    border: 1px solid {BORDER};
    padding: 6px 8px;
}}
"""


def build_stylesheet(dark_mode: bool) -> str:
    palette = DARK_PALETTE if dark_mode else LIGHT_PALETTE
    return _TEMPLATE.format(
        ACCENT=ACCENT,
        ACCENT_GLOW=ACCENT_GLOW,
        ACCENT_DEEP=ACCENT_DEEP,
        SUCCESS=SUCCESS,
        DANGER=DANGER,
        WARNING=WARNING,
        **palette,
    )

