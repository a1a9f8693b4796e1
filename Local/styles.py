"""
Keyproof Dark Theme Stylesheet
===============================

Dark theme for the PySide6 desktop window; the log panel uses a
terminal-like monospace look.
"""

# Color palette
_BG_WINDOW = "#141821"
_BG_PANEL = "#1b2130"
_BG_INPUT = "#10141d"
_BG_BUTTON_OFF = "#2a3246"
_ACCENT = "#3aa0d8"
_ACCENT_HOVER = "#5cb6e6"
_ACCENT_PRESSED = "#2a7fb0"
_TEXT = "#e4e7ee"
_TEXT_DIM = "#9aa3b5"
_TEXT_OFF = "#5f6779"
_BORDER = "#2c3448"
_SUCCESS = "#3cc47c"
_LOG_TEXT = "#c8f0c8"

STYLESHEET = f"""
QWidget {{
    background-color: {_BG_WINDOW};
    color: {_TEXT};
    font-family: "Segoe UI", "SF Pro Display", "Helvetica Neue", sans-serif;
    font-size: 13px;
}}

QGroupBox {{
    background-color: {_BG_PANEL};
    border: 1px solid {_BORDER};
    border-radius: 6px;
    margin-top: 14px;
    padding: 18px 10px 8px 10px;
    font-weight: 600;
}}

QGroupBox::title {{
    subcontrol-origin: margin;
    subcontrol-position: top left;
    padding: 4px 10px;
    color: {_ACCENT};
}}

QLabel {{
    background-color: transparent;
}}

QLabel[class="heading"] {{
    font-size: 20px;
    font-weight: 800;
    letter-spacing: 3px;
}}

QLabel[class="subheading"] {{
    color: {_TEXT_DIM};
    padding-top: 6px;
}}

QPushButton {{
    background-color: {_ACCENT};
    color: #ffffff;
    border: none;
    border-radius: 5px;
    padding: 7px 18px;
    font-weight: 600;
}}

QPushButton:hover {{
    background-color: {_ACCENT_HOVER};
}}

QPushButton:pressed {{
    background-color: {_ACCENT_PRESSED};
}}

QPushButton:disabled {{
    background-color: {_BG_BUTTON_OFF};
    color: {_TEXT_OFF};
}}

QPushButton[class="secondary"] {{
    background-color: {_BG_BUTTON_OFF};
    border: 1px solid {_BORDER};
}}

QPushButton[class="success"] {{
    background-color: {_SUCCESS};
    color: {_BG_WINDOW};
}}

QLineEdit, QComboBox {{
    background-color: {_BG_INPUT};
    border: 1px solid {_BORDER};
    border-radius: 5px;
    padding: 6px 10px;
}}

QLineEdit:focus, QComboBox:hover {{
    border-color: {_ACCENT};
}}

QComboBox QAbstractItemView {{
    background-color: {_BG_PANEL};
    selection-background-color: {_BG_BUTTON_OFF};
}}

QPlainTextEdit#log {{
    background-color: {_BG_INPUT};
    color: {_LOG_TEXT};
    border: 1px solid {_BORDER};
    border-radius: 5px;
    padding: 10px;
    font-family: "Cascadia Code", "Fira Code", "Consolas", monospace;
}}

QStatusBar {{
    background-color: {_BG_PANEL};
    color: {_TEXT_DIM};
    border-top: 1px solid {_BORDER};
    font-size: 12px;
}}

QMenuBar {{
    border-bottom: 1px solid {_BORDER};
}}

QMenuBar::item:selected, QMenu::item:selected {{
    background-color: {_BG_BUTTON_OFF};
}}

QMenu {{
    background-color: {_BG_PANEL};
    border: 1px solid {_BORDER};
}}
"""
