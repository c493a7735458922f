"""
UI Theme configuration: colors, icons, and styles.
"""

from typing import Dict

THEME: Dict[str, str] = {
    # Status line
    "status_success": "bold #3fb950",  # Green
    "status_error": "bold #f85149",  # Red
    "field_key": "#8b949e",  # Dim gray
    "field_value": "#c9d1d9",  # Main text
    "separator": "#484f58",
    "button": "underline #58a6ff",  # Link blue
    # Buffer content
    "header_block": "italic #7d8590",  # Decorative, read-only
    "text": "#e6edf3",
    "muted": "#7d8590",
    "error": "#f85149",
    "warning": "#d29922",
    # REPL
    "prompt": "#58a6ff",
    "border": "#30363d",
}

ICONS: Dict[str, str] = {
    "success": "✓",
    "error": "✗",
    "warning": "⚠",
    "arrow": "❯",
    "separator": "│",
    "bullet": "•",
}

SYNTAX_THEME = "monokai"
