"""
Cursor tokens (``cursor-pointer``).
"""

from __future__ import annotations

from twill.tokens.base import CssToken


class Cursor(CssToken):
    AUTO = "auto"
    DEFAULT = "default"
    POINTER = "pointer"
    WAIT = "wait"
    TEXT = "text"
    MOVE = "move"
    HELP = "help"
    NOT_ALLOWED = "not-allowed"
    NONE = "none"
    CONTEXT_MENU = "context-menu"
    PROGRESS = "progress"
    CELL = "cell"
    CROSSHAIR = "crosshair"
    VERTICAL_TEXT = "vertical-text"
    ALIAS = "alias"
    COPY = "copy"
    NO_DROP = "no-drop"
    GRAB = "grab"
    GRABBING = "grabbing"
    ALL_SCROLL = "all-scroll"
    COL_RESIZE = "col-resize"
    ROW_RESIZE = "row-resize"
    ZOOM_IN = "zoom-in"
    ZOOM_OUT = "zoom-out"
