"""Named colours and their mapping to TColor-style integer values."""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple


class ColorId(IntEnum):
    """Identifiers of the colours known to the colour table."""

    CUSTOM = 0

    AQUA = 1
    BLACK = 2
    BLUE = 3
    CREAM = 4
    DK_GRAY = 5
    FUCHSIA = 6
    GRAY = 7
    GREEN = 8
    LIME = 9
    LT_GRAY = 10
    MAROON = 11
    MED_GRAY = 12
    MONEY_GREEN = 13
    NAVY = 14
    OLIVE = 15
    PURPLE = 16
    RED = 17
    SILVER = 18
    SKY_BLUE = 19
    TEAL = 20
    WHITE = 21
    YELLOW = 22

    ACTIVE_BORDER = 23
    ACTIVE_CAPTION = 24
    APP_WORK_SPACE = 25
    BACKGROUND = 26
    BTN_FACE = 27
    BTN_HIGHLIGHT = 28
    BTN_SHADOW = 29
    BTN_TEXT = 30
    CAPTION_TEXT = 31
    GRAY_TEXT = 32
    HIGHLIGHT = 33
    HIGHLIGHT_TEXT = 34
    INACTIVE_BORDER = 35
    INACTIVE_CAPTION = 36
    INACTIVE_CAPTION_TEXT = 37
    MENU = 38
    MENU_BAR = 39
    MENU_HIGHLIGHT = 40
    MENU_TEXT = 41
    WINDOW = 42
    WINDOW_FRAME = 43
    WINDOW_TEXT = 44


# System colours are encoded as the signed value 0xFF000000 | system index.
_SYSTEM = -0x1000000


def _system(index: int) -> int:
    return _SYSTEM | index


class _Entry(NamedTuple):
    color_id: ColorId
    name: str
    color: int


_ENTRIES: tuple[_Entry, ...] = (
    _Entry(ColorId.CUSTOM, "<custom color>", 0),

    _Entry(ColorId.AQUA, "Aqua", 0xFFFF00),
    _Entry(ColorId.BLACK, "Black", 0x000000),
    _Entry(ColorId.BLUE, "Blue", 0xFF0000),
    _Entry(ColorId.CREAM, "Cream", 0xF0FBFF),
    _Entry(ColorId.DK_GRAY, "Dark Grey", 0x808080),
    _Entry(ColorId.FUCHSIA, "Fuchsia", 0xFF00FF),
    _Entry(ColorId.GRAY, "Gray", 0x808080),
    _Entry(ColorId.GREEN, "Green", 0x008000),
    _Entry(ColorId.LIME, "Lime Green", 0x00FF00),
    _Entry(ColorId.LT_GRAY, "Light Gray", 0xC0C0C0),
    _Entry(ColorId.MAROON, "Maroon", 0x000080),
    _Entry(ColorId.MED_GRAY, "Medium Gray", 0xA4A0A0),
    _Entry(ColorId.MONEY_GREEN, "Mint Green", 0xC0DCC0),
    _Entry(ColorId.NAVY, "Navy Blue", 0x800000),
    _Entry(ColorId.OLIVE, "Olive Green", 0x008080),
    _Entry(ColorId.PURPLE, "Purple", 0x800080),
    _Entry(ColorId.RED, "Red", 0x0000FF),
    _Entry(ColorId.SILVER, "Silver", 0xC0C0C0),
    _Entry(ColorId.SKY_BLUE, "Sky Blue", 0xF0CAA6),
    _Entry(ColorId.TEAL, "Teal", 0x808000),
    _Entry(ColorId.WHITE, "White", 0xFFFFFF),
    _Entry(ColorId.YELLOW, "Yellow", 0x00FFFF),

    _Entry(ColorId.ACTIVE_BORDER, "clActiveBorder", _system(10)),
    _Entry(ColorId.ACTIVE_CAPTION, "clActiveCaption", _system(2)),
    _Entry(ColorId.APP_WORK_SPACE, "clAppWorkSpace", _system(12)),
    _Entry(ColorId.BACKGROUND, "clBackground", _system(1)),
    _Entry(ColorId.BTN_FACE, "clBtnFace", _system(15)),
    _Entry(ColorId.BTN_HIGHLIGHT, "clBtnHighlight", _system(20)),
    _Entry(ColorId.BTN_SHADOW, "clBtnShadow", _system(16)),
    _Entry(ColorId.BTN_TEXT, "clBtnText", _system(18)),
    _Entry(ColorId.CAPTION_TEXT, "clCaptionText", _system(9)),
    _Entry(ColorId.GRAY_TEXT, "clGrayText", _system(17)),
    _Entry(ColorId.HIGHLIGHT, "clHighlight", _system(13)),
    _Entry(ColorId.HIGHLIGHT_TEXT, "clHighlightText", _system(14)),
    _Entry(ColorId.INACTIVE_BORDER, "clInactiveBorder", _system(11)),
    _Entry(ColorId.INACTIVE_CAPTION, "clInactiveCaption", _system(3)),
    _Entry(ColorId.INACTIVE_CAPTION_TEXT, "clInactiveCaptionText", _system(19)),
    _Entry(ColorId.MENU, "clMenu", _system(4)),
    _Entry(ColorId.MENU_BAR, "clMenuBar", _system(30)),
    _Entry(ColorId.MENU_HIGHLIGHT, "clMenuHighlight", _system(29)),
    _Entry(ColorId.MENU_TEXT, "clMenuText", _system(7)),
    _Entry(ColorId.WINDOW, "clWindow", _system(5)),
    _Entry(ColorId.WINDOW_FRAME, "clWindowFrame", _system(6)),
    _Entry(ColorId.WINDOW_TEXT, "clWindowText", _system(8)),
)


def _find_by_id(color_id: int) -> _Entry | None:
    return next((entry for entry in _ENTRIES if entry.color_id == color_id), None)


def id_to_text(color_id: int) -> str:
    """Return the display name of a colour, or "???" for an unknown id."""
    entry = _find_by_id(color_id)
    return entry.name if entry is not None else "???"


def id_to_int_tcolor(color_id: int) -> int:
    """Return the TColor integer of a colour, or 0 for an unknown id."""
    entry = _find_by_id(color_id)
    return entry.color if entry is not None else 0


def int_tcolor_to_id(color: int) -> ColorId:
    """Return the first colour id whose value matches, else ColorId.CUSTOM."""
    return next(
        (entry.color_id for entry in _ENTRIES if entry.color == color),
        ColorId.CUSTOM,
    )