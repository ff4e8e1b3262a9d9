"""Table of keyboard virtual-key codes with names and descriptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VirtualKey:
    """One virtual key: symbolic name, code and description."""

    name: str
    code: int
    description: str


_PACKET_DESCRIPTION = (
    "Used to pass Unicode characters as if they were keystrokes. The VK_PACKET key "
    "is the low word of a 32-bit Virtual Key value used for non-keyboard input "
    "methods. For more information, see Remark in KEYBDINPUT, SendInput, "
    "WM_KEYDOWN, and WM_KEYUP"
)


def _build() -> tuple[VirtualKey, ...]:
    entries: list[tuple[str, int, str]] = [
        ("VK_LBUTTON", 0x01, "Left mouse button"),
        ("VK_RBUTTON", 0x02, "Right mouse button"),
        ("VK_CANCEL", 0x03, "Control-break processing"),
        ("VK_MBUTTON", 0x04, "Middle mouse button"),
        ("VK_XBUTTON1", 0x05, "X1 mouse button"),
        ("VK_XBUTTON2", 0x06, "X2 mouse button"),
        ("VK_BACK", 0x08, "BACKSPACE"),
        ("VK_TAB", 0x09, "TAB"),
        ("VK_CLEAR", 0x0C, "CLEAR"),
        ("VK_RETURN", 0x0D, "ENTER"),
        ("VK_PAUSE", 0x13, "PAUSE"),
        ("VK_CAPITAL", 0x14, "CAPS LOCK"),
        ("VK_KANA", 0x15, "IME Kana mode"),
        ("VK_HANGUL", 0x15, "IME Hangul mode"),
        ("VK_JUNJA", 0x17, "IME Junja mode"),
        ("VK_FINAL", 0x18, "IME final mode"),
        ("VK_HANJA", 0x19, "IME Hanja mode"),
        ("VK_KANJI", 0x19, "IME Kanji mode"),
        ("VK_ESCAPE", 0x1B, "ESC"),
        ("VK_CONVERT", 0x1C, "IME convert"),
        ("VK_NONCONVERT", 0x1D, "IME nonconvert"),
        ("VK_ACCEPT", 0x1E, "IME accept"),
        ("VK_MODECHANGE", 0x1F, "IME mode change request"),
        ("VK_SPACE", 0x20, "SPACEBAR"),
        ("VK_PRIOR", 0x21, "PAGE UP"),
        ("VK_NEXT", 0x22, "PAGE DOWN"),
        ("VK_END", 0x23, "END"),
        ("VK_HOME", 0x24, "HOME"),
        ("VK_LEFT", 0x25, "LEFT ARROW"),
        ("VK_UP", 0x26, "UP ARROW"),
        ("VK_RIGHT", 0x27, "RIGHT ARROW"),
        ("VK_DOWN", 0x28, "DOWN ARROW"),
        ("VK_SELECT", 0x29, "SELECT"),
        ("VK_PRINT", 0x2A, "PRINT"),
        ("VK_EXECUTE", 0x2B, "EXECUTE"),
        ("VK_SNAPSHOT", 0x2C, "PRINT SCREEN"),
        ("VK_INSERT", 0x2D, "INS"),
        ("VK_DELETE", 0x2E, "DEL"),
        ("VK_HELP", 0x2F, "HELP"),
    ]
    entries += [(f"{d} key", 0x30 + d, f"{d} key") for d in range(10)]
    entries += [
        (f"{letter} key", ord(letter), f"{letter} key")
        for letter in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    ]
    entries += [
        ("VK_LWIN", 0x5B, "Left Windows key (Natural keyboard)"),
        ("VK_RWIN", 0x5C, "Right Windows key (Natural keyboard)"),
        ("VK_APPS", 0x5D, "Applications key (Natural keyboard)"),
        ("VK_SLEEP", 0x5F, "Computer Sleep key"),
    ]
    entries += [(f"VK_NUMPAD{d}", 0x60 + d, f"Numeric keypad {d}") for d in range(10)]
    entries += [
        ("VK_MULTIPLY", 0x6A, "Multiply"),
        ("VK_ADD", 0x6B, "Add"),
        ("VK_SEPARATOR", 0x6C, "Separator"),
        ("VK_SUBTRACT", 0x6D, "Subtract"),
        ("VK_DECIMAL", 0x6E, "Decimal"),
        ("VK_DIVIDE", 0x6F, "Divide"),
    ]
    entries += [(f"VK_F{n}", 0x6F + n, f"F{n} key") for n in range(1, 25)]
    entries += [
        ("VK_NUMLOCK", 0x90, "NUM LOCK"),
        ("VK_SCROLL", 0x91, "SCROLL LOCK"),
        ("VK_NUMLOCK", 0x90, "NUM LOCK"),
        ("VK_SCROLL", 0x91, "SCROLL LOCK"),
        ("VK_LMENU", 0xA4, "Left MENU key"),
        ("VK_RMENU", 0xA5, "Right MENU key"),
        ("VK_BROWSER_BACK", 0xA6, "Browser Back key"),
        ("VK_BROWSER_FORWARD", 0xA7, "Browser Forward key"),
        ("VK_BROWSER_REFRESH", 0xA8, "Browser Refresh key"),
        ("VK_BROWSER_STOP", 0xA9, "Browser Stop key"),
        ("VK_BROWSER_SEARCH", 0xAA, "Browser Search key"),
        ("VK_BROWSER_FAVORITES", 0xAB, "Browser Favorites key"),
        ("VK_BROWSER_HOME", 0xAC, "Browser Start and Home key"),
        ("VK_VOLUME_MUTE", 0xAD, "Volume Mute key"),
        ("VK_VOLUME_DOWN", 0xAE, "Volume Down key"),
        ("VK_VOLUME_UP", 0xAF, "Volume Up key"),
        ("VK_MEDIA_NEXT_TRACK", 0xB0, "Next Track key"),
        ("VK_MEDIA_PREV_TRACK", 0xB1, "Previous Track key"),
        ("VK_MEDIA_STOP", 0xB2, "Stop Media key"),
        ("VK_MEDIA_PLAY_PAUSE", 0xB3, "Play/Pause Media key"),
        ("VK_LAUNCH_MAIL", 0xB4, "Start Mail key"),
        ("VK_LAUNCH_MEDIA_SELECT", 0xB5, "Select Media key"),
        ("VK_LAUNCH_APP1", 0xB6, "Start Application 1 key"),
        ("VK_LAUNCH_APP2", 0xB7, "Start Application 2 key"),
        ("VK_PROCESSKEY", 0xE5, "IME PROCESS key"),
        ("VK_PACKET", 0xE7, _PACKET_DESCRIPTION),
        ("VK_PACKET", 0xE7, _PACKET_DESCRIPTION),
        ("VK_ATTN", 0xF6, "Attn key"),
        ("VK_CRSEL", 0xF7, "CrSel key"),
        ("VK_EXSEL", 0xF8, "ExSel key"),
        ("VK_EREOF", 0xF9, "Erase EOF key"),
        ("VK_PLAY", 0xFA, "Play key"),
        ("VK_ZOOM", 0xFB, "Zoom key"),
        ("VK_PA1", 0xFD, "PA1 key"),
        ("VK_OEM_CLEAR", 0xFE, "Clear key"),
    ]
    return tuple(VirtualKey(*entry) for entry in entries)


VKEY_LIST: tuple[VirtualKey, ...] = _build()


def vkey_list_size() -> int:
    """Return the number of entries in the key table."""
    return len(VKEY_LIST)


def vkey_find(name: str) -> int | None:
    """Return the index of the first entry with this name, or None."""
    return next((i for i, key in enumerate(VKEY_LIST) if key.name == name), None)