"""A 5x8 pixel bitmap font for column-oriented monochrome displays.

Each glyph is ``width`` bytes, one per column, least significant bit at the
top. Glyphs start at the space character (code 32). The basic font covers
printable ASCII; the full font continues up to code 255.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

FIRST_CHAR = 32

_ASCII_GLYPHS = """
0000000000 00005c0000 000c000c00 287c287c28 0050ec2800 442a345824 2058542450 0000060000
0038440000 0044380000 0054385400 0010381000 0080400000 0808080800 0000400000 0060180400
3844443800 00087c0000 4864544800 4454542800 2030287c00 5c54542400 3854542000 0464140c00
2854542800 0854543800 0000500000 0080500000 0010284400 0028282800 0044281000 0054140800
3844545408 7814147800 7c54542800 3844444400 7c44443800 7c54544400 7c14140400 3844446800
7c10107c00 00447c4400 3040403c00 7c10284400 7c40404000 7c10107c00 7c08107c00 3844443800
7c14140800 384444b800 7c14146800 4854542400 04047c0404 3c40403c00 1c60601c00 1c6018601c
4c30106c00 001c601c00 64544c4400 007c440000 000c304000 00447c0000 0008040800 8080808080
0004080000 0068287000 7e48483000 0030484800 3048487c00 3058585000 1078140400 10a8a87800
7c08087000 00487a4000 0080807a00 7c10284000 00427e4000 7810107800 7808087000 3048483000
f848483000 304848f800 0078100800 5058682800 083c484800 3840407800 1860601800 7820207800
4830304800 18a0a07800 4868584800 0018244200 00007e0000 0042241800 1008100800
"""

_EXTENDED_GLYPHS = """
6050485060 3844c44400 3842407a00 30585a5100 284a314200 482a704200 4829724000 4828724000
0030c84800 305a595200 305a585200 30595a5000 004a784200 004a794200 00497a4000 7914157800
7814157800 7c54564500 6838705858 78147c5400 304a493200 304a483200 30494a3000 3842417a00
3841427800 18a2a07a00 304a483200 3c41403d00 3048cc4800 507c524600 022e702e02 7e121c3850
907c121200 482a714000 00487a4100 30484a3100 3840427900 7a090a7100 7e19227d00 00242a2c00
00242a2400 20504a2000 6020202020 2020202060 2e10485470 2e104864f2 00207a2000 2050205000
5020502000 55aa55aa55 55bb55ee55 55ffaaff55 0000ff0000 0808ff0000 1414ff0000 08ff00ff00
08f808f800 1414fc0000 14f700ff00 00ff00ff00 14f404fc00 1417101f00 080f080f00 14141f0000
0808f80000 00000f0808 08080f0808 0808f80808 0000ff0808 0808080808 0808ff0808 0000ff1414
00ff00ff08 001f101714 00fc04f414 1417101714 14f404f414 00ff00f714 1414141414 14f700f714
1414171414 080f080f08 1414f41414 08f808f808 000f080f08 00001f1414 0000fc1414 00f808f808
08ff08ff08 1414ff1414 08080f0000 0000f80808 ffffffffff f0f0f0f0f0 ffffff0000 000000ffff
0f0f0f0f0f 3048483048 fc4a4a3c00 007e020200 007c047c00 62564a4266 3844443c04 f840403840
02047806 02 102 8ee2810 3854545438 5864046458 324d493000 3048784830 5028584834
003c4a4a00 7c02027c00 5454545400 48485c4848 4062544800 0048546200 0000f8040c 30201f0000
1054541000 4824482400 0008140800 0018180000 0000080000 2040300c04 000e020c00 00121a1400
0038383800 0000000000
"""


def _parse(text: str) -> bytes:
    return bytes.fromhex("".join(text.split()))


@dataclass(frozen=True)
class Font:
    """A fixed-size bitmap font: column bytes for consecutive character codes."""

    width: int
    height: int
    data: bytes
    first_char: int = FIRST_CHAR

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError("font width and height must be positive")
        if len(self.data) % self.width:
            raise ValueError(
                f"font data length {len(self.data)} is not a multiple of {self.width}"
            )

    @property
    def raw(self) -> bytes:
        """The font as a table: width and height bytes, then all glyph columns."""
        return bytes((self.width, self.height)) + self.data

    def glyph_count(self) -> int:
        """Return how many glyphs the font holds."""
        return len(self.data) // self.width

    def glyph(self, char: str | int) -> bytes:
        """Return the column bytes of a character, given as a string or a code."""
        if isinstance(char, str):
            if len(char) != 1:
                raise ValueError(f"expected a single character, got {char!r}")
            code = ord(char)
        else:
            code = int(char)
        index = code - self.first_char
        if not 0 <= index < self.glyph_count():
            raise KeyError(f"character code {code} is not in the font")
        start = index * self.width
        return self.data[start:start + self.width]


@lru_cache(maxsize=2)
def font_5x8(full: bool = False) -> Font:
    """Return the 5x8 font: printable ASCII, or codes 32..255 when ``full``."""
    data = _parse(_ASCII_GLYPHS)
    if full:
        data += _parse(_EXTENDED_GLYPHS)
    return Font(width=5, height=8, data=data)