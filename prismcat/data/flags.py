"""
Our data: flag patterns. Palette codes drive 256-color output; stripes (0xRRGGBB)
plus an easing factor drive 24-bit output. Order here is the flag number (0-9).
"""
from ..render.schema import AnsiPattern, Color, ColorFunction, ColorPattern, Pattern


def _stripes(*hex_colors: int, factor: float) -> ColorPattern:
    return ColorPattern(tuple(Color.from_hex(h) for h in hex_colors), factor)


RAINBOW = Pattern(
    name="rainbow",
    ansi_pattern=AnsiPattern((
        39, 38, 44, 43, 49, 48, 84, 83, 119, 118, 154, 148, 184, 178,
        214, 208, 209, 203, 204, 198, 199, 163, 164, 128, 129, 93, 99, 63, 69, 33,
    )),
    color_pattern=ColorPattern(),
    color_function=ColorFunction.HUE_ROTATION,
)

TRANSGENDER = Pattern(
    name="transgender",
    ansi_pattern=AnsiPattern((117, 117, 225, 225, 255, 255, 225, 225, 117, 117)),
    color_pattern=_stripes(
        0x55CDFC,  # blue
        0xF7A8B8,  # pink
        0xFFFFFF,  # white
        0xF7A8B8,  # pink
        0x55CDFC,  # blue
        factor=4.0,
    ),
    color_function=ColorFunction.STRIPES,
)

NONBINARY = Pattern(
    name="nonbinary",
    ansi_pattern=AnsiPattern((226, 226, 255, 255, 93, 93, 234, 234)),
    color_pattern=_stripes(
        0xFFFF00,  # yellow
        0xB000FF,  # purple
        0xFFFFFF,  # white
        0x000000,  # black
        factor=4.0,
    ),
    color_function=ColorFunction.STRIPES,
)

LESBIAN = Pattern(
    name="lesbian",
    ansi_pattern=AnsiPattern((196, 208, 255, 170, 128)),
    color_pattern=_stripes(
        0xFF0000,  # red
        0xFF993F,  # orange
        0xFFFFFF,  # white
        0xFF8CBD,  # pink
        0xFF4284,  # purple
        factor=2.0,
    ),
    color_function=ColorFunction.STRIPES,
)

GAY = Pattern(
    name="gay",
    ansi_pattern=AnsiPattern((36, 49, 121, 255, 117, 105, 92)),
    color_pattern=_stripes(
        0x00B685,  # teal
        0x6BFFB6,  # green
        0xFFFFFF,  # white
        0x8BE1FF,  # blue
        0x8E1AE1,  # purple
        factor=6.0,
    ),
    color_function=ColorFunction.STRIPES,
)

PANSEXUAL = Pattern(
    name="pansexual",
    ansi_pattern=AnsiPattern((200, 200, 200, 227, 227, 227, 45, 45, 45)),
    color_pattern=_stripes(
        0xFF3388,  # pink
        0xFFEA00,  # yellow
        0x00DBFF,  # cyan
        factor=8.0,
    ),
    color_function=ColorFunction.STRIPES,
)

BISEXUAL = Pattern(
    name="bisexual",
    ansi_pattern=AnsiPattern((162, 162, 162, 129, 129, 27, 27, 27)),
    color_pattern=_stripes(
        0xFF3B7B,  # pink
        0xFF3B7B,  # pink
        0xD06BCC,  # purple
        0x3B72FF,  # blue
        0x3B72FF,  # blue
        factor=4.0,
    ),
    color_function=ColorFunction.STRIPES,
)

GENDERFLUID = Pattern(
    name="genderfluid",
    ansi_pattern=AnsiPattern((219, 219, 255, 255, 128, 128, 234, 234, 20, 20)),
    color_pattern=_stripes(
        0xFFA0BC,  # pink
        0xFFFFFF,  # white
        0xC600E4,  # purple
        0x000000,  # black
        0x4E3CBB,  # blue
        factor=2.0,
    ),
    color_function=ColorFunction.STRIPES,
)

ASEXUAL = Pattern(
    name="asexual",
    ansi_pattern=AnsiPattern((233, 233, 247, 247, 255, 255, 5, 5)),
    color_pattern=_stripes(
        0x000000,  # black
        0xA3A3A3,  # gray
        0xFFFFFF,  # white
        0x800080,  # purple
        factor=4.0,
    ),
    color_function=ColorFunction.STRIPES,
)

UNLABELED = Pattern(
    name="unlabeled",
    ansi_pattern=AnsiPattern((194, 194, 255, 255, 195, 195, 223, 223)),
    color_pattern=_stripes(
        0xE6F9E3,  # green
        0xFDFDFB,  # white
        0xDEEFF9,  # blue
        0xFAE1C2,  # orange
        factor=4.0,
    ),
    color_function=ColorFunction.STRIPES,
)

FLAGS: tuple[Pattern, ...] = (
    RAINBOW,
    TRANSGENDER,
    NONBINARY,
    LESBIAN,
    GAY,
    PANSEXUAL,
    BISEXUAL,
    GENDERFLUID,
    ASEXUAL,
    UNLABELED,
)

# Short names accepted on the command line and in config
ALIASES: dict[str, str] = {
    "trans": "transgender",
    "nb": "nonbinary",
    "enby": "nonbinary",
    "pan": "pansexual",
    "bi": "bisexual",
    "gender_fluid": "genderfluid",
    "ace": "asexual",
}
