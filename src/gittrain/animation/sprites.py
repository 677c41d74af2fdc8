"""Static sprites for the D51 locomotive, its coal car and the commit carriage."""

from typing import Tuple

Sprite = Tuple[str, ...]

# Horizontal layout, in columns from the assembly origin
BODY_WIDTH = 54
COAL_OFFSET = 53
COAL_WIDTH = 30
CARRIAGE_OFFSET = 81
CARRIAGE_WIDTH = 46
TRAIN_MARGIN = 10

# Placeholder fields are 40 columns once formatted
FIELD_WIDTH = 40
FIELD_JUSTIFY = 27

D51_BODY: Sprite = (
    "      ====        ________                ___________ ",
    "  _D _|  |_______/        \\__I_I_____===__|_________| ",
    "   |(_)---  |   H\\________/ |   |        =|___ ___|   ",
    "   /     |  |   H  |  |     |   |         ||_| |_||   ",
    "  |      |  |   H  |__--------------------| [___] |   ",
    "  | ________|___H__/__|_____/[][]~\\_______|       |   ",
    "  |/ |   |-----------I_____I [][] []  D   |=======|__ ",
)
BODY_HEIGHT = len(D51_BODY)

# One rotation of the driving wheels, indexed by distance travelled
D51_WHEELS: Tuple[Sprite, ...] = (
    (
        "__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__ ",
        " |/-=|___|=    ||    ||    ||    |_____/~\\___/        ",
        "  \\_/      \\O=====O=====O=====O_/      \\_/            ",
    ),
    (
        "__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__ ",
        " |/-=|___|=O=====O=====O=====O   |_____/~\\___/        ",
        "  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/            ",
    ),
    (
        "__/ =| o |=-O=====O=====O=====O \\ ____Y___________|__ ",
        " |/-=|___|=    ||    ||    ||    |_____/~\\___/        ",
        "  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/            ",
    ),
    (
        "__/ =| o |=-~O=====O=====O=====O\\ ____Y___________|__ ",
        " |/-=|___|=    ||    ||    ||    |_____/~\\___/        ",
        "  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/            ",
    ),
    (
        "__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__ ",
        " |/-=|___|=   O=====O=====O=====O|_____/~\\___/        ",
        "  \\_/      \\__/  \\__/  \\__/  \\__/      \\_/            ",
    ),
    (
        "__/ =| o |=-~~\\  /~~\\  /~~\\  /~~\\ ____Y___________|__ ",
        " |/-=|___|=    ||    ||    ||    |_____/~\\___/        ",
        "  \\_/      \\_O=====O=====O=====O/      \\_/            ",
    ),
)

D51_COAL: Sprite = (
    "                              ",
    "                              ",
    "    _________________         ",
    "   _|                \\_____A  ",
    " =|                        |  ",
    " -|                        |  ",
    "__|________________________|_ ",
    "|__________________________|_ ",
    "   |_D__D__D_|  |_D__D__D_|   ",
    "    \\_/   \\_/    \\_/   \\_/    ",
)

# Each field line renders to CARRIAGE_WIDTH columns: 3 + FIELD_WIDTH + 3
CARRIAGE_TEMPLATE: Sprite = (
    " " * CARRIAGE_WIDTH,
    " " * CARRIAGE_WIDTH,
    "  " + "_" * 42 + "  ",
    " |" + " " * 42 + "| ",
    " | {hash} | ",
    " | {msg} | ",
    " | {modifications} | ",
    "_|" + "_" * 42 + "|_",
    "   |_D__D__D_|" + " " * 18 + "|_D__D__D_|   ",
    "    \\_/   \\_/" + " " * 20 + "\\_/   \\_/    ",
)


def total_assembly_width(carriage_count: int) -> int:
    """Columns the whole train occupies, plus a trailing margin."""
    return BODY_WIDTH + COAL_WIDTH + CARRIAGE_WIDTH * carriage_count + TRAIN_MARGIN
