"""Fixed-width text helpers and placeholder templating for sprites."""

from enum import Enum
from typing import Iterable, Mapping, Tuple

from gittrain.models.errors import InvalidWidthError

ELLIPSIS = "..."


class CarriageField(Enum):
    """Placeholders a carriage template may contain."""

    HASH = "hash"
    MESSAGE = "msg"
    MODIFICATIONS = "modifications"

    @property
    def token(self) -> str:
        return "{" + self.value + "}"


def format_fixed_width(text: str, width: int) -> str:
    """Truncate or pad ``text`` to exactly ``width`` characters.

    Text longer than ``width`` keeps its first ``width - 3`` characters and
    ends with ``"..."``; shorter text is right-padded with spaces.

    Raises:
        InvalidWidthError: If ``width`` is too small to hold the ellipsis.
    """
    if width < len(ELLIPSIS):
        raise InvalidWidthError(width)

    if len(text) > width:
        return text[: width - len(ELLIPSIS)] + ELLIPSIS
    return text.ljust(width)


def fill_template(lines: Iterable[str], values: Mapping[CarriageField, str]) -> Tuple[str, ...]:
    """Substitute every field token in every template line.

    All fields of ``CarriageField`` must be supplied.
    """
    missing = [field.name for field in CarriageField if field not in values]
    if missing:
        raise ValueError(f"Missing template values for: {', '.join(missing)}")

    rendered = []
    for line in lines:
        for field in CarriageField:
            line = line.replace(field.token, values[field])
        rendered.append(line)
    return tuple(rendered)
