"""
Wire protocol helpers for the textual command grammar.

This module centralizes recognition of PLACE arguments, keyword
normalisation, encoding of command strings for clients and the REPORT
payload format.

Grammar (keywords and direction names are case-insensitive, the whole
command may carry leading/trailing whitespace):

  PLACE X,Y[,DIRECTION]
  MOVE
  LEFT
  RIGHT
  REPORT
"""

import logging
from dataclasses import dataclass

from .types import Direction, Position

logger = logging.getLogger(__name__)

PLACE_KEYWORD = "PLACE"

# Coordinates must fit a signed 32-bit integer
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

__all__ = [
    "PlaceRequest",
    "parse_place",
    "parse_coordinate",
    "normalize_keyword",
    "encode_place",
    "encode_move",
    "encode_left",
    "encode_right",
    "encode_report",
    "format_report",
    "decode_report",
]


@dataclass(frozen=True)
class PlaceRequest:
    """Raw PLACE arguments, validated for shape only."""
    x_token: str
    y_token: str
    direction_token: str | None = None


def _is_int_shaped(token: str) -> bool:
    digits = token[1:] if token.startswith("-") else token
    return digits != "" and all(ch.isdecimal() for ch in digits)


def _is_direction_shaped(token: str) -> bool:
    return token != "" and token.isascii() and token.isalpha()


def parse_place(text: str) -> PlaceRequest | None:
    """
    Recognise ``PLACE <int>,<int>[,<alpha>]``.

    Returns None when the text does not have that shape, so unrecognised text
    is handled by keyword dispatch instead of being reported as a bad PLACE.
    Integer tokens are only checked for shape here; see parse_coordinate().
    """
    cmd = text.strip()
    n = len(PLACE_KEYWORD)
    if len(cmd) <= n or cmd[:n].upper() != PLACE_KEYWORD or not cmd[n].isspace():
        return None

    parts = [p.strip() for p in cmd[n:].split(",")]
    if len(parts) not in (2, 3):
        return None
    x_token, y_token = parts[0], parts[1]
    if not (_is_int_shaped(x_token) and _is_int_shaped(y_token)):
        return None

    direction_token = None
    if len(parts) == 3:
        direction_token = parts[2]
        if not _is_direction_shaped(direction_token):
            return None

    return PlaceRequest(x_token, y_token, direction_token)


def parse_coordinate(token: str) -> int | None:
    """Parse an integer-shaped token; None if it is not ASCII or overflows int32."""
    if not token.isascii():
        return None
    try:
        value = int(token)
    except ValueError:
        return None
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


def normalize_keyword(text: str) -> str:
    """Whole-command keyword used for dispatch (trimmed, upper-cased)."""
    return text.strip().upper()


def encode_place(x: int, y: int, direction: Direction | str | None = None) -> str:
    """
    PLACE X,Y[,DIRECTION]
    Direction is omitted when None; strings are upper-cased verbatim.
    """
    if direction is None:
        return f"{PLACE_KEYWORD} {int(x)},{int(y)}"
    name = direction.name if isinstance(direction, Direction) else str(direction).strip().upper()
    return f"{PLACE_KEYWORD} {int(x)},{int(y)},{name}"


def encode_move() -> str:
    return "MOVE"


def encode_left() -> str:
    return "LEFT"


def encode_right() -> str:
    return "RIGHT"


def encode_report() -> str:
    return "REPORT"


def format_report(position: Position, direction: Direction) -> str:
    """REPORT payload: X,Y,DIRECTION"""
    return f"{position.x},{position.y},{direction.name}"


def decode_report(report: str) -> tuple[Position, Direction] | None:
    """
    Decode a REPORT payload like ``3,3,NORTH``.

    Returns None for anything that is not a well-formed report.
    """
    if not report:
        logger.debug("decode_report: empty payload")
        return None
    parts = [p.strip() for p in report.strip().split(",")]
    if len(parts) != 3:
        logger.warning(f"decode_report: expected 'X,Y,DIRECTION' but got '{report}'")
        return None
    try:
        x, y = int(parts[0]), int(parts[1])
    except ValueError as e:
        logger.warning(f"decode_report: bad coordinates in '{report}': {e}")
        return None
    direction = Direction.parse(parts[2])
    if direction is None:
        logger.warning(f"decode_report: bad direction in '{report}'")
        return None
    return Position(x, y), direction
