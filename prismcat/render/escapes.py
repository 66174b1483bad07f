"""
Foreign escape sequence detection. Keeps the colorizer from painting over
ANSI sequences already present in the input.
"""
from .schema import EscapeState

ESCAPE_CHAR = "\x1b"


def _is_ascii_letter(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z")


def next_escape_state(char: str, state: EscapeState) -> EscapeState:
    """
    ESC always opens a sequence. Inside one, an ASCII letter terminates it (LAST);
    anything else keeps it open. Outside (or right after one), plain text.
    """
    if char == ESCAPE_CHAR:
        return EscapeState.IN
    if state is EscapeState.IN:
        return EscapeState.LAST if _is_ascii_letter(char) else EscapeState.IN
    return EscapeState.OUT
