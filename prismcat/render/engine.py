"""
Stream colorizer: chars in -> chars out, with color escapes interleaved.
One RenderState per stream; nothing carries over between streams.
"""
from typing import Callable, Iterable, Iterator

from wcwidth import wcwidth

from .encoder import OutputEncoder
from .escapes import next_escape_state
from .schema import EscapeState, RenderState

NEWLINE = "\n"


class Colorizer:
    """
    Paints one stream at a time with the encoder's pattern.
    Foreign escape sequences pass through byte-for-byte and uncolored; coloring
    resumes right after one ends.
    """

    def __init__(self, encoder: OutputEncoder, width_fn: Callable[[str], int] = wcwidth):
        self.encoder = encoder
        self.width_fn = width_fn

    def colorize(self, chars: Iterable[str]) -> Iterator[str]:
        """Yield output chunks for one input stream, ending with a reset escape."""
        state = RenderState()
        for char in chars:
            state.escape_state = next_escape_state(char, state.escape_state)
            if state.escape_state is EscapeState.OUT:
                if char == NEWLINE:
                    state.newline()
                else:
                    state.advance(self.width_fn(char))
                    escape = self.encoder.color_escape(state)
                    if escape:
                        yield escape
            yield char
            if state.escape_state is EscapeState.LAST:
                yield self.encoder.color_escape(state, force=True)
        yield self.encoder.reset_escape()

    def render(self, text: str) -> str:
        """Colorize a whole string as one stream."""
        return "".join(self.colorize(text))
