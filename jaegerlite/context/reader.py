"""Cursor over a bounded character source used by the streaming decoder."""

from __future__ import annotations

from typing import Optional, TextIO, Union

from jaegerlite.utils.hex import is_hex_digit


class CarrierReader:
    """
    Character cursor over a string or a text stream.

    Streams are read one character at a time through ``read(1)``, so a
    blocking source blocks only for as long as the decoder needs input.
    A single character of lookahead is buffered; ``detach()`` hands it
    back to a seekable stream.

    ``eof`` and ``failed`` record end of input and the last failed
    expectation; ``clear()`` resets both so that later reads are unaffected.
    """

    def __init__(self, source: Union[str, TextIO]) -> None:
        if isinstance(source, str):
            self._text: Optional[str] = source
            self._stream: Optional[TextIO] = None
            self._seekable = False
        else:
            self._text = None
            self._stream = source
            seekable = getattr(source, "seekable", None)
            self._seekable = bool(seekable and seekable())
        self._pos = 0
        self._pending: Optional[str] = None
        # stream position of the buffered lookahead character
        self._pending_pos = None
        self.eof = False
        self.failed = False

    def _read_char(self) -> str:
        if self._stream is not None:
            return self._stream.read(1)
        if self._pos >= len(self._text):
            return ""
        ch = self._text[self._pos]
        self._pos += 1
        return ch

    def peek(self) -> str:
        """Return the next character without consuming it ("" at end of input)."""
        if self._pending is None:
            if self._seekable:
                self._pending_pos = self._stream.tell()
            self._pending = self._read_char()
        return self._pending

    def get(self) -> str:
        """Consume and return the next character ("" at end of input)."""
        ch = self.peek()
        self._pending = None
        if not ch:
            self.eof = True
        return ch

    def expect(self, expected: str) -> bool:
        """Consume one character and check that it is ``expected``."""
        if self.get() != expected:
            self.failed = True
            return False
        return True

    def read_segment(self, max_chars: int, delimiter: str) -> str:
        """
        Read at most ``max_chars`` hex digits terminated by ``delimiter``.

        The delimiter is left unconsumed. End of input also terminates the
        segment. Returns "" if nothing was read, if a character that is
        neither a hex digit nor the delimiter is met, or if the delimiter
        does not appear within ``max_chars`` digits; in the last two cases
        at most ``max_chars + 1`` characters are consumed.
        """
        buf = []
        while True:
            ch = self.peek()
            if not ch:
                self.eof = True
                break
            if ch == delimiter:
                break
            if not is_hex_digit(ch) or len(buf) == max_chars:
                self.failed = True
                return ""
            buf.append(self.get())
        return "".join(buf)

    def read_remaining(self) -> str:
        """Consume and return everything left in the source."""
        parts = []
        ch = self.get()
        while ch:
            parts.append(ch)
            ch = self.get()
        return "".join(parts)

    def detach(self) -> None:
        """
        Stop reading and return a buffered lookahead character to the stream.

        Only seekable streams can take the character back; for other
        streams it stays in this reader.
        """
        if self._pending and self._seekable:
            self._stream.seek(self._pending_pos)
            self._pending = None

    def clear(self) -> None:
        self.eof = False
        self.failed = False
