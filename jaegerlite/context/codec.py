"""Text codec for the ``trace:span:parent:flags`` trace context format."""

from __future__ import annotations

import logging
from typing import TextIO, Union

from jaegerlite.context.reader import CarrierReader
from jaegerlite.errors import HexParseError
from jaegerlite.tracer.span_context import INVALID_SPAN_CONTEXT, SpanContext
from jaegerlite.tracer.trace_id import TRACE_ID_HEX_CHARS, U64_HEX_CHARS, TraceID
from jaegerlite.utils.hex import decode_hex, write_hex, write_hex_byte

logger = logging.getLogger(__name__)

DELIMITER = ":"

# Hex digits in the flags byte.
FLAGS_HEX_CHARS = 2


def encode(context: SpanContext) -> str:
    """
    Encode a span context as ``traceHex:spanHex:parentHex:flagsHex``.

    Every field is lowercase hex without leading zeros and at least one
    digit long, except the low word of a 128-bit trace id, which is padded.
    """
    flags_hex, skip = write_hex_byte(context.flags, True)
    if skip:
        flags_hex = "0"
    return DELIMITER.join(
        (
            context.trace_id.to_hex(),
            write_hex(context.span_id),
            write_hex(context.parent_id),
            flags_hex,
        )
    )


def extract(text: str) -> SpanContext:
    """
    Decode a complete trace context string.

    Returns:
        The decoded SpanContext, or ``INVALID_SPAN_CONTEXT`` if a delimiter
        is missing or any field fails to parse
    """
    p = text.find(DELIMITER)
    if p < 0:
        logger.debug(f"Rejecting trace context {text!r}: no delimiter")
        return INVALID_SPAN_CONTEXT
    p2 = text.find(DELIMITER, p + 1)
    if p2 < 0:
        logger.debug(f"Rejecting trace context {text!r}: missing span id delimiter")
        return INVALID_SPAN_CONTEXT
    p3 = text.find(DELIMITER, p2 + 1)
    if p3 < 0:
        logger.debug(f"Rejecting trace context {text!r}: missing parent id delimiter")
        return INVALID_SPAN_CONTEXT

    if (
        p > TRACE_ID_HEX_CHARS
        or p2 - p - 1 > U64_HEX_CHARS
        or p3 - p2 - 1 > U64_HEX_CHARS
        or len(text) - p3 - 1 > FLAGS_HEX_CHARS
    ):
        logger.debug(f"Rejecting trace context {text!r}: field too long")
        return INVALID_SPAN_CONTEXT

    try:
        return SpanContext(
            trace_id=TraceID.from_hex(text[:p]),
            span_id=decode_hex(text[p + 1:p2]),
            parent_id=decode_hex(text[p2 + 1:p3]),
            flags=decode_hex(text[p3 + 1:], bits=8),
        )
    except HexParseError as e:
        logger.debug(f"Rejecting trace context {text!r}: {e}")
        return INVALID_SPAN_CONTEXT


def from_stream(source: Union[str, TextIO, CarrierReader]) -> SpanContext:
    """
    Decode a trace context incrementally from a character source.

    Each field is read with a fixed width cap (32, 16, 16 and 2 digits), so
    malformed input is rejected after a bounded number of characters. The
    trace id must be non-zero. Data following the flags field is left in
    the source: a passed-in reader has its error state cleared on success,
    and a seekable text stream gets back the lookahead character the
    decoder buffered. Wrap a non-seekable stream in a CarrierReader and
    keep using that reader to read what follows.

    Returns:
        The decoded SpanContext, or ``INVALID_SPAN_CONTEXT`` on any violation
    """
    if isinstance(source, CarrierReader):
        return _read_context(source)
    reader = CarrierReader(source)
    try:
        return _read_context(reader)
    finally:
        reader.detach()


def _read_context(reader: CarrierReader) -> SpanContext:
    trace_id = TraceID.from_stream(reader)
    if not trace_id.is_valid():
        logger.debug("Rejecting streamed trace context: invalid trace id")
        return INVALID_SPAN_CONTEXT
    if not reader.expect(DELIMITER):
        return INVALID_SPAN_CONTEXT

    span_hex = reader.read_segment(U64_HEX_CHARS, DELIMITER)
    if not span_hex or not reader.expect(DELIMITER):
        logger.debug("Rejecting streamed trace context: bad span id")
        return INVALID_SPAN_CONTEXT

    parent_hex = reader.read_segment(U64_HEX_CHARS, DELIMITER)
    if not parent_hex or not reader.expect(DELIMITER):
        logger.debug("Rejecting streamed trace context: bad parent id")
        return INVALID_SPAN_CONTEXT

    flags_hex = reader.read_segment(FLAGS_HEX_CHARS, DELIMITER)
    if not flags_hex:
        logger.debug("Rejecting streamed trace context: bad flags")
        return INVALID_SPAN_CONTEXT

    context = SpanContext(
        trace_id=trace_id,
        span_id=decode_hex(span_hex),
        parent_id=decode_hex(parent_hex),
        flags=decode_hex(flags_hex, bits=8),
    )
    reader.clear()
    return context
