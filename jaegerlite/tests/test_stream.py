"""Tests for incremental trace context decoding."""

import io

import pytest

from jaegerlite.context.codec import encode, extract, from_stream
from jaegerlite.context.reader import CarrierReader
from jaegerlite.tracer import INVALID_SPAN_CONTEXT, MAX_U64, SpanContext, TraceID


class TestCarrierReader:
    """Cursor behavior."""

    def test_read_segment_stops_at_delimiter(self):
        reader = CarrierReader("abc:def")
        assert reader.read_segment(16, ":") == "abc"
        assert reader.peek() == ":"
        assert reader.expect(":")
        assert reader.read_segment(16, ":") == "def"
        assert reader.eof

    def test_read_segment_too_long(self):
        reader = CarrierReader("12345:")
        assert reader.read_segment(4, ":") == ""
        assert reader.failed

    def test_read_segment_rejects_non_hex(self):
        reader = CarrierReader("12g4:")
        assert reader.read_segment(16, ":") == ""
        assert reader.failed

    def test_read_segment_empty(self):
        assert CarrierReader(":1").read_segment(16, ":") == ""
        assert CarrierReader("").read_segment(16, ":") == ""

    def test_expect_mismatch(self):
        reader = CarrierReader(";")
        assert not reader.expect(":")
        assert reader.failed

    def test_clear(self):
        reader = CarrierReader("")
        reader.expect(":")
        assert reader.eof and reader.failed
        reader.clear()
        assert not reader.eof
        assert not reader.failed

    def test_detach_returns_lookahead_to_stream(self):
        stream = io.StringIO("ab:cd")
        reader = CarrierReader(stream)
        assert reader.read_segment(16, ":") == "ab"
        reader.detach()
        assert stream.read() == ":cd"

    def test_stream_source(self):
        reader = CarrierReader(io.StringIO("ab:rest"))
        assert reader.read_segment(2, ":") == "ab"
        assert reader.read_remaining() == ":rest"


class TestFromStream:
    """Streaming decode of a full trace context."""

    def test_matches_whole_buffer_decode(self):
        assert from_stream("ff:1:0:1") == extract("ff:1:0:1")

    def test_text_stream(self):
        context = from_stream(io.StringIO("10000000000000000:2:3:1"))
        assert context == SpanContext(TraceID(high=1, low=0), span_id=2, parent_id=3, flags=1)

    def test_max_width_fields(self):
        text = "f" * 32 + ":" + "f" * 16 + ":" + "f" * 16 + ":ff"
        context = from_stream(text)
        assert context == SpanContext(TraceID(MAX_U64, MAX_U64), MAX_U64, MAX_U64, 0xFF)

    def test_round_trip(self):
        context = SpanContext(TraceID(high=0x12, low=0x34), span_id=0x56, parent_id=0x78, flags=1)
        assert from_stream(encode(context)) == context

    def test_trailing_data_left_in_reader(self):
        reader = CarrierReader("ff:1:0:1:baggage")
        context = from_stream(reader)
        assert context == SpanContext(TraceID(low=255), span_id=1, flags=1)
        assert not reader.failed
        assert reader.read_remaining() == ":baggage"

    def test_trailing_data_left_in_text_stream(self):
        """The caller's stream still holds everything after the flags."""
        stream = io.StringIO("ff:1:0:1:baggage")
        context = from_stream(stream)
        assert context == SpanContext(TraceID(low=255), span_id=1, flags=1)
        assert stream.read() == ":baggage"

    def test_trailing_data_left_in_file_stream(self):
        stream = io.TextIOWrapper(io.BytesIO(b"abc:2:1:1:k=v"), encoding="ascii")
        assert from_stream(stream) == SpanContext(TraceID(low=0xABC), span_id=2, parent_id=1, flags=1)
        assert stream.read() == ":k=v"

    def test_text_stream_at_end_of_input(self):
        stream = io.StringIO("ff:1:0:1")
        assert from_stream(stream).is_valid()
        assert stream.read() == ""

    def test_success_clears_end_of_input(self):
        reader = CarrierReader("ff:1:0:1")
        assert from_stream(reader).is_valid()
        assert not reader.eof

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "0:1:0:1",
            "ff;1:0:1",
            "ff",
            "ff:",
            "ff::0:1",
            "ff:1",
            "ff:1:0",
            "ff:1:0:",
            "ff:1:0;1",
            "ff:" + "1" * 17 + ":0:1",
            "ff:1:" + "1" * 17 + ":1",
            "ff:1:0:123",
            "1" * 33 + ":1:0:1",
            "ff:1x:0:1",
        ],
    )
    def test_rejects_malformed(self, text):
        assert from_stream(text) is INVALID_SPAN_CONTEXT

    def test_stops_reading_oversized_field(self):
        stream = io.StringIO("ff:" + "1" * 1000 + ":0:1")
        assert from_stream(stream) is INVALID_SPAN_CONTEXT
        # "ff:" plus at most one digit past the 16-digit cap
        assert stream.tell() <= 3 + 17


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
