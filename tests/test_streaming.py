"""Tests for ideaforge.llm.streaming module."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ideaforge.llm import TextStream, smooth_stream

from .conftest import chunk_source, make_chunk


class TestTextStream:
    """Tests for TextStream class."""

    async def test_yields_deltas(self):
        stream = TextStream(chunk_source(["Hello", " world"]))

        assert [text async for text in stream] == ["Hello", " world"]
        assert stream.completed
        assert not stream.failed
        assert stream.finish_reason == "stop"

    async def test_skips_empty_deltas(self):
        async def chunks():
            yield make_chunk("")
            yield make_chunk(None)
            yield make_chunk("text")
            yield make_chunk(None, finish_reason="length")

        stream = TextStream(chunks())

        assert await stream.text() == "text"
        assert stream.finish_reason == "length"

    async def test_skips_chunks_without_choices(self):
        async def chunks():
            yield MagicMock(choices=[])
            yield make_chunk("only")

        assert await TextStream(chunks()).text() == "only"

    async def test_applies_transform(self):
        stream = TextStream(chunk_source(["one tw", "o three"]), transform=smooth_stream(delay_ms=0))

        assert [text async for text in stream] == ["one ", "two ", "three"]

    async def test_mid_stream_error_observed_and_truncated(self):
        observed = []
        stream = TextStream(
            chunk_source(["partial ", "answer"], error=RuntimeError("connection reset")),
            on_error=observed.append,
        )

        received = [text async for text in stream]

        assert received == ["partial ", "answer"]
        assert len(observed) == 1
        assert str(observed[0]) == "connection reset"
        assert stream.failed
        assert not stream.completed

    async def test_mid_stream_error_through_transform(self):
        observed = []
        stream = TextStream(
            chunk_source(["first second thi"], error=RuntimeError("reset")),
            transform=smooth_stream(delay_ms=0),
            on_error=observed.append,
        )

        assert [text async for text in stream] == ["first ", "second "]
        assert len(observed) == 1

    async def test_error_without_observer_propagates(self):
        stream = TextStream(chunk_source(["partial"], error=RuntimeError("reset")))

        with pytest.raises(RuntimeError):
            async for _ in stream:
                pass

        assert stream.failed

    async def test_closes_provider_stream(self):
        provider = MagicMock()
        provider.__aiter__.return_value = [make_chunk("hi"), make_chunk(None, finish_reason="stop")]
        provider.close = AsyncMock()

        assert await TextStream(provider).text() == "hi"

        provider.close.assert_awaited_once()
