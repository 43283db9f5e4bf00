import asyncio

import pytest
from unitranslit.aio import transliterate_async
from unitranslit.errors import InvalidInput
from unitranslit.normalizer import Normalization


def test_async_matches_sync_result():
    result = asyncio.run(transliterate_async("Fußgänger", Normalization.DECOMPOSE))
    assert result == "Fussgaenger"


def test_async_passes_custom_mapping():
    result = asyncio.run(
        transliterate_async("test_custom", Normalization.DECOMPOSE, True, {"_": "-"})
    )
    assert result == "test-custom"


def test_async_propagates_errors():
    with pytest.raises(InvalidInput):
        asyncio.run(transliterate_async("", Normalization.DECOMPOSE))


def test_cancelled_before_dispatch():
    async def run():
        event = asyncio.Event()
        event.set()
        try:
            await transliterate_async("abc", Normalization.DECOMPOSE, cancel_event=event)
        except asyncio.CancelledError:
            return "cancelled"
        return "finished"

    assert asyncio.run(run()) == "cancelled"


def test_unset_event_does_not_cancel():
    async def run():
        event = asyncio.Event()
        return await transliterate_async("🤓", Normalization.DECOMPOSE, cancel_event=event)

    assert asyncio.run(run()) == "nerd face"
