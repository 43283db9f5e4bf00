# unitranslit/aio.py
import asyncio
from typing import Mapping, Optional

from unitranslit.engine import default_engine
from unitranslit.normalizer import Normalization


async def transliterate_async(
    text: str,
    mode: Normalization,
    use_default_mapping: bool = True,
    custom_mapping: Optional[Mapping[str, str]] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> str:
    """
    Runs the transliteration in a worker thread.
    Cancellation is only observed before the work starts and after it finishes,
    so a replacement is never cut off halfway.
    """
    if cancel_event is not None and cancel_event.is_set():
        raise asyncio.CancelledError()

    engine = default_engine()
    result = await asyncio.to_thread(
        engine.transliterate, text, mode, use_default_mapping, custom_mapping
    )

    if cancel_event is not None and cancel_event.is_set():
        raise asyncio.CancelledError()
    return result
