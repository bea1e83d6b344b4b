"""
Cooperative delays.
"""

import asyncio


async def sleep(delay: float) -> None:
    """
    Pause the current coroutine for delay milliseconds.

    Usage:
        await sleep(250)
    """
    await asyncio.sleep(max(delay, 0) / 1000)
