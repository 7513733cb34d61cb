"""
Fan-out helpers for aggregators.

Results are only used once every launched call has settled, so a failing
call never leaves its siblings running unobserved.
"""
import asyncio
from typing import Any, Awaitable, List


async def gather_all(*calls: Awaitable[Any]) -> List[Any]:
    """Run calls concurrently; once all settle, raise the first failure if any."""
    results = await asyncio.gather(*calls, return_exceptions=True)
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)


async def gather_settled(*calls: Awaitable[Any]) -> List[Any]:
    """Run calls concurrently and return values or exceptions in call order."""
    return list(await asyncio.gather(*calls, return_exceptions=True))
