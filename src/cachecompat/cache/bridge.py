# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Bridge callback-style client methods to awaitables."""

from __future__ import annotations

import asyncio
import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any

from cachecompat.kernel.exceptions import ClientErrorException


def _settle(future: asyncio.Future[Any], error: object, result: Any) -> None:
    # Late callbacks after cancellation are dropped.
    if future.done():
        return
    if error is None:
        future.set_result(result)
        return
    if not isinstance(error, BaseException):
        error = ClientErrorException(error)
    try:
        future.set_exception(error)
    except TypeError:
        # StopIteration and friends cannot be set on a future.
        future.set_exception(ClientErrorException(error))


def promisify(method: Callable[..., Any]) -> Callable[..., Awaitable[Any]]:
    """Wrap a method whose last argument is a ``callback(error, result)``.

    The returned coroutine function appends the callback itself and resolves
    with ``result``, or raises ``error`` when the client reports one. Errors
    that are not exceptions (plain strings, codes) are raised as
    ``ClientErrorException``. The callback may fire synchronously, later on
    the loop, or from another thread. If the method itself returns an
    awaitable it is awaited first so its failures surface too.
    """

    @functools.wraps(method)
    async def bridged(*args: Any) -> Any:
        loop = asyncio.get_running_loop()
        future: asyncio.Future[Any] = loop.create_future()

        def callback(error: object = None, result: Any = None) -> None:
            loop.call_soon_threadsafe(_settle, future, error, result)

        returned = method(*args, callback)
        if inspect.isawaitable(returned):
            await returned
        return await future

    return bridged
