"""
Lookup gate: runs the caller's lookup function and suppresses stale results.

Every issued lookup gets a ``LookupToken`` carrying a generation number.
When an asynchronous lookup completes, its token is compared with the latest
issued generation and the result is only delivered if they match. Superseded
lookups are not cancelled; they run to completion and their result is
dropped.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

from typeahead.domain.types import Candidate, LookupFunction, LookupToken
from typeahead.errors import LookupFailure
from typeahead.logger import get_logger

logger = get_logger("core.lookup_gate")

ResultCallback = Callable[[LookupToken, tuple[Candidate, ...]], None]
ErrorCallback = Callable[[LookupFailure], None]
StaleCallback = Callable[[LookupToken], None]


class LookupGate:
    """Issue lookups and deliver only the newest one's result."""

    def __init__(
        self,
        lookup: LookupFunction,
        on_result: ResultCallback,
        on_error: ErrorCallback | None = None,
        on_stale: StaleCallback | None = None,
    ) -> None:
        """
        Args:
            lookup: Caller function returning candidates or an awaitable of them
            on_result: Receives the token and candidates of each current lookup
            on_error: Reporting hook for lookup failures
            on_stale: Notified whenever a superseded result is dropped
        """
        self._lookup = lookup
        self._on_result = on_result
        self._on_error = on_error
        self._on_stale = on_stale
        self._generation = 0
        self._in_flight: dict[int, asyncio.Future[Any]] = {}
        self.issued_count = 0
        self.stale_count = 0

    @property
    def generation(self) -> int:
        """Latest issued (or invalidated) generation."""
        return self._generation

    @property
    def loading(self) -> bool:
        """True while the latest issued lookup is still pending."""
        return self._generation in self._in_flight

    def is_current(self, token: LookupToken) -> bool:
        return token.generation == self._generation

    def issue(self, query: str) -> LookupToken:
        """Run the lookup for ``query`` under a fresh generation.

        Synchronous results (and synchronous failures) are delivered before
        this returns. Awaitable results are scheduled on the running loop.
        """
        self._generation += 1
        self.issued_count += 1
        token = LookupToken(generation=self._generation, query=query)
        logger.info(f"Issuing lookup #{token.generation} for {query!r}")

        try:
            result = self._lookup(query)
        except Exception as e:
            self._fail(token, e)
            return token

        if inspect.isawaitable(result):
            future = asyncio.ensure_future(result)
            self._in_flight[token.generation] = future
            future.add_done_callback(lambda f: self._complete(token, f))
        else:
            self._deliver(token, result)
        return token

    def invalidate(self) -> None:
        """Supersede any in-flight lookup without issuing a new one."""
        if self._in_flight:
            logger.debug(f"Invalidating {len(self._in_flight)} in-flight lookup(s)")
        self._generation += 1

    async def wait(self) -> None:
        """Wait until every in-flight lookup has completed and been processed."""
        while self._in_flight:
            await asyncio.gather(*self._in_flight.values(), return_exceptions=True)

    def _complete(self, token: LookupToken, future: asyncio.Future[Any]) -> None:
        self._in_flight.pop(token.generation, None)

        if not self.is_current(token):
            self.stale_count += 1
            if not future.cancelled() and future.exception() is not None:
                logger.debug(f"Superseded lookup #{token.generation} failed: {future.exception()!r}")
            logger.debug(
                f"Discarding stale lookup #{token.generation} for {token.query!r} "
                f"(current #{self._generation})"
            )
            if self._on_stale:
                self._on_stale(token)
            return

        if future.cancelled():
            self._fail(token, asyncio.CancelledError(f"lookup for {token.query!r} was cancelled"))
            return

        error = future.exception()
        if error is not None:
            self._fail(token, error)
            return

        self._deliver(token, future.result())

    def _deliver(self, token: LookupToken, result: Any) -> None:
        try:
            candidates = tuple(result)
        except TypeError as e:
            self._fail(token, e)
            return
        logger.debug(f"Lookup #{token.generation} returned {len(candidates)} candidate(s)")
        self._on_result(token, candidates)

    def _fail(self, token: LookupToken, error: BaseException) -> None:
        failure = LookupFailure(token.query, token.generation, error)
        self._on_result(token, ())
        if self._on_error:
            self._on_error(failure)
        else:
            logger.opt(exception=error).error(str(failure))
