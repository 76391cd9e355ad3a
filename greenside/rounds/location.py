from __future__ import annotations

import asyncio
import logging

from fastapi.concurrency import run_in_threadpool

from greenside.config import get_settings
from greenside.errors import GreensideError, SessionNotFound
from greenside.providers.location import LocationStream

from .service import RoundSessionService

logger = logging.getLogger(__name__)


class LocationSubscription:
    """Feeds position fixes from a stream into one round session.

    Lives for as long as the round screen is shown. ``close`` must be called
    when the round ends; ``RoundSessionService.end`` does this for attached
    subscriptions.
    """

    def __init__(
        self,
        service: RoundSessionService,
        session_id: str,
        user_id: str,
        stream: LocationStream,
        *,
        min_distance_m: float | None = None,
        min_interval_s: float | None = None,
    ) -> None:
        settings = get_settings()
        self._service = service
        self._session_id = session_id
        self._user_id = user_id
        self._stream = stream
        self._min_distance_m = (
            settings.location_min_distance_m if min_distance_m is None else min_distance_m
        )
        self._min_interval_s = (
            settings.location_min_interval_s if min_interval_s is None else min_interval_s
        )
        self._task: asyncio.Task[None] | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self.fixes_applied = 0

    @property
    def closed(self) -> bool:
        return self._task is None or self._task.done()

    def start(self) -> asyncio.Task[None]:
        """Begin consuming the stream; must be called from a running event loop."""
        if self._task is not None:
            raise RuntimeError("location subscription already started")
        loop = asyncio.get_running_loop()
        self._service.attach_subscription(self._session_id, self._user_id, self)
        self._loop = loop
        self._task = loop.create_task(self._run())
        self._task.add_done_callback(self._detach)
        return self._task

    def _detach(self, _task: asyncio.Task[None]) -> None:
        self._service.detach_subscription(self._session_id, self)

    async def _run(self) -> None:
        fixes = self._stream.subscribe(
            min_distance_m=self._min_distance_m,
            min_interval_s=self._min_interval_s,
        )
        try:
            async for point in fixes:
                try:
                    await run_in_threadpool(
                        self._service.update_location,
                        self._session_id,
                        self._user_id,
                        point,
                    )
                except SessionNotFound:
                    logger.info(
                        "location fix for ended session dropped",
                        extra={"session_id": self._session_id},
                    )
                    return
                except GreensideError as exc:
                    logger.warning(
                        "location fix not applied",
                        extra={"session_id": self._session_id, "kind": exc.kind},
                    )
                    continue
                self.fixes_applied += 1
        finally:
            aclose = getattr(fixes, "aclose", None)
            if aclose is not None:
                await aclose()

    def close(self) -> None:
        """Cancel the stream consumer; safe to call from any thread."""
        task, loop = self._task, self._loop
        if task is None or loop is None or task.done():
            return
        if loop.is_closed():
            return
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            running = None
        if running is loop:
            task.cancel()
        else:
            loop.call_soon_threadsafe(task.cancel)

    async def wait_closed(self) -> None:
        if self._task is None:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass


__all__ = ["LocationSubscription"]
