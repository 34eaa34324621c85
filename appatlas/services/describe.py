"""Aggregation of an application's resources into one description.

The application record, its environments, its services and its tagged
pipelines come from independent reads. :class:`ApplicationDescriber` issues
them concurrently on worker threads and joins on all of them before building
the :class:`ApplicationDescription`. The first failure fails the whole call
without waiting for the other reads: reads that have not started are
cancelled, and reads already running finish in the background with their
results discarded.
"""

from __future__ import annotations

import asyncio
import contextvars
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Callable

from appatlas.infrastructure.observability import get_logger, log_context
from appatlas.services.dto import ApplicationDescription, EnvironmentView, WorkloadView
from appatlas.services.errors import ErrorKind, ShowAppError
from appatlas.services.interfaces import ConfigStore, PipelineDirectory

APP_TAG_KEY = "application"

_logger = get_logger(__name__)


@dataclass(frozen=True)
class _Read:
    operation: str
    kind: ErrorKind
    fetch: Callable[[], Any]


class ApplicationDescriber:
    """Builds application descriptions from the store and the pipeline directory.

    Uses collaborator injection - the caller owns both clients.
    """

    def __init__(self, store: ConfigStore, pipelines: PipelineDirectory) -> None:
        self._store = store
        self._pipelines = pipelines

    async def describe(self, name: str) -> ApplicationDescription:
        """Describe application ``name``.

        Raises:
            ShowAppError: ``STORE_ACCESS`` when a store read fails (including
                an unknown application) or ``DIRECTORY_ACCESS`` when the
                pipeline lookup fails.
        """
        reads = {
            "app": _Read(
                "get application",
                ErrorKind.STORE_ACCESS,
                lambda: self._store.get_application(name),
            ),
            "envs": _Read(
                "list environments in application",
                ErrorKind.STORE_ACCESS,
                lambda: self._store.list_environments(name),
            ),
            "svcs": _Read(
                "list services in application",
                ErrorKind.STORE_ACCESS,
                lambda: self._store.list_services(name),
            ),
            "pipelines": _Read(
                "list pipelines in application",
                ErrorKind.DIRECTORY_ACCESS,
                lambda: self._pipelines.find_pipelines_by_tag(APP_TAG_KEY, name),
            ),
        }
        with log_context(app=name):
            _logger.debug("Describing application")
            results = await self._gather(name, reads)

        app = results["app"]
        return ApplicationDescription(
            name=app.name,
            uri=app.domain,
            environments=[EnvironmentView.from_record(env) for env in results["envs"]],
            workloads=[WorkloadView.from_record(svc) for svc in results["svcs"]],
            pipelines=list(results["pipelines"]),
        )

    async def _gather(self, name: str, reads: dict[str, _Read]) -> dict[str, Any]:
        # Not the default executor: asyncio.run joins that one before returning.
        executor = ThreadPoolExecutor(
            max_workers=len(reads), thread_name_prefix="appatlas-describe"
        )
        try:
            tasks = {
                slot: asyncio.create_task(
                    self._run_read(name, read, executor), name=slot
                )
                for slot, read in reads.items()
            }
            done, pending = await asyncio.wait(
                tasks.values(), return_when=asyncio.FIRST_EXCEPTION
            )
            if pending:
                for task in pending:
                    task.cancel()
                await asyncio.gather(*pending, return_exceptions=True)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

        # Report the first failure in declaration order so errors are stable.
        for task in tasks.values():
            if task in done and task.exception() is not None:
                raise task.exception()
        return {slot: task.result() for slot, task in tasks.items()}

    async def _run_read(
        self, name: str, read: _Read, executor: ThreadPoolExecutor
    ) -> Any:
        loop = asyncio.get_running_loop()
        context = contextvars.copy_context()
        try:
            return await loop.run_in_executor(executor, context.run, read.fetch)
        except Exception as exc:
            _logger.debug("%s %s failed: %s", read.operation, name, exc)
            raise ShowAppError(read.kind, read.operation, name) from exc


def describe_application(describer: ApplicationDescriber, name: str) -> ApplicationDescription:
    """Run :meth:`ApplicationDescriber.describe` from synchronous code."""
    return asyncio.run(describer.describe(name))


__all__ = ["APP_TAG_KEY", "ApplicationDescriber", "describe_application"]
