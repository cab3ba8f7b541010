"""Simulated-latency pipeline for profile mutations."""

import asyncio
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4

import structlog

from core.exceptions import AppException, MutationFailedError, SubmissionNotFoundError
from domain.entities.mutation import (
    MutationKind,
    MutationOperation,
    MutationResult,
    MutationStatus,
)
from domain.entities.profile import utcnow
from domain.repositories.profile_repository import IProfileRepository

logger = structlog.get_logger()


@dataclass(frozen=True)
class MutationDelays:
    """Simulated round-trip time per mutation kind, in seconds."""

    create: float = 0.5
    update: float = 0.5
    delete: float = 0.3

    def for_kind(self, kind: MutationKind) -> float:
        return {
            MutationKind.CREATE: self.create,
            MutationKind.UPDATE: self.update,
            MutationKind.DELETE: self.delete,
        }[kind]


@dataclass
class Submission:
    """A mutation accepted by the pipeline, pending until its delay elapses."""

    operation: MutationOperation
    delay: float
    id: str = field(default_factory=lambda: str(uuid4()))
    status: MutationStatus = MutationStatus.PENDING
    result: MutationResult | None = None
    submitted_at: datetime = field(default_factory=utcnow)
    settled_at: datetime | None = None
    _settled: asyncio.Event = field(default_factory=asyncio.Event, repr=False)

    @property
    def kind(self) -> MutationKind:
        return self.operation.kind

    @property
    def is_pending(self) -> bool:
        return self.status is MutationStatus.PENDING

    def settle(self, result: MutationResult) -> None:
        self.result = result
        self.status = MutationStatus.SETTLED
        self.settled_at = utcnow()
        self._settled.set()

    async def wait(self) -> MutationResult:
        """Wait for settlement and return the result."""
        await self._settled.wait()
        assert self.result is not None
        return self.result


class MutationPipeline:
    """Applies repository writes after a simulated network delay.

    ``submit`` marks the submission pending at once and schedules a task that
    sleeps, applies the operation and settles. Submissions run independently:
    none is cancelled or dropped, and each is applied at most once. Completion
    order follows delay expiry, not submission order. Until a submission
    settles, repository reads see the state before it.

    Only the newest ``history_limit`` settled submissions stay available to
    ``get``; pending ones are always kept.
    """

    def __init__(
        self,
        repository: IProfileRepository,
        delays: MutationDelays | None = None,
        history_limit: int = 1000,
    ) -> None:
        if history_limit < 1:
            raise ValueError("history_limit must be at least 1")
        self._repository = repository
        self._delays = delays or MutationDelays()
        self._history_limit = history_limit
        self._pending: dict[str, Submission] = {}
        self._settled: OrderedDict[str, Submission] = OrderedDict()
        self._tasks: set[asyncio.Task[MutationResult]] = set()

    @property
    def status(self) -> MutationStatus:
        """PENDING while anything is in flight, SETTLED once something finished."""
        if self._pending:
            return MutationStatus.PENDING
        if self._settled:
            return MutationStatus.SETTLED
        return MutationStatus.IDLE

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    def submit(self, operation: MutationOperation, delay: float | None = None) -> Submission:
        """Accept a mutation and schedule it. Must be called from a running loop."""
        loop = asyncio.get_running_loop()
        if delay is None:
            delay = self._delays.for_kind(operation.kind)

        submission = Submission(operation=operation, delay=delay)
        self._pending[submission.id] = submission

        task = loop.create_task(self._run(submission))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

        logger.info(
            "mutation_submitted",
            submission_id=submission.id,
            kind=operation.kind.value,
            profile_id=operation.profile_id,
            delay=delay,
        )
        return submission

    def get(self, submission_id: str) -> Submission:
        """Get a pending or recently settled submission by ID."""
        submission = self._pending.get(submission_id) or self._settled.get(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        return submission

    async def drain(self) -> None:
        """Wait until every outstanding submission has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def _run(self, submission: Submission) -> MutationResult:
        await asyncio.sleep(submission.delay)

        operation = submission.operation
        try:
            value = operation.apply(self._repository)
        except AppException as exc:
            result = MutationResult(error=exc)
            logger.warning(
                "mutation_failed",
                submission_id=submission.id,
                kind=operation.kind.value,
                error_code=exc.error_code.value,
                message=exc.message,
            )
        except Exception:
            result = MutationResult(error=MutationFailedError(submission.id))
            logger.exception(
                "mutation_crashed",
                submission_id=submission.id,
                kind=operation.kind.value,
            )
        else:
            result = MutationResult(value=value)
            logger.info(
                "mutation_settled",
                submission_id=submission.id,
                kind=operation.kind.value,
            )

        self._settle(submission, result)
        return result

    def _settle(self, submission: Submission, result: MutationResult) -> None:
        submission.settle(result)
        del self._pending[submission.id]
        self._settled[submission.id] = submission
        while len(self._settled) > self._history_limit:
            self._settled.popitem(last=False)
