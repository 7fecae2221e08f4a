"""Job booking orchestration.

The workflow is a fixed, strictly sequential pipeline against the CSP API:
authenticate, resolve the first account, resolve a collection/delivery pair of
service levels, add a pending job and confirm it. Each stage awaits its network
call before the next one starts; nothing is retried or run concurrently.

Stages return `Resolved`/`Aborted` results for "the data is not there" cases.
Transport and protocol faults travel through the `core.errors` exceptions and
are never swallowed. Printing is left to the caller through `WorkflowHooks`.
"""

from __future__ import annotations

import re
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable

from core.config import AppSettings
from core.domain.dates import Clock, today
from core.domain.models import (
    Account,
    Credentials,
    JobRequest,
    OAuthToken,
    ServiceLevelPair,
    ServiceMatrixEntry,
    ServiceType,
)
from core.domain.results import AbortReason, Aborted, Resolved, StageResult
from core.errors import (
    AuthenticationFailure,
    CSPError,
    ResolutionFailure,
    SubmissionError,
)
from core.interfaces.gateways import (
    AccountGateway,
    Authenticator,
    CSPGateways,
    JobGateway,
    ServiceMatrixGateway,
)

SessionFactory = Callable[[OAuthToken], AbstractAsyncContextManager[CSPGateways]]

_JOB_ID_RE = re.compile(r"[+-]?[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


@dataclass
class WorkflowHooks:
    """Optional callbacks for UI layers (stage progress, warnings)."""

    info: Callable[[str], None] | None = None
    warning: Callable[[str], None] | None = None

    def emit_info(self, message: str) -> None:
        if self.info:
            self.info(message)

    def emit_warning(self, message: str) -> None:
        if self.warning:
            self.warning(message)


@dataclass
class BookingOutcome:
    """What a run produced, up to the stage where it stopped."""

    account: Account | None = None
    service_levels: ServiceLevelPair | None = None
    job: JobRequest | None = None
    job_id: int | None = None
    confirmation: Any = None
    aborted: Aborted | None = None

    @property
    def completed(self) -> bool:
        return self.aborted is None and self.job_id is not None


async def acquire_token(authenticator: Authenticator, credentials: Credentials) -> OAuthToken:
    try:
        return await authenticator.acquire_token(credentials)
    except CSPError:
        raise
    except Exception as exc:
        raise AuthenticationFailure("Unable to obtain an OAuth token.", cause=exc) from exc


async def resolve_first_account(accounts: AccountGateway) -> StageResult[Account]:
    """First account in API order; an empty collection is a clean abort."""

    try:
        collection = await accounts.all_accounts()
    except CSPError:
        raise
    except Exception as exc:
        raise ResolutionFailure("Unable to fetch accounts.", cause=exc) from exc

    if not collection:
        return Aborted(AbortReason.ACCOUNT_UNRESOLVED)
    return Resolved(collection[0])


def _first_of_type(
    entries: list[ServiceMatrixEntry],
    matrix_id: int,
    service_type: ServiceType,
) -> ServiceMatrixEntry | None:
    for entry in entries:
        if entry.service_matrix_id == matrix_id and entry.type == service_type:
            return entry
    return None


async def resolve_service_levels(services: ServiceMatrixGateway) -> StageResult[ServiceLevelPair]:
    """Collection/delivery pair for the matrix id of the first returned entry."""

    try:
        matrix = await services.matrix()
    except CSPError:
        raise
    except Exception as exc:
        raise ResolutionFailure("Unable to fetch the service matrix.", cause=exc) from exc

    matrix_id = matrix[0].service_matrix_id if matrix else None
    if matrix_id is None or matrix_id <= 0:
        return Aborted(AbortReason.MATRIX_UNRESOLVED)

    collection = _first_of_type(matrix, matrix_id, ServiceType.COLLECTION)
    delivery = _first_of_type(matrix, matrix_id, ServiceType.DELIVERY)
    if collection is None or delivery is None:
        return Aborted(
            AbortReason.SERVICE_LEVELS_UNRESOLVED,
            detail=f"matrix_id={matrix_id}",
        )
    return Resolved(ServiceLevelPair(matrix_id=matrix_id, collection=collection, delivery=delivery))


def build_job_request(
    account: Account,
    pair: ServiceLevelPair,
    *,
    collection_address: str,
    delivery_address: str,
    clock: Clock | None = None,
) -> JobRequest:
    """Minimum `PortalJob` fields; missing numeric values fall back to 0.

    The delivery date is the collection date plus the collection row's
    `AdvanceDays`; permitted-day rules are left to the API.
    """

    collection = pair.collection
    delivery = pair.delivery
    now = (clock or datetime.now)()
    fixed = lambda: now  # noqa: E731
    return JobRequest(
        account_id=account.account_id or 0,
        service_level_id=collection.service_level_id or 0,
        collection_date=today(clock=fixed),
        collection_time=collection.service_time_id or 0,
        collection_start_time=collection.start_time or 0,
        collection_end_time=collection.end_time or 0,
        collection_address1=collection_address,
        delivery_date=today(collection.advance_days, clock=fixed),
        delivery_time=delivery.service_time_id or 0,
        delivery_start_time=delivery.start_time or 0,
        delivery_end_time=delivery.end_time or 0,
        delivery_address1=delivery_address,
        weight=0,
    )


def parse_job_id(body: str | None) -> int:
    """Integer id from the add-job response body, 0 when it is not one."""

    if body is None:
        return 0
    text = str(body).strip().strip('"').strip()
    if not _JOB_ID_RE.fullmatch(text):
        return 0
    value = int(text)
    if not _INT32_MIN <= value <= _INT32_MAX:
        return 0
    return value


async def submit_pending(jobs: JobGateway, job: JobRequest) -> StageResult[int]:
    try:
        body = await jobs.add(job)
    except CSPError:
        raise
    except Exception as exc:
        raise SubmissionError("Adding a pending job raised an error.", cause=exc) from exc

    job_id = parse_job_id(body)
    if job_id <= 0:
        return Aborted(AbortReason.SUBMISSION_FAILED, detail=f"result={job_id}")
    return Resolved(job_id)


async def confirm(jobs: JobGateway, job_id: int) -> Any:
    """Confirm a pending job. The pending job is left in place if this fails."""

    if job_id <= 0:
        raise ValueError(f"Only positive job ids can be confirmed, got {job_id}")
    try:
        return await jobs.confirm(job_id)
    except Exception as exc:
        raise SubmissionError(
            f"Confirming pending job {job_id} failed.",
            cause=exc,
            pending_job_id=job_id,
        ) from exc


async def book_job(
    *,
    settings: AppSettings,
    authenticator: Authenticator,
    open_session: SessionFactory,
    hooks: WorkflowHooks | None = None,
    clock: Clock | None = None,
) -> BookingOutcome:
    """Run the four stages in order, stopping at the first abort or fault."""

    hooks = hooks or WorkflowHooks()
    outcome = BookingOutcome()

    hooks.emit_info("Requesting OAuth token...")
    token = await acquire_token(authenticator, settings.credentials())

    async with open_session(token) as gateways:
        hooks.emit_info("Resolving accounts...")
        account = await resolve_first_account(gateways.accounts)
        if isinstance(account, Aborted):
            hooks.emit_warning(account.message)
            outcome.aborted = account
            return outcome
        outcome.account = account.value

        hooks.emit_info("Resolving service levels...")
        levels = await resolve_service_levels(gateways.services)
        if isinstance(levels, Aborted):
            hooks.emit_warning(levels.message)
            outcome.aborted = levels
            return outcome
        outcome.service_levels = levels.value

        outcome.job = build_job_request(
            outcome.account,
            outcome.service_levels,
            collection_address=settings.collection_address,
            delivery_address=settings.delivery_address,
            clock=clock,
        )

        hooks.emit_info("Adding pending job...")
        submitted = await submit_pending(gateways.jobs, outcome.job)
        if isinstance(submitted, Aborted):
            for line in submitted.lines():
                hooks.emit_warning(line)
            outcome.aborted = submitted
            return outcome
        outcome.job_id = submitted.value

        hooks.emit_info(f"Confirming job {outcome.job_id}...")
        outcome.confirmation = await confirm(gateways.jobs, outcome.job_id)

    return outcome
