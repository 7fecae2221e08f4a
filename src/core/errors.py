"""Fatal error channel for the booking workflow.

Expected "not found" conditions (no account, no matrix, unparseable job id)
are not exceptions: stages report them as `Aborted` results. The classes here
cover transport and protocol faults only, and always keep the underlying
cause so the CLI can print it as the inner exception.
"""

from __future__ import annotations


class CSPError(Exception):
    """Base class for fatal CSP integration errors."""

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause


class AuthenticationFailure(CSPError):
    """The OAuth token exchange failed."""


class ResolutionFailure(CSPError):
    """Fetching accounts or the service matrix failed at the transport level."""


class SubmissionError(CSPError):
    """Creating or confirming a job failed unexpectedly.

    `pending_job_id` is set when the job was created but confirmation failed;
    that pending job stays in the CSP.
    """

    def __init__(
        self,
        message: str,
        *,
        cause: BaseException | None = None,
        pending_job_id: int | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.pending_job_id = pending_job_id
