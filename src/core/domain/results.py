"""Tagged stage results.

Each workflow stage returns `Resolved[T]` on success or `Aborted` when the
API answered correctly but the data needed to continue is missing. Aborts
stop the workflow cleanly; they are not errors.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class AbortReason(str, Enum):
    ACCOUNT_UNRESOLVED = "account_unresolved"
    MATRIX_UNRESOLVED = "matrix_unresolved"
    SERVICE_LEVELS_UNRESOLVED = "service_levels_unresolved"
    SUBMISSION_FAILED = "submission_failed"


ABORT_MESSAGES: dict[AbortReason, str] = {
    AbortReason.ACCOUNT_UNRESOLVED: "Unable to resolve any Accounts.",
    AbortReason.MATRIX_UNRESOLVED: "Unable to resolve Service Matrix.",
    AbortReason.SERVICE_LEVELS_UNRESOLVED: "Unable to resolve Service Levels.",
    AbortReason.SUBMISSION_FAILED: "Adding a pending job failed.",
}


@dataclass(frozen=True)
class Resolved(Generic[T]):
    value: T


@dataclass(frozen=True)
class Aborted:
    reason: AbortReason
    detail: str | None = None

    @property
    def message(self) -> str:
        return ABORT_MESSAGES[self.reason]

    def lines(self) -> list[str]:
        """Líneas para consola: mensaje y, si existe, el detalle."""

        out = [self.message]
        if self.detail:
            out.append(self.detail)
        return out


StageResult = Union[Resolved[T], Aborted]
