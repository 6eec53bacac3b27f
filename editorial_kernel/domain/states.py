"""
Document state policy (``editorial_kernel.domain.states``).

Responsibility
--------------
Defines the closed set of document states and, for each one, whether the
text is editable, which content is visible, and where each review action
leads.  States are immutable; every transition returns the next state
(possibly the same object) and never mutates its input.

Architecture position
---------------------
**Kernel domain layer** -- pure functions over frozen dataclasses.  ZERO
I/O, no logging.  ``domain/document.py`` is the only stateful caller.

Invariants enforced
-------------------
* Every query and transition is total: each ``match`` lists all three
  variants explicitly, and actions that make no sense in a state return
  that state unchanged.
* ``PendingReview.approvals_remaining`` stays in ``0..MAX_APPROVALS``.
* ``PendingReview(0)`` + approve -> ``Published``;
  ``PendingReview(n > 0)`` + approve -> ``PendingReview(n - 1)``.
* ``Published`` is never left: reject, approve and request_review are
  no-ops there.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, unique
from typing import ClassVar, TypeAlias

from editorial_kernel.domain.review_policy import (
    DEFAULT_REVIEW_POLICY,
    ReviewPolicy,
    check_approval_count,
)
from editorial_kernel.exceptions import UnknownStateError


@unique
class DocumentStatus(str, Enum):
    """Lifecycle status tag for a document."""

    DRAFT = "draft"
    PENDING_REVIEW = "pending_review"
    PUBLISHED = "published"


@unique
class ReviewAction(str, Enum):
    """Actions a caller may request on a document's lifecycle."""

    REQUEST_REVIEW = "request_review"
    REJECT = "reject"
    APPROVE = "approve"


# =========================================================================
# State variants
# =========================================================================


@dataclass(frozen=True)
class Draft:
    """Initial state. Text is editable; nothing is visible."""

    status: ClassVar[DocumentStatus] = DocumentStatus.DRAFT


@dataclass(frozen=True)
class PendingReview:
    """Awaiting approval. Text is frozen; nothing is visible."""

    approvals_remaining: int = 1

    status: ClassVar[DocumentStatus] = DocumentStatus.PENDING_REVIEW

    def __post_init__(self) -> None:
        check_approval_count(self.approvals_remaining)


@dataclass(frozen=True)
class Published:
    """Final in practice. Full text is visible; nothing is editable."""

    status: ClassVar[DocumentStatus] = DocumentStatus.PUBLISHED


DocumentState: TypeAlias = Draft | PendingReview | Published


# =========================================================================
# Queries
# =========================================================================


def is_editable(state: DocumentState) -> bool:
    """Whether ``add_text`` is accepted in ``state``."""
    match state:
        case Draft():
            return True
        case PendingReview():
            return False
        case Published():
            return False
        case _:
            raise UnknownStateError(state)


def visible_content(state: DocumentState, full_text: str) -> str:
    """The part of ``full_text`` a reader may see in ``state``."""
    match state:
        case Draft():
            return ""
        case PendingReview():
            return ""
        case Published():
            return full_text
        case _:
            raise UnknownStateError(state)


# =========================================================================
# Transitions
# =========================================================================


def on_request_review(
    state: DocumentState,
    policy: ReviewPolicy = DEFAULT_REVIEW_POLICY,
) -> DocumentState:
    """Draft enters review; pending and published documents are unchanged."""
    match state:
        case Draft():
            return PendingReview(policy.initial_approvals_remaining)
        case PendingReview():
            return state
        case Published():
            return state
        case _:
            raise UnknownStateError(state)


def on_reject(state: DocumentState) -> DocumentState:
    """A pending document goes back to draft. Published content stays up."""
    match state:
        case Draft():
            return state
        case PendingReview():
            return Draft()
        case Published():
            return state
        case _:
            raise UnknownStateError(state)


def on_approve(state: DocumentState) -> DocumentState:
    """Count down a pending review; publish once the counter is spent."""
    match state:
        case Draft():
            return state
        case PendingReview(approvals_remaining=0):
            return Published()
        case PendingReview(approvals_remaining=remaining):
            return PendingReview(remaining - 1)
        case Published():
            return state
        case _:
            raise UnknownStateError(state)


def apply_action(
    state: DocumentState,
    action: ReviewAction,
    policy: ReviewPolicy = DEFAULT_REVIEW_POLICY,
) -> DocumentState:
    """Dispatch ``action`` to its transition function."""
    match ReviewAction(action):
        case ReviewAction.REQUEST_REVIEW:
            return on_request_review(state, policy)
        case ReviewAction.REJECT:
            return on_reject(state)
        case ReviewAction.APPROVE:
            return on_approve(state)


# =========================================================================
# Helpers
# =========================================================================


def state_from_status(
    status: DocumentStatus | str,
    approvals_remaining: int | None = None,
    policy: ReviewPolicy = DEFAULT_REVIEW_POLICY,
) -> DocumentState:
    """Build the state named by ``status``.

    ``approvals_remaining`` only applies to pending review and defaults to
    the policy's initial counter.
    """
    try:
        tag = DocumentStatus(status)
    except ValueError:
        raise UnknownStateError(status) from None

    match tag:
        case DocumentStatus.DRAFT:
            return Draft()
        case DocumentStatus.PENDING_REVIEW:
            if approvals_remaining is None:
                approvals_remaining = policy.initial_approvals_remaining
            return PendingReview(approvals_remaining)
        case DocumentStatus.PUBLISHED:
            return Published()


def describe_state(state: DocumentState) -> str:
    """Short label, e.g. ``pending_review(approvals_remaining=1)``."""
    match state:
        case PendingReview(approvals_remaining=remaining):
            return f"{state.status.value}(approvals_remaining={remaining})"
        case Draft() | Published():
            return state.status.value
        case _:
            raise UnknownStateError(state)
