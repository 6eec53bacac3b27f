"""
Document entity (``editorial_kernel.domain.document``).

Responsibility
--------------
Owns the raw text buffer and the current lifecycle state, and exposes
the public document operations.  Every decision (may I edit? what is
visible? where does this action lead?) is delegated to
``domain/states.py``.

Architecture position
---------------------
**Kernel domain layer** -- in-memory entity.  No I/O beyond structured
log records.

Invariants enforced
-------------------
* A state is always installed.  Transitions compute the next state from
  the current one and install it in a single assignment.
* ``add_text`` appends only while the state is editable; otherwise the
  call is a silent no-op.
* No operation raises for a disallowed action.

Concurrency
-----------
Not thread-safe.  A multi-threaded host must serialise access to each
document (one lock per document).
"""

from __future__ import annotations

from uuid import UUID, uuid4

from editorial_kernel.domain.review_policy import DEFAULT_REVIEW_POLICY, ReviewPolicy
from editorial_kernel.domain.states import (
    Draft,
    DocumentState,
    DocumentStatus,
    ReviewAction,
    apply_action,
    describe_state,
    is_editable,
    visible_content,
)
from editorial_kernel.logging_config import LogContext, get_logger

logger = get_logger("domain.document")

OUTCOME_TRANSITIONED = "transitioned"
OUTCOME_NO_OP = "no_op"


class Document:
    """A piece of text moving through draft, review and publication."""

    def __init__(
        self,
        *,
        policy: ReviewPolicy | None = None,
        document_id: UUID | None = None,
    ) -> None:
        self._document_id = document_id or uuid4()
        self._policy = policy or DEFAULT_REVIEW_POLICY
        self._text = ""
        self._state: DocumentState = Draft()

    @classmethod
    def new(
        cls,
        *,
        policy: ReviewPolicy | None = None,
        document_id: UUID | None = None,
    ) -> Document:
        """A draft document with empty text."""
        return cls(policy=policy, document_id=document_id)

    def __repr__(self) -> str:
        return (
            f"Document(id={self._document_id}, state={describe_state(self._state)}, "
            f"length={len(self._text)})"
        )

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------

    @property
    def document_id(self) -> UUID:
        return self._document_id

    @property
    def policy(self) -> ReviewPolicy:
        return self._policy

    @property
    def state(self) -> DocumentState:
        return self._state

    @property
    def status(self) -> DocumentStatus:
        return self._state.status

    @property
    def raw_text(self) -> str:
        """The stored buffer regardless of visibility."""
        return self._text

    def is_editable(self) -> bool:
        return is_editable(self._state)

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------

    def add_text(self, text: str) -> None:
        """Append ``text`` if the current state allows editing."""
        if not is_editable(self._state):
            with LogContext.bind(document_id=str(self._document_id)):
                logger.debug(
                    "edit_ignored",
                    extra={
                        "state": describe_state(self._state),
                        "rejected_length": len(text),
                    },
                )
            return
        self._text += text

    def content(self) -> str:
        """The text visible in the current state."""
        return visible_content(self._state, self._text)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def request_review(self) -> None:
        self._transition(ReviewAction.REQUEST_REVIEW)

    def reject(self) -> None:
        self._transition(ReviewAction.REJECT)

    def approve(self) -> None:
        self._transition(ReviewAction.APPROVE)

    def _transition(self, action: ReviewAction) -> None:
        previous = self._state
        self._state = apply_action(previous, action, self._policy)

        outcome = OUTCOME_NO_OP if self._state == previous else OUTCOME_TRANSITIONED
        extra = {
            "action": action.value,
            "from_state": describe_state(previous),
            "to_state": describe_state(self._state),
            "outcome": outcome,
            "policy": self._policy.policy_name,
        }
        # The record names this document even inside a caller-bound context.
        with LogContext.bind(document_id=str(self._document_id)):
            logger.info("document_transition", extra=extra)
