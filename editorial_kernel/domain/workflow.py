"""
Canonical workflow types (``editorial_kernel.domain.workflow``).

Responsibility
--------------
Pure value objects describing the document lifecycle as data: which
status changes exist, which action triggers each, and the guard that
decides between them.  ``domain/states.py`` implements the behaviour;
this module is the declarative table that behaviour is checked against.

Architecture position
---------------------
**Kernel domain layer** -- pure value objects.  ZERO I/O.

Invariants enforced
-------------------
* Transitions reference only states in ``Workflow.states``.
* ``initial_state`` is a member of ``states``.
* No-op self-loops are not listed.  Pending -> pending on approve is
  listed because it spends one approval.
* ``ALLOWED_TRANSITIONS`` holds only status changes.
"""

from __future__ import annotations

from dataclasses import dataclass

from editorial_kernel.domain.states import DocumentStatus, ReviewAction


@dataclass(frozen=True)
class Guard:
    """A condition that must be satisfied before a transition fires.

    Contract: frozen, descriptive only.
    Non-goals: does not evaluate the condition -- ``domain/states.py`` does.
    """
    name: str
    description: str


@dataclass(frozen=True)
class Transition:
    """A valid status change in a workflow.

    ``requires_approval=True`` marks the edge gated by the approval counter.
    """
    from_state: str
    to_state: str
    action: str
    guard: Guard | None = None
    requires_approval: bool = False


@dataclass(frozen=True)
class Workflow:
    """A state machine definition for a document lifecycle.

    Contract: frozen; ``transitions`` reference only states in ``states``.
    ``final_states`` have no status-changing transitions.  They are not
    terminal: every action is still accepted there as a no-op.
    """
    name: str
    description: str
    initial_state: str
    states: tuple[str, ...]
    transitions: tuple[Transition, ...]
    final_states: tuple[str, ...] = ()

    def transitions_from(self, state: str) -> tuple[Transition, ...]:
        """Outgoing transitions of ``state``, in declaration order."""
        return tuple(t for t in self.transitions if t.from_state == state)

    def actions_from(self, state: str) -> frozenset[str]:
        """Actions that can change the status of a document in ``state``."""
        return frozenset(t.action for t in self.transitions_from(state))


# -----------------------------------------------------------------------------
# Guards
# -----------------------------------------------------------------------------

APPROVALS_OUTSTANDING = Guard(
    name="approvals_outstanding",
    description="Approval counter is above zero",
)

APPROVALS_SPENT = Guard(
    name="approvals_spent",
    description="Approval counter has reached zero",
)


# -----------------------------------------------------------------------------
# Document workflow
# -----------------------------------------------------------------------------

_DRAFT = DocumentStatus.DRAFT.value
_PENDING = DocumentStatus.PENDING_REVIEW.value
_PUBLISHED = DocumentStatus.PUBLISHED.value

DOCUMENT_WORKFLOW = Workflow(
    name="document_review",
    description="Editorial lifecycle of a text document",
    initial_state=_DRAFT,
    states=(_DRAFT, _PENDING, _PUBLISHED),
    transitions=(
        Transition(_DRAFT, _PENDING, ReviewAction.REQUEST_REVIEW.value),
        Transition(_PENDING, _DRAFT, ReviewAction.REJECT.value),
        Transition(
            _PENDING,
            _PENDING,
            ReviewAction.APPROVE.value,
            guard=APPROVALS_OUTSTANDING,
        ),
        Transition(
            _PENDING,
            _PUBLISHED,
            ReviewAction.APPROVE.value,
            guard=APPROVALS_SPENT,
            requires_approval=True,
        ),
    ),
    final_states=(_PUBLISHED,),
)


# Allowed status changes (from -> set of valid next statuses)
ALLOWED_TRANSITIONS: dict[DocumentStatus, frozenset[DocumentStatus]] = {
    DocumentStatus.DRAFT: frozenset({DocumentStatus.PENDING_REVIEW}),
    DocumentStatus.PENDING_REVIEW: frozenset({
        DocumentStatus.DRAFT,
        DocumentStatus.PUBLISHED,
    }),
    DocumentStatus.PUBLISHED: frozenset(),  # Actions are accepted as no-ops
}


def validate_transition(current: DocumentStatus, target: DocumentStatus) -> bool:
    """Check if a status change is valid. Staying put is always valid."""
    if current == target:
        return True
    return target in ALLOWED_TRANSITIONS.get(current, frozenset())
