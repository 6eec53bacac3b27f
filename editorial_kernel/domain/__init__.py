"""
Pure domain layer for the editorial kernel.

Everything here is in-memory: frozen state variants, the transition
functions between them, the declarative workflow table, and the
``Document`` entity that ties a text buffer to its current state.
"""

from editorial_kernel.domain.document import Document
from editorial_kernel.domain.review_policy import (
    DEFAULT_REVIEW_POLICY,
    MAX_APPROVALS,
    ReviewPolicy,
)
from editorial_kernel.domain.states import (
    DocumentState,
    DocumentStatus,
    Draft,
    PendingReview,
    Published,
    ReviewAction,
    apply_action,
    describe_state,
    is_editable,
    on_approve,
    on_reject,
    on_request_review,
    state_from_status,
    visible_content,
)
from editorial_kernel.domain.workflow import (
    ALLOWED_TRANSITIONS,
    DOCUMENT_WORKFLOW,
    Guard,
    Transition,
    Workflow,
    validate_transition,
)

__all__ = [
    "ALLOWED_TRANSITIONS",
    "DEFAULT_REVIEW_POLICY",
    "DOCUMENT_WORKFLOW",
    "Document",
    "DocumentState",
    "DocumentStatus",
    "Draft",
    "Guard",
    "MAX_APPROVALS",
    "PendingReview",
    "Published",
    "ReviewAction",
    "ReviewPolicy",
    "Transition",
    "Workflow",
    "apply_action",
    "describe_state",
    "is_editable",
    "on_approve",
    "on_reject",
    "on_request_review",
    "state_from_status",
    "validate_transition",
    "visible_content",
]
