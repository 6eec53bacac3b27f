"""
Review policy value object (``editorial_kernel.domain.review_policy``).

Responsibility
--------------
Carries the one tunable of the review gate: how many approvals remain
when a draft enters review.  ``editorial_config`` builds instances from
YAML; the kernel only ever receives the finished value.

Architecture position
---------------------
**Kernel domain layer** -- pure value object.  ZERO I/O.  Must not import
from ``editorial_config``.

Invariants enforced
-------------------
* ``initial_approvals_remaining`` is an int in ``0..MAX_APPROVALS``.
* Publishing takes ``initial_approvals_remaining + 1`` approve calls: the
  counter must reach zero and then receive one more approval.
"""

from __future__ import annotations

from dataclasses import dataclass

from editorial_kernel.exceptions import InvalidApprovalCountError

# Counter is a small unsigned integer.
MAX_APPROVALS = 255


def check_approval_count(value: object) -> int:
    """Return ``value`` if it is a valid approval counter, else raise."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidApprovalCountError(value, MAX_APPROVALS)
    if value < 0 or value > MAX_APPROVALS:
        raise InvalidApprovalCountError(value, MAX_APPROVALS)
    return value


@dataclass(frozen=True)
class ReviewPolicy:
    """Named, versioned approval gate for documents entering review."""

    policy_name: str
    version: int
    initial_approvals_remaining: int = 1

    def __post_init__(self) -> None:
        check_approval_count(self.initial_approvals_remaining)

    @property
    def approvals_to_publish(self) -> int:
        """Number of ``approve`` calls needed from a fresh review request."""
        return self.initial_approvals_remaining + 1


DEFAULT_REVIEW_POLICY = ReviewPolicy(
    policy_name="default_review",
    version=1,
    initial_approvals_remaining=1,
)
