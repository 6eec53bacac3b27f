"""
Typed Exception Hierarchy for the Editorial Kernel.

===============================================================================
WHEN THESE ARE RAISED
===============================================================================

Document operations never raise.  Editing a non-draft, approving a draft or
re-reviewing a published document are silent no-ops.  The exceptions below
cover the remaining failures: building a state or policy with an impossible
counter, or naming a status that does not exist.

Example:
    try:
        state = state_from_status(raw_status)
    except UnknownStateError as e:
        log.warning("unknown status", extra={"status": e.status})
        api_response(code=e.code)

===============================================================================
EXCEPTION HIERARCHY
===============================================================================

    EditorialKernelError (base)
    |
    +-- StateError
        +-- InvalidApprovalCountError
        +-- UnknownStateError

===============================================================================
ERROR CODES - QUICK REFERENCE
===============================================================================

Category        | Code                        | When Raised
----------------|-----------------------------|-----------------------------------------
State           | INVALID_APPROVAL_COUNT      | Counter outside 0..MAX_APPROVALS
                | UNKNOWN_STATE               | Status tag or object is not a state
===============================================================================
"""


class EditorialKernelError(Exception):
    """
    Base exception for all editorial kernel errors.

    All subclasses must have a `code` class attribute for machine-readable
    error identification.
    """

    code: str = "EDITORIAL_KERNEL_ERROR"


class StateError(EditorialKernelError):
    """Base exception for document state errors."""

    code: str = "STATE_ERROR"


class InvalidApprovalCountError(StateError):
    """Approval counter is negative, too large, or not an integer."""

    code: str = "INVALID_APPROVAL_COUNT"

    def __init__(self, approvals: object, maximum: int):
        self.approvals = approvals
        self.maximum = maximum
        super().__init__(
            f"Approval count must be an integer in 0..{maximum}, got {approvals!r}"
        )


class UnknownStateError(StateError):
    """Value does not name or represent a document state."""

    code: str = "UNKNOWN_STATE"

    def __init__(self, status: object):
        self.status = status
        super().__init__(f"Unknown document state: {status!r}")
