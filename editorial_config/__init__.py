"""
editorial_config -- single public entrypoint for review-policy configuration.

Responsibility:
    Provides the way to obtain the review policy at runtime through
    ``get_active_policy()``.  Returns a kernel ``ReviewPolicy``; YAML
    parsing stays internal.

Architecture position:
    Configuration.  Sits above ``editorial_kernel``.  The kernel MUST NEVER
    import from ``editorial_config``.

Failure modes:
    - ``FileNotFoundError`` -- no review_policy.yaml in the directory.
    - ``KeyError`` / ``ValueError`` -- structural validation failures.
    - ``InvalidApprovalCountError`` -- counter outside the allowed range.

Audit relevance:
    Every successful ``get_active_policy()`` call emits an
    ``EDITORIAL_CONFIG_TRACE`` log entry with the policy name, version and
    the checksum of the parsed policy.
"""

from __future__ import annotations

from pathlib import Path

from editorial_config.loader import (
    POLICY_FILE_NAME,
    compute_checksum,
    load_yaml_file,
    parse_review_policy,
    policy_checksum,
)
from editorial_kernel.domain.review_policy import ReviewPolicy
from editorial_kernel.logging_config import get_logger

_logger = get_logger("config")

# Default configuration sets directory
_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets" / "default"


def get_active_policy(config_dir: Path | None = None) -> ReviewPolicy:
    """Load, validate and return the review policy in ``config_dir``.

    Guarantees:
        - The returned policy passed structural validation.
        - An ``EDITORIAL_CONFIG_TRACE`` log entry is emitted.
    """
    directory = Path(config_dir) if config_dir is not None else _DEFAULT_CONFIG_DIR
    data = load_yaml_file(directory / POLICY_FILE_NAME)
    policy = parse_review_policy(data)

    checksum = policy_checksum(policy)

    _logger.info(
        "EDITORIAL_CONFIG_TRACE",
        extra={
            "trace_type": "EDITORIAL_CONFIG_TRACE",
            "policy_name": policy.policy_name,
            "policy_version": policy.version,
            "initial_approvals_remaining": policy.initial_approvals_remaining,
            "checksum": checksum,
            "config_dir": str(directory),
        },
    )
    return policy


__all__ = [
    "compute_checksum",
    "policy_checksum",
    "get_active_policy",
]
