"""
Pytest fixtures for the editorial kernel test suite.

Provides:
- Structured logging configured once per session
- LogContext isolation between tests
- Captured JSON log records
- Fresh documents and temporary review-policy directories
"""

import json
import logging
from io import StringIO
from pathlib import Path
from uuid import UUID

import pytest
import yaml

from editorial_kernel.domain import Document, ReviewPolicy
from editorial_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)

TEST_DOCUMENT_ID = UUID("00000000-0000-4000-8000-000000000001")


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture editorial_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, document):
            document.request_review()
            logs = captured_logs()
            assert any(r["message"] == "document_transition" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("editorial_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Domain fixtures
# =============================================================================


@pytest.fixture
def document() -> Document:
    """A fresh draft document with a fixed id."""
    return Document.new(document_id=TEST_DOCUMENT_ID)


@pytest.fixture
def write_policy(tmp_path: Path):
    """
    Write a review_policy.yaml into a temp directory and return the directory.

    Usage::

        def test_x(write_policy):
            config_dir = write_policy({"policy_name": "p", "version": 1})
    """

    def _write(data, *, raw: str | None = None) -> Path:
        path = tmp_path / "review_policy.yaml"
        if raw is not None:
            path.write_text(raw)
        else:
            path.write_text(yaml.safe_dump(data))
        return tmp_path

    return _write


@pytest.fixture
def three_approval_policy() -> ReviewPolicy:
    return ReviewPolicy(
        policy_name="strict_review",
        version=1,
        initial_approvals_remaining=2,
    )
