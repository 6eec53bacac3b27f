#!/usr/bin/env python3
"""
Document lifecycle demo: write a draft, send it for review, approve it.

Prints the visible content after each step so the review gate can be
seen hiding text until publication.

Usage:
    python3 scripts/demo_document.py                  # Default scenario
    python3 scripts/demo_document.py --approvals 2    # Approve twice
    python3 scripts/demo_document.py --json           # One JSON object per step
    python3 scripts/demo_document.py --describe       # Print the workflow table
    python3 scripts/demo_document.py --config-dir DIR # Use another review policy
"""

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from editorial_config import get_active_policy  # noqa: E402
from editorial_kernel.domain import DOCUMENT_WORKFLOW, Document, describe_state  # noqa: E402

DEFAULT_TEXT = "hola que tal"

W = 60


# =============================================================================
# Formatting
# =============================================================================

def hline(char: str = "=") -> str:
    return char * W


def banner(title: str) -> None:
    print(hline())
    print(f"  {title}")
    print(hline())


def emit_step(step: str, document: Document, as_json: bool) -> None:
    if as_json:
        print(json.dumps({
            "step": step,
            "state": describe_state(document.state),
            "content": document.content(),
        }))
        return
    print(step)
    print(document.content())


def describe_workflow() -> None:
    banner(f"Workflow: {DOCUMENT_WORKFLOW.name}")
    print(f"  initial: {DOCUMENT_WORKFLOW.initial_state}")
    for t in DOCUMENT_WORKFLOW.transitions:
        guard = f"  [{t.guard.name}]" if t.guard else ""
        print(f"  {t.from_state:<16} --{t.action}--> {t.to_state}{guard}")
    print(hline())


# =============================================================================
# Main
# =============================================================================

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Document lifecycle demo")
    parser.add_argument("--text", default=DEFAULT_TEXT, help="Draft text to add")
    parser.add_argument(
        "--approvals", type=int, default=1,
        help="Number of approve calls after requesting review",
    )
    parser.add_argument("--json", action="store_true", help="Emit JSON lines")
    parser.add_argument("--describe", action="store_true", help="Print the workflow and exit")
    parser.add_argument("--config-dir", type=Path, default=None, help="Review policy directory")
    args = parser.parse_args(argv)

    if args.describe:
        describe_workflow()
        return 0

    policy = get_active_policy(args.config_dir)
    document = Document.new(policy=policy)

    document.add_text(args.text)
    emit_step("Added text", document, args.json)

    document.request_review()
    emit_step("Reviewed", document, args.json)

    for _ in range(args.approvals):
        document.approve()
        emit_step("Approved", document, args.json)

    return 0


if __name__ == "__main__":
    sys.exit(main())
