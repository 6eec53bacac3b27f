"""
Configuration Loader (``editorial_config.loader``).

Responsibility
--------------
Loads the review-policy YAML file and parses it into the kernel's
``ReviewPolicy`` value object.  Callers should go through
``editorial_config.get_active_policy()``.

Architecture position
---------------------
**Config layer** -- infrastructure tooling.  Depends on the kernel's
domain value objects; the kernel never imports this package.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing required keys  -> ``KeyError`` propagates.
* Wrong value types  -> ``ValueError``.
* Counter out of range  -> ``InvalidApprovalCountError``.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import asdict
from pathlib import Path
from typing import Any

import yaml

from editorial_kernel.domain.review_policy import ReviewPolicy

POLICY_FILE_NAME = "review_policy.yaml"


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        ValueError: if the top level is not a mapping.
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping, got {type(data).__name__}")
    return data


def parse_review_policy(data: dict[str, Any]) -> ReviewPolicy:
    """
    Parse a ``ReviewPolicy`` from a dict.

    ``policy_name`` and ``version`` are required;
    ``initial_approvals_remaining`` defaults to 1.
    """
    name = data["policy_name"]
    version = data["version"]
    if not isinstance(name, str) or not name:
        raise ValueError(f"policy_name must be a non-empty string, got {name!r}")
    if isinstance(version, bool) or not isinstance(version, int) or version < 1:
        raise ValueError(f"version must be a positive integer, got {version!r}")

    return ReviewPolicy(
        policy_name=name,
        version=version,
        initial_approvals_remaining=data.get("initial_approvals_remaining", 1),
    )


def compute_checksum(data: dict[str, Any]) -> str:
    """SHA-256 of the canonical JSON serialization of ``data``."""
    canonical = json.dumps(data, sort_keys=True, default=str)
    return hashlib.sha256(canonical.encode()).hexdigest()


def policy_checksum(policy: ReviewPolicy) -> str:
    """Checksum of the parsed policy.

    Defaults are filled in before hashing, so files that spell out a default
    and files that omit it identify the same policy.
    """
    return compute_checksum(asdict(policy))
