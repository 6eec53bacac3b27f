"""
Editorial Kernel

A pure, in-memory document lifecycle with:
- Draft / pending-review / published states
- State-gated visibility and editability
- A two-approval publication gate
- Structured logging of every transition request
"""

__version__ = "0.1.0"
