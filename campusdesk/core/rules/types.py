"""Shared type definitions for rules and pricing strategies.

Responsibilities:
  - Define the Rule and Strategy contracts consumed by the engine.
Must not:
  - Implement evaluation logic; contracts only.
"""

from __future__ import annotations

from typing import Any, Hashable, Optional, Protocol


class Rule(Protocol):
    name: str

    def check(self, subject: Any) -> Optional[str]:
        """Return a violation reason, or None when the subject passes."""
        ...


class Strategy(Protocol):
    name: str
    value: float

    def supports(self, discriminant: Hashable) -> bool:
        ...
