"""Core rule-chain and strategy-resolution utilities.

Responsibilities:
  - Provide evaluator, resolver and result types for deterministic decisions.
  - Must not perform storage or printing; callers own side effects.
"""
