"""
Error classes for the projection engine.
"""

from __future__ import annotations


class InvalidParameter(ValueError):
    """
    Raised when an input parameter violates a precondition of the engine.

    Validation happens before any month is simulated, so a raised
    ``InvalidParameter`` always means no schedule was produced.

    Attributes:
        field: Name of the offending ``InputParameters`` field
        reason: Human-readable description of the violated constraint
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
