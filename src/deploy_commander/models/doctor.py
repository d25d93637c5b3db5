"""Diagnostic result models."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any


class Severity(enum.Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class DiagnosticResult:
    check_name: str
    severity: Severity
    message: str
    suggestion: str = ""
    component: str = ""

    @property
    def is_problem(self) -> bool:
        return self.severity != Severity.INFO

    def to_dict(self) -> dict[str, Any]:
        return {
            "check": self.check_name,
            "severity": self.severity.value,
            "message": self.message,
            "suggestion": self.suggestion,
            "component": self.component,
        }
