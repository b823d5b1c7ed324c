# Pydantic data models for optimization suggestions: Language, Severity, Optimization.

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, model_validator


class Language(str, Enum):
    """Source languages the optimizer has rules for."""

    JAVASCRIPT = "javascript"
    PYTHON = "python"
    RUST = "rust"


class SeverityLevel(str, Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CUSTOM = "custom"


class Severity(BaseModel):
    """
    How important a suggestion is.

    Built-in levels are info, warning and error. A custom severity carries a
    caller-defined label; two custom severities are equal only when their
    labels match.
    """

    level: SeverityLevel
    label: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _label_only_for_custom(self) -> "Severity":
        if self.level is SeverityLevel.CUSTOM:
            if self.label is None:
                raise ValueError("custom severity requires a label")
        elif self.label is not None:
            raise ValueError(f"built-in severity '{self.level.value}' does not take a label")
        return self

    @classmethod
    def custom(cls, label: str) -> "Severity":
        return cls(level=SeverityLevel.CUSTOM, label=label)

    @classmethod
    def from_name(cls, name: str) -> "Severity":
        """Map "info"/"warning"/"error" (any case) to built-ins, anything else to custom."""
        try:
            level = SeverityLevel(name.strip().lower())
        except ValueError:
            return cls.custom(name.strip())
        if level is SeverityLevel.CUSTOM:
            return cls.custom(name.strip())
        return cls(level=level)

    @property
    def display_name(self) -> str:
        if self.level is SeverityLevel.CUSTOM:
            return self.label
        return self.level.value

    def __str__(self) -> str:
        return self.display_name


INFO = Severity(level=SeverityLevel.INFO)
WARNING = Severity(level=SeverityLevel.WARNING)
ERROR = Severity(level=SeverityLevel.ERROR)

DEFAULT_SEVERITY_FILTER = (INFO, WARNING, ERROR)


class Optimization(BaseModel):
    """A single suggestion: one rule matched one line."""

    rule_name: str
    language: Language
    line_number: int = Field(..., ge=1, description="1-based line number")
    original_code: str
    suggested_code: str
    explanation: str
    severity: Severity
    confidence: float = Field(..., ge=0.0, le=1.0)

    model_config = {"frozen": True}
