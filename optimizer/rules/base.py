# Rule definition: pattern variants and the OptimizationRule model every rule source builds.
# Built-in rules (javascript, python, rust) and caller-supplied custom rules are all
# OptimizationRule instances; matcher.py and rewriter.py interpret the pattern.

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from optimizer.findings.models import INFO, Language, Severity


class Contains(BaseModel):
    """Line contains ``text`` anywhere (case-sensitive)."""

    kind: Literal["contains"] = "contains"
    text: str

    model_config = {"frozen": True}


class StartsWith(BaseModel):
    """Line, ignoring leading whitespace, starts with ``text``."""

    kind: Literal["starts_with"] = "starts_with"
    text: str

    model_config = {"frozen": True}


class EndsWith(BaseModel):
    """Line, ignoring trailing whitespace, ends with ``text``."""

    kind: Literal["ends_with"] = "ends_with"
    text: str

    model_config = {"frozen": True}


class Regex(BaseModel):
    """Regular-expression pattern; see matcher.matches_regex for what is honored."""

    kind: Literal["regex"] = "regex"
    pattern: str

    model_config = {"frozen": True}


PatternType = Annotated[
    Union[Contains, StartsWith, EndsWith, Regex],
    Field(discriminator="kind"),
]


class OptimizationRule(BaseModel):
    """
    A named, language-scoped pattern-to-replacement mapping.

    ``enabled`` is the rule's default state; for built-in rules it can be
    overridden by name through OptimizerConfig.enabled_rules, custom rules
    always use their own flag.
    """

    name: str
    language: Language
    pattern: PatternType
    replacement: str
    explanation: str
    severity: Severity = INFO
    confidence: float = Field(..., ge=0.0, le=1.0)
    enabled: bool = True

    model_config = {"frozen": True}
