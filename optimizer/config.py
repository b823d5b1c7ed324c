from __future__ import annotations

"""
Optimizer configuration: per-rule overrides, custom rules and the severity filter.

OptimizerConfig is a plain value. The engine holds one and replaces it
wholesale in CodeOptimizer.update_config(); nothing mutates a config that an
engine already owns.

Overrides in ``enabled_rules`` only apply to built-in rules, looked up by
name. Custom rules are always evaluated under their own ``enabled`` flag, so a
custom rule that shares a name with a built-in still fires when that built-in
is disabled.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Sequence

from pydantic import TypeAdapter

from optimizer.errors import FileReadError
from optimizer.findings.models import DEFAULT_SEVERITY_FILTER, Severity
from optimizer.rules.base import OptimizationRule

logger = logging.getLogger(__name__)

DISABLE_DIRECTIVE = "disable_rule:"
ENABLE_DIRECTIVE = "enable_rule:"

_RULE_LIST_ADAPTER = TypeAdapter(List[OptimizationRule])


@dataclass
class OptimizerConfig:
    """
    Optimizer configuration.

    enabled_rules: rule name -> override; a missing entry means "use the rule's default".
    custom_rules: caller-supplied rules, evaluated after built-ins in insertion order.
    severity_filter: severities allowed through; custom severities are excluded by default.
    """

    enabled_rules: Dict[str, bool] = field(default_factory=dict)
    custom_rules: List[OptimizationRule] = field(default_factory=list)
    severity_filter: List[Severity] = field(
        default_factory=lambda: list(DEFAULT_SEVERITY_FILTER)
    )

    @classmethod
    def from_config_string(cls, config_str: str) -> "OptimizerConfig":
        """
        Build a config from directive text, one directive per line.

        ``disable_rule: NAME`` and ``enable_rule: NAME`` set an override for NAME;
        every other line is ignored. When a name appears more than once the last
        directive wins.
        """
        config = cls()
        for raw_line in config_str.splitlines():
            line = raw_line.strip()
            if line.startswith(DISABLE_DIRECTIVE):
                config.enabled_rules[line[len(DISABLE_DIRECTIVE):].strip()] = False
            elif line.startswith(ENABLE_DIRECTIVE):
                config.enabled_rules[line[len(ENABLE_DIRECTIVE):].strip()] = True
            elif line:
                logger.debug("Ignoring unrecognized config line: %r", line)
        return config

    @classmethod
    def from_file(cls, path: Path) -> "OptimizerConfig":
        """Read a directive file; raises FileReadError if it cannot be read."""
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read config file %s: %s", path, e)
            raise FileReadError(path, e) from e
        config = cls.from_config_string(text)
        logger.info("Loaded %d rule override(s) from %s", len(config.enabled_rules), path)
        return config

    def add_custom_rule(self, rule: OptimizationRule) -> None:
        self.custom_rules.append(rule)

    def allows(self, severity: Severity) -> bool:
        """True if suggestions with this severity pass the severity filter."""
        return severity in self.severity_filter


def get_default_config() -> OptimizerConfig:
    """Return a fresh default configuration (no overrides, no custom rules)."""
    return OptimizerConfig()


def load_custom_rules(path: Path) -> List[OptimizationRule]:
    """
    Load custom rules from a JSON array of rule objects.

    Example entry::

        {"name": "no-var", "language": "javascript",
         "pattern": {"kind": "contains", "text": "var "},
         "replacement": "let ", "explanation": "Use 'let' instead of 'var'",
         "severity": {"level": "custom", "label": "Style"}, "confidence": 0.95}

    Raises FileReadError if the file cannot be read; malformed content raises
    pydantic.ValidationError.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        logger.error("Failed to read rules file %s: %s", path, e)
        raise FileReadError(path, e) from e
    rules = _RULE_LIST_ADAPTER.validate_json(data)
    logger.info("Loaded %d custom rule(s) from %s", len(rules), path)
    return rules


def get_active_rules(
    built_in: Iterable[OptimizationRule],
    config: OptimizerConfig,
) -> List[OptimizationRule]:
    """
    Resolve which rules run under ``config``.

    Built-ins come first in catalog order, each enabled by its override in
    ``config.enabled_rules`` if present, otherwise by its own default. Enabled
    custom rules follow in insertion order. Names are not deduplicated.
    """
    active: List[OptimizationRule] = [
        rule
        for rule in built_in
        if config.enabled_rules.get(rule.name, rule.enabled)
    ]
    active.extend(rule for rule in config.custom_rules if rule.enabled)
    return active


def parse_severities(names: Sequence[str]) -> List[Severity]:
    """Turn CLI severity names into a severity filter."""
    return [Severity.from_name(name) for name in names]
