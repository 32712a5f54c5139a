"""
Rule table construction and lookup.

The table is built once from the static configuration records in
autonames.config and is read only afterwards. Lookup returns the first rule
whose type matches, so record order is precedence order.
"""

from functools import lru_cache
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple
import logging

from autonames.config import EXPORT_RULE_CONFIG, NAMING_RULE_CONFIGS
from autonames.exceptions import InvalidRuleOptionsError, InvalidTypeTagError
from autonames.naming_rule import NamingRule
from autonames.type_identifier import TypeIdentifier, parse_type_tag

logger = logging.getLogger(__name__)

RULE_CONFIG_KEYS = ("type", "options", "description")


class RuleTable:
    """Ordered, read only collection of naming rules."""

    def __init__(self, rules: Iterable[NamingRule]):
        self._rules: Tuple[NamingRule, ...] = tuple(rules)

    def find(self, type_id: TypeIdentifier) -> Optional[NamingRule]:
        """
        Find the naming rule for a resource type.

        Args:
            type_id: Parsed resource type

        Returns:
            First matching rule, or None when the type has no rule
        """
        for rule in self._rules:
            if rule.matches(type_id):
                return rule
        return None

    def __iter__(self) -> Iterator[NamingRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    @classmethod
    def from_configs(cls, configs: Iterable[Mapping[str, Any]]) -> "RuleTable":
        return cls(build_rule(config) for config in configs)


def build_rule(config: Mapping[str, Any]) -> NamingRule:
    """
    Build a NamingRule from one configuration record.

    Args:
        config: Record with "type" and optional "options"/"description"

    Returns:
        NamingRule for the record

    Raises:
        InvalidRuleOptionsError: If the record is malformed
    """
    unknown = sorted(key for key in config if key not in RULE_CONFIG_KEYS)
    if unknown:
        raise InvalidRuleOptionsError(
            f"{unknown} Invalid naming rule record keys",
            context={"type": config.get("type")},
        )

    try:
        type_id = parse_type_tag(config.get("type"))
    except InvalidTypeTagError as e:
        raise InvalidRuleOptionsError(
            f"Naming rule record has an invalid type: {e.message}",
            context={"type": config.get("type")},
        ) from e

    return NamingRule(type_id, config.get("options"))


@lru_cache(maxsize=None)
def default_rule_table() -> RuleTable:
    """Rule table built from the shipped AWS naming rule configuration."""
    table = RuleTable.from_configs(NAMING_RULE_CONFIGS)
    logger.debug(f"Built naming rule table with {len(table)} rules")
    return table


@lru_cache(maxsize=None)
def export_rule() -> NamingRule:
    """Fixed rule applied to output exports."""
    return build_rule(EXPORT_RULE_CONFIG)


def describe_rules(table: RuleTable) -> List[Dict[str, Any]]:
    """
    Summarise a rule table for display.

    Args:
        table: Rule table to describe

    Returns:
        One dict per rule with type, property and whether naming is enabled
    """
    return [
        {
            "type": str(rule.type_id),
            "property": rule.property_key(),
            "naming": rule.is_naming_enabled(),
        }
        for rule in table
    ]
