"""
Naming rule configuration package.

Rule tables are plain data; autonames.rule_table turns them into NamingRule
objects.
"""

from .naming_rule_configs_aws import EXPORT_RULE_CONFIG, NAMING_RULE_CONFIGS

__all__ = [
    "EXPORT_RULE_CONFIG",
    "NAMING_RULE_CONFIGS",
]
