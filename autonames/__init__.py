"""
cfn-autonames: rule based resource names for CloudFormation templates.

Resources, inline policies and output exports of a template receive
deterministic names built from a configured prefix and their logical ids.
Names the user already declared are never replaced.
"""

from autonames.config_loader import NamingConfig, load_config
from autonames.driver import NamingDriver
from autonames.exceptions import (
    AutoNamesError,
    InvalidDeclarationError,
    InvalidConfigurationError,
    InvalidRuleOptionsError,
    InvalidTypeTagError,
    MissingTypeTagError,
)
from autonames.export_namer import ExportNamer
from autonames.naming_rule import NamingRule
from autonames.resource_namer import ResourceNamer, apply_policy_names
from autonames.rule_table import RuleTable, default_rule_table
from autonames.type_identifier import TypeIdentifier, parse_type_tag

__version__ = "0.1"

__all__ = [
    "AutoNamesError",
    "InvalidDeclarationError",
    "ExportNamer",
    "InvalidConfigurationError",
    "InvalidRuleOptionsError",
    "InvalidTypeTagError",
    "MissingTypeTagError",
    "NamingConfig",
    "NamingDriver",
    "NamingRule",
    "ResourceNamer",
    "RuleTable",
    "TypeIdentifier",
    "apply_policy_names",
    "default_rule_table",
    "load_config",
    "parse_type_tag",
]
