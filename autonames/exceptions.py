"""Custom exception types for cfn-autonames.

This module defines the exception hierarchy raised by the naming engine. Every
error carries the offending logical id or configuration field in its context so
that the caller can report it without re-parsing the message.

Exception Hierarchy:
    AutoNamesError (base)
    ├── MissingTypeTagError - Resource declaration has no "Type"
    ├── InvalidTypeTagError - "Type" is not a string or not root::provider::name
    ├── InvalidDeclarationError - Properties, output or export block is not a mapping
    ├── InvalidConfigurationError - Naming configuration failed validation
    └── InvalidRuleOptionsError - Naming rule built with unknown options
"""

from typing import Any, Dict, Optional


class AutoNamesError(Exception):
    """Base exception for all cfn-autonames errors.

    Attributes:
        message: Human-readable error description
        context: Where the error happened, keyed by "logical_id", "field" or "type"
    """

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = dict(context or {})

    @property
    def logical_id(self) -> Optional[str]:
        """Logical id of the offending declaration, if any."""
        return self.context.get("logical_id")

    @property
    def field(self) -> Optional[str]:
        """Configuration key that failed validation, if any."""
        return self.context.get("field")

    def __str__(self) -> str:
        if not self.context:
            return self.message
        where = " ".join(f"{key}={value}" for key, value in sorted(self.context.items()))
        return f"{self.message} [{where}]"


class MissingTypeTagError(AutoNamesError):
    """Raised when a resource declaration has no "Type" property.

    Examples:
        - Resource block written with only "Properties"
        - "Type" set to an empty string
    """


class InvalidTypeTagError(AutoNamesError):
    """Raised when a resource "Type" cannot be parsed into a type identifier.

    Examples:
        - "Type" given as a list or mapping
        - "BadTag" (no "::" separators)
        - "AWS::S3" (only two segments)
        - "AWS::S3::Bücket" (non ASCII word characters)
    """


class InvalidDeclarationError(AutoNamesError):
    """Raised when a block a name is written into is not a mapping.

    Empty values ("", [], None) are replaced with a fresh mapping instead.

    Examples:
        - "Properties": "TableName=orders"
        - an output declared as a plain string
        - "Export": ["orders"]
    """


class InvalidConfigurationError(AutoNamesError):
    """Raised when the naming configuration fails validation.

    Examples:
        - Empty or non-string prefix
        - Empty export prefix
        - Non-boolean flags such as removeLambdaFunctionSuffix
    """


class InvalidRuleOptionsError(AutoNamesError):
    """Raised when a naming rule is built with unrecognized options.

    This is a programming error in a rule table rather than a data error,
    so it surfaces when the table is built.
    """
