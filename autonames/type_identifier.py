"""
Type identifiers for CloudFormation resource declarations.

A resource "Type" such as ``AWS::S3::Bucket`` is parsed into an immutable
``TypeIdentifier`` which naming rules are keyed on.
"""

from dataclasses import dataclass
from typing import Optional
import re

from autonames.exceptions import InvalidTypeTagError

TYPE_TAG_PATTERN = re.compile(r"(?P<root>\w+)::(?P<provider>\w+)::(?P<name>\w+)", re.ASCII)
TYPE_TAG_SEPARATOR = "::"


@dataclass(frozen=True)
class TypeIdentifier:
    """
    Three part resource type key.

    Args:
        root: Type namespace (e.g., "AWS", "Alexa")
        provider: Service provider (e.g., "S3", "Lambda")
        name: Resource type name (e.g., "Bucket", "Function")
    """

    root: str
    provider: str
    name: str

    def __str__(self) -> str:
        return TYPE_TAG_SEPARATOR.join((self.root, self.provider, self.name))


def parse_type_tag(type_tag: str, logical_id: Optional[str] = None) -> TypeIdentifier:
    """
    Parse a ``root::provider::name`` type tag.

    Args:
        type_tag: Resource "Type" value
        logical_id: Logical id of the declaration, used in error context

    Returns:
        TypeIdentifier with the three segments

    Raises:
        InvalidTypeTagError: If the tag is not a string or has the wrong shape

    Examples:
        >>> parse_type_tag("AWS::S3::Bucket")
        TypeIdentifier(root='AWS', provider='S3', name='Bucket')
    """
    context = {"logical_id": logical_id} if logical_id is not None else {}
    if not isinstance(type_tag, str):
        raise InvalidTypeTagError(
            f'property "Type" must be string on resource "{logical_id}"', context
        )

    match = TYPE_TAG_PATTERN.fullmatch(type_tag)
    if not match:
        raise InvalidTypeTagError(
            f'property "Type" must match root::provider::name on resource '
            f'"{logical_id}", got "{type_tag}"',
            context,
        )
    return TypeIdentifier(match.group("root"), match.group("provider"), match.group("name"))
