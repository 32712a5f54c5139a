"""
Naming rules for CloudFormation resource types.

A ``NamingRule`` describes, for one resource type, which property receives a
generated name and how the name is derived from the configured prefix and the
resource logical id.
"""

from typing import Any, Mapping, MutableMapping, Optional, Union

from autonames.converters import CONVERTERS, Converter, identity, kebab
from autonames.exceptions import InvalidRuleOptionsError
from autonames.type_identifier import TypeIdentifier

RULE_OPTIONS = (
    "name_converter",
    "logical_name_converter",
    "include_type_name_in_property",
    "name_insertion_enabled",
    "name_property_override",
)


def resolve_converter(converter: Union[str, Converter], type_id: TypeIdentifier) -> Converter:
    """Return the converter function for a registered name or callable."""
    if callable(converter):
        return converter
    if isinstance(converter, str) and converter in CONVERTERS:
        return CONVERTERS[converter]
    raise InvalidRuleOptionsError(
        f'Unknown converter "{converter}" for type {type_id}',
        context={"type": str(type_id), "converter": converter},
    )


class NamingRule:
    """
    Name insertion behaviour for resources of one type.

    Args:
        type_id: Resource type the rule applies to
        options: Optional overrides, any of:
            name_converter: converts the final name before it is stored
            logical_name_converter: converts the logical id into the name suffix
            include_type_name_in_property: use "<TypeName>Name" as the property
            name_insertion_enabled: False for types that carry no name
            name_property_override: property used instead of the derived one

    Raises:
        InvalidRuleOptionsError: If options contains unknown keys or converters
    """

    def __init__(self, type_id: TypeIdentifier, options: Optional[Mapping[str, Any]] = None):
        options = dict(options or {})
        unknown = sorted(key for key in options if key not in RULE_OPTIONS)
        if unknown:
            raise InvalidRuleOptionsError(
                f"{unknown} Invalid NamingRule options",
                context={"type": str(type_id)},
            )

        self._type_id = type_id
        self._name_converter = resolve_converter(
            options.get("name_converter", identity), type_id
        )
        self._logical_name_converter = resolve_converter(
            options.get("logical_name_converter", kebab), type_id
        )
        self._include_type_name_in_property = options.get(
            "include_type_name_in_property", True
        )
        self._name_insertion_enabled = options.get("name_insertion_enabled", True)
        self._name_property_override = options.get("name_property_override")

    @property
    def type_id(self) -> TypeIdentifier:
        return self._type_id

    @property
    def name_property_override(self) -> Optional[str]:
        return self._name_property_override

    @property
    def include_type_name_in_property(self) -> bool:
        return self._include_type_name_in_property

    def property_key(self) -> str:
        """Property on which the generated name is stored."""
        if self._name_property_override:
            return self._name_property_override
        if self._include_type_name_in_property:
            return self._type_id.name + "Name"
        return "Name"

    def synthesize(self, prefix: str, logical_name: str, config: Any) -> str:
        """Build the resource name from prefix and logical id."""
        return self._name_converter(
            prefix + self._logical_name_converter(logical_name, config), config
        )

    def matches(self, type_id: TypeIdentifier) -> bool:
        return self._type_id == type_id

    def is_naming_enabled(self) -> bool:
        return bool(self._name_insertion_enabled)

    def apply_type(
        self,
        target: MutableMapping[str, Any],
        prior: Optional[Mapping[str, Any]],
        prefix: str,
        logical_name: str,
        config: Any,
    ) -> None:
        """
        Insert the name property into target.

        A non-empty value already present on the prior view wins over the
        generated name.

        Args:
            target: Properties mapping that receives the name
            prior: User declared properties for the same resource, may be None
            prefix: Prefix for the generated name
            logical_name: Logical id of the resource
            config: Active NamingConfig
        """
        if not self.is_naming_enabled():
            return

        key = self.property_key()
        existing = (prior or {}).get(key)
        target[key] = existing if existing else self.synthesize(prefix, logical_name, config)

    def __repr__(self) -> str:
        return f"NamingRule({self._type_id}, property={self.property_key()!r})"
