"""Resource naming pass for cfn-autonames.

This module walks the "Resources" section of a CloudFormation template,
parses each declaration's type and applies the matching naming rule. Names
already declared by the user on the prior (service defined) resources are
kept. Types without a rule are reported through the diagnostics sink and left
untouched.
"""

from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional
import logging

from autonames.config_loader import NamingConfig, validate_config
from autonames.exceptions import InvalidDeclarationError, MissingTypeTagError
from autonames.rule_table import RuleTable, default_rule_table
from autonames.type_identifier import parse_type_tag

logger = logging.getLogger(__name__)

Diagnostics = Callable[[str], None]

POLICIES_PROPERTY = "Policies"
POLICY_NAME_PROPERTY = "PolicyName"
INLINE_POLICY_PREFIX = "inline-policy-"


class ResourceNamer:
    """
    Applies naming rules to a collection of resource declarations.

    Args:
        rule_table: Rules to apply, defaults to the shipped AWS table
        diagnostics: Sink for non fatal messages, defaults to logger.warning
    """

    def __init__(
        self,
        rule_table: Optional[RuleTable] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.rule_table = rule_table if rule_table is not None else default_rule_table()
        self.diagnostics = diagnostics or logger.warning

    def apply(
        self,
        resources: MutableMapping[str, Any],
        prior_resources: Optional[Mapping[str, Any]],
        config: NamingConfig,
    ) -> None:
        """
        Insert generated names into every resource declaration.

        Args:
            resources: Mapping of logical id to {"Type", "Properties"}, mutated in place
            prior_resources: User declared resources of the same shape, may be None
            config: Naming configuration

        Raises:
            InvalidConfigurationError: If config is invalid, before any resource is touched
            MissingTypeTagError: If a declaration has no "Type"
            InvalidTypeTagError: If a "Type" is not a root::provider::name string
            InvalidDeclarationError: If a matched declaration has non mapping "Properties"
        """
        validate_config(config)
        for logical_id in list(resources):
            self.apply_on_resource(resources, prior_resources, logical_id, config)

    def apply_on_resource(
        self,
        resources: MutableMapping[str, Any],
        prior_resources: Optional[Mapping[str, Any]],
        logical_id: str,
        config: NamingConfig,
    ) -> None:
        resource = resources[logical_id]
        if not isinstance(resource, MutableMapping):
            raise MissingTypeTagError(
                f'resource "{logical_id}" must be a mapping with a "Type" property',
                context={"logical_id": logical_id},
            )

        type_tag = resource.get("Type")
        if type_tag is None or type_tag == "":
            raise MissingTypeTagError(
                f'property "Type" is missing on resource "{logical_id}"',
                context={"logical_id": logical_id},
            )
        type_id = parse_type_tag(type_tag, logical_id)

        rule = self.rule_table.find(type_id)
        if rule is None:
            if config.log_missing_type_behaviour_warning:
                self.diagnostics(
                    f'No naming behaviour defined for type "{type_id}" '
                    f'(resource "{logical_id}"), skipping name insertion'
                )
            return

        properties = resource.get("Properties")
        if not properties:
            properties = resource["Properties"] = {}
        elif not isinstance(properties, MutableMapping):
            raise InvalidDeclarationError(
                f'property "Properties" on resource "{logical_id}" must be a mapping',
                context={"logical_id": logical_id},
            )

        rule.apply_type(
            properties,
            _prior_properties(prior_resources, logical_id),
            config.prefix,
            logical_id,
            config,
        )


def _prior_properties(
    prior_resources: Optional[Mapping[str, Any]], logical_id: str
) -> Optional[Mapping[str, Any]]:
    prior = (prior_resources or {}).get(logical_id)
    if not isinstance(prior, Mapping):
        return None
    properties = prior.get("Properties")
    return properties if isinstance(properties, Mapping) else None


def apply_policy_names(resources: Mapping[str, Any]) -> Dict[str, int]:
    """
    Label inline policies by position.

    Every mapping element of a resource's "Policies" list gets
    PolicyName = "inline-policy-<index>", replacing any existing value.

    Args:
        resources: Mapping of logical id to resource declaration

    Returns:
        Number of labelled policies per logical id
    """
    labelled = {}
    for logical_id, resource in resources.items():
        if not isinstance(resource, Mapping):
            continue
        properties = resource.get("Properties")
        if not isinstance(properties, Mapping):
            continue
        policies = properties.get(POLICIES_PROPERTY)
        if not isinstance(policies, list):
            continue

        for index, policy in enumerate(policies):
            if isinstance(policy, MutableMapping):
                policy[POLICY_NAME_PROPERTY] = INLINE_POLICY_PREFIX + str(index)
        labelled[logical_id] = len(policies)
        logger.debug(f"Labelled {len(policies)} inline policies on {logical_id}")
    return labelled
