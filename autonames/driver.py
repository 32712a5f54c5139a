"""
Naming driver for serverless style service definitions.

The driver owns everything around the naming passes: reading the naming
configuration from the service, choosing which templates to name at which
lifecycle hook, and the JSON file round trip for the packaged create stack
template. The passes themselves live in resource_namer and export_namer.
"""

from typing import Any, Callable, Dict, Mapping, MutableMapping, Optional
import logging
import os

from autonames.config_loader import (
    NamingConfig,
    load_config,
    load_template_file,
    write_template_file,
)
from autonames.export_namer import ExportNamer
from autonames.naming_rule import NamingRule
from autonames.resource_namer import Diagnostics, ResourceNamer, apply_policy_names
from autonames.rule_table import RuleTable, default_rule_table
from autonames.type_identifier import TypeIdentifier

logger = logging.getLogger(__name__)

LAMBDA_FUNCTION_TYPE = TypeIdentifier("AWS", "Lambda", "Function")
FUNCTION_LOGICAL_ID_SUFFIX = "LambdaFunction"
CREATE_STACK_TEMPLATE = os.path.join(
    ".serverless", "cloudformation-template-create-stack.json"
)

HOOK_DEPLOY_FUNCTION = "before:deploy:function:initialize"
HOOK_PACKAGE_INITIALIZE = "after:package:initialize"
HOOK_MERGE_PROVIDER_RESOURCES = "after:aws:package:finalize:mergeCustomProviderResources"


def function_logical_id(function_key: str) -> str:
    """Logical id the packager gives to a function declared under key."""
    return function_key + FUNCTION_LOGICAL_ID_SUFFIX


class NamingDriver:
    """
    Runs the naming passes over a service definition.

    Args:
        service: Parsed service mapping with provider/custom/functions/resources
        service_path: Directory of the service, used to locate packaged templates
        rule_table: Rules to apply, defaults to the shipped AWS table
        diagnostics: Sink for non fatal messages, defaults to logger.warning

    Attributes:
        hooks: Mapping of lifecycle hook name to callable, empty for non AWS services
        config: NamingConfig loaded by the most recent hook or initialize_config()
    """

    def __init__(
        self,
        service: MutableMapping[str, Any],
        service_path: Optional[str] = None,
        rule_table: Optional[RuleTable] = None,
        diagnostics: Optional[Diagnostics] = None,
    ):
        self.service = service
        self.service_path = service_path or os.getcwd()
        self.rule_table = rule_table if rule_table is not None else default_rule_table()
        self.resource_namer = ResourceNamer(self.rule_table, diagnostics)
        self.export_namer = ExportNamer()
        self.config: Optional[NamingConfig] = None
        self.hooks: Dict[str, Callable[[], None]] = {}

        if self.is_aws_template:
            hooks = {
                # rename functions so a single function deploy finds the right name
                HOOK_DEPLOY_FUNCTION: self._on_deploy_function,
                # rewrite the create template after it has been written
                HOOK_PACKAGE_INITIALIZE: self._on_package_initialize,
                # name the in memory templates the update template is written from
                HOOK_MERGE_PROVIDER_RESOURCES: self._on_merge_provider_resources,
            }
            self.hooks = {name: self._with_config(hook) for name, hook in hooks.items()}
        else:
            logger.info("template provider is not aws, therefore skipping transformations...")

    @property
    def provider(self) -> Mapping[str, Any]:
        return self.service.get("provider") or {}

    @property
    def is_aws_template(self) -> bool:
        return self.provider.get("name") == "aws"

    @property
    def function_rule(self) -> NamingRule:
        rule = self.rule_table.find(LAMBDA_FUNCTION_TYPE)
        if rule is None:
            raise LookupError(f"Rule table has no rule for {LAMBDA_FUNCTION_TYPE}")
        return rule

    def initialize_config(self) -> NamingConfig:
        """Load and validate the naming configuration from the service."""
        self.config = load_config(self.service.get("custom"))
        return self.config

    def _with_config(self, hook: Callable[[], None]) -> Callable[[], None]:
        def run_hook(*args, **kwargs):
            self.initialize_config()
            hook()

        return run_hook

    def _on_deploy_function(self) -> None:
        self.rename_functions()
        self.apply_on_template(self.service.get("resources") or {})

    def _on_package_initialize(self) -> None:
        self.apply_on_json_file(os.path.join(self.service_path, CREATE_STACK_TEMPLATE))

    def _on_merge_provider_resources(self) -> None:
        for key in ("compiledCloudFormationTemplate", "coreCloudFormationTemplate"):
            template = self.provider.get(key)
            if template is not None:
                self.apply_on_template(template)

    def function_names(self) -> Dict[str, str]:
        """
        Materialized names of the service functions.

        Returns:
            Mapping of function key to generated function name
        """
        config = self.config or self.initialize_config()
        rule = self.function_rule
        return {
            key: rule.synthesize(config.prefix, function_logical_id(key), config)
            for key in (self.service.get("functions") or {})
        }

    def rename_functions(self) -> None:
        """Set the name of every service function from the Lambda naming rule."""
        functions = self.service.get("functions") or {}
        for key, name in self.function_names().items():
            if functions[key] is None:
                functions[key] = {}
            functions[key]["name"] = name
            logger.debug(f"Function {key} named {name}")

    def apply_on_template(self, cf_template: MutableMapping[str, Any]) -> None:
        """
        Name resources, inline policies and (optionally) exports of a template.

        Args:
            cf_template: CloudFormation template mapping, mutated in place
        """
        config = self.config or self.initialize_config()
        resources = cf_template.get("Resources") or {}
        prior_resources = (self.service.get("resources") or {}).get("Resources")

        self.resource_namer.apply(resources, prior_resources, config)
        apply_policy_names(resources)
        self.export_namer.apply(cf_template.get("Outputs") or {}, config)

    def apply_on_json_file(self, path: str) -> Dict[str, Any]:
        """
        Name a CloudFormation JSON template on disk in place.

        Args:
            path: Path to the template file

        Returns:
            The named template
        """
        cf_template = load_template_file(path)
        self.apply_on_template(cf_template)
        write_template_file(path, cf_template)
        logger.info(f"Applied resource names to {path}")
        return cf_template
