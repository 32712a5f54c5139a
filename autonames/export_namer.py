"""Export naming pass for cfn-autonames.

Outputs have no resource type, so a single fixed rule names their "Export"
block. The export block itself is the prior view: an export name the user
already wrote is kept.
"""

from typing import Any, MutableMapping, Optional
import logging

from autonames.config_loader import NamingConfig, validate_config
from autonames.exceptions import InvalidDeclarationError
from autonames.naming_rule import NamingRule
from autonames.rule_table import export_rule

logger = logging.getLogger(__name__)

EXPORT_PROPERTY = "Export"


class ExportNamer:
    """
    Applies the export naming rule to template outputs.

    Args:
        rule: Rule used for exports, defaults to the "CUSTOM::Output::Export" rule
    """

    def __init__(self, rule: Optional[NamingRule] = None):
        self.rule = rule if rule is not None else export_rule()

    def apply(self, outputs: MutableMapping[str, Any], config: NamingConfig) -> None:
        """
        Insert generated export names into every output.

        Does nothing unless config.generate_exports is set.

        Args:
            outputs: Mapping of logical id to output declaration, mutated in place
            config: Naming configuration

        Raises:
            InvalidDeclarationError: If an output or its "Export" is not a mapping
        """
        validate_config(config)
        if not config.generate_exports:
            logger.debug("Export generation disabled, skipping outputs")
            return

        prefix = config.export_prefix or config.prefix
        for logical_id, output in outputs.items():
            if not isinstance(output, MutableMapping):
                raise InvalidDeclarationError(
                    f'output "{logical_id}" must be a mapping',
                    context={"logical_id": logical_id},
                )
            export = output.get(EXPORT_PROPERTY)
            if not export:
                export = output[EXPORT_PROPERTY] = {}
            elif not isinstance(export, MutableMapping):
                raise InvalidDeclarationError(
                    f'property "{EXPORT_PROPERTY}" on output "{logical_id}" must be a mapping',
                    context={"logical_id": logical_id},
                )
            self.rule.apply_type(export, export, prefix, logical_id, config)
