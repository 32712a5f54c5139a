"""
Configuration Loader Module for cfn-autonames

This module turns the user supplied ``custom.awsAutoResourceNames`` block of a
service definition into a validated ``NamingConfig``, and reads/writes the
service and template files the driver works on.

"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import json
import logging

import yaml

from autonames.exceptions import InvalidConfigurationError

# Configure logging
logger = logging.getLogger(__name__)

# Key of the plugin block inside the service "custom" section
CONFIG_SECTION = "awsAutoResourceNames"

# Recognised keys and their defaults
CONFIG_DEFAULTS = {
    "prefix": "",
    "exportPrefix": None,
    "generateExports": False,
    "removeLambdaFunctionSuffix": True,
    "logMissingTypeBehaviourWarning": True,
}

BOOLEAN_KEYS = [
    "generateExports",
    "removeLambdaFunctionSuffix",
    "logMissingTypeBehaviourWarning",
]


@dataclass(frozen=True)
class NamingConfig:
    """
    Resolved naming configuration passed to every naming pass.

    Args:
        prefix: Prepended to every generated resource name
        export_prefix: Prepended to generated export names, falls back to prefix
        generate_exports: Whether output exports receive generated names
        remove_lambda_function_suffix: Strip "LambdaFunction" from function logical ids
        log_missing_type_behaviour_warning: Report resource types without a naming rule
    """

    prefix: str
    export_prefix: Optional[str] = None
    generate_exports: bool = False
    remove_lambda_function_suffix: bool = True
    log_missing_type_behaviour_warning: bool = True


def validate_config(config: NamingConfig) -> bool:
    """
    Validate a naming configuration.

    Args:
        config: Configuration to validate

    Returns:
        True if validation passes

    Raises:
        InvalidConfigurationError: If any field violates its constraint
    """
    if not isinstance(config.prefix, str):
        raise InvalidConfigurationError(
            "prefix must be string", context={"field": "prefix"}
        )
    if len(config.prefix) == 0:
        raise InvalidConfigurationError(
            "prefix must be nonempty", context={"field": "prefix"}
        )

    if config.export_prefix is not None:
        if not isinstance(config.export_prefix, str):
            raise InvalidConfigurationError(
                "export prefix must be string", context={"field": "exportPrefix"}
            )
        if len(config.export_prefix) == 0:
            raise InvalidConfigurationError(
                "export prefix must be non empty or undefined",
                context={"field": "exportPrefix"},
            )

    flags = {
        "generateExports": config.generate_exports,
        "removeLambdaFunctionSuffix": config.remove_lambda_function_suffix,
        "logMissingTypeBehaviourWarning": config.log_missing_type_behaviour_warning,
    }
    for key, value in flags.items():
        if not isinstance(value, bool):
            raise InvalidConfigurationError(
                f"{key} must be a boolean", context={"field": key}
            )

    return True


def load_config(custom: Optional[Mapping[str, Any]]) -> NamingConfig:
    """
    Build a NamingConfig from the "custom" section of a service definition.

    Args:
        custom: The service "custom" mapping, may be None

    Returns:
        Validated NamingConfig

    Raises:
        InvalidConfigurationError: If the section is malformed or a value is invalid

    Examples:
        >>> load_config({"awsAutoResourceNames": {"prefix": "app-"}}).prefix
        'app-'
    """
    section = (custom or {}).get(CONFIG_SECTION) or {}
    if not isinstance(section, Mapping):
        raise InvalidConfigurationError(
            f"{CONFIG_SECTION} must be a mapping", context={"field": CONFIG_SECTION}
        )

    unknown = [key for key in section if key not in CONFIG_DEFAULTS]
    if unknown:
        logger.warning(f"Ignoring unknown {CONFIG_SECTION} options: {', '.join(unknown)}")

    values = dict(CONFIG_DEFAULTS)
    values.update({k: v for k, v in section.items() if k in CONFIG_DEFAULTS})

    config = NamingConfig(
        prefix=values["prefix"],
        export_prefix=values["exportPrefix"],
        generate_exports=values["generateExports"],
        remove_lambda_function_suffix=values["removeLambdaFunctionSuffix"],
        log_missing_type_behaviour_warning=values["logMissingTypeBehaviourWarning"],
    )
    validate_config(config)
    logger.debug(f"Loaded naming configuration: {config}")
    return config


class CloudFormationLoader(yaml.SafeLoader):
    """YAML loader that understands CloudFormation short form tags."""

    pass


def _construct_intrinsic(loader: yaml.SafeLoader, tag_suffix: str, node: yaml.Node):
    if isinstance(node, yaml.ScalarNode):
        value = loader.construct_scalar(node)
    elif isinstance(node, yaml.SequenceNode):
        value = loader.construct_sequence(node, deep=True)
    else:
        value = loader.construct_mapping(node, deep=True)

    if tag_suffix == "Ref":
        return {"Ref": value}
    if tag_suffix == "GetAtt" and isinstance(value, str):
        value = value.split(".", 1)
    if tag_suffix == "Condition":
        return {"Condition": value}
    return {f"Fn::{tag_suffix}": value}


CloudFormationLoader.add_multi_constructor("!", _construct_intrinsic)


def load_service_file(path: str) -> Dict[str, Any]:
    """
    Read a service definition (serverless.yml style) from disk.

    Args:
        path: Path to the YAML service file

    Returns:
        Parsed service mapping

    Raises:
        InvalidConfigurationError: If the file is not valid YAML or not a mapping
    """
    try:
        with open(path, "r") as fh:
            service = yaml.load(fh, Loader=CloudFormationLoader)
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse service file {path}: {e}")
        raise InvalidConfigurationError(
            f"Could not parse service file: {e}", context={"path": path}
        ) from e

    if not isinstance(service, dict):
        raise InvalidConfigurationError(
            "service file must contain a mapping", context={"path": path}
        )
    return service


def load_template_file(path: str) -> Dict[str, Any]:
    """Read a CloudFormation JSON template."""
    with open(path, "r") as fh:
        return json.load(fh)


def write_template_file(path: str, template: Dict[str, Any]) -> None:
    """Write a CloudFormation JSON template with 2 space indentation."""
    with open(path, "w") as fh:
        json.dump(template, fh, indent=2)
