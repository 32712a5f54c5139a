"""Name converters referenced by naming rule tables.

Each converter takes the value being built and the active ``NamingConfig`` and
returns the converted value. Rule tables refer to converters by the names
registered in ``CONVERTERS`` so the tables stay plain data.
"""

from typing import Any, Callable, Dict

from autonames.utils.string_utils import kebab_case, replace_chars, strip_suffix

Converter = Callable[[str, Any], str]

LAMBDA_FUNCTION_SUFFIX = "LambdaFunction"


def identity(value: str, config: Any = None) -> str:
    return value


def kebab(value: str, config: Any = None) -> str:
    return kebab_case(value)


def strip_lambda_function_suffix(value: str, config: Any = None) -> str:
    """Kebab case a function logical id, dropping "LambdaFunction" when configured."""
    if config is not None and config.remove_lambda_function_suffix:
        value = strip_suffix(value, LAMBDA_FUNCTION_SUFFIX)
    return kebab_case(value)


def hyphens_to_underscores(value: str, config: Any = None) -> str:
    # AppSync names only allow [_A-Za-z][_0-9A-Za-z]*
    return value.replace("-", "_")


def bucket_safe(value: str, config: Any = None) -> str:
    return replace_chars(value, "_.", "-")


CONVERTERS: Dict[str, Converter] = {
    "identity": identity,
    "kebab_case": kebab,
    "strip_lambda_function_suffix": strip_lambda_function_suffix,
    "hyphens_to_underscores": hyphens_to_underscores,
    "bucket_safe": bucket_safe,
}
