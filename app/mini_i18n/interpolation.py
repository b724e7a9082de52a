"""Placeholder interpolation for translation templates.

Templates reference variables with ``{{ name }}`` tokens. Whitespace inside
the braces is ignored and names consist of letters, digits and underscores.
"""

import math
import re
from decimal import Decimal
from typing import Optional

from mini_i18n.logging import get_module_logger
from mini_i18n.models import VariableValue, Variables

logger = get_module_logger()

PLACEHOLDER_PATTERN = re.compile(r"\{\{\s*([A-Za-z0-9_]+)\s*\}\}")


def _float_to_string(value: float) -> str:
    """Render a float with the shortest round-trip digits, JavaScript style.

    Plain notation covers magnitudes from 1e-6 up to but excluding 1e21;
    anything else uses the exponent form ``<digits>e+N`` / ``<digits>e-N``.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # value == 0.<digits> * 10**n
    n = exponent + k

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = f"{digits[:n]}.{digits[n:]}"
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
        text = f"{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"

    return f"-{text}" if sign else text


def to_display_string(value: VariableValue) -> str:
    """Convert a variable value to the text inserted into a template.

    Booleans render as ``true``/``false``. Floats render like JavaScript
    numbers: ``5.0`` as ``5``, ``1e21`` as ``1e+21``, ``1e-7`` as ``1e-7``,
    and infinities as ``Infinity``/``-Infinity``. Integers render in full.

    Args:
        value: Variable value (str, int, float or bool).

    Returns:
        Display string for the value.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _float_to_string(value)
    return str(value)


def interpolate(template: str, variables: Optional[Variables] = None) -> str:
    """Substitute ``{{ name }}`` placeholders in a template.

    A placeholder whose variable is missing or None is left in the output
    exactly as written. Substitution is a single pass: inserted values are
    never scanned for further placeholders.

    Args:
        template: Template string with ``{{ name }}`` placeholders.
        variables: Mapping of variable name to value. If None, the template
            is returned unchanged.

    Returns:
        Template with available variables substituted.

    Example:
        >>> interpolate("Hello, {{ name }}!", {"name": "Ana"})
        'Hello, Ana!'
        >>> interpolate("{{x}}", {})
        '{{x}}'
    """
    if variables is None:
        return template

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = variables.get(name)
        if value is None:
            logger.debug(
                "missing_interpolation_variable",
                variable=name,
                available_variables=list(variables.keys()),
            )
            return match.group(0)
        return to_display_string(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)
