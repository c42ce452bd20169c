"""rfc6570: URI Template parsing and expansion.

Implements RFC 6570 URI Templates (levels 1-4): a template string is parsed
once into literal and expression components and then expanded against
variable bindings into a percent-encoded URI reference string.

Primary API:
    Template - Parsed, immutable template with expand()
    expand() - Expand a template string in one call (cached parse)
    validate() - Check whether a string is a valid template
    Text, ListValue, AssocList - Variable value shapes
    load_catalog_yaml() - Load named templates from YAML

Example:
    from rfc6570 import Template

    tpl = Template("/users/{id}/posts{?page,limit}")
    tpl.expand(id="123", page="1", limit="50")
    # "/users/123/posts?page=1&limit=50"
"""

from __future__ import annotations

from rfc6570 import logging
from rfc6570._version import __version__
from rfc6570.api import (
    as_template,
    clear_template_cache,
    expand,
    template_cache_info,
    validate,
    variables,
)
from rfc6570.catalog import TemplateCatalog, load_catalog_yaml
from rfc6570.components import Explode, Expression, Literal, Prefix, VarSpec
from rfc6570.encoding import percent_encode
from rfc6570.errors import (
    ExpansionFailed,
    InvalidExpression,
    InvalidModifier,
    InvalidTemplate,
    InvalidVariableName,
    TemplateError,
)
from rfc6570.operators import Operator
from rfc6570.parser import parse
from rfc6570.template import Template
from rfc6570.values import AssocList, ListValue, Text, VariableValue, to_value

__all__ = [
    # Version
    "__version__",
    # Template
    "Template",
    "parse",
    # Function API
    "as_template",
    "expand",
    "validate",
    "variables",
    "clear_template_cache",
    "template_cache_info",
    # Values
    "Text",
    "ListValue",
    "AssocList",
    "VariableValue",
    "to_value",
    # Structure
    "Operator",
    "Literal",
    "Expression",
    "VarSpec",
    "Prefix",
    "Explode",
    "percent_encode",
    # Catalog
    "TemplateCatalog",
    "load_catalog_yaml",
    # Errors
    "TemplateError",
    "InvalidTemplate",
    "InvalidExpression",
    "InvalidVariableName",
    "InvalidModifier",
    "ExpansionFailed",
    # Utilities
    "logging",
]
