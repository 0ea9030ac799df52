"""Classification of string tables into accessor kinds.

Submodules:
    classifier   - Simple/parametrized/plural partition and placeholder extraction
    plural_rules - CLDR plural coverage hints (Babel)

Python 3.13+.
"""

from .classifier import (
    ClassifiedTable,
    ParametrizedEntry,
    PluralGroup,
    SimpleEntry,
    category_from_suffix,
    category_from_value,
    classify_table,
    extract_parameters,
    find_plural_groups,
    plural_parameter,
    value_for_category,
)
from .plural_rules import (
    cldr_plural_categories,
    missing_cldr_categories,
    plural_coverage_diagnostic,
)

__all__ = [
    "ClassifiedTable",
    "ParametrizedEntry",
    "PluralGroup",
    "SimpleEntry",
    "category_from_suffix",
    "category_from_value",
    "classify_table",
    "cldr_plural_categories",
    "extract_parameters",
    "find_plural_groups",
    "missing_cldr_categories",
    "plural_coverage_diagnostic",
    "plural_parameter",
    "value_for_category",
]
