"""Validation rule inference.

Usage::

    from crudgen.inference import build_rule_table, classify

    table = build_rule_table(descriptor, inspector)
    print(table.rules())
"""

from crudgen.inference.builder import RuleSetBuilder, build_rule_table
from crudgen.inference.classifier import classify

__all__ = [
    "RuleSetBuilder",
    "build_rule_table",
    "classify",
]
