"""Field classifier: infer a validation rule from a column and its name.

Decision order for a single field:

1. Enumeration metadata present -> ``required|in:<values>``.  Column type and
   naming are ignored.
2. Name ends with ``_id`` -> ``required|integer`` (foreign key convention).
   Column type is ignored.
3. Otherwise dispatch on the column type (see ``_TYPE_RULES``); unknown
   types fall back to ``string|max:255``.

Every field is ``required``; nullability is not inspected.
"""

from __future__ import annotations

from typing import Optional, Union

from crudgen.schema.models import Classification, ColumnType, EnumMeta, RuleDescriptor


REQUIRED = "required"
DEFAULT_STRING_RULES: tuple[str, ...] = ("string", "max:255")

_TYPE_RULES: dict[ColumnType, tuple[str, ...]] = {
    ColumnType.INTEGER: ("integer",),
    ColumnType.UNSIGNED_BIG_INTEGER: ("integer", "min:0"),
    ColumnType.STRING: ("string", "max:255"),
    ColumnType.TEXT: ("string",),
    ColumnType.DECIMAL: ("numeric",),
    ColumnType.BOOLEAN: ("boolean",),
    ColumnType.DATETIME: ("date",),
}


def classify(
    field_name: str,
    column_type: Union[ColumnType, str, None],
    enum_meta: Optional[EnumMeta] = None,
) -> Classification:
    """Classify one field into its validation rule.

    Args:
        field_name: The writable field's name.
        column_type: A ``ColumnType`` or a raw storage type name such as
            ``"varchar"`` or ``"unsignedBigInteger"``.
        enum_meta: Enumeration metadata declared for the field, if any.

    Returns:
        A ``Classification`` holding the rule tokens and, when the
        enumeration path was taken, the field's enum metadata.
    """
    tokens = [REQUIRED]

    if enum_meta is not None:
        tokens.append("in:" + ",".join(enum_meta.values))
        return Classification(
            rule=RuleDescriptor(field=field_name, tokens=tokens),
            enum=enum_meta,
        )

    if field_name.endswith("_id"):
        tokens.append("integer")
    else:
        ctype = ColumnType.parse(column_type)
        tokens.extend(_TYPE_RULES.get(ctype, DEFAULT_STRING_RULES))
        if ctype is ColumnType.STRING and field_name.endswith("email"):
            tokens.append("email")

    return Classification(rule=RuleDescriptor(field=field_name, tokens=tokens))
