# ==============================================
# SCHEMA CATALOG
# ==============================================
#
# The Model / Field types an inference run iterates over, and the
# closed classification of declared field types.
#
# Modules:
# --------
# - schema.py      → Model, Field, load_catalog()
# - field_type.py  → FieldKind, FieldCategory, FieldTypeResolver
#
# ==============================================

from .field_type import FieldCategory, FieldKind, FieldTypeResolver, UnknownFieldTypeError
from .schema import Field, Model, load_catalog, load_catalog_file

__all__ = [
    "Field",
    "FieldCategory",
    "FieldKind",
    "FieldTypeResolver",
    "Model",
    "UnknownFieldTypeError",
    "load_catalog",
    "load_catalog_file",
]
