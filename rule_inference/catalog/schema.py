# ==============================================
# Schema Catalog (Data Classes)
# ==============================================
#
# PURPOSE:
#   The Model / Field catalog that an inference run walks over.
#   It is produced once per run from an already-parsed schema
#   (a Prisma DMMF-shaped JSON document) and never mutated.
#
# CLASSES:
# --------
# - Field (frozen dataclass)
#     name, db_name, type, kind, is_required, is_list, is_unique, is_id
#     category: FieldCategory  → resolved once, at construction
#
# - Model (frozen dataclass)
#     name, db_name, fields: tuple[Field, ...]
#
# FUNCTIONS:
# ----------
# - load_catalog(data) -> list[Model]
#     Accepts {"models": [...]} or a bare list of model dicts.
#
# - load_catalog_file(path) -> list[Model]
#
# ==============================================

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from .field_type import FieldCategory, FieldKind, FieldTypeResolver


@dataclass(frozen=True)
class Field:
    """
    A typed attribute of a Model.

    The category is resolved when the field is built so that an unknown
    type tag fails while loading the catalog, not halfway through a run.
    """

    name: str
    type: str  # Declared type tag, e.g. "String", "Int", "Role"
    kind: FieldKind = FieldKind.SCALAR
    is_required: bool = True
    is_list: bool = False
    db_name: Optional[str] = None  # Physical column name when mapped
    is_unique: bool = False
    is_id: bool = False
    category: FieldCategory = field(init=False, compare=False)

    def __post_init__(self):
        kind = FieldTypeResolver.parse_kind(self.kind)
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "category", FieldTypeResolver.resolve(self.type, kind))

    @property
    def column_name(self) -> str:
        return self.db_name or self.name

    @property
    def is_relation(self) -> bool:
        return self.kind is FieldKind.RELATION

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Field":
        """
        Build a Field from a DMMF field entry.

        Args:
            data: Dictionary with at least "name" and "type"

        Returns:
            A Field instance
        """
        return cls(
            name=data["name"],
            type=data["type"],
            kind=data.get("kind", "scalar"),
            is_required=data.get("isRequired", True),
            is_list=data.get("isList", False),
            db_name=data.get("dbName"),
            is_unique=data.get("isUnique", False),
            is_id=data.get("isId", False),
        )


@dataclass(frozen=True)
class Model:
    """A schema entity backed by one table or collection."""

    name: str
    fields: Tuple[Field, ...] = ()
    db_name: Optional[str] = None  # Physical table / collection name when mapped

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    @property
    def table_name(self) -> str:
        return self.db_name or self.name

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Model":
        return cls(
            name=data["name"],
            fields=tuple(Field.from_dict(f) for f in data.get("fields", [])),
            db_name=data.get("dbName"),
        )


def load_catalog(data: Union[Dict[str, Any], List[Dict[str, Any]]]) -> List[Model]:
    """
    Build the ordered model catalog from parsed schema JSON.

    Args:
        data: Either a DMMF datamodel ({"models": [...]}) or a list of models

    Returns:
        Models in document order
    """
    if isinstance(data, dict):
        if "models" not in data:
            raise ValueError("Schema document has no 'models' key")
        raw_models = data["models"]
    else:
        raw_models = data
    return [Model.from_dict(m) for m in raw_models]


def load_catalog_file(path: Union[str, Path]) -> List[Model]:
    with open(path, "r", encoding="utf-8") as f:
        return load_catalog(json.load(f))
