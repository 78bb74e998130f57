from enum import Enum


class FieldKind(Enum):
    SCALAR = "scalar"
    ENUM = "enum"
    RELATION = "relation"
    UNSUPPORTED = "unsupported"


class FieldCategory(Enum):
    STRING = "string"
    NUMERIC = "numeric"
    ENUM = "enum"
    BOOLEAN = "boolean"
    DATETIME = "datetime"
    JSON = "json"
    BYTES = "bytes"
    UNSUPPORTED = "unsupported"
    RELATION = "relation"


class UnknownFieldTypeError(ValueError):
    pass


class FieldTypeResolver:
    # Prisma DMMF spells relations "object"
    KIND_ALIASES = {
        "scalar": FieldKind.SCALAR,
        "enum": FieldKind.ENUM,
        "relation": FieldKind.RELATION,
        "object": FieldKind.RELATION,
        "unsupported": FieldKind.UNSUPPORTED,
    }

    SCALAR_CATEGORIES = {
        "String": FieldCategory.STRING,
        "Int": FieldCategory.NUMERIC,
        "Float": FieldCategory.NUMERIC,
        "Decimal": FieldCategory.NUMERIC,
        "BigInt": FieldCategory.NUMERIC,
        "Boolean": FieldCategory.BOOLEAN,
        "DateTime": FieldCategory.DATETIME,
        "Json": FieldCategory.JSON,
        "Bytes": FieldCategory.BYTES,
        "Unsupported": FieldCategory.UNSUPPORTED,
    }

    ENUM_PREFIX = "Enum_"

    @classmethod
    def parse_kind(cls, raw_kind) -> FieldKind:
        if isinstance(raw_kind, FieldKind):
            return raw_kind
        try:
            return cls.KIND_ALIASES[str(raw_kind).lower()]
        except KeyError:
            raise UnknownFieldTypeError(f"Unknown field kind '{raw_kind}'") from None

    @classmethod
    def resolve(cls, type_tag: str, kind: FieldKind) -> FieldCategory:
        if kind is FieldKind.RELATION:
            return FieldCategory.RELATION

        # Prisma Unsupported("...") keeps the native column type as its tag
        if kind is FieldKind.UNSUPPORTED:
            return FieldCategory.UNSUPPORTED

        if kind is FieldKind.ENUM or type_tag.startswith(cls.ENUM_PREFIX):
            return FieldCategory.ENUM

        category = cls.SCALAR_CATEGORIES.get(type_tag)
        if category is None:
            raise UnknownFieldTypeError(
                f"Scalar type '{type_tag}' has no field category"
            )
        return category
