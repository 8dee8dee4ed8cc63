"""Tagged representation of Avro schema nodes.

A JSON-shaped Avro schema (as returned by ``json.load``) is turned into these
node classes once by :func:`parse_schema`. The translator then matches over the
node classes instead of probing dictionary shapes at every step.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union


@dataclass
class Primitive:
    """A primitive type name or a reference to a named type."""
    name: str


@dataclass
class Field:
    """A field of a record."""
    name: str
    type: 'SchemaNode'
    doc: Optional[str] = None
    has_default: bool = False
    default: Any = None


@dataclass
class RecordType:
    """A named record with ordered fields."""
    name: str
    fields: List[Field] = field(default_factory=list)
    doc: Optional[str] = None


@dataclass
class EnumType:
    """A named, closed set of symbols."""
    name: str
    symbols: List[str] = field(default_factory=list)
    doc: Optional[str] = None


@dataclass
class ArrayType:
    items: 'SchemaNode'


@dataclass
class MapType:
    values: 'SchemaNode'


@dataclass
class UnionType:
    members: List['SchemaNode'] = field(default_factory=list)


@dataclass
class LogicalDecimalType:
    """The ``decimal`` logical type (bytes or fixed with precision/scale)."""
    precision: Optional[int] = None
    scale: Optional[int] = None
    underlying: Any = 'bytes'


@dataclass
class UnknownType:
    """A schema shape the translator does not recognize."""
    raw: Any = None


SchemaNode = Union[Primitive, RecordType, EnumType, ArrayType, MapType,
                   UnionType, LogicalDecimalType, UnknownType]

_NODE_CLASSES = (Primitive, RecordType, EnumType, ArrayType, MapType,
                 UnionType, LogicalDecimalType, UnknownType)


def parse_field(avro_field: Dict[str, Any]) -> Field:
    """Build a Field from its JSON object. A present ``default`` key counts, even when null."""
    return Field(
        name=avro_field['name'],
        type=parse_schema(avro_field.get('type')),
        doc=avro_field.get('doc'),
        has_default='default' in avro_field,
        default=avro_field.get('default'),
    )


def parse_schema(avro_schema: Any) -> SchemaNode:
    """
    Convert a JSON-shaped Avro schema into schema nodes.

    Strings become primitives (or references), lists become unions, and
    objects are classified by their ``type`` and ``logicalType`` keys.
    Anything that cannot be classified becomes an UnknownType so that the
    translation can report it and carry on.

    Args:
        avro_schema: The parsed schema (str, list or dict) or an existing node.

    Returns:
        SchemaNode: The root node.
    """
    if isinstance(avro_schema, _NODE_CLASSES):
        return avro_schema
    if isinstance(avro_schema, str):
        return Primitive(avro_schema)
    if isinstance(avro_schema, list):
        return UnionType([parse_schema(t) for t in avro_schema])
    if not isinstance(avro_schema, dict):
        return UnknownType(avro_schema)

    avro_type = avro_schema.get('type')
    if avro_type == 'record' and avro_schema.get('name') and isinstance(avro_schema.get('fields'), list):
        return RecordType(
            name=avro_schema['name'],
            fields=[parse_field(f) for f in avro_schema['fields']],
            doc=avro_schema.get('doc'),
        )
    if avro_type == 'array' and 'items' in avro_schema:
        return ArrayType(parse_schema(avro_schema['items']))
    if avro_type == 'map' and 'values' in avro_schema:
        return MapType(parse_schema(avro_schema['values']))
    if avro_type == 'enum' and avro_schema.get('name') and isinstance(avro_schema.get('symbols'), list):
        return EnumType(
            name=avro_schema['name'],
            symbols=list(avro_schema['symbols']),
            doc=avro_schema.get('doc'),
        )
    if avro_schema.get('logicalType') == 'decimal':
        return LogicalDecimalType(
            precision=avro_schema.get('precision'),
            scale=avro_schema.get('scale'),
            underlying=avro_type,
        )
    return UnknownType(avro_schema)


def is_record_type(node: SchemaNode) -> bool:
    return isinstance(node, RecordType)


def is_enum_type(node: SchemaNode) -> bool:
    return isinstance(node, EnumType)


def is_array_type(node: SchemaNode) -> bool:
    return isinstance(node, ArrayType)


def is_map_type(node: SchemaNode) -> bool:
    return isinstance(node, MapType)


def is_union_type(node: SchemaNode) -> bool:
    return isinstance(node, UnionType)


def is_logical_decimal_type(node: SchemaNode) -> bool:
    return isinstance(node, LogicalDecimalType)


def is_optional(node: SchemaNode) -> bool:
    """True if the type is ``null`` or a union that contains ``null``."""
    if isinstance(node, Primitive):
        return node.name == 'null'
    if isinstance(node, UnionType):
        return any(isinstance(t, Primitive) and t.name == 'null' for t in node.members)
    return False
