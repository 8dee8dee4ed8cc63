# pylint: disable=line-too-long

""" Convert Avro schema to TypeScript interface and enum declarations """

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from avrotsd.common import create_documentation, get_files_from_input, load_schema_text, process_template, strip_namespace
from avrotsd.model import (ArrayType, EnumType, Field, LogicalDecimalType, MapType, Primitive, RecordType,
                           SchemaNode, UnionType, UnknownType, is_optional, parse_schema)

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = 'UNKNOWN'
UNION_SEPARATOR = ' | '


def convert_primitive(avro_type: str, has_default_value: bool, interfaces: Optional[Dict[str, str]] = None) -> str:
    """
    Convert a primitive Avro type name into a TypeScript type.

    Names that are not primitives are references to named types. They are
    stripped of their namespace and resolved through the interfaces table.
    A ``null`` of a field that has a default is plain ``null``; without a
    default the value may also be absent, so it becomes ``null | undefined``.
    """
    if avro_type in ('long', 'int', 'double', 'float'):
        return 'number'
    if avro_type == 'bytes':
        return 'Buffer'
    if avro_type == 'null':
        return 'null' if has_default_value else 'null | undefined'
    if avro_type == 'boolean':
        return 'boolean'
    clean_name = strip_namespace(avro_type)
    return (interfaces or {}).get(clean_name, clean_name)


class TranslationContext:
    """ The state of one conversion: the interfaces table, the output buffer and the diagnostics """

    def __init__(self) -> None:
        self.interfaces: Dict[str, str] = {}
        self.buffer: List[str] = []
        self.diagnostics: List[str] = []

    def resolve(self, name: str) -> str:
        """ Map an original type name to its generated name, if there is one """
        return self.interfaces.get(name, name)

    def register(self, original_name: str, generated_name: str) -> None:
        self.interfaces[original_name] = generated_name

    def text(self) -> str:
        return '\n'.join(self.buffer)


class AvroToTypeScript:
    """ Converts an Avro record or enum schema into TypeScript declarations """

    def __init__(self, doc_width: int = 80, indent: str = '\t') -> None:
        self.doc_width = doc_width
        self.indent = indent

    def translate(self, avro_schema: Any) -> str:
        """ Convert the schema and return the declaration text """
        return self.translate_with_diagnostics(avro_schema)[0]

    def translate_with_diagnostics(self, avro_schema: Any) -> Tuple[str, List[str]]:
        """
        Convert the schema and return the declaration text together with the
        diagnostics collected for type shapes that could not be converted.

        Every call uses a fresh context, so names registered while converting
        one schema never leak into another.
        """
        schema = parse_schema(avro_schema)
        context = TranslationContext()
        if isinstance(schema, EnumType):
            self.convert_enum(schema, context)
        elif isinstance(schema, RecordType):
            self.convert_record(schema, context)
        else:
            raise ValueError(f"The top-level schema must be a record or an enum, got {type(schema).__name__}")
        return context.text(), context.diagnostics

    def document(self, doc: Optional[str], indent: str = '') -> str:
        return create_documentation(doc, self.doc_width, indent)

    def convert_record(self, record_type: RecordType, context: TranslationContext, parent_record_type: Optional[RecordType] = None) -> str:
        """ Convert a record. Return the interface name, but add the definition to the buffer """
        doc = self.document(record_type.doc)
        if parent_record_type:
            clean_name = f'I{strip_namespace(parent_record_type.name)}{strip_namespace(record_type.name)}'
        else:
            clean_name = f'I{strip_namespace(record_type.name)}'
        field_lines = [self.convert_field(field, context, record_type) for field in record_type.fields]
        interface_def = process_template(
            "avrotots/interface.ts.jinja",
            doc=doc,
            name=clean_name,
            body='\n'.join(field_lines),
        )
        context.buffer.append(interface_def + '\n')
        context.register(record_type.name, clean_name)
        return clean_name

    def convert_enum(self, enum_type: EnumType, context: TranslationContext) -> str:
        """ Convert an enum. Return the enum name, but add the definition to the buffer """
        enum_name = strip_namespace(enum_type.name)
        enum_def = process_template(
            "avrotots/enum.ts.jinja",
            doc=self.document(enum_type.doc),
            name=enum_type.name,
            body=',\n'.join(f"{self.indent}{symbol} = '{symbol}'" for symbol in enum_type.symbols),
        )
        context.buffer.append(enum_def + '\n')
        context.register(enum_type.name, enum_name)
        return enum_name

    def convert_type(self, avro_type: SchemaNode, has_default_value: bool, context: TranslationContext, parent_record_type: Optional[RecordType] = None) -> str:
        """ Convert a schema node into a TypeScript type expression """
        if isinstance(avro_type, Primitive):
            return convert_primitive(avro_type.name, has_default_value, context.interfaces)
        if isinstance(avro_type, UnionType):
            names: List[str] = []
            for member in avro_type.members:
                name = context.resolve(strip_namespace(self.convert_type(member, has_default_value, context)))
                if name not in names:
                    names.append(name)
            return UNION_SEPARATOR.join(names)
        if isinstance(avro_type, RecordType):
            return self.convert_record(avro_type, context, parent_record_type)
        if isinstance(avro_type, ArrayType):
            name = context.resolve(strip_namespace(self.convert_type(avro_type.items, has_default_value, context)))
            return f'Array<{name}>' if '|' in name else f'{name}[]'
        if isinstance(avro_type, MapType):
            return f'{{ [key: string]: {self.convert_type(avro_type.values, has_default_value, context)} }}'
        if isinstance(avro_type, EnumType):
            return self.convert_enum(avro_type, context)
        if isinstance(avro_type, LogicalDecimalType):
            return 'number'
        raw = avro_type.raw if isinstance(avro_type, UnknownType) else avro_type
        logger.warning("Cannot work out type %r", raw)
        context.diagnostics.append(f"Cannot work out type {raw!r}")
        return UNKNOWN_TYPE

    def convert_field(self, field: Field, context: TranslationContext, parent_record_type: Optional[RecordType] = None) -> str:
        """ Convert a field into one interface member line, preceded by its documentation """
        doc = self.document(field.doc, self.indent)
        field_type = self.convert_type(field.type, field.has_default, context, parent_record_type)
        optional = '?' if is_optional(field.type) and not field.has_default else ''
        return f'{doc}{self.indent}{field.name}{optional}: {context.resolve(field_type)};'


def avro_to_typescript(avro_schema: Any) -> str:
    """ Convert a parsed Avro record or enum schema into TypeScript declaration text """
    return AvroToTypeScript().translate(avro_schema)


def convert_avro_schema_to_typescript(avro_schema: Any, ts_file_path: str, indent: str = '  ') -> str:
    """ Convert an in-memory Avro schema and write the declarations to a file """
    converter = AvroToTypeScript(indent=indent)
    result = converter.translate(avro_schema)
    out_dir = os.path.dirname(os.path.abspath(ts_file_path))
    if not os.path.exists(out_dir):
        os.makedirs(out_dir, exist_ok=True)
    with open(ts_file_path, 'w', encoding='utf-8') as file:
        file.write(result)
    return result


def convert_avro_to_typescript(avro_schema_path: str, ts_dir_path: Optional[str] = None, verbose: bool = False) -> List[str]:
    """
    Convert an Avro schema file, or every *.avsc file in a folder, into .ts files.

    Args:
        avro_schema_path (str): Schema file or folder.
        ts_dir_path (str): Output folder. Defaults to the folder of each input file.
        verbose (bool): Print the generated declarations.

    Returns:
        List[str]: The paths of the written files.
    """
    written = []
    for input_file in get_files_from_input(avro_schema_path):
        with open(input_file, 'r', encoding='utf-8') as file:
            schema = load_schema_text(file.read())
        out_dir = ts_dir_path or os.path.dirname(os.path.abspath(input_file))
        out_file = os.path.join(out_dir, f"{os.path.splitext(os.path.basename(input_file))[0]}.ts")
        result = convert_avro_schema_to_typescript(schema, out_file)
        logger.info("Converted %s to %s", input_file, out_file)
        if verbose:
            print(f"{result} is written to {os.path.basename(out_file)} in {out_dir}.")
        written.append(out_file)
    return written
