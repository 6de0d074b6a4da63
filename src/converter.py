
from logging import getLogger
from typing import BinaryIO
from yaml import SafeDumper, YAMLError, dump
from errors import DecodeError, EncodeError
from values import Value, ValueTag, decode_document

_logger = getLogger(f'app.{__name__}')

class ValueDumper(SafeDumper):
    def ignore_aliases(self, data):
        # A decoded tree never shares nodes, anchors would only be noise.
        return True

def _represent_null(dumper: ValueDumper, value: Value):
    return dumper.represent_none(None)

def _represent_bool(dumper: ValueDumper, value: Value):
    return dumper.represent_bool(value.value)

def _represent_number(dumper: ValueDumper, value: Value):
    if isinstance(value.value, float):
        return dumper.represent_float(value.value)
    return dumper.represent_int(value.value)

def _represent_string(dumper: ValueDumper, value: Value):
    return dumper.represent_str(value.value)

def _represent_sequence(dumper: ValueDumper, value: Value):
    return dumper.represent_sequence('tag:yaml.org,2002:seq', value.items)

def _represent_mapping(dumper: ValueDumper, value: Value):
    return dumper.represent_mapping('tag:yaml.org,2002:map', value.entries)

_REPRESENTERS = {
    ValueTag.NULL: _represent_null,
    ValueTag.BOOL: _represent_bool,
    ValueTag.NUMBER: _represent_number,
    ValueTag.STRING: _represent_string,
    ValueTag.SEQUENCE: _represent_sequence,
    ValueTag.MAPPING: _represent_mapping,
}

def represent_value(dumper: ValueDumper, value: Value):
    return _REPRESENTERS[value.tag](dumper, value)

ValueDumper.add_multi_representer(Value, represent_value)

def decode(reader: BinaryIO) -> Value:
    raw = reader.read()
    _logger.debug(f'read {len(raw)} bytes')

    try:
        # utf-8-sig drops a leading BOM if there is one.
        text = raw.decode('utf-8-sig')
        value = decode_document(text)
    except (ValueError, RecursionError) as error:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors.
        raise DecodeError('failed to decode input JSON', error) from error

    _logger.debug(f'decoded root: {value.tag.name}')
    return value

def encode(value: Value, writer: BinaryIO):
    try:
        dump(
            value,
            writer,
            Dumper=ValueDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            encoding='utf-8',
        )
    except (YAMLError, RecursionError) as error:
        raise EncodeError('failed to encode YAML output', error) from error
    finally:
        writer.flush()

def convert(reader: BinaryIO, writer: BinaryIO):
    """Decode one JSON document from *reader* and write it as YAML to *writer*.

    Both streams stay open. *writer* is flushed before returning, also when
    encoding fails. Raises DecodeError or EncodeError.
    """
    value = decode(reader)
    encode(value, writer)
