from dataclasses import dataclass, field
from enum import Enum, auto
from json import JSONDecoder
from typing import ClassVar, Union

# JSON insignificant whitespace. str.lstrip() would also eat NBSP and friends.
JSON_WHITESPACE = ' \t\n\r'

class ValueTag(Enum):
    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    SEQUENCE = auto()
    MAPPING = auto()

class Value():
    tag: ClassVar[ValueTag]

@dataclass(frozen=True)
class VNull(Value):
    tag: ClassVar[ValueTag] = ValueTag.NULL

@dataclass(frozen=True)
class VBool(Value):
    tag: ClassVar[ValueTag] = ValueTag.BOOL
    value: bool

@dataclass(frozen=True)
class VNumber(Value):
    tag: ClassVar[ValueTag] = ValueTag.NUMBER
    value: Union[int, float]

@dataclass(frozen=True)
class VString(Value):
    tag: ClassVar[ValueTag] = ValueTag.STRING
    value: str

@dataclass(frozen=True)
class VSequence(Value):
    tag: ClassVar[ValueTag] = ValueTag.SEQUENCE
    items: list[Value] = field(default_factory=list)

@dataclass(frozen=True)
class VMapping(Value):
    tag: ClassVar[ValueTag] = ValueTag.MAPPING
    entries: list[tuple[str, Value]] = field(default_factory=list)

def _reject_constant(name: str):
    raise ValueError(f'invalid JSON constant: {name}')

def from_python(obj) -> Value:
    # Only ever fed with what the json module produces.
    if obj is None:
        return VNull()
    if isinstance(obj, bool):
        return VBool(obj)
    if isinstance(obj, (int, float)):
        return VNumber(obj)
    if isinstance(obj, str):
        return VString(obj)
    if isinstance(obj, list):
        return VSequence([from_python(item) for item in obj])
    if isinstance(obj, dict):
        return VMapping([(key, from_python(item)) for key, item in obj.items()])

    raise TypeError(f'Unsupported type for value tree: {type(obj).__name__}')

def decode_document(text: str) -> Value:
    """Decode the first JSON value found in *text*.

    Leading whitespace is skipped. Anything after the first complete value
    is left unread, the same way a streaming decoder stops after one value.
    Raises ``json.JSONDecodeError`` (or ``ValueError`` for ``NaN`` and
    ``Infinity``) on bad input and ``RecursionError`` on very deep nesting.
    """
    decoder = JSONDecoder(parse_constant=_reject_constant)
    start = len(text) - len(text.lstrip(JSON_WHITESPACE))
    obj, _ = decoder.raw_decode(text, start)
    return from_python(obj)
