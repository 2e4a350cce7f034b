from typing import Any, ClassVar, Union

from pydantic.dataclasses import dataclass

WIRE_SEPARATOR = "|"


# Values containing the separator cannot be told apart on the wire; they are
# written as-is and will not survive parse_wire.


@dataclass(frozen=True)
class FieldSet:
    hash_key: str
    field: str
    value: Any

    name: ClassVar[str] = "hset"

    def args(self) -> tuple:
        return (self.hash_key, self.field, self.value)

    def to_wire(self) -> str:
        return _join(self.name, *self.args())

    def __str__(self):
        return self.to_wire()


@dataclass(frozen=True)
class SetAdd:
    set_key: str
    member: Any

    name: ClassVar[str] = "sadd"

    def args(self) -> tuple:
        return (self.set_key, self.member)

    def to_wire(self) -> str:
        return _join(self.name, *self.args())

    def __str__(self):
        return self.to_wire()


@dataclass(frozen=True)
class SortedSetAdd:
    set_key: str
    score: Any  # passed through untouched, the store interprets it
    member: Any

    name: ClassVar[str] = "zadd"

    def args(self) -> tuple:
        return (self.set_key, self.score, self.member)

    def to_wire(self) -> str:
        return _join(self.name, *self.args())

    def __str__(self):
        return self.to_wire()


Command = Union[FieldSet, SetAdd, SortedSetAdd]

COMMAND_TYPES: dict[str, type] = {
    FieldSet.name: FieldSet,
    SetAdd.name: SetAdd,
    SortedSetAdd.name: SortedSetAdd,
}


def parse_wire(text: str) -> Command:
    """
    Rebuild a command from its pipe-delimited wire form.
    Every argument comes back as a string.
    """
    name, *args = text.split(WIRE_SEPARATOR)
    command_type = COMMAND_TYPES.get(name)
    if command_type is None:
        raise ValueError(f"Unknown command '{name}' in {text!r}")

    try:
        return command_type(*args)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Wrong number of arguments for '{name}' in {text!r}") from exc


def _join(*parts) -> str:
    return WIRE_SEPARATOR.join(str(part) for part in parts)
