from typing import Any

from tuilade.errors import SchemaError

JSONValue = (
    bool
    | str
    | None
    | int
    | float
    | dict[str, "JSONValue"]
    | list["JSONValue"]
)
JSONDict = dict[str, JSONValue]
JSONList = list[JSONValue]

i64_min = -(2**63)
i64_max = 2**63 - 1


def is_number(val: Any) -> bool:
    # bool is a subclass of int, but JSON true/false are not numbers
    return isinstance(val, (int, float)) and not isinstance(val, bool)


def try_number(val: JSONValue) -> int | float:
    if not is_number(val):
        raise SchemaError("Invalid JSON Value type (expected number)")
    return val  # pyright: ignore


def try_float(val: JSONValue) -> float:
    num = try_number(val)
    if isinstance(num, float):
        return num
    if num >= 0:
        return float(num)
    raise SchemaError("Invalid JSON number: Expected a float")


def try_int(val: JSONValue) -> int:
    num = try_number(val)
    if isinstance(num, int) and i64_min <= num <= i64_max:
        return num
    raise SchemaError("Invalid JSON number: Expected an integer")


def try_uint(val: JSONValue) -> int:
    num = try_number(val)
    if isinstance(num, int) and 0 <= num:
        return num
    raise SchemaError("Invalid JSON number: Expected an unsigned integer")


def try_string(val: JSONValue) -> str:
    if not isinstance(val, str):
        raise SchemaError("Invalid JSON Value type (expected string)")
    return val


def try_list(val: JSONValue) -> JSONList:
    if not isinstance(val, list):
        raise SchemaError("Invalid JSON Value type (expected array)")
    return val


def try_dict(val: JSONValue) -> JSONDict:
    if not isinstance(val, dict):
        raise SchemaError("Invalid JSON Value type (expected object)")
    return val


def stringify(val: JSONValue) -> str | None:
    """
    Textual form of a swallow criterion. Returns None for values that are
    neither strings nor numbers.
    """
    if isinstance(val, str):
        return val
    if is_number(val):
        return str(val)
    return None
