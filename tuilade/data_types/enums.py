from enum import Enum

from tuilade.errors import SchemaError
from tuilade.utilities import JSONValue, try_string


class BorderType(Enum):
    NORMAL = "normal"
    PIXEL = "pixel"
    NONE = "none"

    @classmethod
    def from_json(cls, val: JSONValue) -> "BorderType":
        if not isinstance(val, str):
            raise SchemaError("Incompatible JSON value type")
        try:
            return cls(val)
        except ValueError:
            raise SchemaError(f'Unknown border type "{val}"') from None

    @property
    def unit(self) -> str:
        return "" if self is BorderType.NONE else "px"

    def __str__(self) -> str:
        return self.value


class FloatMode(Enum):
    AUTO_ON = "auto_on"
    USER_ON = "user_on"
    AUTO_OFF = "auto_off"
    USER_OFF = "user_off"

    @classmethod
    def from_json(cls, val: JSONValue) -> "FloatMode":
        if not isinstance(val, str):
            raise SchemaError("Incompatible JSON value type")
        try:
            return cls(val)
        except ValueError:
            raise SchemaError(f'Unknown floating type "{val}"') from None

    def __str__(self) -> str:
        # "auto_off" -> "Auto Off"
        return self.value.replace("_", " ").title()


class Layout(Enum):
    TABBED = "tabbed"
    SPLITV = "splitv"
    SPLITH = "splith"
    STACKED = "stacked"
    OUTPUT = "output"
    DOCKAREA = "dockarea"

    @classmethod
    def from_json(cls, val: JSONValue) -> "Layout":
        st = try_string(val)
        try:
            return cls(st)
        except ValueError:
            raise SchemaError(f'Unknown layout "{st}"') from None

    def __str__(self) -> str:
        return self.value


class TreeType(Enum):
    ROOT = "root"
    OUTPUT = "output"
    WORKSPACE = "workspace"
    DOCKAREA = "dockarea"
    CON = "con"
    FLOATING_CON = "floating_con"

    @classmethod
    def parse(cls, val: str) -> "TreeType":
        try:
            return cls(val)
        except ValueError:
            raise SchemaError(f'Unknown tree type "{val}"') from None

    @classmethod
    def from_json(cls, val: JSONValue) -> "TreeType":
        return cls.parse(try_string(val))

    def __str__(self) -> str:
        return self.value
