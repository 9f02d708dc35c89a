class TuiladeError(Exception):
    """Base class for every fatal condition raised while building a diagram"""


class InputError(TuiladeError):
    pass


class DocumentSyntaxError(TuiladeError):
    pass


class SchemaError(TuiladeError, ValueError):
    """
    Raised by the decoder. `path` holds the child indices leading from the
    document root to the container that failed, empty for the root itself.
    """

    def __init__(self, message: str, path: tuple[int, ...] = ()):
        super().__init__(message)
        self.message = message
        self.path = path

    def nested(self, index: int) -> "SchemaError":
        return SchemaError(self.message, (index, *self.path))

    def location(self) -> str:
        return "root" + "".join(f".nodes[{i}]" for i in self.path)


class RenderError(TuiladeError):
    pass


class SettingsError(TuiladeError, ValueError):
    pass
