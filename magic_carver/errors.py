"""Exception types raised while loading signatures and extracting files."""


class CarveError(Exception):
    """Base class for carving errors."""

    pass


class FormatError(CarveError):
    """A definitions line is not in ``FILE_TYPE:HEXBYTES`` form."""

    def __init__(self, line: str, reason: str = "invalid format in file signatures"):
        self.line = line
        super().__init__(f"{reason}: {line}")


class DecodeError(CarveError):
    """Invalid hex in a definitions line, or an undecodable image payload."""

    pass
