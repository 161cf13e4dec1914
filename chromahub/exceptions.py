"""Exception and warning types raised by chromahub."""


class CSSParseError(ValueError):
    """Base class for every failure to read a CSS color or number."""


class InvalidNumericCharacters(CSSParseError):
    """A numeric token contains a character outside ``0-9 . + - %``."""


class InvalidNumericSyntax(CSSParseError):
    """A numeric token uses legal characters in an illegal shape."""


class InvalidColorSyntax(CSSParseError):
    """A color function has the wrong prefix, brackets, field count or field kind."""


class MatrixDecompositionError(RuntimeError):
    """A constant transform matrix could not be factorized."""


class GamutWarning(UserWarning):
    """A color channel outside the displayable range was clipped."""
