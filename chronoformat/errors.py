"""Exceptions raised while describing, parsing and formatting date-time values."""

from typing import Optional


class Error(ValueError):
    """Top-level exception for every error raised by the library."""

    pass


class ComponentRange(Error):
    """A component of a date-time value was out of its valid range."""

    def __init__(self, name: str, is_conditional: bool = False):
        """Construct the exception with the offending component."""
        super().__init__(f"{name} was not in range")
        self.name = name
        self.is_conditional = is_conditional

    @classmethod
    def conditional(cls, name: str) -> "ComponentRange":
        """Create an error for a value only invalid given the other components."""
        return cls(name, is_conditional=True)


class InvalidFormatDescription(Error):
    """The format description text is malformed."""

    def __init__(self, message: str, index: int):
        """Construct the exception with the byte offset of the problem."""
        super().__init__(f"{message} at byte index {index}")
        self.index = index


class InvalidComponentName(InvalidFormatDescription):
    """A component name was not recognised."""

    def __init__(self, name: str, index: int):
        """Construct the exception with the unknown name."""
        super().__init__(f"invalid component name `{name}`", index)
        self.name = name


class InvalidModifier(InvalidFormatDescription):
    """A modifier was malformed, unknown, or had an unknown value."""

    def __init__(self, value: str, index: int):
        """Construct the exception with the offending text."""
        super().__init__(f"invalid modifier `{value}`", index)
        self.value = value


class MissingComponentName(InvalidFormatDescription):
    """A component was opened without a name."""

    def __init__(self, index: int):
        """Construct the exception."""
        super().__init__("missing component name", index)


class MissingRequiredModifier(InvalidFormatDescription):
    """A component was given without one of its required modifiers."""

    def __init__(self, name: str, index: int):
        """Construct the exception with the name of the missing modifier."""
        super().__init__(f"missing required modifier `{name}`", index)
        self.name = name


class UnclosedOpeningBracket(InvalidFormatDescription):
    """A `[` was never closed."""

    def __init__(self, index: int):
        """Construct the exception."""
        super().__init__("unclosed opening bracket", index)


class NotSupported(InvalidFormatDescription):
    """The description uses something that is not available in this context."""

    def __init__(self, what: str, context: str, index: int):
        """Construct the exception with what is unsupported and where."""
        if context:
            message = f"{what} is not supported in {context}"
        else:
            message = f"{what} is not supported"
        super().__init__(message, index)
        self.what = what
        self.context = context


class Expected(InvalidFormatDescription):
    """Something was expected but not found."""

    def __init__(self, what: str, index: int):
        """Construct the exception with what was expected."""
        super().__init__(f"expected {what}", index)
        self.what = what


class ParseError(Error):
    """Text could not be parsed into a date-time value."""

    pass


class ParseFromDescription(ParseError):
    """The input did not match the format description."""

    pass


class InvalidLiteral(ParseFromDescription):
    """A literal in the description was not present in the input."""

    def __init__(self, message: str = "a character literal was not valid"):
        """Construct the exception."""
        super().__init__(message)


class InvalidComponent(ParseFromDescription):
    """A component could not be parsed from the input."""

    def __init__(self, name: str):
        """Construct the exception with the failing component."""
        super().__init__(f"the {name} component could not be parsed")
        self.name = name


class UnexpectedTrailingCharacters(ParseFromDescription):
    """Input remained after the whole description was parsed."""

    def __init__(self, remaining: Optional[bytes] = None):
        """Construct the exception with the unparsed input, if known."""
        super().__init__("unexpected trailing characters; the end of input was expected")
        self.remaining = remaining


class TryFromParsed(ParseError):
    """The parsed fields could not be converted into the requested type."""

    pass


class InsufficientInformation(TryFromParsed):
    """Not enough fields were parsed to build the requested type."""

    def __init__(self):
        """Construct the exception."""
        super().__init__(
            "the parsed value did not contain enough information to construct the type"
        )


class ParsedComponentRange(TryFromParsed, ComponentRange):
    """A parsed component was outside the range of the requested type."""

    pass


class FormatError(Error):
    """A value could not be formatted."""

    pass


class InsufficientTypeInformation(FormatError):
    """The value lacks a component that the description requires."""

    def __init__(self):
        """Construct the exception."""
        super().__init__(
            "the type being formatted does not contain sufficient information to format "
            "a component"
        )


class InvalidFormatComponent(FormatError):
    """A component of the value cannot be represented in the requested format."""

    def __init__(self, name: str):
        """Construct the exception with the offending component."""
        super().__init__(f"the {name} component cannot be formatted into the requested format")
        self.name = name


class FormatComponentRange(FormatError, ComponentRange):
    """A component was outside the range the description can express."""

    pass


class WriteError(FormatError):
    """The output writer failed; the original error is the cause."""

    pass
