"""
fuzzystrings.errors — Exception hierarchy.

Every error raised by the library derives from FuzzyStringsError.  Concrete
errors also subclass the matching builtin (ValueError), so callers that only
know about builtins still catch them.
"""

from typing import Optional


class FuzzyStringsError(Exception):
    """
    Base exception for all fuzzystrings errors.

    Carries a message plus optional suggestion and context, rendered
    together by formatted().
    """

    def __init__(
        self,
        message: str,
        suggestion: Optional[str] = None,
        context: Optional[str] = None,
    ):
        self.message = message
        self.suggestion = suggestion
        self.context = context
        super().__init__(self.formatted())

    def formatted(self) -> str:
        """Full message with context and suggestion lines."""
        msg = self.message

        if self.context:
            msg += f"\n  Context: {self.context}"

        if self.suggestion:
            msg += f"\n  Suggestion: {self.suggestion}"

        return msg

    def __str__(self) -> str:
        return self.formatted()


class InvalidInputError(FuzzyStringsError, ValueError):
    """
    An input string contains the reserved null character (code point 0).

    Raised before any alignment work; there is no partial result.
    """

    def __init__(self, argument: str, position: int):
        super().__init__(
            "strings cannot contain the reserved null character",
            suggestion="Strip NUL characters from the input before comparing",
            context=f"{argument} has NUL at index {position}",
        )
        self.argument = argument
        self.position = position


class OptionsError(FuzzyStringsError, ValueError):
    """A match option has an invalid value or an unknown name."""

    def __init__(self, name: str, value: object, expected: str):
        super().__init__(
            f"Invalid match option {name}={value!r}",
            suggestion=f"Expected: {expected}",
        )
        self.name = name
        self.value = value
        self.expected = expected
