class BlurHashError(ValueError):
    """Base class for every error raised while decoding or encoding a blurhash."""


class TooShortError(BlurHashError):
    """The hash is shorter than the fixed 6 character header."""


class LengthMismatchError(BlurHashError):
    """The hash length does not match the component count in its size flag."""


class InvalidCharacterError(BlurHashError):
    """A character outside the base 83 alphabet was found."""

    def __init__(self, character: str, message: str = None):
        self.character = character
        if message is None:
            message = f"BlurHash.decode: Invalid base83 character {character!r}"
        super().__init__(message)


class InvalidDimensionError(BlurHashError):
    """Output (or input image) width and height must be positive integers."""


class InvalidPunchError(BlurHashError):
    pass


class InvalidComponentsError(BlurHashError):
    pass
