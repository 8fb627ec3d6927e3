"""Error kinds raised around contact extraction."""


class ContactParserError(ValueError):
    """Base class for errors raised by the card parsing pipeline."""


class MissingInputError(ContactParserError):
    """Required input (image, text or name) was not provided."""


class UpstreamError(ContactParserError):
    """An external collaborator such as the OCR engine failed."""


class ResponseParseError(ContactParserError):
    """A model response did not have the expected shape."""
