class HeadlineExtractionError(ValueError):
    """Raised when a headline source responds but carries no usable item."""


class QuotePayloadError(ValueError):
    """Raised when the quote provider returns something other than a quote list."""
