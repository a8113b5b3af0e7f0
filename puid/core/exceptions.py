class PuidError(Exception):
    """Base class for puid errors."""


class InvalidPrefixError(PuidError):
    message = (
        "Prefix cannot be longer than 8 characters with "
        "non-alphanumeric characters or non empty."
    )

    def __init__(self, prefix=None):
        super().__init__(self.message)
        self.prefix = prefix
