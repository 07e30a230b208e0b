class InvalidQueryParameter(Exception):
    """
    Raised when query parameter is deemed as invalid
    """
    def __init__(self, key: str, val: str = '', error: str = '', *args: object) -> None:
        super().__init__('Invalid query parameter: %s - %s\nError: %s' % (key, val, error), *args)


class InvalidBundleDocument(Exception):
    """
    Raised when a card bundle import document can not be read into a bundle and its cards
    """
    def __init__(self, source: str, error: str = '', *args: object) -> None:
        super().__init__('Invalid card bundle document: %s\nError: %s' % (source, error), *args)
