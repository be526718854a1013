class MetadataFetchError(Exception):
    def __init__(self, message: str):
        super().__init__(f"Failed to fetch metadata: {message}")
