from collections.abc import Sequence


class UnsupportedFormatError(ValueError):
    """An explicitly requested format is not offered for the document kind."""

    def __init__(self, output_format: str, supported: Sequence[str]) -> None:
        self.output_format = output_format
        self.supported = list(supported)
        super().__init__(
            f"Unsupported format '{output_format}', supported formats are: {', '.join(self.supported)}"
        )


class UnknownCollectionError(LookupError):
    """A collection identifier is not present in the catalog."""

    def __init__(self, collection_id: str) -> None:
        self.collection_id = collection_id
        super().__init__(f"Collection '{collection_id}' not found")
