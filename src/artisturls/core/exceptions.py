class ArtistURLError(Exception):
    pass

class FormatError(ArtistURLError):
    """Raw URL failed format validation."""

    def __init__(self, url: str, errors: list[str]) -> None:
        self.url = url
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))

class ConfigError(ArtistURLError):
    pass

class InvalidPriorityListError(ConfigError):
    pass

class ProbeError(ArtistURLError):
    """HTTP existence probe failed or timed out."""
    pass
