class LlsException(Exception):
    """Base class for exceptions raised by little_league_stats."""


class ConfigError(LlsException):
    pass


class OcrError(LlsException):
    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"OCR failed for {source}: {reason}")
