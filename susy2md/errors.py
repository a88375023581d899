"""Exceptions raised by the scrape pipeline, one class per failure kind."""


class Susy2mdError(Exception):
    """Base error: carries the failing URL (if any) and the pipeline stage"""

    kind = "error"

    def __init__(self, message, url=None, stage=None):
        super().__init__(message)
        self.message = message
        self.url = url
        self.stage = stage

    def describe(self):
        parts = [f"[{self.kind}]"]
        if self.stage:
            parts.append(f"stage={self.stage}")
        if self.url:
            parts.append(f"url={self.url}")
        parts.append(self.message)
        return " ".join(parts)


class FetchError(Susy2mdError):
    kind = "network"


class WriteError(Susy2mdError):
    kind = "filesystem"


class ConversionError(Susy2mdError):
    kind = "conversion"


class InvalidNameError(Susy2mdError):
    """Extracted title or filename is not safe to use as a local file name"""

    kind = "pattern"
