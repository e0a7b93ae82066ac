"""Exception types raised by mdtree"""


class MdTreeError(Exception):
    """Base class for mdtree exceptions."""


class RendererUnavailable(MdTreeError):
    """Raised when the markdown-it backend cannot be configured for a call."""

    def __init__(self, preset: str, cause: Exception = None):
        self.preset = preset
        msg = f"Markdown renderer unavailable for preset '{preset}'"
        if cause is not None:
            msg = f"{msg}: {cause}"
        super().__init__(msg)
