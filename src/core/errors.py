# core/errors.py

class RenderError(Exception):
    """Base class for errors surfaced by the renderer."""


class ConfigError(RenderError, ValueError):
    """
    Invalid render configuration or scene setup. Raised before any
    rendering work starts.
    """


class WorkerFailure(RenderError):
    """
    A render worker failed; the whole render is aborted and the partial
    image is discarded. The original exception is chained as __cause__.
    """
    def __init__(self, worker: int, message: str):
        super().__init__(f"render worker {worker} failed: {message}")
        self.worker = worker
