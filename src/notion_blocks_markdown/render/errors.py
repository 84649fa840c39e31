class RenderError(Exception):
    """Base class for failures that abort a whole document render."""


class ConfigurationError(RenderError, ValueError):
    """Renderer options are inconsistent, e.g. size-in-alt without a lookup."""


class ValidationError(RenderError, ValueError):
    """The image size lookup answered without a usable width and height."""
