"""Error for unit templates without a usable instance slot."""


class MalformedTemplateError(ValueError):
    """The template unit name does not have the form ``name@.type``."""

    def __init__(self, template: str, reason: str):
        self.template = template
        self.reason = reason
        super().__init__(f"Malformed unit template {template!r}: {reason}")
