"""Instantiate a template unit name."""

from .MalformedTemplateError import MalformedTemplateError


def template_unit(template: str, instance: str) -> str:
    """Insert ``instance`` into the ``@`` slot of ``template``.

    Examples:
        >>> template_unit("onedriver@.service", "home-user-OneDrive")
        'onedriver@home-user-OneDrive.service'

    Raises:
        MalformedTemplateError: If ``template`` is not of the form ``name@.type``
    """
    markers = template.count("@")
    if markers == 0:
        raise MalformedTemplateError(template, "missing '@' instance marker")
    if markers > 1:
        raise MalformedTemplateError(template, "more than one '@' marker")
    prefix, suffix = template.split("@")
    if not prefix:
        raise MalformedTemplateError(template, "empty unit prefix before '@'")
    if not suffix.startswith(".") or len(suffix) < 2:
        raise MalformedTemplateError(template, "expected '.<type>' right after '@'")
    return f"{prefix}@{instance}{suffix}"
