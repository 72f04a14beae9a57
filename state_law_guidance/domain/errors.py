class DomainError(Exception):
    """Base for domain-level errors."""


class ResourceNotFound(DomainError):
    pass


class ValidationFailed(DomainError):
    pass


class UnknownTemplateKind(ValidationFailed):
    pass


class CatalogLoadError(DomainError):
    """The bundled law catalog is missing or malformed."""
