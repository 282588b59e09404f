class DomainError(Exception):
    """Base domain error."""


class ValidationError(DomainError):
    pass


class QueryParseError(DomainError):
    pass


class NotFoundError(DomainError):
    pass


class NoSuchPageError(NotFoundError):
    """Requested a prev/next page that does not exist."""
