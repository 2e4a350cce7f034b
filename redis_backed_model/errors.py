class RedisBackedModelError(Exception):
    """
    Base class for every error raised while mapping entities to store commands.
    """


class InvalidInputKind(RedisBackedModelError, TypeError):
    """
    Raised when an entity is built from something other than a flat mapping.
    """


class InvalidAttributeName(RedisBackedModelError, ValueError):
    """
    Raised when an attribute key cannot be used as a field name on the entity.
    """


class MalformedScoreDirective(InvalidAttributeName):
    """
    Raised when an attribute looks like a ``score_[for|by]`` directive but
    cannot be parsed as one.
    """


class MissingIdentifier(RedisBackedModelError, ValueError):
    """
    Raised when an entity without an id is serialized.
    """
