from enum import Enum


class MatcherKind(str, Enum):
    """Tags for every node a matcher tree can contain."""

    # Constants
    ALWAYS = "always"
    NEVER = "never"

    # Comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    BETWEEN = "between"
    IN = "in"

    # String operations
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"
    CONTAINS = "contains"
    REGEX = "regex"

    # Decorators and adapters
    IGNORING_CASE = "ignoring_case"
    FIELD = "field"
    PREDICATE = "predicate"

    # Logical operators
    ALL = "all"
    ANY = "any"
    NOT = "not"
