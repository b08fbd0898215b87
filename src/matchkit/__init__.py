from .base import (
    AllOf,
    Always,
    AnyOf,
    IMatcher,
    Matcher,
    Never,
    Not,
    Predicate,
)
from .builder import MatcherBuilder
from .config import DEFAULT_CAPACITY, StoreConfig
from .decorators import IgnoringCase, ascii_lower
from .exceptions import (
    CapacityExceededError,
    FieldNotFoundError,
    MatchkitError,
    StoreError,
)
from .factories import (
    all_of,
    always,
    any_of,
    between,
    contains,
    ends_with,
    equal_to,
    greater_than,
    ignoring_case,
    is_in,
    less_than,
    matches_regex,
    never,
    not_,
    not_equal_to,
    predicate,
    starts_with,
)
from .fields import (
    FieldMatcher,
    attribute,
    field,
    name_matcher,
    resolve_attribute,
    version_matcher,
)
from .kinds import MatcherKind
from .leaves import (
    Between,
    Contains,
    EndsWith,
    Equal,
    GreaterThan,
    IsIn,
    LessThan,
    NotEqual,
    Regex,
    StartsWith,
)
from .records import ModelRecord, Record
from .store import RecordStore

__all__ = [
    # Core types
    "MatcherKind",
    "IMatcher",
    "Matcher",
    "AllOf",
    "AnyOf",
    "Not",
    "Always",
    "Never",
    "Predicate",
    # Leaves
    "Equal",
    "NotEqual",
    "GreaterThan",
    "LessThan",
    "Between",
    "IsIn",
    "StartsWith",
    "EndsWith",
    "Contains",
    "Regex",
    "IgnoringCase",
    "ascii_lower",
    # Factories
    "equal_to",
    "not_equal_to",
    "greater_than",
    "less_than",
    "between",
    "is_in",
    "starts_with",
    "ends_with",
    "contains",
    "matches_regex",
    "ignoring_case",
    "not_",
    "all_of",
    "any_of",
    "always",
    "never",
    "predicate",
    # Field adapters
    "FieldMatcher",
    "field",
    "attribute",
    "resolve_attribute",
    "name_matcher",
    "version_matcher",
    # Builder
    "MatcherBuilder",
    # Records and store
    "Record",
    "ModelRecord",
    "StoreConfig",
    "DEFAULT_CAPACITY",
    "RecordStore",
    # Exceptions
    "MatchkitError",
    "StoreError",
    "CapacityExceededError",
    "FieldNotFoundError",
]
