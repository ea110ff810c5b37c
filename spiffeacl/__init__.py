"""spiffeacl package providing wildcard matching of SPIFFE identity URIs."""

from .acl import IdentityACL
from .compiler import compile, compile_list, compile_with_separator, must_compile
from .exceptions import (
    BadPattern,
    BadPolicy,
    EmptyPattern,
    FatalPatternError,
    InvalidDoubleWildcard,
    InvalidPrefix,
    InvalidSegment,
    InvalidSeparator,
    InvalidSingleWildcard,
    PolicyDenied,
)
from .guard import Authorizer
from .matcher import Matcher
from .policy import Policy, load_policy
from .segments import parse_candidate, split_segments
from .types import SegmentView

__all__ = [
    "Authorizer",
    "BadPattern",
    "BadPolicy",
    "EmptyPattern",
    "FatalPatternError",
    "IdentityACL",
    "InvalidDoubleWildcard",
    "InvalidPrefix",
    "InvalidSegment",
    "InvalidSeparator",
    "InvalidSingleWildcard",
    "Matcher",
    "Policy",
    "PolicyDenied",
    "SegmentView",
    "compile",
    "compile_list",
    "compile_with_separator",
    "load_policy",
    "must_compile",
    "parse_candidate",
    "split_segments",
]
