"""ResolverConfig and UnknownKeyPolicy for resolver behaviour.

ResolverConfig is a frozen (immutable) dataclass holding the policy knobs of
a resolution pass. It governs diagnostics only: the order produced for a given
tree and OrderConfig is the same under every setting that does not raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto


class UnknownKeyPolicy(StrEnum):
    """What to do with a configured key that matches no actual child.

    - IGNORE: Drop the key silently.
    - WARN:   Drop the key and report a warning (default).
    - ERROR:  Report every unknown key, then raise UnknownKeyError.
    """

    IGNORE = auto()
    WARN = auto()
    ERROR = auto()


@dataclass(frozen=True, slots=True)
class ResolverConfig:
    """Immutable configuration for a resolution pass.

    Attributes:
        unknown_key_policy: Handling of configured keys with no matching child.
        report_unconfigured: When True, children appended after an explicit
            order (not mentioned in it) are reported as notices.  Default True.
        report_unknown_paths: When True, config entries whose path matches no
            category in the tree are reported as warnings.  Default True.
    """

    unknown_key_policy: UnknownKeyPolicy = UnknownKeyPolicy.WARN
    report_unconfigured: bool = True
    report_unknown_paths: bool = True

    def __post_init__(self) -> None:
        try:
            policy = UnknownKeyPolicy(self.unknown_key_policy)
        except ValueError:
            msg = f"unknown_key_policy must be one of {[p.value for p in UnknownKeyPolicy]}, got {self.unknown_key_policy!r}"
            raise ValueError(msg) from None
        object.__setattr__(self, "unknown_key_policy", policy)
