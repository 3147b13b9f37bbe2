"""
Validation result

[Contract]
- Every validator returns a ValidationResult, never raises
- is_valid == True  <=>  error_message is None
- sanitized and metadata are only filled on success
- Build through ValidationResult.success() / ValidationResult.failure()
- Direct construction is checked against the same contract (ValueError)
"""
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

_EMPTY_METADATA: Mapping[str, str] = MappingProxyType({})


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of a single validation.

    Args:
        is_valid: Whether the value passed validation.
        error_message: Reason for failure; None when valid.
        sanitized: Canonical form of the input; None when invalid.
        metadata: Read-only, insertion-ordered values derived from the input.

    Raises:
        ValueError: the fields contradict the contract above.
    """

    is_valid: bool
    error_message: Optional[str] = None
    sanitized: Optional[str] = None
    metadata: Mapping[str, str] = field(default_factory=lambda: _EMPTY_METADATA)

    def __post_init__(self):
        if self.is_valid:
            if self.error_message is not None:
                raise ValueError("A valid result cannot carry an error message.")
        else:
            if self.error_message is None:
                raise ValueError("An invalid result requires an error message.")
            if self.sanitized is not None or self.metadata:
                raise ValueError("An invalid result cannot carry a sanitized value or metadata.")

        if not isinstance(self.metadata, MappingProxyType):
            frozen = MappingProxyType(dict(self.metadata)) if self.metadata else _EMPTY_METADATA
            object.__setattr__(self, 'metadata', frozen)

    @classmethod
    def success(cls, sanitized: Optional[str] = None,
                metadata: Optional[Mapping[str, str]] = None) -> 'ValidationResult':
        """Create a successful result. The metadata is copied and frozen."""
        frozen = MappingProxyType(dict(metadata)) if metadata else _EMPTY_METADATA
        return cls(is_valid=True, error_message=None, sanitized=sanitized, metadata=frozen)

    @classmethod
    def failure(cls, error_message: str) -> 'ValidationResult':
        """Create a failed result"""
        return cls(is_valid=False, error_message=error_message)

    def get(self, key: str) -> Optional[str]:
        """Metadata value for key, or None"""
        return self.metadata.get(key)

    def __hash__(self) -> int:
        return hash((self.is_valid, self.error_message, self.sanitized,
                     tuple(self.metadata.items())))

    def __reduce__(self):
        # mappingproxy cannot be pickled; rebuild from a plain dict (copy, deepcopy, pickle)
        return (self.__class__, (self.is_valid, self.error_message, self.sanitized, dict(self.metadata)))

    def __str__(self) -> str:
        if self.is_valid:
            return f"Valid ({self.sanitized})"
        return f"Invalid: {self.error_message}"
