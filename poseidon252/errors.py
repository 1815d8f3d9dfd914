"""Exception hierarchy for hashing, circuit construction and proving."""


class PoseidonError(Exception):
    """Base exception for poseidon252 errors."""

    pass


class DecodeError(PoseidonError, ValueError):
    """Bytes do not encode a canonical field element or proof."""

    pass


class TruncationError(PoseidonError):
    """Truncation mask does not fit the target scalar field.

    Raised while the module constants are built, or if a masked digest fails to
    parse. Either case is a programming error.
    """

    pass


class ProvingError(PoseidonError):
    """The witness assignment does not satisfy the constraint system."""

    pass


class CircuitShapeError(ProvingError):
    """The circuit produced a different gate layout than the compiled one."""

    pass


class VerificationError(PoseidonError):
    """A proof was rejected by the verifier."""

    pass
