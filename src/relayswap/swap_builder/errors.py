"""Errors raised while assembling and encoding swap calls."""

from typing import Iterable


class SwapBuilderError(ValueError):
    """Base error for swap building."""


class UninitializedArgumentsError(SwapBuilderError):
    """Raised when attributes are read before every required setter ran."""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Uninitialized arguments: {', '.join(self.missing)}")


class FragmentNotFoundError(SwapBuilderError):
    """Raised when a function name is absent from a relayer's fragment table."""

    def __init__(self, function_name: str):
        self.function_name = function_name
        super().__init__(f"No ABI fragment found for function: {function_name}")


class AbiEncodingError(SwapBuilderError):
    """Raised when arguments do not match a fragment's declared inputs."""


class UnsupportedNetworkError(SwapBuilderError):
    """Raised for chain ids without a known vault deployment."""

    def __init__(self, chain_id: int):
        self.chain_id = chain_id
        super().__init__(f"Unsupported network: {chain_id}")
