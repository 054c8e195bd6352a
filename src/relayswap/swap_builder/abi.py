"""Function call encoding through the web3 contract layer.

Builder attributes hold amounts as decimal strings and addresses in whatever
case the router returned; they are converted to the values web3 expects
(ints, checksum addresses, plain dicts for structs) before encoding.
"""

import logging
import re
from typing import Any, Sequence

from eth_abi.exceptions import DecodingError, EncodingError
from eth_utils import function_abi_to_4byte_selector
from pydantic import BaseModel
from web3 import Web3
from web3.exceptions import Web3Exception

from relayswap.swap_builder.errors import AbiEncodingError, FragmentNotFoundError

logger = logging.getLogger(__name__)

_INTEGER = re.compile(r"-?\d+")

# Encoding needs no provider; the instance only supplies the codec.
_w3 = Web3()


def to_abi_value(value: Any) -> Any:
    """Convert a builder attribute into the Python value web3 encodes."""
    if isinstance(value, BaseModel):
        value = value.model_dump(by_alias=True)
    if isinstance(value, dict):
        return {key: to_abi_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_abi_value(item) for item in value]
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return int(value)
    if isinstance(value, str):
        if Web3.is_address(value):
            return Web3.to_checksum_address(value)
        if _INTEGER.fullmatch(value):
            return int(value)
    return value


class FunctionInterface:
    """Encoder bound to a list of function fragments."""

    def __init__(self, fragments: Sequence[dict]):
        self.contract = _w3.eth.contract(abi=list(fragments))

    def get_function(self, name: str):
        """Get the contract function by name.

        Raises:
            FragmentNotFoundError: If no fragment has this name
        """
        try:
            return self.contract.get_function_by_name(name)
        except (ValueError, Web3Exception) as e:
            raise FragmentNotFoundError(name) from e

    def selector(self, name: str) -> bytes:
        return bytes(function_abi_to_4byte_selector(self.get_function(name).abi))

    def encode_function_data(self, name: str, values: Sequence[Any]) -> str:
        """Encode a call as ``0x``-prefixed hex.

        Raises:
            FragmentNotFoundError: If the function is unknown
            AbiEncodingError: If the values do not match the declared inputs
        """
        function = self.get_function(name)
        args = [to_abi_value(v) for v in values]
        try:
            data = function(*args)._encode_transaction_data()
        except (Web3Exception, EncodingError, ValueError, TypeError, KeyError) as e:
            raise AbiEncodingError(f"Failed to encode {name}: {e}") from e

        logger.debug(f"Encoded {name}: {len(data) // 2 - 1} bytes")
        return data

    def decode_function_data(self, name: str, data: str) -> dict[str, Any]:
        """Decode call data produced for ``name`` into named arguments.

        Raises:
            AbiEncodingError: If the data is for another function or malformed
        """
        try:
            function, params = self.contract.decode_function_input(data)
        except (Web3Exception, DecodingError, ValueError) as e:
            raise AbiEncodingError(f"Failed to decode {name}: {e}") from e
        if function.fn_name != name:
            raise AbiEncodingError(f"Call data is for {function.fn_name}, not {name}")
        return params
