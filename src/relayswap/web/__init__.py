"""Boundary layer producing unsigned swap transactions.

Nothing here signs or broadcasts: callers receive ``to``/``value``/``data``
and submit the transaction themselves.
"""

__all__ = [
    "contracts",
    "services",
]
