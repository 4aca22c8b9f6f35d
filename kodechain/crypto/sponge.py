"""
KodeChain Sponge Hash Engine

Fixed-state absorb/permute/squeeze construction behind addresses and
function selectors. It is not a vetted cryptographic hash; it must match
the node bit for bit, so the permutation keeps its in-place update order:
index i reads state[(i+1) % 32] and state[(i+7) % 32] after earlier
indices of the same pass have already been rewritten.
"""

from __future__ import annotations
from typing import Union

from kodechain.constants import (
    SPONGE_STATE_SIZE,
    SPONGE_NEIGHBOUR_OFFSET,
    SPONGE_DIFFUSION_OFFSET,
)
from kodechain.errors import InvalidParameterError


def _rotl8(value: int) -> int:
    """Rotate an 8-bit value left by one bit."""
    return ((value << 1) | (value >> 7)) & 0xFF


class Sponge:
    """
    32-byte sponge state with a shared read/write cursor.

    One instance per hashing operation; instances are never shared.

    Example:
        sponge = Sponge()
        sponge.absorb(b"hello")
        digest = sponge.squeeze(32)
    """

    __slots__ = ("_state", "_cursor")

    def __init__(self):
        self._state = bytearray(SPONGE_STATE_SIZE)
        self._cursor = 0

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def state(self) -> bytes:
        """Snapshot of the current state."""
        return bytes(self._state)

    def absorb(self, data: Union[bytes, bytearray, memoryview]) -> None:
        """XOR data into the state byte by byte, permuting on every wrap."""
        state = self._state
        cursor = self._cursor
        for byte in bytes(data):
            state[cursor] ^= byte
            cursor = (cursor + 1) % SPONGE_STATE_SIZE
            if cursor == 0:
                self._cursor = cursor
                self.permute()
        self._cursor = cursor

    def permute(self) -> None:
        """Mix the state in place, lowest index first."""
        state = self._state
        for i in range(SPONGE_STATE_SIZE):
            mixed = (
                state[i]
                ^ state[(i + SPONGE_NEIGHBOUR_OFFSET) % SPONGE_STATE_SIZE]
                ^ state[(i + SPONGE_DIFFUSION_OFFSET) % SPONGE_STATE_SIZE]
            )
            state[i] = _rotl8(mixed)

    def squeeze(self, length: int) -> bytes:
        """Emit length bytes, permuting whenever the cursor sits at 0."""
        if length < 0:
            raise InvalidParameterError("length", f"must be non-negative, got {length}")

        out = bytearray(length)
        for n in range(length):
            if self._cursor == 0:
                self.permute()
            out[n] = self._state[self._cursor]
            self._cursor = (self._cursor + 1) % SPONGE_STATE_SIZE
        return bytes(out)

    def copy(self) -> "Sponge":
        """Create an independent copy of the current state."""
        clone = Sponge()
        clone._state[:] = self._state
        clone._cursor = self._cursor
        return clone
