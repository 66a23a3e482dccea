from typing import Iterable, Tuple

from .magnitude import normalize


class LimbInt:
    """An immutable sign-and-magnitude integer stored as 32-bit limbs."""

    __slots__ = ("_sign", "_limbs")

    def __init__(self, sign: int, limbs: Iterable[int] = ()) -> None:
        """Initialize a limb integer in canonical form.

        Args:
            sign (int): -1 or 1; ignored when the magnitude is zero
            limbs (Iterable[int]): Magnitude limbs, least significant first
        """
        magnitude = tuple(normalize(list(limbs)))
        self._limbs = magnitude
        self._sign = (1 if sign >= 0 else -1) if magnitude else 0

    def get_sign(self) -> int:
        return self._sign

    def get_limbs(self) -> Tuple[int, ...]:
        return self._limbs

    def is_negative(self) -> bool:
        return self._sign < 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LimbInt):
            return NotImplemented
        return self._sign == other._sign and self._limbs == other._limbs

    def __hash__(self) -> int:
        return hash((self._sign, self._limbs))

    def __repr__(self) -> str:
        return f"<LimbInt(sign={self._sign}, limbs={list(self._limbs)})>"


ZERO = LimbInt(0)
