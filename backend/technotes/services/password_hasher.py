"""
TechNotes Backend: Password Hashing
===================================

What:  Interface for one-way password hashing plus the bcrypt implementation.
How:   bcrypt is CPU-bound (about 60-80ms at cost 10), so hashing and
       verification run in Starlette's threadpool instead of on the event loop.
Who:   UserService on create and on update when a new password is supplied.

Every call to hash() draws a fresh random salt, so hashing the same
plaintext twice yields two different strings.
"""

from abc import ABC, abstractmethod

import bcrypt
from starlette.concurrency import run_in_threadpool

from technotes.config import settings
from technotes.exceptions import ValidationError

# bcrypt only looks at the first 72 bytes; longer input is rejected outright
MAX_PASSWORD_BYTES = 72


class PasswordHasher(ABC):
    """
    Abstract one-way password hasher.

    Contract:
        - hash() never returns the plaintext and never returns the same
          string twice for the same input (per-call salt)
        - verify() is the only way to relate a plaintext to a stored hash
    """

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        ...

    @abstractmethod
    async def verify(self, plaintext: str, hashed: str) -> bool:
        ...


class BcryptPasswordHasher(PasswordHasher):
    """
    bcrypt with a configurable cost factor.

    Args:
        rounds: log2 of the work factor (settings.bcrypt_rounds, default 10)
    """

    def __init__(self, rounds: int = settings.bcrypt_rounds):
        self.rounds = rounds

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValidationError(
                message=f"Password must be at most {MAX_PASSWORD_BYTES} bytes",
                field="password",
            )
        return encoded

    def _hash_sync(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(plaintext), salt).decode("utf-8")

    async def hash(self, plaintext: str) -> str:
        return await run_in_threadpool(self._hash_sync, plaintext)

    async def verify(self, plaintext: str, hashed: str) -> bool:
        try:
            encoded = self._encode(plaintext)
        except ValidationError:
            return False
        return await run_in_threadpool(bcrypt.checkpw, encoded, hashed.encode("utf-8"))


# ── Singleton Instance ────────────────────────────────────────────────────
password_hasher = BcryptPasswordHasher()
