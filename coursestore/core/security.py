# ==============================================================================
# SECURITY MODULE - Password Hashing & Session Tokens
# ==============================================================================
# bcrypt password hashing (passlib) and per-role JWT bearer tokens (jose)
# ==============================================================================

from __future__ import annotations

from typing import Any, Dict

from jose import JWTError, jwt
from passlib.context import CryptContext

from coursestore.core.constants import SecurityConstants
from coursestore.core.exceptions import InvalidTokenError


# ==============================================================================
# PASSWORD HASHING
# ==============================================================================

class PasswordHasher:
    """
    One-way salted password hashing with bcrypt.

    Every call to :meth:`hash` draws a fresh salt, so hashing the same
    password twice yields different strings. Verification goes through
    passlib, which compares in constant time.

    Args:
        rounds: bcrypt work factor (log2 of the iteration count)

    Example:
        >>> hasher = PasswordHasher(rounds=10)
        >>> hashed = hasher.hash("Abcdef1!")
        >>> hasher.verify("Abcdef1!", hashed)
        True
    """

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Returns:
            Opaque hash string safe for storage (never for logging)
        """
        return self._context.hash(password)

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a stored hash.

        A missing or unparseable stored hash is treated as a mismatch.
        """
        if not hashed_password:
            return False
        try:
            return self._context.verify(password, hashed_password)
        except (ValueError, TypeError):
            return False

    def dummy_verify(self) -> None:
        """Spend one verification's worth of time without a real hash."""
        self._context.dummy_verify()


# ==============================================================================
# SESSION TOKENS
# ==============================================================================

class SessionTokens:
    """
    Issue and verify stateless bearer tokens for one role namespace.

    Tokens are HS256 JWTs whose only claim is the subject id. They carry
    no expiry. A token only verifies against the secret that signed it,
    which is what keeps admin and user tokens apart.

    Args:
        secret: Signing secret for this namespace
        algorithm: JWT signing algorithm

    Example:
        >>> tokens = SessionTokens(secret="s" * 32)
        >>> tokens.verify(tokens.issue("65f0c0ffee"))
        '65f0c0ffee'
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("A signing secret is required")
        self._secret = secret
        self._algorithm = algorithm

    def issue(self, subject_id: Any) -> str:
        """
        Sign a token binding ``subject_id``.

        Args:
            subject_id: Store-assigned account id

        Returns:
            Encoded JWT string
        """
        claims: Dict[str, Any] = {SecurityConstants.SUBJECT_CLAIM: str(subject_id)}
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> str:
        """
        Verify a token and return its subject id.

        Raises:
            InvalidTokenError: If the token is malformed, was signed with
                another secret, or carries no subject
        """
        if not token:
            raise InvalidTokenError(reason="empty token")
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
            )
        except JWTError as e:
            raise InvalidTokenError(reason=str(e))

        subject = payload.get(SecurityConstants.SUBJECT_CLAIM)
        if not isinstance(subject, str) or not subject:
            raise InvalidTokenError(reason="missing subject")
        return subject
