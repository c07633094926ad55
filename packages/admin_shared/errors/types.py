"""Canonical error types for Firebase Admin service calls.

Every public error carries a namespaced ``code`` (``<prefix>/<bare-code>``) and
a human-readable ``message``. Service modules extend ``PrefixedFirebaseError``
with their own prefix; translation from raw server tokens lives in
``factories``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ErrorInfo:
    """Namespace-free error identity and its default message."""

    code: str
    message: str


@dataclass(frozen=True)
class FirebaseError(Exception):
    """Base error type for all Firebase Admin failures."""

    code: str
    message: str

    def __str__(self) -> str:
        """Return the human-readable error message."""
        return self.message

    def to_dict(self) -> dict[str, str]:
        """Return a serialisable ``{code, message}`` mapping."""
        return {"code": self.code, "message": self.message}


@dataclass(frozen=True)
class PrefixedFirebaseError(FirebaseError):
    """Firebase error whose public code is ``<code_prefix>/<code>``."""

    code_prefix: str = ""

    def __post_init__(self) -> None:
        """Apply the namespace prefix to a bare code."""
        if self.code_prefix and not self.code.startswith(f"{self.code_prefix}/"):
            object.__setattr__(self, "code", f"{self.code_prefix}/{self.code}")

    @property
    def bare_code(self) -> str:
        """Return the error code without its namespace prefix."""
        if not self.code_prefix:
            return self.code
        return self.code[len(self.code_prefix) + 1 :]

    def has_code(self, code: str) -> bool:
        """Return whether this error carries ``code`` within its own namespace."""
        return f"{self.code_prefix}/{code}" == self.code


@dataclass(frozen=True)
class AppError(PrefixedFirebaseError):
    """App-level failure: network, timeout, credential or parse errors."""

    code_prefix: str = "app"


@dataclass(frozen=True)
class AuthError(PrefixedFirebaseError):
    """Firebase Authentication failure."""

    code_prefix: str = "auth"


@dataclass(frozen=True)
class MessagingError(PrefixedFirebaseError):
    """Firebase Cloud Messaging failure."""

    code_prefix: str = "messaging"


@dataclass(frozen=True)
class DatabaseError(PrefixedFirebaseError):
    """Realtime Database failure."""

    code_prefix: str = "database"


@dataclass(frozen=True)
class FirestoreError(PrefixedFirebaseError):
    """Cloud Firestore failure."""

    code_prefix: str = "firestore"


@dataclass(frozen=True)
class InstanceIdError(PrefixedFirebaseError):
    """Instance ID service failure."""

    code_prefix: str = "instance-id"


@dataclass(frozen=True)
class SecurityRulesError(PrefixedFirebaseError):
    """Security Rules service failure."""

    code_prefix: str = "security-rules"


@dataclass(frozen=True)
class ProjectManagementError(PrefixedFirebaseError):
    """Project Management service failure."""

    code_prefix: str = "project-management"


def has_code(error: BaseException, code: str) -> bool:
    """Return whether ``error`` is a prefixed error carrying bare ``code``."""
    return isinstance(error, PrefixedFirebaseError) and error.has_code(code)
