"""Password hasher port."""

from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """
    Interface for one-way password hashing.

    The domain never sees the algorithm; it only stores the opaque hash
    returned by ``hash`` and asks ``verify`` to compare.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password

        Returns
        -------
        The opaque hash string
        """

    @abstractmethod
    def verify(self, password_hash: str, password: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Parameters
        ----------
        password_hash
            Hash previously returned by ``hash``
        password
            The plaintext password to check

        Returns
        -------
        True if the password matches, False otherwise
        """
