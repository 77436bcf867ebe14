"""
In-memory user directory.

Owns the authoritative, insertion-ordered list of user records. The only
mutation is register(), which appends; everything else reads a snapshot.

Concurrency:
- Writes go through a single asyncio.Lock, so "check the email is free,
  then append" is one critical section.
- Password hashing happens outside the lock (in a worker thread) because
  it is slow; the uniqueness check is repeated under the lock before
  appending.
- Records are frozen and appended fully built, so readers never see a
  half-constructed record.
"""

import asyncio
import logging
import uuid
from typing import Optional

from modules.auth.interfaces import IPasswordHasher

from .exceptions import DuplicateEmailError, UserNotFoundError
from .models import RegisterUserRequest, UserPreview, UserRecord

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    The volatile, single-process set of user records.

    Records are never updated or deleted.
    """

    def __init__(self, hasher: IPasswordHasher):
        self._hasher = hasher
        self._records: list[UserRecord] = []
        self._emails: set[str] = set()
        self._ids: set[str] = set()
        self._write_lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def count(self) -> int:
        """Number of records currently in the directory."""
        return len(self._records)

    # -------------------------------------------------------------------------
    # Write path
    # -------------------------------------------------------------------------

    async def register(self, candidate: RegisterUserRequest) -> str:
        """
        Add a new user and return its ID.

        Raises:
            DuplicateEmailError: If the email is already registered. The
                directory is left unchanged.
            CredentialHashingError: If the password could not be hashed.
        """
        # Cheap rejection before paying for bcrypt
        if candidate.email in self._emails:
            raise DuplicateEmailError(candidate.email)

        password_hash = await asyncio.to_thread(self._hasher.hash, candidate.password)

        async with self._write_lock:
            if candidate.email in self._emails:
                raise DuplicateEmailError(candidate.email)

            record = UserRecord(
                id=self._new_id(),
                email=candidate.email,
                first_name=candidate.first_name,
                last_name=candidate.last_name,
                company=candidate.company,
                password_hash=password_hash,
            )
            self._records.append(record)
            self._emails.add(record.email)
            self._ids.add(record.id)

        logger.info(f"Registered user {record.id}")
        return record.id

    def _new_id(self) -> str:
        while True:
            user_id = str(uuid.uuid4())
            if user_id not in self._ids:
                return user_id

    # -------------------------------------------------------------------------
    # Read path
    # -------------------------------------------------------------------------

    def _snapshot(self) -> list[UserRecord]:
        return list(self._records)

    def find_by_id(self, user_id: str) -> UserRecord:
        """
        Look up a record by ID.

        Raises:
            UserNotFoundError: If no record has this ID.
        """
        for record in self._snapshot():
            if record.id == user_id:
                return record
        raise UserNotFoundError(user_id)

    def find_by_email(self, email: str) -> Optional[UserRecord]:
        """Look up a record by exact (case-sensitive) email, or None."""
        for record in self._snapshot():
            if record.email == email:
                return record
        return None

    def list_all(self) -> list[UserPreview]:
        """Previews of every record, sorted by email ascending."""
        previews = [record.to_preview() for record in self._snapshot()]
        return sorted(previews, key=lambda preview: preview.email)

    def slice(self, offset: int, count: int) -> list[UserPreview]:
        """
        Previews for a contiguous range of the insertion-ordered records.

        The range is clipped to the directory; a negative offset or count
        yields an empty list.
        """
        if offset < 0 or count <= 0:
            return []
        return [record.to_preview() for record in self._snapshot()[offset:offset + count]]

    def sorted_slice(self, offset: int, count: int) -> list[UserPreview]:
        """
        Same as slice(), but the range is taken from the email-sorted listing.

        Consecutive ranges therefore concatenate to list_all().
        """
        if offset < 0 or count <= 0:
            return []
        return self.list_all()[offset:offset + count]
