"""
Seed data loader.

Reads users from a JSON array file and registers them at startup.
Duplicate emails in the seed data are expected and only logged.
"""

import asyncio
import json
import logging
from pathlib import Path
from typing import Iterable, Union

from pydantic import ValidationError as PydanticValidationError

from .exceptions import DuplicateEmailError
from .interfaces import IDirectoryService
from .models import RegisterUserRequest

logger = logging.getLogger(__name__)


def load_seed_file(path: Union[str, Path]) -> list[RegisterUserRequest]:
    """
    Load registration candidates from a JSON file.

    A missing or unreadable file yields an empty list. Entries that fail
    validation are skipped.
    """
    file_path = Path(path)
    try:
        raw = json.loads(file_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning(f"File not found: {file_path}. No users loaded.")
        return []
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Error loading users from {file_path}: {e}")
        return []

    if not isinstance(raw, list):
        logger.error(f"Error loading users from {file_path}: expected a JSON array")
        return []

    candidates: list[RegisterUserRequest] = []
    for index, entry in enumerate(raw):
        try:
            candidates.append(RegisterUserRequest.model_validate(entry))
        except PydanticValidationError as e:
            logger.warning(f"Skipping seed entry {index}: {e.error_count()} validation errors")

    logger.info(f"Successfully loaded {len(candidates)} users from {file_path}")
    return candidates


async def seed_directory(
    service: IDirectoryService,
    candidates: Iterable[RegisterUserRequest],
) -> list[str]:
    """
    Register every candidate concurrently.

    Returns:
        IDs of the users that were registered. Duplicates are skipped.
    """
    candidates = list(candidates)
    results = await asyncio.gather(
        *(service.register(candidate) for candidate in candidates),
        return_exceptions=True,
    )

    registered: list[str] = []
    duplicates = 0
    for result in results:
        if isinstance(result, DuplicateEmailError):
            duplicates += 1
            logger.warning(result.message)
        elif isinstance(result, BaseException):
            raise result
        else:
            registered.append(result)

    if registered:
        logger.info(f"Registered {len(registered)} users ({duplicates} duplicates skipped)")
    else:
        logger.warning("No users registered.")
    return registered
