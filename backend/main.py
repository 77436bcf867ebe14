"""
User directory demo driver.

Builds the directory in-process, seeds it from a JSON file and walks
through the main use cases:

1. Load and register users from a file
2. Query users with pagination (page 2, limit 5 and page 2, limit 10)
3. Register a user that already exists
4. Log in an existing user and get a token

Pages are 0-indexed.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from api.dependencies import ServiceContainer
from modules.auth.exceptions import AuthenticationFailedError
from modules.users.exceptions import DuplicateEmailError
from modules.users.models import ALLOWED_PAGE_LIMITS, PageRequest, PageResult, RegisterUserRequest
from modules.users.seed import load_seed_file, seed_directory
from shared.config import get_settings
from shared.logging import configure_logging

logger = logging.getLogger(__name__)
console = Console()

DEFAULT_SEED_FILE = Path(__file__).parent / "data" / "users-init.json"

DEMO_USER = RegisterUserRequest(
    email="samuel.white@example.com",
    first_name="Samuel",
    last_name="White",
    company="NextVision",
    password="samuelPWD",
)


def render_page(result: PageResult) -> Table:
    """Render a page of users as a table."""
    table = Table(title=f"Page {result.page} (limit {result.limit}, total {result.total})")
    table.add_column("ID", style="dim")
    table.add_column("Email")
    for user in result.users:
        table.add_row(user.id, user.email)
    return table


def report_page(request: PageRequest, result: PageResult) -> None:
    """Log and render each page as the channel delivers it."""
    ids = ", ".join(user.id for user in result.users)
    logger.info(f"Received {len(result.users)} users (page {result.page}), user ids: {ids}")
    console.print(render_page(result))


async def run_demo(seed_file: Path, pages: list[tuple[int, int]]) -> None:
    """Run every use case against a fresh in-process directory."""
    container = ServiceContainer(get_settings())
    service = container.directory

    try:
        console.print("[bold]1. Load and register users from a file[/bold]")
        await seed_directory(service, load_seed_file(seed_file))

        console.print("[bold]2. Query users with pagination[/bold]")
        channel = service.pagination
        channel.add_listener(report_page)
        futures = [channel.submit(page, limit)[1] for page, limit in pages]
        await channel.join()
        for future in futures:
            future.result()

        console.print("[bold]3. Register a user that already exists[/bold]")
        try:
            user_id = await service.register(DEMO_USER)
            logger.info(f"Registered {DEMO_USER.email} as {user_id}")
        except DuplicateEmailError:
            logger.warning("User already exists.")

        console.print("[bold]4. Log in an existing user and get a token[/bold]")
        try:
            token = await service.login(DEMO_USER.email, DEMO_USER.password)
            logger.info(f"User with email: {DEMO_USER.email} successfully logged in. Token: {token}")
        except AuthenticationFailedError as e:
            logger.error(f"Error logging in user: {e.message}")
    finally:
        await container.aclose()

    console.print("\n[bold green]Done![/bold green]")


def parse_page(value: str) -> tuple[int, int]:
    """Parse a PAGE:LIMIT pair."""
    try:
        page, limit = (int(part) for part in value.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected PAGE:LIMIT, got {value!r}")
    if page < 0:
        raise argparse.ArgumentTypeError(f"Page must be 0 or greater, got {page}")
    if limit not in ALLOWED_PAGE_LIMITS:
        allowed = ", ".join(str(size) for size in ALLOWED_PAGE_LIMITS)
        raise argparse.ArgumentTypeError(f"Limit must be one of {allowed}, got {limit}")
    return page, limit


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the user directory and run the demo use cases")
    parser.add_argument(
        "-f", "--file",
        type=Path,
        default=DEFAULT_SEED_FILE,
        help="Path to a JSON file with users to register",
    )
    parser.add_argument(
        "--page",
        dest="pages",
        action="append",
        type=parse_page,
        help="PAGE:LIMIT to query (repeatable, default: 2:5 and 2:10)",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default from settings)")
    args = parser.parse_args()

    configure_logging(args.log_level or get_settings().log_level)

    if not args.file.exists():
        console.print(f"[red]Error:[/red] File not found: {args.file}")
        sys.exit(1)

    asyncio.run(run_demo(args.file, args.pages or [(2, 5), (2, 10)]))
