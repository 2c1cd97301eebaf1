"""
Job to set a user's subscription tier.

Used by the billing side (or an operator) when a subscription starts or
ends. Creates the account if it does not exist yet.
"""

import argparse
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from symbolquest.db.database import async_session_factory, init_db
from symbolquest.db.operations import set_subscription_tier
from symbolquest.models.draw import SubscriptionTier

logger = logging.getLogger(__name__)


async def run_set_tier(
    user_id: str,
    tier: SubscriptionTier,
    session_factory: async_sessionmaker[AsyncSession] = async_session_factory,
) -> SubscriptionTier:
    """
    Set and commit a user's tier.

    Returns:
        The tier now stored for the user
    """
    async with session_factory() as session:
        account = await set_subscription_tier(session, user_id, tier)
        await session.commit()

    logger.info("SUBSCRIPTION_TIER_SET", extra={"user_id": user_id, "tier": tier.value})
    return SubscriptionTier.parse(account.subscription_tier)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Set a SymbolQuest user's subscription tier")
    parser.add_argument("user_id", help="User id as used in the draw API")
    parser.add_argument(
        "tier",
        choices=[tier.value for tier in SubscriptionTier],
        help="Subscription tier",
    )
    parser.add_argument(
        "--init-db",
        action="store_true",
        help="Create missing tables before writing",
    )
    return parser.parse_args(argv)


async def _main(args: argparse.Namespace) -> None:
    if args.init_db:
        await init_db()
    await run_set_tier(args.user_id, SubscriptionTier(args.tier))


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(_main(parse_args(argv)))


if __name__ == "__main__":
    main()
