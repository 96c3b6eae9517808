#!/usr/bin/env python3
"""Seed a JSON key store with sample pix keys.

Keys are created through PixKeyService, so every business rule applies:
values rejected as duplicates or accounts over their key limit are counted
and skipped. A fraction of the created keys can be inactivated afterwards
to exercise the lifecycle.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pix_keys.config import PixKeysConfig, StoreConfig
from pix_keys.exceptions import BusinessRuleViolation
from pix_keys.generators import KeyValueGenerator
from pix_keys.logging import get_logger, setup_logging
from pix_keys.models import KeyStatus
from pix_keys.service import PixKeyService

logger = get_logger(__name__)


def seed_keys(
    service: PixKeyService,
    generator: KeyValueGenerator,
    num_accounts: int,
    keys_per_account: int,
    inactivate_ratio: float,
) -> dict[str, int]:
    """Create keys for ``num_accounts`` accounts and return outcome counts."""
    counts = {"created": 0, "rejected": 0, "inactivated": 0}
    created_ids: list[str] = []

    for _ in range(num_accounts):
        agency, account = generator.agency(), generator.account()
        for request in generator.generate_batch(keys_per_account, agency=agency, account=account):
            try:
                key_id = service.create(
                    request.category,
                    request.value,
                    request.account_type,
                    request.agency,
                    request.account,
                    request.holder_name,
                    request.holder_surname,
                )
            except BusinessRuleViolation as e:
                logger.debug("Skipped %s key: %s", request.category.value, e)
                counts["rejected"] += 1
                continue
            created_ids.append(key_id)
            counts["created"] += 1

    for key_id in created_ids[: int(len(created_ids) * inactivate_ratio)]:
        service.inactivate(key_id)
        counts["inactivated"] += 1

    return counts


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Seed a JSON store with sample pix keys")
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("data/pix_keys.json"),
        help="JSON store file (default: data/pix_keys.json)",
    )
    parser.add_argument(
        "--accounts",
        type=int,
        default=20,
        help="Number of accounts to create keys for (default: 20)",
    )
    parser.add_argument(
        "--keys-per-account",
        type=int,
        default=3,
        help="Keys requested per account; requests over the limit are rejected (default: 3)",
    )
    parser.add_argument(
        "--inactivate-ratio",
        type=float,
        default=0.1,
        help="Fraction of created keys to inactivate (default: 0.1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Log level (default: INFO)",
    )
    args = parser.parse_args()

    if not 0.0 <= args.inactivate_ratio <= 1.0:
        parser.error("--inactivate-ratio must be between 0 and 1")

    config = PixKeysConfig.from_env()
    setup_logging(level=args.log_level, format_type=config.log_format)

    config.store = StoreConfig(backend="json", path=args.output)
    service = PixKeyService.from_config(config)

    counts = seed_keys(
        service,
        KeyValueGenerator(seed=args.seed),
        args.accounts,
        args.keys_per_account,
        args.inactivate_ratio,
    )

    totals = service.store.summary()

    logger.info("=" * 60)
    logger.info("Seed complete: %s", args.output)
    logger.info("Created: %d", counts["created"])
    logger.info("Rejected: %d", counts["rejected"])
    logger.info("Inactivated: %d", counts["inactivated"])
    logger.info("-" * 60)
    logger.info("Keys in store: %d", totals["total"])
    for status in KeyStatus:
        logger.info("  %s: %d", status.value, totals.get(status.value, 0))
    logger.info("=" * 60)


if __name__ == "__main__":
    main()
