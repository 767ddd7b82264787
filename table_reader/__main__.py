"""
Print every row of a Supabase table.

Usage:
    python -m table_reader                      # table from SUPABASE_TABLE (default "api test")
    python -m table_reader --table profiles
    python -m table_reader --log-level DEBUG

Reads SUPABASE_URL and SUPABASE_ANON_KEY from the environment or a .env file.
The response body goes to stdout untouched; logs go to stderr.

Exit status: 0 on a 2xx response, 1 on a non-2xx response or a failed
request, 2 on missing or malformed configuration.
"""

import sys
import logging
import argparse

from table_reader.config import (
    LOG_LEVEL,
    LOG_LEVELS,
    ConfigError,
    EndpointConfig,
    check_log_level,
    load_endpoint_config,
)
from table_reader.services.supabase_client import SupabaseTableClient, SupabaseRequestError

logger = logging.getLogger(__name__)


def run(config: EndpointConfig, table: str | None = None, stream=None) -> int:
    """Fetch the table once, print the body, and return the exit status."""
    stream = stream or sys.stdout
    client = SupabaseTableClient(
        config.url,
        config.api_key,
        timeout=config.timeout,
        encode_table=config.encode_table,
    )

    try:
        result = client.fetch_table(table or config.table)
    except SupabaseRequestError:
        logger.exception("Could not reach Supabase")
        return 1

    print(result.body, file=stream)

    if not result.ok:
        logger.error(result.error)
        return 1
    return 0


def main(argv=None) -> int:
    """Entry point for the table reader."""
    parser = argparse.ArgumentParser(description="Print every row of a Supabase table")
    parser.add_argument(
        "--table",
        default=None,
        help="Table to read (default: SUPABASE_TABLE or 'api test')",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (default: LOG_LEVEL or INFO, currently {LOG_LEVEL})",
    )
    args = parser.parse_args(argv)

    # argparse does not check defaults against choices
    try:
        log_level = args.log_level or check_log_level(LOG_LEVEL)
    except ConfigError as e:
        parser.error(str(e))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        config = load_endpoint_config()
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 2

    return run(config, table=args.table)


if __name__ == "__main__":
    sys.exit(main())
