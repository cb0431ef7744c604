# SPDX-License-Identifier: MIT
# Copyright (c) 2025 WUD contributors

"""Example: reporting payment errors to Slack.

Run with WUD_APP_NAME and WUD_WEBHOOK_URL set in the environment.
"""

import logging
import sys

from wud import ReportableError, ReportError, create_reporting_client

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

AMOUNT_LIMIT = 50.0


class PaymentError(ReportableError):
    """Base class for payment errors."""


class InsufficientFunds(PaymentError):
    error_type = "InsufficientFunds"


class InvalidAmount(PaymentError):
    error_type = "InvalidAmount"


def process_payment(customer_id: int, amount: float, reporter) -> None:
    """Process a payment, reporting and raising on invalid amounts."""
    if amount > AMOUNT_LIMIT:
        error = InvalidAmount(f"amount {amount} exceeds limit {AMOUNT_LIMIT}")
        try:
            reporter.report(error)
        except ReportError as e:
            logger.warning(f"Could not report payment error: {e}")
        raise error

    logger.info(f"Processed payment of {amount} for customer {customer_id}")


def main() -> int:
    with create_reporting_client() as reporter:
        try:
            process_payment(1, 100.0, reporter)
        except PaymentError as e:
            logger.error(f"Payment failed: {e}")
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
