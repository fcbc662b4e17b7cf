"""Offers bounded context — buyer catalog browsing and order placement.

Loads the orderable product catalog from the remote inventory service,
derives order requests from a selected product and submits them, and
reconciles the buyer's view with the outcome.
"""

from protean.domain import Domain

from offers.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

offers = Domain(name="offers")
