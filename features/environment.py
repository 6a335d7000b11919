"""
Behave environment configuration for Hover DNS Manager tests.
"""

import logging
from unittest.mock import MagicMock

import requests

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def make_response(status_code=200, payload=None, text=""):
    """Build a fake requests response."""
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.content = b"{}" if payload is not None else b""
    response.text = text
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Client Error", response=response
        )
    return response


def before_all(context):
    """Set up shared test data before all scenarios."""
    context.base_url = "https://www.hover.com/api"
    context.make_response = make_response
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Give each scenario a fresh fake session."""
    context.session = MagicMock()
    context.session.post.return_value = make_response(payload={"succeeded": True})
    context.session.request.return_value = make_response(payload={"succeeded": True})
    context.error = None
    context.result = None
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Release the client of the scenario."""
    if getattr(context, "client", None) is not None:
        context.client.close()
    logger.info(f"Completed scenario: {scenario.name}")
