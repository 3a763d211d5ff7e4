"""
Behave environment configuration for cf-notice integration tests.
"""

import io
import logging
import shutil
import tempfile
from pathlib import Path

from rich.console import Console

from cf_notice.core.config import CheckerConfig
from cf_notice.core.reporter import Reporter
from cf_notice.core.snapshot_store import SnapshotStore
from cf_notice.providers.mock_provider import MockDNSProvider

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_zone = "023e105f4ecef8ad9ca31a8372d0c353"
    context.test_zone_name = "example.com"
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.test_data_dir = Path(tempfile.mkdtemp(prefix="cf-notice-"))
    context.storage_path = str(context.test_data_dir / "cf-notice.json")

    context.provider = MockDNSProvider()
    context.provider.add_zone(context.test_zone, context.test_zone_name)

    context.output = io.StringIO()
    context.reporter = Reporter(Console(file=context.output, width=200, color_system=None))
    context.store = SnapshotStore(context.storage_path)
    context.checker_config = CheckerConfig(
        storage_path=context.storage_path,
        api_key="test-token",
        zone_id=context.test_zone,
    )
    context.results = []

    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    try:
        shutil.rmtree(context.test_data_dir)
    except OSError as e:
        logger.warning(f"Failed to cleanup test data: {e}")

    logger.info(f"Completed scenario: {scenario.name}")
