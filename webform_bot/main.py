# Import only what's necessary for startup
import logging
import os
import sys

from webform_bot.domain.config import Config
from webform_bot.config.logging_config import configure_logging
from webform_bot.infrastructure.config_loader import load

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def setup_env() -> Config:
    """Load configuration and configure logging.

    LOG_LEVEL from the environment wins over the config file.
    """
    config = load()
    configure_logging(os.getenv("LOG_LEVEL", config.log_level))
    return config


def run(config: Config) -> int:
    # Local imports (lazy loading)
    from webform_bot.application.job import FormSubmissionJob
    from webform_bot.domain.errors import WebFormBotError
    from webform_bot.infrastructure.driver_adapter.builder import open_driver

    job = FormSubmissionJob(
        form_config=config.form_config,
        implicit_wait_ms=config.driver_config.implicit_wait_ms,
    )

    try:
        with open_driver(config.driver_config) as driver:
            result = job.execute(driver)
    except KeyboardInterrupt:
        logger.info(f"Keyboard interrupt received, shutting down (job {job.status.value})...")
        return EXIT_INTERRUPTED
    except WebFormBotError as e:
        logger.error(f"Run aborted: {e}")
        return EXIT_FAILED

    return EXIT_OK if result.passed else EXIT_FAILED


def main() -> None:
    config = setup_env()
    sys.exit(run(config))


if __name__ == "__main__":
    main()
