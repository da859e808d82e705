import os
import sys
import logging
import traceback

from dotenv import load_dotenv
from dependency_injector.wiring import inject, Provide

from src.configuration.config import Config, Envs
from src.container import Container
from src.exceptions import AppError
from src.processors.postman_processor import PostmanProcessor
from src.utils.logger import Logger

BANNER = "================================================"


def log_banner(logger: logging.Logger, title: str) -> None:
    logger.info(f"\n    {BANNER}\n    {title}\n    {BANNER}")


@inject
def main(
    logger: logging.Logger,
    config: Config = Provide[Container.config],
    postman_processor: PostmanProcessor = Provide[Container.postman_processor],
) -> int:
    """Generate .http request files and REST Client environments from Postman exports"""
    try:
        logger.info(f"Postman folder: {os.path.join(config.base_dir, config.postman_dir)}")
        logger.info(f"Requests folder: {config.requests_path}")

        if config.generate_requests:
            log_banner(logger, "Requests HTTP file generation START")
            written = postman_processor.generate_all_requests()
            logger.info(f"✅ Generated {len(written)} request file(s)")
            log_banner(logger, "Requests HTTP file generation END")

        if config.generate_environments:
            log_banner(logger, "Env Variables generation START")
            postman_processor.generate_environment_variables()
            log_banner(logger, "Env Variables generation END")

        return 0

    except AppError as e:
        logger.error(f"💥 {e}")
        return 1
    except Exception as e:
        logger.error(f"❌ Unexpected error: {e}")
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    load_dotenv(override=True)
    env = Envs(os.getenv("ENV", "DEV").upper())

    from src.adapters.config_adapter import ProdConfigAdapter, DevConfigAdapter

    config_adapter = ProdConfigAdapter() if env == Envs.PROD else DevConfigAdapter()
    container = Container(config_adapter=config_adapter)
    container.wire(modules=[__name__])

    Logger.configure_logger(container.config())
    logger = Logger.get_logger(__name__)

    sys.exit(main(logger))
