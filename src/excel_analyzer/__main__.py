"""Entry point for ``python -m excel_analyzer`` and the ``excel-analyzer`` script."""

from excel_analyzer.config import settings, validate_settings_on_startup
from excel_analyzer.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    configure_logging(level=settings.log_level_int)
    validate_settings_on_startup(settings)

    from excel_analyzer.app import run_app

    logger.info("Starting Excel Analyzer")
    run_app(settings)


if __name__ == "__main__":
    main()
