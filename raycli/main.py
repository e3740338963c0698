import logging
import sys

from .cli import run_cli
from .ui import display_error, display_notice

logger = logging.getLogger(__name__)


def main():
    """Console-script entry point for `ray`: run the pipeline and exit with its status."""
    try:
        status = run_cli()
    except KeyboardInterrupt:
        logger.info("Interrupted before the command finished")
        display_notice("\nInterrupted.")
        sys.exit(130)  # 128 + SIGINT
    except Exception as e:
        # Anything the pipeline does not map to a status is a bug; keep the traceback.
        logger.exception(f"Unexpected failure in ray: {e}")
        display_error("Unexpected error", e)
        sys.exit(1)
    sys.exit(status)


if __name__ == "__main__":
    main()
