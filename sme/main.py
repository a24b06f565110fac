import logging
import sys

from sme.infra.Suite_Repository import read_suite_from_json
from sme.utilities.config import LOG_LEVEL, LOW_STOCK_ALERT_LIMIT

logger = logging.getLogger("sme")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if len(argv) != 1:
        logger.error("Usage: python -m sme.main <data.json>")
        return 2
    suite = read_suite_from_json(argv[0])
    logger.info(f"Summary: {suite.summary()}")
    for product in suite.inventory.low_stock_alerts(LOW_STOCK_ALERT_LIMIT):
        logger.info(f"Low stock: {product}")
    critical = suite.workflow.critical_path()
    if critical is not None:
        logger.info(str(critical))
    return 0


if __name__ == "__main__":
    sys.exit(main())
