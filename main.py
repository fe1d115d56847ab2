"""Demo service: pushes synthetic job-runner logs through the dately rotating handler."""

import logging
import random
import signal
import sys
import time

from dately_log.config import load_config
from dately_log.handler import DatelyRotatingFileHandler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [dately-log] %(levelname)s %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)

_stop = False

# (level, template) pairs; INFO is listed more often so it dominates the output.
EVENTS = [
    (logging.INFO, "job %d finished in %dms"),
    (logging.INFO, "job %d picked up by worker-%d"),
    (logging.INFO, "checkpoint %d written (%d records)"),
    (logging.DEBUG, "job %d heartbeat, queue depth %d"),
    (logging.WARNING, "job %d retried, attempt %d"),
    (logging.ERROR, "job %d failed with exit code %d"),
]


def _request_stop(signum, _frame):
    global _stop
    logger.info("Received signal %d, finishing up", signum)
    _stop = True


def emit_event(app_logger: logging.Logger, job_id: int):
    level, template = random.choice(EVENTS)
    app_logger.log(level, template, job_id, random.randint(1, 500))


def main():
    signal.signal(signal.SIGINT, _request_stop)
    signal.signal(signal.SIGTERM, _request_stop)

    config = load_config()
    logger.info(
        "Writing to %s (max_size=%d bytes, max_files=%d, max_age=%dd, truncate=%s)",
        config.base_filename, config.max_file_size_bytes,
        config.max_file_count, config.max_age_days, config.truncate,
    )

    handler = DatelyRotatingFileHandler.from_config(config)
    app_logger = logging.getLogger("demo.jobs")
    app_logger.setLevel(logging.DEBUG)
    app_logger.propagate = False
    app_logger.addHandler(handler)

    job_id = 0
    try:
        while not _stop:
            job_id += 1
            emit_event(app_logger, job_id)
            time.sleep(0.05)
    except KeyboardInterrupt:
        pass
    finally:
        app_logger.removeHandler(handler)
        handler.close()

    logger.info("Stopped after %d events; archives tracked: %d",
                job_id, len(handler.writer.archives))


if __name__ == "__main__":
    main()
