import logging
import sys

from kitchen.shell.shell_run import build_session, run
from kitchen.utilities.config import LOG_FORMAT, LOG_LEVEL


def main():
    # stdout carries the console transcript, logs go to stderr
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)
    run(build_session())
    return 0


if __name__ == "__main__":
    sys.exit(main())
