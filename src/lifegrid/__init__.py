# SPDX-License-Identifier: MIT

from lifegrid.cleanup import register_cleanup
from lifegrid.initialize import initialize
from lifegrid.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
