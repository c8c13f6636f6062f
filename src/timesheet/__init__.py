# SPDX-License-Identifier: MIT

from timesheet.cleanup import register_cleanup
from timesheet.initialize import initialize
from timesheet.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
