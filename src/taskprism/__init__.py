# SPDX-License-Identifier: MIT

from taskprism.cleanup import register_cleanup
from taskprism.initialize import initialize
from taskprism.terminal.app import run


def main() -> None:
    initialize()
    register_cleanup()
    run()


if __name__ == "__main__":
    main()
