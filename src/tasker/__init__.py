# SPDX-License-Identifier: MIT

from tasker.terminal.app import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
