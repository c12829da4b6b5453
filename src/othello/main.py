from __future__ import annotations

import logging
import time

from othello.config import LOG_LEVEL
from othello.ui.session import run_game


def run_menu() -> None:
    print("Select mode:")
    print("1) Human (Black) vs CPU")
    print("2) CPU (Black) vs Human - you choose the CPU's first move")
    print("3) Run self-play benchmark")

    choice = input("Choice: ").strip()

    if choice == "1":
        print("\nStarting game: you play Black.")
        time.sleep(1)
        run_game(cpu_first=False)
        return

    if choice == "2":
        print("\nStarting game: CPU plays Black, you play White.")
        time.sleep(1)
        run_game(cpu_first=True)
        return

    if choice == "3":
        from othello.scripts.selfplay import main as selfplay_main

        selfplay_main([])
        return

    print("\nInvalid choice. Defaulting to Human (Black) vs CPU.\n")
    time.sleep(1)
    run_game(cpu_first=False)


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_menu()


if __name__ == "__main__":
    main()
