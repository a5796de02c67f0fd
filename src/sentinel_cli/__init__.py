"""CLI helpers: the menu-driven demonstration front end."""

from sentinel_cli.menu import (
    keyboard_reader,
    main,
    menu_loop,
    parse_int,
    run_demo,
)

__all__ = [
    "keyboard_reader",
    "main",
    "menu_loop",
    "parse_int",
    "run_demo",
]
