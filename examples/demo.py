#!/usr/bin/env python3
"""
termprompt demo

Runs every prompt type in turn and prints what was picked.

Usage:
    python examples/demo.py

    # Force the ASCII glyphs and SS3 arrow keys
    TERMPROMPT_PROFILE=legacy python examples/demo.py

    # Trace decoded keystrokes into demo.log
    python examples/demo.py --debug

Settings are also read from a .env file in the current directory or
its parents.
"""

import argparse

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from termprompt import (
    Choice,
    PromptConfig,
    prompt_checkbox,
    prompt_confirm,
    prompt_input,
    prompt_input_number,
    prompt_input_password,
    prompt_list,
    prompt_list_object,
)
from termprompt.logging import setup_logging

console = Console()


def main() -> None:
    parser = argparse.ArgumentParser(description="termprompt demo")
    parser.add_argument("--debug", action="store_true", help="Log keystrokes to demo.log")
    args = parser.parse_args()

    load_dotenv()
    if args.debug:
        setup_logging("DEBUG", file="demo.log")

    config = PromptConfig.from_env()
    console.print(f"[bold]Profile:[/bold] {config.resolve_profile().value}\n")

    answers: list[tuple[str, str]] = []

    crust = prompt_list(
        "Which crust?",
        ["thin", "regular", "deep dish", "stuffed", "gluten free"],
        hint="use arrow keys",
        page_size=3,
        config=config,
    )
    answers.append(("crust", crust))

    size = prompt_list_object(
        "Which size?",
        [Choice("small (25cm)", 25), Choice("medium (30cm)", 30), Choice("large (35cm)", 35)],
        config=config,
    )
    answers.append(("size", f"{size}cm"))

    toppings = prompt_checkbox(
        "Toppings?",
        ["cheese", "olives", "ham", "mushrooms", "pineapple", "peppers"],
        hint="space to toggle",
        min_selection=1,
        max_selection=3,
        config=config,
    )
    answers.append(("toppings", ", ".join(toppings)))

    name = prompt_input("Name for the order?", default="guest", hint="guest", config=config)
    answers.append(("name", name))

    tip = prompt_input_number("Tip?", hint="0.00", config=config)
    answers.append(("tip", str(tip)))

    secret = prompt_input_password("Loyalty PIN?", config=config)
    answers.append(("PIN", "*" * len(secret)))

    confirmed = prompt_confirm("Place the order?", default=True, config=config)
    answers.append(("confirmed", "yes" if confirmed else "no"))

    table = Table(title="Order")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, value in answers:
        table.add_row(field, value)

    console.print()
    console.print(table)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
