"""Interactive console for the toy shop."""

from __future__ import annotations

import logging
import math
from typing import Callable, List, TypeVar

from .main import ToyShop, build_shop
from ..core.config import load_settings
from ..core.errors import ToyNotFoundError
from ..core.types import DrawStatus, ToyRecord

T = TypeVar("T")

MENU = """Welcome to the Children's Goods Store!
1. Add Toy
2. Change Drop Rate
3. Draw Prize Toy
4. Display List of Toys
5. Exit"""


def _ask(prompt: str, parse: Callable[[str], T], error: str) -> T:
    while True:
        raw = input(prompt)
        try:
            return parse(raw.strip())
        except ValueError:
            print(error)


def ask_int(prompt: str) -> int:
    return _ask(prompt, int, "Invalid input. Please enter a valid integer.")


def _non_negative(parse: Callable[[str], T]) -> Callable[[str], T]:
    def inner(raw: str) -> T:
        value = parse(raw)
        if not math.isfinite(value) or value < 0:  # type: ignore[operator]
            raise ValueError(raw)
        return value

    return inner


def show_toys(toys: List[ToyRecord]):
    print("List of toys:")
    for t in toys:
        print(f"ID: {t.id}, Name: {t.name}, Quantity: {t.quantity}, Drop Rate: {t.drop_rate}%")


def add_toy(shop: ToyShop):
    print("Adding a new toy:")
    name = input("Enter toy name: ").strip()
    quantity = _ask("Enter quantity: ", _non_negative(int), "Please enter a whole number >= 0.")
    drop_rate = _ask("Enter drop rate (%): ", _non_negative(float), "Please enter a number >= 0.")
    toy_id = shop.add_toy(name, quantity, drop_rate)
    print(f"Toy added successfully! (ID {toy_id})")


def change_drop_rate(shop: ToyShop):
    print("Changing drop rate:")
    toy_id = ask_int("Enter toy ID: ")
    rate = _ask("Enter new drop rate (%): ", _non_negative(float), "Please enter a number >= 0.")
    try:
        shop.change_drop_rate(toy_id, rate)
    except ToyNotFoundError:
        print(f"No toy with ID {toy_id}.")
        return
    print("Drop rate changed successfully!")


def draw(shop: ToyShop):
    result = shop.draw()
    if result.status == DrawStatus.WON and result.toy is not None:
        print(f"Congratulations! You won a {result.toy.name}!")
    elif result.status == DrawStatus.NO_WEIGHT:
        print("Remaining prize toys all have a 0% drop rate; nothing can be drawn.")
    else:
        print("No prize toys available.")


def main():  # pragma: no cover - manual run
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    shop = build_shop(settings)
    while True:
        print(MENU)
        choice = ask_int("Enter your choice: ")
        if choice == 1:
            add_toy(shop)
        elif choice == 2:
            change_drop_rate(shop)
        elif choice == 3:
            draw(shop)
        elif choice == 4:
            show_toys(shop.list_all())
        elif choice == 5:
            break
        else:
            print("Invalid choice. Please try again.")


if __name__ == "__main__":  # pragma: no cover
    main()
