"""Demonstration: build a list, link its tail back into it, detect the cycle."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from dsdrills.linked_list import LinkedList
from dsdrills.solution import find_cycle


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the cycle-detection demonstration and return the exit status."""
    parser = argparse.ArgumentParser(
        prog="dsdrills", description="Detect a cycle in a linked list."
    )
    parser.parse_args(argv)

    linked_list = LinkedList(range(10))

    tail = linked_list.head
    while tail.next is not None:
        tail = tail.next

    target = linked_list.head
    while target is not None and target.data != 5:
        target = target.next

    if target is not None:
        tail.next = target
        print("Ciclo creado apuntando al nodo con valor 5.")

    try:
        if find_cycle(linked_list):
            print("Se detectó un ciclo en la lista.")
        else:
            print("No se detectó ningún ciclo.")
    finally:
        tail.next = None

    return 0


if __name__ == "__main__":
    raise SystemExit(main())