"""
Interactive console menu around MaxHeap.

The menu owns all input parsing and output formatting: MaxHeap only returns
data or raises, and every condition it raises is rendered here and the loop
carries on. One line of input is read per prompt; end of input exits.

Run:
    python -m int_maxheap.Menu.menu --initial_capacity 20 --log_path logs/session.txt
"""

import os
import sys
import time
import argparse
from typing import Callable, Dict, List, Optional, TextIO

from int_maxheap.Max_Heap import MaxHeap, DEFAULT_INITIAL_CAPACITY
from int_maxheap.Integer_Source.integer_source import INT_TOKEN_PAT
from int_maxheap.errors import (
    HeapError,
    EmptyHeapError,
    SourceUnavailableError,
    MalformedInputError
)
from int_maxheap.utils import TeeStdout # Utility to tee the session to a transcript file

EXIT_CHOICE = 6
MENU_LINES = [
    "\n===== MAX HEAP MENU =====",
    "1 - Build heap from file",
    "2 - Insert number",
    "3 - Delete max",
    "4 - Heapsort",
    "5 - Print heap",
    "6 - Exit",
]
EMPTY_MESSAGES = {
    "delete_max": "\nHeap is empty.",
    "heap_sort": "\nThe heap is empty. There is nothing to sort.",
    "snapshot": "\nHeap is empty.",
}


def parse_int(text: str) -> int:
    """
    Parse one line of user input as a decimal integer.

    Raises:
        - MalformedInputError: the line is not a single integer.
    """
    stripped = text.strip()
    if INT_TOKEN_PAT.fullmatch(stripped) is None:
        raise MalformedInputError(stripped)
    return int(stripped)


def format_values(values: List[int]) -> str:
    return " ".join(str(v) for v in values)


class HeapMenu:
    def __init__(
        self,
        heap: MaxHeap,
        input_stream: TextIO,
        output_stream: TextIO,
        verbose: bool = False,
    ):
        self.heap = heap
        self.input = input_stream
        self.output = output_stream
        self.verbose = verbose
        self._actions: Dict[int, Callable[[], None]] = {
            1: self._build_from_file,
            2: self._insert,
            3: self._delete_max,
            4: self._heap_sort,
            5: self._print_heap,
        }

    def _print(self, *args) -> None:
        print(*args, file=self.output)

    def _prompt(self, text: str) -> Optional[str]:
        """Write a prompt and read one line; None at end of input."""
        self.output.write(text)
        self.output.flush()
        line = self.input.readline()
        if line == "":
            return None
        return line.strip()

    def run(self) -> int:
        """
        Loop until the exit choice (or end of input) and return the exit code.
        """
        while True:
            for line in MENU_LINES:
                self._print(line)

            line = self._prompt("\nEnter your choice: ")
            if line is None:
                self._print("\nExiting program...")
                return 0

            try:
                choice = parse_int(line)
            except MalformedInputError as e:
                self._print(f"[Error] {e}. Please try again.")
                continue

            if choice == EXIT_CHOICE:
                self._print("Exiting program...")
                return 0

            action = self._actions.get(choice)
            if action is None:
                self._print("That was an invalid choice. Please try again.")
                continue

            try:
                action()
            except EmptyHeapError as e:
                self._print(EMPTY_MESSAGES.get(e.operation, "\nHeap is empty."))
            except SourceUnavailableError as e:
                self._print(
                    f"\n[Error] File not found: {e.path}. If there are no \".txt\" files, "
                    "you will need to manually create a file with your own values listed in it."
                )
            except (HeapError, OverflowError) as e:
                self._print(f"[Error] {e}")

    def _build_from_file(self) -> None:
        file_name = self._prompt("Enter file name: ")
        if file_name is None:
            return

        start_time = time.perf_counter()
        count = self.heap.build_heap_from_file(file_name)
        end_time = time.perf_counter()

        self._print("\nThe heap has been successfully built from the file.")
        if self.verbose:
            self._print(f"[build] {end_time - start_time:.6f} sec for {count} values")

    def _insert(self) -> None:
        line = self._prompt("Enter a number to insert: ")
        if line is None:
            return

        value = parse_int(line)
        self.heap.insert(value)
        self._print(f"Value {value} has been inserted.")

    def _delete_max(self) -> None:
        self._print(f"Deleted max: {self.heap.delete_max()}")

    def _heap_sort(self) -> None:
        start_time = time.perf_counter()
        values = self.heap.heap_sort()
        end_time = time.perf_counter()

        self._print("\nSorted Output:")
        self._print(format_values(values))
        self._print("\nHeap destroyed after heap sort (size reset to 0).")
        if self.verbose:
            self._print(f"[sort] {end_time - start_time:.6f} sec for {len(values)} values")

    def _print_heap(self) -> None:
        values = self.heap.snapshot()
        self._print("\nHeap elements:")
        self._print(format_values(values))


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive integer max-heap")
    parser.add_argument(
        "--initial_capacity",
        "-n",
        type = int,
        default = DEFAULT_INITIAL_CAPACITY,
        help = "number of slots the heap allocates up front (doubles as needed)"
    )
    parser.add_argument("--log_path", type=str, default=None, help="Also write the session to this file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Print config and operation timings")

    args = parser.parse_args(argv)
    if args.initial_capacity < 1:
        parser.error(f"--initial_capacity must be at least 1, got {args.initial_capacity}")

    output = sys.stdout
    log_file = None
    if args.log_path:
        log_dir = os.path.dirname(args.log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        log_file = open(args.log_path, "w", encoding="utf-8")
        output = TeeStdout(sys.stdout, log_file)

    try:
        if args.verbose:
            print("\n========== Heap Menu Config ==========", file=output)
            for k, v in sorted(vars(args).items()):
                print(f"{k:20s}: {v}", file=output)
            print("======================================", file=output)

        menu = HeapMenu(
            heap = MaxHeap(args.initial_capacity),
            input_stream = sys.stdin,
            output_stream = output,
            verbose = args.verbose,
        )
        return menu.run()
    finally:
        if log_file is not None:
            log_file.close()


if __name__ == "__main__":
    sys.exit(main())
