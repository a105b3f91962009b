"""Menu-driven console front end for the cafeteria system."""

from typing import Callable, Optional

from ..core import CafeteriaError
from ..core.base import MAX_PRIORITY, MIN_PRIORITY
from ..routing import format_distance_table
from ..system import CafeteriaSystem
from ..system.cafeteria_system import MAX_CAPACITY, MIN_CAPACITY


MENU = """
====== CAFETERIA MENU ======
1. Add Student
2. Add Faculty
3. Serve Next (faculty first)
4. Return Tray
5. Show Queues
6. Show Tray Records
7. Search Tray ID
8. Cafeteria Shortest Paths
0. Exit"""

MAX_TRAY_SEARCH = 9999


def read_int(prompt: str, lo: int, hi: int,
             input_fn: Callable[[str], str] = input) -> int:
    """Prompt until the user enters an integer in [lo, hi]."""
    while True:
        raw = input_fn(prompt)
        try:
            value = int(raw.strip())
        except ValueError:
            print(" Invalid input, try again.")
            continue
        if value < lo or value > hi:
            print(f" Please enter a number between {lo} and {hi}.")
            continue
        return value


def read_string(prompt: str, input_fn: Callable[[str], str] = input) -> str:
    """Prompt until the user enters a non-empty line."""
    while True:
        value = input_fn(prompt).strip()
        if value:
            return value
        print(" Input cannot be empty.")


def setup_system(input_fn: Callable[[str], str] = input, graph=None) -> CafeteriaSystem:
    capacity = read_int("Enter max tray capacity: ", MIN_CAPACITY, MAX_CAPACITY, input_fn)
    available = read_int("Enter starting available trays: ", 0, capacity, input_fn)
    return CafeteriaSystem(tray_capacity=capacity, trays_available=available, graph=graph)


def handle_choice(system: CafeteriaSystem, choice: int,
                  input_fn: Callable[[str], str] = input) -> bool:
    """Run one menu command. Returns False when the session should end."""
    if choice == 0:
        print("Exiting. Goodbye!")
        return False

    try:
        if choice == 1:
            name = read_string("Enter student name: ", input_fn)
            customer = system.add_student(name)
            print(f" Student added -> Token #{customer.token}")
        elif choice == 2:
            name = read_string("Enter faculty name: ", input_fn)
            priority = read_int(f"Enter priority ({MIN_PRIORITY} low - {MAX_PRIORITY} high): ",
                                MIN_PRIORITY, MAX_PRIORITY, input_fn)
            customer = system.add_faculty(name, priority)
            print(f" Faculty added -> Token #{customer.token} | Priority {priority}")
        elif choice == 3:
            result = system.serve_next()
            print(f"\n Served: {result.customer.name} [{result.customer.role}]"
                  f" | Token #{result.customer.token}"
                  f" | Tray #{result.tray_id}"
                  f" | Wait Time = {result.wait_time}")
            print(f" Avg waiting time (last {result.window_size}): "
                  f"{result.rolling_average:.2f}")
        elif choice == 4:
            returned = system.return_tray()
            print(f" Tray #{returned.tray_id} returned. "
                  f"Available trays: {returned.trays_available}")
        elif choice == 5:
            sizes = system.queue_sizes()
            print("\n--- Current Queues ---")
            print(f"Faculty: {sizes['faculty']} | Students: {sizes['students']}")
        elif choice == 6:
            print(" ".join(str(tray_id) for tray_id in system.tray_records()))
        elif choice == 7:
            tray_id = read_int("Enter tray ID to search: ", 0, MAX_TRAY_SEARCH, input_fn)
            print(" Found" if system.search_tray(tray_id) else " Not found")
        elif choice == 8:
            if system.graph.num_nodes < 1:
                print(" No nodes configured.")
                return True
            last = system.graph.num_nodes - 1
            src = read_int(f"Enter start node (0-{last}): ", 0, last, input_fn)
            print("\n" + format_distance_table(src, system.shortest_paths(src)))
    except CafeteriaError as e:
        print(f" {e}")

    return True


def run_interactive(system: Optional[CafeteriaSystem] = None,
                    input_fn: Callable[[str], str] = input,
                    graph=None) -> int:
    """Run the menu loop until the user exits. Returns the exit status."""
    print("Welcome to Cafeteria Self-Service System!")
    try:
        if system is None:
            system = setup_system(input_fn, graph)
        while True:
            print(MENU)
            choice = read_int("Your choice: ", 0, 8, input_fn)
            if not handle_choice(system, choice, input_fn):
                return 0
    except (EOFError, KeyboardInterrupt):
        print("\nExiting. Goodbye!")
        return 0
