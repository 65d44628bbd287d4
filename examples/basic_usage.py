"""Basic usage example for linkedodict."""

from linkedodict import LinkedOrderedDict


def main() -> None:
    """Demonstrate basic dict operations."""
    d = LinkedOrderedDict[str, dict]()

    print("=== Basic Ordered Dict Example ===\n")

    # Insert in order; set() chains
    d.set("task-1", {"action": "send_email"}).set("task-2", {"action": "process_data"})
    d.set("task-3", {"action": "generate_report"})
    print(f"Initial:      {d}")

    # Updating a key keeps its place
    d.set("task-2", {"action": "process_data", "records": 100})
    print(f"After update: {d}")

    # Reorder without touching values
    d.to_start("task-3")
    d.to_end("task-1")
    print(f"Reordered:    {d}")

    print(f"\nKeys: {list(d.keys())}")
    print(f"Has task-4: {d.has('task-4')}")
    print(f"Delete task-4: {d.delete('task-4')}\n")

    # Drain from both ends
    print(f"shift() -> {d.shift()}")
    print(f"pop()   -> {d.pop()}")
    print(f"Remaining: {d}")

    d.clear()
    print(f"Cleared:   {d}")
    print(f"pop() on empty -> {d.pop()}")


if __name__ == "__main__":
    main()
