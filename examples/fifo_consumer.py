"""Example of a keyed FIFO work queue with retries at the front."""

import random

from linkedodict import LinkedOrderedDict


def worker(queue: LinkedOrderedDict[str, dict], fail_rate: float = 0.2) -> int:
    """
    Process items from the front of the queue until it is empty.

    Failed items are put back and moved to the front so they are retried
    next, keeping their original payload.

    Args:
        queue: The queue to process from
        fail_rate: Probability of simulated failure (0.0 to 1.0)

    Returns:
        Number of items processed successfully
    """
    processed = 0
    while (entry := queue.shift()) is not None:
        key, value = entry
        attempts = value.get("attempts", 0) + 1
        print(f"Processing {key} (attempt {attempts})...")

        if random.random() < fail_rate and attempts < 3:
            print(f"  ✗ Failed {key} - will retry")
            queue.set(key, {**value, "attempts": attempts})
            queue.to_start(key)
        else:
            print(f"  ✓ Completed {key}")
            processed += 1
    return processed


def main() -> None:
    """Run the FIFO consumer example."""
    queue = LinkedOrderedDict[str, dict]()

    for i in range(8):
        queue.set(f"job-{i}", {"payload": i})

    # A re-submitted job updates its payload but keeps its place in line
    queue.set("job-2", {"payload": 200})

    print("=== FIFO Consumer Example ===\n")
    print(f"Queue: {list(queue.keys())}\n")

    processed = worker(queue)
    print(f"\nProcessed {processed} items, queue now: {queue}")


if __name__ == "__main__":
    main()
