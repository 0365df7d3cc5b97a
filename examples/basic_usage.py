"""Basic usage example for linkedmap."""

from linkedmap import KeyNotFoundError, LinkedMap


def main() -> None:
    """Demonstrate basic map operations."""
    tasks = LinkedMap[str, dict]()

    print("=== Basic LinkedMap Example ===\n")

    tasks.insert("task-1", {"action": "send_email", "to": "user@example.com"})
    tasks.insert("task-2", {"action": "process_data", "records": 100})
    tasks.insert("task-3", {"action": "generate_report", "format": "pdf"})

    print(f"Size: {tasks.size()}")
    print(f"Keys: {list(tasks)}\n")

    # Updating keeps the position
    tasks.insert("task-1", {"action": "send_email", "to": "admin@example.com"})
    print(f"After update: {list(tasks)}")

    # Removing and re-inserting moves to the end
    tasks.remove("task-2")
    tasks.insert("task-2", {"action": "process_data", "records": 200})
    print(f"After re-insert: {list(tasks)}\n")

    for key, value in tasks.iterate(reverse=True):
        print(f"  {key}: {value}")

    try:
        tasks.get("task-9")
    except KeyNotFoundError as exc:
        print(f"\nLookup failed: {exc}")


if __name__ == "__main__":
    main()
