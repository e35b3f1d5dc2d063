"""A short demonstration of the bounded stack and queue."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .queues import ArrayQueue
from .stacks import ArrayStack


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exercise a bounded stack and queue, printing the results."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.parse_args(argv)

    try:
        stack: ArrayStack[int] = ArrayStack(3)
        stack.push(10)
        stack.push(20)
        stack.push(30)

        try:
            stack.push(30)
        except Exception as exc:
            print(f"Error: {exc}")

        print(f"Top element: {stack.pop()}")
        print(f"Top element after pop: {stack.pop()}")
        print(f"Top element after push: {stack.pop()}")
        print(stack.pop(), end="")
    except Exception as exc:
        print(f"Error: {exc}")

    queue: ArrayQueue[int] = ArrayQueue(5)
    queue.enqueue(10)
    queue.enqueue(20)
    queue.enqueue(30)

    print(queue.dequeue())
    print(queue.peek())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())