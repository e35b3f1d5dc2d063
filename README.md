# linkedstructs

A small set of container types:

- `linkedstructs.single_list.SingleList`: a singly linked list
- `linkedstructs.double_list.DoubleList`: a doubly linked list that you can also walk backwards
- `linkedstructs.stacks.ArrayStack` and `linkedstructs.stacks.LinkedStack`: stacks with a fixed maximum size
- `linkedstructs.queues.ArrayQueue`, `linkedstructs.queues.LinkedQueue` and
  `linkedstructs.queues.CircularQueue`: queues with a fixed maximum size
- `linkedstructs.student.Student`: a frozen record with `name`, `age` and `group`, useful as sample data

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install .[test]
```

## Lists

Both list types accept an optional iterable of initial items. They support `len()`, iteration, `in`,
reading with `[]` and assigning with `[]`. Each also has `is_empty()` and these methods:
`insert_at_beginning`, `insert_at_end`, `insert_at_index`, `remove_from_beginning`,
`remove_from_end` and `remove_at_index`. `DoubleList` also supports `reversed()`.

```python
from linkedstructs.single_list import SingleList
from linkedstructs.double_list import DoubleList

items = SingleList([1, 2, 3])
items.insert_at_beginning(0)
items.insert_at_index(2, 99)
items.remove_from_end()
print(len(items), 99 in items, items[2])   # 4 True 99
print(items)                               # List data: 0 1 99 2

letters = DoubleList("abc")
letters.insert_at_end("d")
print(list(reversed(letters)))             # ['d', 'c', 'b', 'a']
print(letters)                             # List: a b c d
```

Indices must lie between `0` and `len - 1`. For `insert_at_index` the index may also equal `len`.
Negative indices are not accepted. An index outside that range raises `IndexError`. Removing from an
empty list raises `IndexError` as well. An index that is not an integer raises `TypeError`.

## Stacks and queues

Each stack and queue takes its maximum size when you create it. A negative size raises `ValueError`.
They all provide `is_empty()`, `is_full()`, `peek()` and `len()`. Stacks add `push`/`pop`, and
queues add `enqueue`/`dequeue`.

- Adding to a full container raises `linkedstructs.errors.ContainerFullError`.
- Taking from an empty container, or calling `peek` on one, raises `linkedstructs.errors.ContainerEmptyError`.

```python
from linkedstructs.stacks import ArrayStack
from linkedstructs.queues import CircularQueue

stack = ArrayStack(3)
stack.push(10)
stack.push(20)
print(stack.pop())                     # 20

queue = CircularQueue(2)
queue.enqueue("a")
queue.enqueue("b")
print(queue.dequeue(), queue.peek())   # a b
```

## Students

```python
from linkedstructs.student import Student

s = Student("Andrii", 18, "SE-143")
print(s)                               # [Name: Andrii, Age: 18, Group: SE-143]
print(s == Student("Andrii", 18, "SE-143"))   # True
```

## Demo

The demo command walks through a stack with a maximum size of 3 and an `ArrayQueue` with a maximum size of 5:

```
linkedstructs-demo
```

It shows:

- pushing onto a full stack, which prints `Error: Stack is full`;
- popping the three values 30, 20 and 10;
- popping once more from the empty stack, which prints `Error: Stack is empty`;
- the queue's dequeued value, 10, and then its front, 20.

The command takes no options apart from `--help`.

## Running the tests

```
pytest
```