# nodekit

Small, dependency-free data structures built on a singly linked list:

- `nodekit.linked_list.LinkedList`: a singly linked list with positional and
  value-relative insertion and deletion.
- `nodekit.stack.Stack`: a LIFO stack.
- `nodekit.queue.Queue`: a FIFO queue with a fixed capacity (20 by default).

Two command-line tools use the stack to convert numbers between binary and
decimal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Linked list

```python
from nodekit.linked_list import LinkedList, NodeNotFoundError

items = LinkedList([10, 32, 60])
items.insert_first(20)
items.insert_after(20, 25)
items.insert_at(2, 100)
items.insert_before(100, 99)
print(items)                      # [20]->[99]->[100]->[25]->[10]->[32]->[60]
print(len(items))                 # 7
print(32 in items)                # True
print(items.format_reverse())     # [60]->[32]->[10]->[25]->[100]->[99]->[20]->NULL

removed = items.delete_first()    # 20
removed = items.delete_value(32)  # 32
print(list(reversed(items)))      # [60, 10, 25, 100, 99]

try:
    items.insert_after(12345, 1)
except NodeNotFoundError as exc:
    print(exc)                    # node with data 12345 not found
```

Positions are 1-based. `insert_at` places the new value so that it takes the
given position, which must already exist, so `insert_at` cannot append. Use
`insert_last` for that.

The list also has `insert_last`, `delete_last`, `delete_after`,
`delete_before`, `delete_at`, `find_node`, `find_previous`, `is_empty` and
`clear`. Every delete method returns the removed value.

An empty list prints as `list empty`. The methods raise these errors:

- Deleting from an empty list raises `EmptyListError`.
- A missing reference value raises `NodeNotFoundError`. So does `delete_after`
  on the last node and `delete_before` on the first node.
- A position outside `1..len(list)` raises `InvalidPositionError`.

All of these derive from `LinkedListError`.

## Stack

```python
from nodekit.stack import Stack, StackEmptyError

stack = Stack()
for value in (10, 20, 30, 40):
    stack.push(value)
print(stack)        # [40]->[30]->[20]->[10]
print(list(stack))  # [40, 30, 20, 10]  (top first)
print(stack.pop())  # 40
```

An empty stack prints as `Stack is empty`. Popping an empty stack raises
`StackEmptyError`, which is a subclass of `EmptyListError`.

## Queue

```python
from nodekit.queue import Queue, QueueFullError, QueueEmptyError

queue = Queue()             # capacity 20; Queue(capacity=5) for another size
for value in (10, 20, 30, 40):
    queue.enqueue(value)
print(queue)                # [10]->[20]->[30]->[40]
print(queue.dequeue())      # 10
print(queue.is_full())      # False
```

An empty queue prints as `Queue is empty`. Two errors can come up:

- Enqueuing into a full queue raises `QueueFullError`, an `OverflowError`.
- Dequeuing from an empty queue raises `QueueEmptyError`, an `IndexError`.

A capacity below 1 raises `ValueError`.

## Conversion tools

```python
from nodekit.bin_to_dec import binary_to_decimal
from nodekit.dec_to_bin import decimal_to_binary

binary_to_decimal("1011")  # 11
decimal_to_binary(11)      # "1011"
decimal_to_binary(0)       # ""  (zero and negative numbers give no digits)
```

`binary_to_decimal` raises `ValueError` for any character other than `0` or
`1`.

The same conversions run from the command line. Each command takes the number
as its first argument. Without an argument, it prompts for one on standard
input:

```
$ nodekit-bin-to-dec 1011
Decimal: 11
$ nodekit-dec-to-bin 11
Binary: 1 0 1 1 
```

On invalid or missing input, each command prints a message to standard error
and exits with status 1.