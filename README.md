# dsprimer

Classic textbook data structures, each kept small and readable, together with
the stack algorithms usually taught alongside them.

## What is inside

| Module | Contents |
| --- | --- |
| `dsprimer.seqlist` | `SeqList`: a fixed-capacity sequential list with 1-based positions that can be enlarged with `increase_size` |
| `dsprimer.static_list` | `StaticLinkedList`: a linked list kept in a fixed array, linked by cursors |
| `dsprimer.linked_list` | `Node`, `LinkedList`, and `insert_after`, `insert_before` and `delete_node` for working on single nodes |
| `dsprimer.doubly_list` | `DNode` and `DoublyLinkedList` |
| `dsprimer.circular_list` | `CircularSinglyList` and `CircularDoublyList` |
| `dsprimer.stack` | `SeqStack` and `SharedStack` (two stacks growing toward each other in one array) |
| `dsprimer.linked_stack` | `LinkedStack` |
| `dsprimer.circular_queue` | `CircularQueue`: a ring buffer that leaves one slot free to tell "full" from "empty" |
| `dsprimer.linked_queue` | `LinkedQueue` |
| `dsprimer.expressions` | bracket matching, infix to postfix conversion, postfix and infix evaluation |
| `dsprimer.recursion` | `factorial` and `fibonacci` |

Positions in the list types count from 1, as in the textbooks.
Where an operation cannot be done, an exception is raised rather than a flag
returned: `IndexError` for a position out of range or an empty structure,
`OverflowError` for a full one, and `ValueError` for a bad argument such as a
missing node or a stack number other than 0 or 1.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dsprimer.seqlist import SeqList

lst = SeqList(10)
lst.insert(1, 20)
lst.insert(2, 30)
lst.insert(3, 40)
list(lst)         # [20, 30, 40]
lst.locate(40)    # 3
lst.delete(2)     # 30
len(lst)          # 2
```

```python
from dsprimer.linked_list import LinkedList

lst = LinkedList([1, 2, 3])
lst.insert(2, 9)
list(lst)                                      # [1, 9, 2, 3]
list(LinkedList.from_head_insertion([1, 2, 3]))  # [3, 2, 1]
```

```python
from dsprimer.circular_queue import CircularQueue

queue = CircularQueue(10)   # holds up to 9 items
queue.enqueue(1)
queue.enqueue(2)
queue.head()                # 1
queue.dequeue()             # 1
len(queue)                  # 1
```

```python
from dsprimer.linked_stack import LinkedStack

stack = LinkedStack()
stack.push(1)
stack.push(2)
stack.top()       # 2
stack.pop()       # 2
```

```python
from dsprimer.expressions import (
    bracket_check,
    evaluate_infix,
    evaluate_postfix,
    infix_to_postfix,
)

bracket_check("([)]")                # False
bracket_check("{[()]}")              # True
infix_to_postfix("3+2*(1+2)")        # "3212+*+"
evaluate_postfix("3212+*+")          # 9
evaluate_infix("3+2*(1+2)")          # 9
```

Expressions work on single-digit operands and the operators `+ - * /`;
division is integer division truncating toward zero, and other characters are
ignored. A malformed expression raises `ValueError`. `bracket_check_counts`
only counts each kind of bracket, so it does not notice wrong nesting such as
`([)]`; `bracket_check_array` gives the same answers as `bracket_check`.

```python
from dsprimer.recursion import factorial, fibonacci

factorial(5)     # 120
fibonacci(10)    # 55
```

Both take `n >= 1` and raise `ValueError` otherwise.

## Commands

Three small demonstration commands are installed with the package:

```
dsprimer-seqlist
dsprimer-expressions [EXPRESSION]
dsprimer-recursion [N]
```

`dsprimer-seqlist` builds a list of 20, 30 and 40, prints it and deletes the
second element. `dsprimer-expressions` prints `0` for the bracket check of
`([)]`, then converts the given expression (by default `3+2*(1+2)`) to postfix
and evaluates it both ways. `dsprimer-recursion` prints the factorial and the
Fibonacci number of `N`, read from the first argument or, if there is none,
from a line of standard input.