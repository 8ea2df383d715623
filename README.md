# classics

Classic data structures, algorithms, a game, two small simulations and a
handful of file and bit utilities, written in plain Python with no
third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

| Module                 | Contents |
|------------------------|----------|
| `classics.mathutils`   | `add`, `multiply`, `factorial` |
| `classics.linkedlist`  | `SinglyLinkedList`, `DoublyLinkedList` |
| `classics.stack`       | `BoundedStack`, raising `StackOverflowError` / `StackUnderflowError` |
| `classics.hashtable`   | `djb2` and `ChainedHashTable`, a string-keyed table with separate chaining |
| `classics.bst`         | `BinarySearchTree`: insert, delete, membership, minimum, height and three traversals |
| `classics.graph`       | undirected weighted `Graph`: DFS, BFS, shortest path, component count, cycle check |
| `classics.heap`        | bounded `BinaryHeap` (min or max), `HeapFullError`, `HeapEmptyError`, `heap_sort` |
| `classics.tictactoe`   | `Board` with a minimax opponent, and an interactive `play` loop |
| `classics.perceptron`  | `Perceptron` trained with the perceptron rule, `TrainingResult`, `activate` |
| `classics.moldyn`      | `Particle`, Lennard-Jones forces, velocity Verlet steps, kinetic energy, temperature |
| `classics.textfiles`   | `FileStats`, `analyze_file`, `search_in_file`, `replace_in_file`, `reverse_file`, `merge_files`, `write_int_array`, `read_int_array` |
| `classics.records`     | `Student` records as CSV (`write_csv`, `read_csv`, `append_csv`) or fixed-size binary records (`write_binary`, `read_binary`, `read_binary_record`), plus `count_lines` and `copy_file` |
| `classics.bits`        | `set_bit`, `clear_bit`, `toggle_bit`, `check_bit` on 32-bit words, `float_to_bits`, `bits_to_float`, `format_array`, `Color`, `Permissions`, `format_mode`, `IPv4Address` |
| `classics.echo`        | `create_server`, `serve_client`, `run_client` for a greeting TCP echo server and its client |
| `classics.personnel`   | `DayOfWeek`, `Status`, `Flags`, `Date`, `Address`, `Employee`, `Point`, `Complex` |
| `classics.buildconfig` | `LogLevel`, `Version`, `make_version`, `compute`, `fast_multiply`, `log_message` |

Errors are raised as exceptions: popping an empty stack, heap or list,
looking up a missing hash-table key (`KeyError`), inserting a list item at an
out-of-range position (`IndexError`), or passing `compute` a value outside
1..1000 (`ValueError`).

## Examples

```python
from classics.mathutils import add, multiply, factorial

add(2, 3)        # 5
multiply(-2, 3)  # -6
factorial(5)     # 120
```

```python
from classics.linkedlist import DoublyLinkedList

items = DoublyLinkedList()
for value in (10, 20, 30):
    items.push_back(value)
items.push_front(5)
items.insert(2, 15)
list(items)            # [5, 10, 15, 20, 30]
items.reverse()
list(items)            # [30, 20, 15, 10, 5]
15 in items            # True
items.format_forward() # 'NULL <-> 30 <-> 20 <-> 15 <-> 10 <-> 5 <-> NULL'
```

```python
from classics.stack import BoundedStack, StackUnderflowError

stack = BoundedStack(100)
stack.push(10)
stack.push(20)
stack.pop()            # 20
stack.pop()            # 10
try:
    stack.pop()
except StackUnderflowError:
    print("empty")
```

```python
from classics.hashtable import ChainedHashTable

table = ChainedHashTable(10)
table["apple"] = 100
table["banana"] = 200
table["apple"] = 150
table["apple"]         # 150
"grape" in table       # False
len(table)             # 2
print(table.render())
```

```python
from classics.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (50, 30, 70, 20, 40, 60, 80):
    tree.insert(value)
list(tree.inorder())   # [20, 30, 40, 50, 60, 70, 80]
tree.height()          # 3
```

```python
from classics.heap import BinaryHeap, heap_sort

heap = BinaryHeap(20, max_heap=True)
for value in (10, 20, 15, 30):
    heap.push(value)
heap.pop()                           # 30
heap_sort([64, 34, 25, 12, 22, 11, 90])  # [11, 12, 22, 25, 34, 64, 90]
```

```python
from classics.tictactoe import Board

board = Board(["XX ", "OO ", "   "])
board.best_move()      # (0, 2)
```

## Command-line programs

```
classics-math            # prints a sum, a product and a factorial
classics-tictactoe       # play tic-tac-toe against a friend or the computer
classics-perceptron      # train a perceptron on the AND gate and show its weights
classics-moldyn          # run a 1000-step molecular dynamics simulation
classics-echo-server     # start the TCP echo server (--host, --port; default port 8080)
classics-echo-client     # connect to it and exchange lines (--host, --port)
```

In tic-tac-toe the human plays `O` and moves first; in mode 2 the computer
plays `X`. Start `classics-echo-server` in one terminal and
`classics-echo-client` in another; the client sends each line typed on
standard input and prints the echo, and stops at end of input or at a line
beginning with `quit`.

## Limits

- The echo server serves a single client and then exits; it does not handle
  several clients at once.
- The perceptron and simulation commands start from unseeded random values,
  so their output differs from run to run. Pass a `random.Random` to
  `Perceptron` or `init_particles` for repeatable results.