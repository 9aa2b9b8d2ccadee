# drillbook

A collection of classic programming drills: small data structures, string and
array algorithms, operating-system simulations and a couple of console games.
Each topic lives in its own module and can be imported as a library; most
modules also come with a console program. The console programs print their
prompts and messages in Chinese.

Requires Python 3.10 or later and has no third-party dependencies.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Data structures

- `drillbook.binarytree` – `build_tree(tokens, null="#")` builds a tree of
  `TreeNode`s from a preorder sequence in which `null` marks an empty child
  (a sequence that ends too early raises `ValueError`). `preorder`,
  `inorder` and `postorder` return lists of values; pass a `null` marker to
  have empty children appear in the output. `tree_size`, `leaf_count`,
  `level_size(root, k)` (root is level 1) and `find(root, value)` complete
  the set.
- `drillbook.seqlist` – `SeqList`, a list addressed by 1-based positions:
  `push_back`, `pop_back` (a no-op when empty), `push_front`, `pop_front`,
  `insert`, `erase`, `modify` (out-of-range positions raise `IndexError`),
  `find` (position or `None`) and `format`.
- `drillbook.arraylist` – `ArrayList`, addressed by 0-based positions for
  `insert` and `erase`, with `push_back`, `push_front`, `pop_front`,
  `pop_back` (these raise `IndexError` when empty), 1-based `find` and
  `format`.
- `drillbook.linkedqueue` – `LinkedQueue`, a FIFO queue with `push`, `pop`,
  `front`, `back` and `format`; reading an empty queue raises `IndexError`.
- `drillbook.slist` – `SList`, a singly linked list of `SListNode`s, with
  `push_back`, `push_front`, `pop_back`, `pop_front`, `find` (returns the
  node), `insert_after`, `erase_after` and `clear`; `str()` renders it as
  `1->2->NULL`. `find_kth_to_tail(head, k)` returns the k-th node from the
  end, or `None`.
- `drillbook.linkedlist` – `LinkedList` with `insert_head`, `insert_tail`,
  `kth_from_end`, `delete` (1-based, returns the removed value), `reverse`,
  `middle` (the second middle for even lengths) and `format`.

```python
from drillbook.binarytree import build_tree, preorder, tree_size

root = build_tree("ABD##E#H##CF##G##", "#")
print(preorder(root, "#"))
print(tree_size(root))    # 8
```

## String and array algorithms

`drillbook.textalgos` provides `first_unique_char`, `longest_common_prefix`,
`longest_palindrome`, `longest_substring_length`, `binary_search` (index or
`None`) and `simplify_path` (an empty path raises `ValueError`).

```python
from drillbook.textalgos import simplify_path, longest_palindrome

simplify_path("/a/./b/../../c/")   # "/c"
longest_palindrome("cbbd")         # "bb"
```

## Operating-system simulations

- `drillbook.scheduling` – process scheduling over `Task` records (name,
  arrival time, service time): `fcfs`, `sjf`, `hrrn` and `preemptive_hrrn`
  return scheduled copies with start and end times filled in, and
  `format_table` renders them. A task with a non-positive service time
  raises `ValueError`.
- `drillbook.memory` – partition allocation over 512 units by default.
  `PartitionTable` offers `first_fit`, `best_fit`, `worst_fit`, `release`
  (merges with free neighbours) and `format`; a free block whose leftover
  would be two units or fewer is handed out whole. `FreeListAllocator`
  offers first-fit `allocate` and `release` by job id. Failed allocations
  raise `OutOfMemory`; each region is a `Block`.
- `drillbook.banker` – the banker's algorithm. `BankerState(available,
  maximum, need)` derives the allocation; `safe_sequence()` returns a safe
  order of processes or `None`, and `request(process, amounts)` grants a
  request and returns the safe sequence, raising `RequestError` (and rolling
  back) when it cannot be granted.
- `drillbook.producer_consumer` – a `BoundedBuffer` ring buffer guarded by
  semaphores, with `produce` and `consume` and an optional wait `timeout`.
  `parse_thread_specs(text)` reads records of id, role (`P` or `C`), delay
  and duration into `ThreadInfo`s, and `run(specs, buffer, sleep)` starts a
  thread for each and returns the log of what happened.

## Applications and games

- `drillbook.contacts` – a `ContactBook` of up to 100 `Contact` records with
  `add`, `remove`, `find` (0-based index) and `update`; `ContactBookFull`
  and `ContactNotFound` signal the error cases, and `format_contact` renders
  one entry.
- `drillbook.tictactoe` – a 5×5 `Board` where a full row, column or diagonal
  wins: `place`, `is_full`, `winner`, `empty_cells`, `format`, and
  `computer_move(board, rng)` for a random computer player.
- `drillbook.mathgame` – arithmetic questions hidden among random letters:
  `make_question(rng)`, `Question.accepts` (for `-` and `/` either order
  counts) and `rating`.
- `drillbook.exercises` – small warm-ups: `diamond`, `bounce`,
  `hello_lines` and `process_ids`.

## Console programs

```
drillbook-binarytree [PREORDER]        traversals and size of a tree
drillbook-seqlist                      SeqList demonstration
drillbook-queue                        LinkedQueue demonstration
drillbook-slist                        SList demonstration
drillbook-linkedlist                   LinkedList demonstration
drillbook-contacts                     interactive contact book
drillbook-scheduling                   interactive scheduling menu
drillbook-memory [--free-list]         partition table, or the free-list allocator
drillbook-banker                       banker's algorithm session
drillbook-tictactoe [--seed N]         play against the computer
drillbook-mathgame [--seed N] [--delay S]
drillbook-producer-consumer [PATH]     threads listed in PATH (default test2.txt)
drillbook-exercises [diamond|bounce|hello|pids]
```

`drillbook-exercises` takes `--rows` for `diamond`, `--height` and
`--bounces` for `bounce`, `--count` for `hello`, and `--stay` for `pids` to
keep the process running after printing the ids.

The interactive programs read whitespace-separated answers from standard
input, so they can be driven by piping a prepared script into them; they end
quietly when the input runs out.

## What it does not do

- The contact book keeps its entries in memory only; nothing is saved
  between runs.
- The binary-tree module has only the recursive traversals: there is no
  level-order traversal and no completeness check.
- There is no console program for `ArrayList` or `textalgos`; use them as
  libraries.