# bintreekit

Checks whether a tree written in parenthesised notation is a binary tree.
The package also holds the small stack and queue containers that the checks
use.

## Tree notation

Each node is an ASCII letter. A pair of parentheses opens a group, and the
letters written directly inside a group are the nodes of that level. Nested
groups do not count toward the letters of the group that holds them. A tree
is binary when no group holds more than two letters.

```
(A (B C) (D E))     binary: the outer group holds A, each inner group two letters
(A (B C D))         not binary: the inner group holds three letters
```

Spaces and newlines are removed before the check.

## Command line

Install the package, then pass one line of tree notation on standard input:

```
echo "(A (B C) (D E))" | bintreekit
```

The command reads one line and uses at most its first 999 characters. It
prints one of:

- `TRUE`: the input is a well-formed binary tree
- `FALSE`: the input is well formed, but some group holds more than two letters
- `ERROR`: the input is malformed. This covers no input, an empty line, a line
  that does not start with `(`, an unmatched `)` or an unclosed `(`, a
  character that is neither a letter nor a parenthesis, a letter outside
  every group, and a tree with no letters.

The command always exits with status 0.

## Library use

```python
from bintreekit.bintree import (
    MalformedTreeError,
    check_binary_tree,
    is_binary_tree_lenient,
    is_binary_tree_recursive,
    verdict,
)

check_binary_tree("(A(BC)(DE))")        # True
check_binary_tree("(A(BCD))")           # False
try:
    check_binary_tree("(A")
except MalformedTreeError:              # a subclass of ValueError
    ...

verdict("(A (B C))\n")                  # "TRUE"
verdict("(A")                           # "ERROR"
```

`check_binary_tree` expects text that has already had its spaces removed.
`verdict` removes spaces and newlines first and turns the result into
`TRUE`, `FALSE` or `ERROR`.

`is_binary_tree_lenient` and `is_binary_tree_recursive` only count nodes per
group and validate nothing: any character other than a parenthesis counts as
a node, and they never raise. The lenient check also ignores a stray `)`.

```python
is_binary_tree_lenient("(A(BCD))")      # False
is_binary_tree_recursive("(A(BC))")     # True
```

### Text helpers

`bintreekit.text` has:

- `erase_space_eol(text)`: removes spaces and newlines
- `strip_whitespace(text)`: removes every white-space character (space, tab,
  newline, vertical tab, form feed, carriage return)
- `parens_balanced(text)`: tells whether the parentheses pair up in order

### Stack and queue

```python
from bintreekit.stack import Stack
from bintreekit.linkedqueue import Queue

s = Stack()
s.push("first")
s.push("second")
list(s)          # ["second", "first"], top first
print(s.render())  # "Stack: second first "
s.pop()          # "second"
len(s)           # 1
s.clear()
s.render()       # "Stack is empty"

q = Queue()
q.enqueue(10)
q.enqueue(20)
print(q.render())  # "[0] 10\n[1] 20"
q.dequeue()      # 10
list(q)          # [20]
```

`pop` on an empty stack and `dequeue` on an empty queue raise `IndexError`.

`bintreekit.demo` has `stack_demo()` and `queue_demo()`. Each one steps through
one of these containers and returns the text of the session as a string.

## What it does not do

The package only judges tree notation. It does not build a tree object from
the text, and it does not report a tree's height, its number of nodes or its
number of leaves.