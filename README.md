# bitcraft

A small collection of bit-manipulation helpers and the algorithms built on
them: bitmask dynamic programming for tours and superstrings, subset
enumeration, matrix scoring, and Dijkstra's shortest paths. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install .[test]
pytest
```

## Library

### `bitcraft.bits`

Single-bit operations on integers. Each function returns a new value and
leaves its arguments alone:

```python
from bitcraft.bits import set_ith_bit, count_set_bits, extract_bits, swap_numbers

set_ith_bit(5, 1)        # 7
count_set_bits(13)       # 3
extract_bits(171, 2, 4)  # 10
swap_numbers(5, 10)      # (10, 5)
```

The module also has `get_ith_bit`, `clear_ith_bit`, `update_ith_bit`,
`toggle_ith_bit`, `clear_last_i_bits`, `clear_bits_in_range` (bits `i`
through `j`, inclusive), `count_set_bits_fast`, `is_power_of_two`, `is_odd`,
`is_even`, `multiply_by_power_of_2`, `divide_by_power_of_2`,
`get_lowest_set_bit`, `turn_off_rightmost_bit`, `convert_to_binary` and
`convert_to_decimal`.

`count_set_bits` returns 0 for zero and negative values, while
`count_set_bits_fast` counts a negative value in its 32-bit two's-complement
form. `convert_to_binary(5)` gives the decimal integer `101`, and
`convert_to_decimal(101)` reads those digits back as `5`.

### `bitcraft.puzzles`

Solutions to classic bit puzzles:

- `range_bitwise_and(left, right)` ANDs `left` with every integer after it
  and below `right`.
- `longest_run_of_ones(n)` is the length of the longest run of 1 bits; a
  negative `n` raises `ValueError`.
- `hamming_distance(x, y)` and `total_hamming_distance(values)` count
  differing bits in 32-bit words, the latter over all pairs.
- `is_power_of_four(n)` checks within a 32-bit word.
- `sort_by_bits(values)` sorts by number of 1 bits, then by value.
- `unique_number` finds the one value that does not appear twice.
- `unique_pair` finds the two values that do not appear twice; the one with
  the distinguishing bit set comes first. It raises `ValueError` when there
  is no such pair.
- `unique_among_triples` finds the one value that does not appear three
  times.

```python
from bitcraft.puzzles import unique_number, unique_pair, sort_by_bits

unique_number([1, 3, 5, 4, 3, 1, 5])        # 4
unique_pair([1, 3, 5, 4, 3, 1, 5, 9])       # (9, 4)
sort_by_bits([0, 1, 2, 3, 4, 5, 6, 7, 8])   # [0, 1, 2, 4, 8, 3, 5, 6, 7]
```

### `bitcraft.subsets`

- `subsets(items)` yields every subset selected by the masks
  `0 .. 2**n - 1`, in mask order. A string gives strings; any other sequence
  gives lists.
- `overlay(items, mask)` gives the single subset for one mask, lowest bit
  first.
- `masked_overlay(values, mask)` keeps the values whose bits are set and puts
  0 elsewhere, up to the highest set bit of the mask.
- `masked_overlays(values)` yields that for every mask.

A negative mask, or one that selects positions past the end of the
sequence, raises `ValueError`.

```python
from bitcraft.subsets import subsets, masked_overlay

list(subsets("ab"))              # ['', 'a', 'b', 'ab']
masked_overlay([2, 1, 3], 0b101) # [2, 0, 3]
```

### `bitcraft.tsp`

Bitmask dynamic programming:

- `shortest_tour(dist)` is the cost of the cheapest round trip that starts
  and ends at city 0. An empty or non-square matrix raises `ValueError`.
- `shortest_superstring(words)` chains words with maximal overlaps and
  returns the shortest result. At most `MAX_WORDS` (12) words are accepted;
  more raise `ValueError`.

`EXAMPLE_DISTANCES` is a four-city distance table:

```python
from bitcraft.tsp import EXAMPLE_DISTANCES, shortest_tour

shortest_tour(EXAMPLE_DISTANCES)  # 85
```

### `bitcraft.matrix_score`

`matrix_score(grid)` and `matrix_score_greedy(grid)` each find the largest
sum of the rows of a 0/1 matrix read as binary numbers, when any row or
column may be flipped. The first counts each column's contribution; the
second flips rows and columns and adds the rows up. An empty or ragged grid
raises `ValueError`.

```python
from bitcraft.matrix_score import matrix_score

matrix_score([[0, 0, 1, 1], [1, 0, 1, 0], [1, 1, 0, 0]])  # 39
```

### `bitcraft.dijkstra`

`Graph(vertex_count, directed=False)` holds weighted edges between vertices
`0 .. vertex_count - 1`; `add_edge(u, v, weight)` adds both directions
unless the graph is directed. `Graph.shortest_distances(start)` gives the
distance from `start` to every vertex, with `None` for a vertex that cannot
be reached. Vertices out of range raise `IndexError`.

`parse_graph(text)` reads the command's input format (below) and returns an
undirected `Graph` with the 0-based start vertex; malformed input raises
`ValueError`.

## Commands

- `bitcraft-bits` prints a demonstration of the bit operations.
- `bitcraft-subsets [WORD]` prints every subset of the characters of `WORD`,
  one per line. Without an argument it takes the first word from standard
  input.
- `bitcraft-tsp tour` prints the cheapest tour over the built-in four-city
  distance table.
- `bitcraft-tsp superstring` reads a word count followed by that many words
  from standard input and prints their shortest superstring.
- `bitcraft-dijkstra` reads a graph from standard input and prints one line
  `Distance to N: D` per vertex, with `unreachable` in place of `D` where
  there is no path. The input is:
  - the vertex count and the edge count;
  - one line `u v w` per edge, with 1-based vertex numbers;
  - the 1-based start vertex.

Examples:

```
bitcraft-subsets abc
printf '3\ncatg ctaagt gcta\n' | bitcraft-tsp superstring
printf '3 2\n1 2 4\n2 3 1\n1\n' | bitcraft-dijkstra
```

## Limits

The `bitcraft-dijkstra` command always builds an undirected graph; directed
graphs are available only through the `Graph` class. None of the commands
read or write files: input comes from arguments or standard input, and
results go to standard output.