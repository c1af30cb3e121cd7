# eulerkit

Solvers for classic number-theory puzzles, together with `RLong`, a small
immutable natural-number type that exposes its value as base 10**10 limbs.
Everything is pure Python with no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Modules

| Module                 | Contents |
|------------------------|----------|
| `eulerkit.bignum`      | `RLong` (built from limbs, lowest first, or with `RLong.from_int`), with `add`, `multiply`, `push_left`, `reverse`, `digit_count`, `count_occurrence`, `is_permutation`, `to_int`, the `limbs` property, `int()`, equality and hashing; helpers `power`, `count_digits`, `is_palindrome`, `reverse_add`; a demonstration `main` |
| `eulerkit.bigproblems` | `first_fibonacci_with_digits`, `self_powers_sum`, `digit_sum`, `max_power_digit_sum` (returns a `PowerDigitSum` of digit sum, base and exponent) |
| `eulerkit.lychrel`     | `is_lychrel`, `lychrel_iterations`, `count_lychrel`, each with a step cap defaulting to 50 |
| `eulerkit.mersenne`    | `multiply_last_ten`, `mersenne_tail` (last ten digits of `coefficient * 2**exponent`), `power_of_two` |
| `eulerkit.primes`      | `is_prime`, `prime_sieve`, `best_quadratic`, `is_circular_prime`, `circular_primes`, `is_truncatable_prime`, `truncatable_primes`, `pandigital_primes`, `smallest_goldbach_counterexample`, `prime_permutation_sequences`, `longest_consecutive_prime_sum`, `prime_power_triples` |
| `eulerkit.digits`      | `is_pandigital`, `digit_power_sum`, `digit_power_numbers`, `pandigital_products`, `digit_factorial_sum`, `digit_factorions`, `is_double_base_palindrome`, `double_base_palindrome_sum`, `concatenated_product`, `largest_pandigital_multiple`, `champernowne_digits`, `permuted_multiples`, `square_digit_chain_end`, `count_chains_to_89` |
| `eulerkit.words`       | `number_letter_count` (1 to 1000, British "and" usage), `letter_count_total`, `word_value`, `parse_word_list`, `name_scores`, `triangle_word_count` |
| `eulerkit.sequences`   | `count_first_sundays`, `render_calendar`, `proper_divisors`, `abundant_numbers`, `non_abundant_sum`, `spiral_matrix`, `spiral_diagonal_sum`, `pentagonal_pairs`, `tri_pent_hex`, `lattice_paths`, `spiral_prime_side_length`, `distinct_powers` |
| `eulerkit.grids`       | `parse_grid`, `max_adjacent_product`, `max_triangle_path`, `min_path_sum` |
| `eulerkit.blocks`      | `BlockWorld` with `move_onto`, `move_over`, `pile_onto`, `pile_over`, `execute`, `render`; `run` and `main` |

Most solvers take a limit whose default is the size of the classic puzzle, so
calling them without arguments solves the full problem (which can take a while
in pure Python); smaller limits are handy for experiments.

## Examples

```python
from eulerkit.bignum import RLong, power
from eulerkit.bigproblems import first_fibonacci_with_digits
from eulerkit.primes import is_prime, circular_primes
from eulerkit.grids import parse_grid, max_triangle_path

big = power(2, 100)
print(big.digit_count())
print(big.limbs)

print(first_fibonacci_with_digits(3))   # 12, since F12 = 144
print(is_prime(97))                     # True
print(circular_primes(100))

triangle = parse_grid("3\n7 4\n2 4 6\n8 5 9 3\n")
print(max_triangle_path(triangle))      # 23
```

Word lists and grids are passed in as text or Python lists:

```python
from eulerkit.words import parse_word_list, name_scores, triangle_word_count

words = parse_word_list('"SKY","ABC","COLIN"')
print(triangle_word_count(words))
print(name_scores(words))
```

### The block world

```python
from eulerkit.blocks import BlockWorld

world = BlockWorld(10)
world.execute("move 9 onto 1")
world.execute("pile 8 over 6")
print(world.render())
```

Commands that name the same block twice, or two blocks already in the same
pile, are ignored, as are lines that are not recognised commands.

## Commands

```
eulerkit-blocks < commands.txt
```

reads a block count on its first line, then commands such as
`move 9 onto 1`, `move 8 over 1`, `pile 8 onto 6`, `pile 8 over 5`, up to a
`quit` line, and prints each pile as `index: blocks...`. If no `quit` line
appears, nothing is printed.

```
eulerkit-bignum
```

prints two sample numbers and then the first one multiplied by 100 again and
again, 99 times.

## What it does not do

The package reads no data files of its own: word lists, name lists, number
grids and triangles must be supplied by the caller, for instance read from a
file and handed to `parse_word_list` or `parse_grid`. Apart from the two
commands above, the solvers are library functions only; there is no
command-line front end for them.