# labkit

This package contains four small console programs. Each one can be run as a command or imported as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

### labkit-magic

`labkit-magic` reads one line from standard input. It reads at most 1023 characters of that line. The line must hold 25 integers separated by whitespace. The integers fill a 5x5 matrix row by row.

The command prints the matrix and then says whether it is a magic square. A matrix is a magic square when every row, every column and both diagonals have the same sum.

```
$ echo "17 24 1 8 15 23 5 7 14 16 4 6 13 20 22 10 12 19 21 3 11 18 25 2 9" | labkit-magic
```

The command prints an error and exits with status 1 in any of these cases:

* there is no input;
* a token does not start with an integer;
* the line has fewer than 25 numbers;
* the line has more than 25 numbers.

When a token starts with an integer, only that leading integer is used. For example, `12abc` counts as `12`.

### labkit-matcalc

`labkit-matcalc` is an interactive calculator that works on six 4x4 matrices, named `A_MAT` to `F_MAT`. Every matrix starts out filled with zeros.

The calculator reads one command per line. It echoes each line back as `You entered: ...`, and it skips blank lines. After the command name, arguments are separated by commas.

```
read_mat A_MAT, 1, 2, 3, 4, 5
print_mat A_MAT
add_mat C_MAT, A_MAT, B_MAT
sub_mat C_MAT, A_MAT, B_MAT
mul_mat C_MAT, A_MAT, B_MAT
mul_scalar C_MAT, 2.5, A_MAT
trans_mat C_MAT, A_MAT
stop
```

The commands work as follows:

* In every operation, the first argument names the matrix that receives the result.
* `read_mat` fills the matrix row by row. Missing cells are set to zero, and values after the sixteenth are ignored.
* A number argument is read from its leading numeric text. If there is no leading number, the value is `0.0`.
* `print_mat` prints each value with two decimals.

The calculator reports these errors:

* `Undefined command name`
* `Undefined matrix name`
* `Missing matrix name`
* `Incorrect number of arguments`

The program ends at `stop`. If input runs out before a `stop` command, it prints `EOF encountered without 'stop' command.`

### labkit-numwords

`labkit-numwords` reads whitespace-separated integers and writes each one from 0 to 99 as English words, one per line. For example, `42` becomes `forty two`.

* Numbers outside 0 to 99 are skipped.
* Reading stops at the first token that is not an integer.

By default the command reads standard input and writes standard output. It also accepts an optional input file and an optional output file:

```
$ labkit-numwords numbers.txt words.txt
```

The command exits with status 1 in these cases:

* it is given more than two arguments;
* a file cannot be opened.

### labkit-palindrome

`labkit-palindrome` reads one line of up to 80 characters. It echoes the line, then prints `1` if the line is a palindrome or `0` if it is not. Whitespace is ignored, and letter case matters.

```
$ echo "never odd or even" | labkit-palindrome
```

## Library use

```python
from labkit.magic import parse_matrix, is_magic_square, format_matrix
from labkit.matrix import Matrix
from labkit.matcalc import Calculator
from labkit.numwords import number_to_words
from labkit.palindrome import is_palindrome

square = parse_matrix("17 24 1 8 15 23 5 7 14 16 4 6 13 20 22 10 12 19 21 3 11 18 25 2 9")
is_magic_square(square)          # True

m = Matrix()
m.read([1, 2, 3])                # fills in place, pads with zeros
print(m.transposed().format())

calc = Calculator()
calc.execute("read_mat A_MAT, 1, 2")
print(calc.execute("print_mat A_MAT"))

number_to_words(42)              # "forty two"
is_palindrome("a b a")           # True
```

Errors are reported as exceptions:

* `parse_matrix` raises `MagicInputError`, which is a `ValueError`, for bad input.
* `number_to_words` raises `ValueError` for numbers outside 0 to 99.

`Matrix` operations (`add`, `sub`, `mul`, `scaled`, `transposed`) return new matrices. `read` changes the matrix in place.