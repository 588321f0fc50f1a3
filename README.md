# coursekit

A collection of small command-line tools and the library code behind them.

| Command                 | Module                  | What it does |
|-------------------------|-------------------------|--------------|
| `coursekit-patients`    | `coursekit.patients`    | Keeps a list of patients (name, age, telephone) for one session; insert, delete and search by telephone number from a menu. |
| `coursekit-polylist`    | `coursekit.polylist`    | Builds a bounded list of polynomial coefficients, lets you replace entries and evaluates the polynomial at `x`. |
| `coursekit-cdecl`       | `coursekit.cdecl`       | Explains a C declaration in English. |
| `coursekit-crc`         | `coursekit.crc`         | Appends a CRC remainder to a string of information bits for a given generator polynomial. |
| `coursekit-hamming`     | `coursekit.hamming`     | Encodes up to 26 information bits as a Hamming code word. |
| `coursekit-parity`      | `coursekit.parity`      | Prints the odd-parity and even-parity forms of a bit string. |
| `coursekit-uncertainty` | `coursekit.uncertainty` | Computes type A, type B and combined uncertainty for a series of measurements. |

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Using the commands

### coursekit-cdecl

Takes the declaration as arguments, or reads one line from standard input:

```
$ echo "char *argv[]" | coursekit-cdecl
argv is array of pointer to char
```

### coursekit-parity

Reads one line of bits:

```
$ coursekit-parity
1011
odd: 10110
even:10111
```

### coursekit-crc

Prompts for the information bits, then the generator polynomial, and prints
`The CRC code:` followed by the code word. The polynomial must start with `1`
and must not be longer than the information bits.

### coursekit-hamming

Reads a string of `0` and `1` from standard input (only the first 26 bits are
used) and prints the code word with the check bits in positions 1, 2, 4, 8, ….

### coursekit-patients

Reads whitespace-separated input: the number of patients, then each patient
as `name age telephone`. It then shows a menu: `1` inserts a record after a
given index (0 puts it first), `2` deletes the record at a 1-based index, `3`
looks up a name by telephone number, `-1` exits. The list is printed after
every insert or delete.

### coursekit-polylist

Reads `x`, then `n`, then `n + 1` coefficients (lowest power first), and
prints the list. A following non-zero number starts an edit loop: each round
reads a position, deletes the value there, reads a new value to insert at that
position and reads a number that continues the loop when non-zero. Finally the
polynomial's value at `x` is printed.

### coursekit-uncertainty

```
coursekit-uncertainty [directory]
```

Reads `unit.txt` (first line is the unit), `data.txt` (the measurements) and
`delta.txt` (the last number is the instrument error) from the given
directory, or the current one. At least five measurements are needed, and
they must all have the same number of decimal places. If a measurement is not
positive the command asks whether to go on. It asks which distribution to use
for the type B uncertainty (1: normal, C = 3; 2: uniform, C = √3;
3: triangular, C = √6; 4: arcsine, C = √2), then prints the type A, type B
and combined uncertainties and the result as `d = mean±u unit P=(0.683)`.

## Using the library

```python
from coursekit.cdecl import explain, tokenize
from coursekit.crc import parse_bits, crc_encode, format_binary
from coursekit.hamming import hamming_encode, check_bit_count
from coursekit.parity import odd_parity, even_parity
from coursekit.patients import Patient, PatientList
from coursekit.polylist import BoundedList

explain("int (*fp)()")
format_binary(crc_encode("101001", "1101"))
hamming_encode("1011")
odd_parity("1011")

values = BoundedList()
values.insert(1, 3)
values.insert(2, 2)
values.evaluate(5)
```

`BoundedList` raises `ListOverflowError` when full and `ListUnderflowError`
when deleting from an empty list. `PatientList.insert` and
`PatientList.delete` raise `ValueError` or `IndexError` for bad indices;
`find_by_tel` returns `None` when nothing matches.

`coursekit.uncertainty` offers `parse_measurements`, `check_size`,
`read_unit`, `read_delta`, `round_uncertainty`, `type_a`, `type_b`,
`combined`, the `Distribution` enum and the `Measurements` record; problems
with the input are raised as `UncertaintyError`.

## Limits

The patient list lives only in memory for the length of one run; nothing is
saved to disk. The uncertainty command's messages are in Chinese.