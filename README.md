# ilmachine

`ilmachine` holds two small interpreters and a few companion utilities:

* an **Instruction List accumulator machine**: one typed accumulator,
  arithmetic, comparison and logic instructions, and jumps to named labels;
* a **stack machine** with a ten-value data stack, integer arithmetic,
  console input and output, and relative jumps;
* helpers for integer arrays and ragged matrices, a singly linked list, a
  fixed-capacity stack, and some text and numeric exercises.

It needs only the Python standard library (3.10 or newer).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The accumulator machine

```
ilmachine [path] [--limit N]
```

`path` defaults to `commands.txt` in the current directory and `--limit`
(default 100) caps the number of instructions. The command prints
`Readed file` once the program is loaded and `Program finished` when it
stops. A missing file prints `File not found`; a parse error prints its
message. Division by zero prints `Division by zero` and exits with status 1.

### Instructions

| Mnemonic | Operand | Effect |
|----------|---------|--------|
| `LD n`   | integer | load `n` (integer accumulator) |
| `LDN n`  | integer | load `-n` (integer accumulator) |
| `ST`     | —       | print the accumulator |
| `STN`    | —       | print the negated accumulator, only if it holds an integer |
| `S`      | —       | print `TRUE` if the accumulator is boolean true |
| `R`      | —       | print `FALSE` if the accumulator is boolean false |
| `AND n`, `ANDN n` | integer | logical AND with the operand / its negation; boolean result |
| `OR n`, `ORN n`   | integer | logical OR with the operand / its negation; boolean result |
| `XOR n`, `XORN n` | integer | XOR with the operand / its negation; boolean result |
| `NOT`    | —       | negate an integer accumulator, invert a boolean one |
| `ADD n`, `SUB n`, `MUL n`, `DIV n` | integer | 64-bit wrapping arithmetic; `DIV` truncates towards zero |
| `GT n`, `GE n`, `EQ n`, `NE n`, `LE n`, `LT n` | integer | compare; the boolean result goes to the accumulator |
| `JMP label`   | label | jump to `label` |
| `JMPC label`  | label | jump if the accumulator is boolean true |
| `JMPCN label` | label | jump if the accumulator is boolean false |
| `RET`    | —       | stop |

A label is a word ending in a colon, such as `done:`, and marks the next
instruction. Parsing stops after the first `RET`. A jump to a label that is
never defined keeps target 0 and raises a warning. The machine stops at
`RET` or when the instruction pointer leaves the program.

Example, which prints `TRUE` and then `42`:

```
LD 5
GT 3
S
JMPC done
LD 0
ST
done:
LD 42
ST
RET
```

### From Python

```python
import sys
from ilmachine.il_parser import parse_program
from ilmachine.il_machine import run_program

program = parse_program("LD 2\nMUL 21\nST\nRET\n", 100)
run_program(program, sys.stdout)   # prints 42
```

`parse_program(text, limit)` raises `ilmachine.il_parser.ParseError` for an
unknown mnemonic, a missing operand, or more instructions than the limit;
`load_program(path, limit)` does the same for a file. `run_program` returns
the stopped `ilmachine.il_machine.Machine`, whose `acc`, `acc_type` and `ip`
can be inspected. To go one instruction at a time, build a `Machine` and call
`step()`; `run()` steps until it stops. The instruction set lives in
`ilmachine.il_instructions` (`OpCode`, `ArgType`, `Instruction`, `lookup`).

## The stack machine

```
ilmachine-stack [path] [--limit N]
```

It also reads `commands.txt` by default, prints `Readed file` after loading,
and reads `iread` input from standard input. Stack underflow or overflow
prints `Stack underflow` / `Stack overflow` (or `Stack is empty` /
`Stack is full`) and stops the program.

Binary instructions take `a` from the top of the stack and `b` from below it
and push `a op b`.

| Mnemonic | Effect |
|----------|--------|
| `push n` | push `n` |
| `pop`, `swap`, `dup` | stack manipulation |
| `iadd`, `isub`, `imul`, `idiv`, `imod` | push `a op b`; division and remainder truncate towards zero |
| `ineg`   | negate the top value |
| `iprint` | pop and print the top value |
| `iread`  | read an integer from input and push it (0 if none can be read) |
| `icmp`   | push 1 if `a > b`, -1 if `a < b`, 0 if equal |
| `jz n`   | if the top value is zero, move `n` instructions from here; the value stays on the stack |
| `jmp n`  | move `n` instructions forward if `n > 0`, otherwise go to the next one |
| `stop`   | stop |

Example, printing `a + 10 * b` for the numbers `a` and `b` read in that order:

```
iread
iread
push 10
imul
iadd
iprint
stop
```

From Python: `ilmachine.stack_vm_parser.parse_program(text, limit)` and
`load_program(path, limit)` build the program, and
`ilmachine.stack_vm.run_program(program, reader, output)` runs it, where
`reader` is an `ilmachine.textio.TokenReader`. Errors are
`ilmachine.stack_vm.StackUnderflowError`, `StackOverflowError` and
`ZeroDivisionError`. `StackMachine` offers `step()` and `run()`.

## Companion utilities

* `ilmachine.textio.TokenReader`: `read_int()` (None at end of input or on a
  non-number), `read_size()` and `read_uint()`.
* `ilmachine.linked_list.LinkedList`: `push_front`, `push_back`, `last`,
  `at`, `total`, `reversed`, `format`, `len()` and iteration; `read_list`.
* `ilmachine.bounded_stack.BoundedStack`: `push`, `pop`, `is_empty`,
  `is_full`, `format`; raises `StackFullError` and `StackEmptyError`.
* `ilmachine.arrays`: `array_min`, `matrix_min`, `normalize_matrix`,
  `read_array`, `read_matrix`, `format_array`, `format_matrix`.
* `ilmachine.sorting`: `reverse_in_place`, `bubble_sort`, and `sort_users`
  over `User` records by `"id"`, `"name"` or `"city"`.
* `ilmachine.text_functions`: `count_words`, `find_char`, `compare`,
  `describe`.
* `ilmachine.logic_tasks`: `truth_table`, `smallest`, `piecewise`,
  `function_values`, `quiz_score`, `log_series`.

Each has a command-line demonstration:

```
ilmachine-list
ilmachine-bounded-stack
ilmachine-arrays [--single]
ilmachine-sorting
ilmachine-text
ilmachine-tasks
```

`ilmachine-list` reads integers from standard input after its fixed
demonstration. `ilmachine-arrays` reads a row count, then for each row its
length and values, and prints the matrix with its smallest value subtracted
from every element; with `--single` it reads one counted array and prints
its minimum. `ilmachine-tasks` reads three integers, a number `x`, a quiz
answer, and then `x` and `n` for the series.

## Limits

The accumulator machine has no variables or memory: `ST`, `STN`, `S` and
`R` print to the output instead of storing into an operand, and every
operand is an integer literal. Neither machine has subroutine calls; `RET`
and `stop` simply end the program.