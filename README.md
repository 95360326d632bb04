# minibash

minibash holds the pieces of a small bash-like shell in plain Python. It uses
only the standard library.

- `minibash.builtins` has the built-ins `echo`, `cd`, `pwd`, `env`, `export`,
  `unset` and `exit`. Their messages and exit statuses follow bash.
- `minibash.environment` has an ordered variable table. It tells apart
  variables that have a value from names that were only declared.
- `minibash.strings` and `minibash.numbers` have C-style helpers such as
  `split`, `strtrim`, `strcmp`, `atoi`, `atoli`, `itoa` and `litoa`.
- `minibash.printf` has a small `printf` for `%c %s %p %d %i %u %x %X %%`.
- `minibash.lines` has `LineReader`, which reads lines from a raw file
  descriptor.

## Running built-ins

```python
import io

from minibash.builtins import Shell, ShellExit, is_builtin, run_builtin

out, err = io.StringIO(), io.StringIO()
shell = Shell({"HOME": "/tmp", "PATH": "/usr/bin"}, out, err)

if is_builtin(["echo", "-n", "hello", "world"]):
    run_builtin(["echo", "-n", "hello", "world"], shell)

run_builtin(["export", "GREETING=hi", "PENDING"], shell)
run_builtin(["unset", "PATH"], shell)
run_builtin(["env"], shell)

try:
    run_builtin(["exit", "42"], shell)
except ShellExit as stop:
    print("shell asked to exit:", stop.status)
```

`Shell(environ, stdout, stderr)` accepts an `Environment`, a mapping, or an
iterable of `KEY=VALUE` strings. A string without `=` becomes a declared name.
When no streams are given, the shell writes to `sys.stdout` and `sys.stderr`.
`run_builtin` returns `shell.exit_status`. It raises `ValueError` when
`args[0]` is not a built-in.

The built-ins behave as follows:

- `echo` joins its arguments with spaces. If the first argument is exactly
  `-n`, no newline is printed.
- `cd` with no operand, or with `~`, goes to `$HOME`. If `HOME` is empty, the
  directory does not change. `cd` reports "too many arguments", "HOME not set",
  "No such file or directory", "Not a directory" and "Permission denied", each
  with status 1. After a move it updates `PWD` and `OLDPWD`, but only if those
  variables already exist.
- `pwd` prints the working directory. `env` prints every exported variable.
- `export` with no operands prints `declare -x` lines. `NAME=value` sets a
  variable, and `NAME` alone declares it. An invalid name gives
  "not a valid identifier" and status 1. `unset` removes the named variables
  and checks names the same way.
- `exit` never stops the Python process. It raises `ShellExit`, a subclass of
  `SystemExit`, and its `status` attribute holds the code, reduced to 0–255.
  It exits with the given number, or with the last status if no number is
  given. A negative number gives 156. An argument that is not numeric, or that
  does not fit a signed 64-bit integer, gives "numeric argument required" and
  status 2. `-9223372036854775808` gives 0 and `-9223372036854775807` gives 1.
  If there is more than one operand, `exit` reports "too many arguments", sets
  status 1 and returns.

## The environment

```python
from minibash.environment import Environment, Visibility, is_valid_identifier

environment = Environment({"USER": "guest"})
environment.set("EDITOR", "vi")
environment.declare("LATER")        # shown by `export`, left out of `env`
environment.unset("USER")

envp = environment.to_envp()        # ["EDITOR=vi"]
lines = environment.declarations()  # ['declare -x EDITOR="vi"', 'declare -x LATER']
```

Each entry is a `Variable` with `key`, `value` and `visibility`. The
visibility is one of `Visibility.EXPORTED`, `DECLARED` or `HIDDEN`. A hidden
variable is left out of both `to_envp()` and `declarations()`. `set` keeps a
variable's position in the table and makes it exported. `declare` leaves an
existing variable untouched.

`is_valid_identifier(name, allow_assignment)` applies the same checks that
`export` (with `allow_assignment=True`) and `unset` apply to their arguments.

## Helpers

```python
from minibash.numbers import atoli, fits_long, is_numeric, litoa
from minibash.printf import format_string, printf
from minibash.strings import split, strtrim

split("  ls   -l  ", " ")             # ["ls", "-l"]
strtrim("xxhixx", "x")                # "hi"
format_string("%s is %d (%x)", "n", 255, 255)   # "n is 255 (ff)"
is_numeric("  -17")                   # True
fits_long(atoli("99999999999999999999"), "99999999999999999999")  # False
```

`atoi` and `atoli` wrap the way a 32-bit or 64-bit C integer would. Lookups
such as `strchr`, `strrchr` and `strnstr` return an index, or `None` when
nothing is found. `printf` writes to standard output and returns the number of
characters it wrote.

## Reading lines from a descriptor

```python
from minibash.lines import LineReader

for line in LineReader(fd):
    ...                               # every line keeps its trailing "\n"
```

`LineReader` reads one byte at a time, so it never consumes input past the
current line. `next_line()` returns `None` at end of input. A descriptor
outside 0–1024 raises `ValueError`.

## What this package does not do

There is no interactive shell here and no command to run. The package does not
read or tokenize command lines, expand variables or quotes, set up pipes,
redirections or here-documents, handle signals, or run external programs. It
gives you the built-ins, the environment table and the helpers. A caller that
wants a full shell has to supply the rest.