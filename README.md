# jumanshe

Building blocks of a small command shell: an environment store, a lexer
that splits command lines into tokens and expands variables, a parser
that groups tokens into pipeline stages, the builtin commands, and the
opening of redirection files and here-documents.

## Installing

```
pip install .
```

## Example

```python
from jumanshe.environment import Shell
from jumanshe.lexer import tokenize
from jumanshe.parser import parse_tokens
from jumanshe.builtins import run_builtin

shell = Shell.create(["PATH=/usr/bin:/bin", "GREETING=hello"])
commands = parse_tokens(tokenize(shell, "echo $GREETING world"))
status = run_builtin(shell, commands[0].argv)   # prints "hello world"
```

## Modules

### `jumanshe.environment`

- `Environment` keeps variables in insertion order. `get`, `set` and
  `unset` work by name; a value of `None` marks a name without a value.
  `to_envp()` returns `NAME=value` strings for the variables that have a
  value. `Environment.from_environ` accepts a mapping or an iterable of
  `NAME=value` strings (entries without `=` are skipped, and for a
  repeated name the first one wins).
- `Shell` holds the environment (`env`), `last_exit_status` and
  `is_interactive`. `Shell.create(envp)` builds one from `envp`, or from
  `os.environ` when `envp` is omitted.

### `jumanshe.lexer`

`tokenize(shell, line)` returns a list of `Token` objects, each with a
`TokenType` (`WORD`, `PIPE`, `REDIR_IN`, `REDIR_OUT`, `REDIR_APPEND`,
`HEREDOC`) and, for words, a `value`.

- Words are separated by spaces or tabs; `|`, `<`, `>`, `<<` and `>>`
  are operators and also end a word.
- Single quotes keep their contents literally. An unclosed single quote
  ends the word and the rest of the line.
- Double quotes group text. A double quote directly followed by `$`
  expands that variable.
- `$NAME` expands to the variable's value (empty if unset), `$?` to
  `shell.last_exit_status`.

### `jumanshe.parser`

`parse_tokens(tokens)` returns a list of `Command` objects, each with an
`argv` list and a list of `Redirection(type, target)` where `type` is a
`RedirType` (`IN`, `OUT`, `APPEND`, `HEREDOC`). A pipe at the start or
right after another pipe, or a redirection not followed by a word,
raises `ShellSyntaxError`. A trailing pipe is ignored.

### `jumanshe.builtins`

`is_builtin(name)` tells whether a name is one of `echo`, `cd`, `pwd`,
`env`, `export`, `unset`, `exit`; `run_builtin(shell, argv, stdout,
stderr)` runs it and returns its status. Each builtin is also available
as `builtin_<name>`.

| command  | what it does                                                     |
|----------|------------------------------------------------------------------|
| `echo`   | prints its arguments; leading `-n`/`-nnn` flags drop the newline |
| `cd`     | takes exactly one directory; updates `PWD` and `OLDPWD`          |
| `pwd`    | prints the current directory                                     |
| `env`    | prints `NAME=value` for each variable with a value               |
| `export` | sets `NAME=value` (a bare `NAME` gets an empty value); with no arguments behaves like `env` |
| `unset`  | removes the named variables                                      |
| `exit`   | prints `exit` and raises `ShellExit` with the status             |

`exit` with no argument raises `ShellExit(0)`; with a non-numeric
argument it reports the error and raises `ShellExit(2)`; with more than
one argument it reports the error and returns 1; otherwise the status is
the number modulo 256.

### `jumanshe.redirections`

`apply_redirections(redirections, read_line)` opens every redirection in
order and returns a `Streams` object (usable as a context manager) whose
`stdin` and `stdout` are binary files, or `None` where nothing was
redirected. A later redirection replaces an earlier one of the same
direction. Output files are created with mode `0644`. A file that cannot
be opened raises `RedirectionError`.

`read_heredoc(delimiter, read_line)` collects lines until one equals the
delimiter or input ends, returning them joined with newlines. `read_line`
is called with the prompt `"> "` and returns a line or `None` at end of
input; by default it reads with `input()`.

### `jumanshe.messages`

`SHELL_NAME`, `PROMPT` and `HEREDOC_PROMPT`; `print_error(msg, error,
stream)` writes `msg: <reason>` for an `OSError` or errno number, and
`print_command_not_found(cmd, stream)` writes
`jumanshe: <cmd>: command not found`. Both write to standard error by
default.

### `jumanshe.textutils` and `jumanshe.fmt`

- `split(text, sep)` splits and drops empty pieces; `atoi(text)` parses a
  leading integer the way C `atoi` does, wrapped to 32 bits;
  `strtrim(text, chars)` strips the given characters from both ends.
- `sprintf(fmt, *args)` and `printf(fmt, *args, stream)` support the
  `%c %s %p %d %i %u %x %X %%` conversions. Unknown conversions are
  copied through; a lone `%` at the end raises `ValueError`. `printf`
  returns the number of characters written.

## What the package does not do

The package has no command to start and no interactive prompt. It does
not look up or start external programs, does not run pipelines of
processes, and does not install signal handlers. The pieces above cover
reading, parsing, builtins and redirection files; running the resulting
commands is left to the caller.