# drills

A set of small command-line tools. Each one does a single job. Every tool
returns exit status 0 on success and 1 on a usage or runtime error. It
prints a message on standard error when it fails.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The package uses only the standard library.

## Commands

### drills-hello

Prints `Hello, world!`. Any arguments are ignored.

### drills-repeat NUMBER TEXT

First prints how many characters of TEXT are not whitespace. Then it prints
TEXT NUMBER times. NUMBER must be a non-negative whole number no larger
than 2**64 - 1.

```
$ drills-repeat 2 "a b c"
Number of non-space characters: 3
a b c
a b c
```

### drills-cat FILE

Prints the contents of FILE, read as UTF-8, followed by a newline. Only paths
with the `.txt` extension are accepted.

### drills-move DEST SOURCE

Moves SOURCE to DEST. The destination comes first. Before the move, it creates
the parent directories of DEST, prints `Created <parent>`, and then prints
`Moved <source> to <dest>`. An existing file at DEST is replaced.

### drills-calc and drills-calc-log

An interactive calculator. After the `> ` prompt, enter lines of the form
`<operand1> <operand2> <operator>`, for example `6 3 /`. The operators are
`+ - * /`. Operands are decimal numbers; `inf` and `nan` are also accepted.
Type `exit` (in any case) or send end of input to quit.

```
> 6 3 /
Result: 2
> 1 0 /
Error: Division by zero
> exit
Goodbye!
```

Both commands read `settings.toml` from the current directory. If it contains
`show_datetime = true`, the current date and time is printed before each
calculation. If the file is missing, or has no boolean `show_datetime`,
a warning is printed and the default `false` is used.

`drills-calc-log` also logs exits, results, warnings and errors to
standard error. The environment variable `DRILLS_LOG` sets the level. It takes
one of `error` (the default), `warn`, `info`, `debug`, `trace` or `off`.

### drills-db-check HOST:PORT

Opens and closes a TCP connection to `HOST:PORT` to check that the address is
reachable. It then opens the shared in-memory SQLite database named after
the address, and prints the first column of up to five rows of its `server`
table. A new process starts with that in-memory database empty. So the command
on its own reports `Error: no such table: server`. Rows are only found when
`drills.db_check.fetch_first_rows` is called from a program that has created
the table in the same shared database.

### drills-fanout N

Appends each line read from standard input to the files `output1` to
`outputN` in the current directory, creating them if needed. Lines are
stripped of surrounding whitespace. All files are written in parallel.
Reading stops at an empty line or at end of input.

### drills-echo-server and drills-echo-client MESSAGE

`drills-echo-server` listens on `127.0.0.1:7878` and handles each connection
on its own thread. It reads one message of up to 512 bytes and prints it. It
then answers `Message received` and closes the connection.

`drills-echo-client` sends MESSAGE to that server and prints the reply:

```
$ drills-echo-client hello
Server response: Message received
```

## Library use

The commands are built from functions that can be called directly:

- `drills.repeat.count_non_space(text)`
- `drills.cat.is_text_file(path)` and `drills.cat.read_file(path)`
- `drills.move.move_file(source, destination)`
- `drills.calculator.load_config(path)`, `drills.calculator.evaluate(line)`
  (raises `CalculationError`) and
  `drills.calculator.run(config, stdin, stdout, logger)`
- `drills.db_check.check_server(address)` and
  `drills.db_check.fetch_first_rows(address)`
- `drills.fanout_writer.output_names(count)`,
  `drills.fanout_writer.write_line(file_names, line)` and
  `drills.fanout_writer.run(count, stdin, stdout)`
- `drills.echo_net.handle_client(connection)`,
  `drills.echo_net.serve(host, port)` and
  `drills.echo_net.send_message(message, host, port)`

## What it does not do

The echo server and client commands always use `127.0.0.1:7878`. They take no
options for another address, and the server runs until it is interrupted. The
database check does not connect to a database server. It only reads the
SQLite in-memory database described above.