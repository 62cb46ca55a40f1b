# sigtalk

Pass short text messages from one process to another using nothing but
POSIX signals. Each byte is sent as eight signals, least significant bit
first: `SIGUSR1` is a 1 bit and `SIGUSR2` is a 0 bit. The receiving server
puts the bits back into bytes, decodes them as UTF-8 (invalid sequences
become replacement characters) and writes text as soon as it is complete.

Because it relies on `SIGUSR1`, `SIGUSR2` and `signal.pause`, sigtalk works
only on POSIX systems.

## Install

```
pip install .
```

## Use

Start the server in one terminal. It prints its process id and then waits
for signals until it is interrupted:

```
$ sigtalk-server
PID: 48213
```

From another terminal, send it a message:

```
$ sigtalk-client 48213 "hello there"
```

The server prints `hello there`, followed by the newline that the client
adds after every message. The client waits 100 microseconds after each
signal.

The PID argument is read the way `sigtalk.numconv.atoi` reads text:
leading whitespace and one sign are allowed, and parsing stops at the first
non-digit.

Exit status:

- both commands print their usage line and exit with 1 when given the wrong
  number of arguments (the client takes exactly two, the server none);
- the client exits with 1 if a signal cannot be delivered to the target;
- the server exits with 130 when stopped with Ctrl-C.

The commands can also be started as `python -m sigtalk.server` and
`python -m sigtalk.client PID MESSAGE`.

## Library

- `sigtalk.protocol`: `char_to_bits(c)` gives the eight bits of a byte,
  least significant first; `message_to_bits(message)` yields the bits of a
  message followed by a newline; `BitDecoder.feed(bit)` returns a finished
  byte after every eighth bit, otherwise `None`.
- `sigtalk.client`: `send_message(pid, message, delay)` signals a `str`
  (encoded as UTF-8) or `bytes` message to a process, raising `OSError` if a
  signal cannot be sent; `main(argv)` is the command.
- `sigtalk.server`: `Server(stream)` writes received text to `stream`
  (standard output by default); `Server.handle(signum, frame)` is the signal
  handler and `Server.run()` installs it and waits forever; `main(argv)` is
  the command.
- `sigtalk.fmt`: `format_string(fmt, *args)` and `printf(fmt, *args)`
  support `%c %s %p %d %i %u %x %X %%`. `%d`/`%i` wrap to a signed 32-bit
  value, `%u`/`%x`/`%X` to an unsigned one, `%s` of `None` gives `(null)`,
  unknown conversions produce nothing, and too few arguments raise
  `TypeError`. `printf` returns the number of characters written.
- `sigtalk.charclass`: `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_upper`, `to_lower` on ASCII codes or one-character strings.
- `sigtalk.numconv`: `atoi(text)` with 32-bit wrap-around, and `itoa(n)`,
  which raises `OverflowError` outside the 32-bit range.
- `sigtalk.search`: `c_length`, `find_char`, `rfind_char`, `find_bounded`,
  `compare_n` on text treated as ending at its first NUL character.
- `sigtalk.strops`: `substr`, `join`, `duplicate`, `trim`, `split`,
  `strlcpy`, `strlcat`, `map_indexed`, `iter_indexed`.
- `sigtalk.memory`: `memset`, `bzero`, `calloc`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on `bytes` and `bytearray`, raising `IndexError` when a
  length runs past a buffer.
- `sigtalk.linkedlist`: `Node` and `LinkedList` with `push_front`,
  `push_back`, `last`, `clear`, `for_each`, `map`, `len()` and iteration.
- `sigtalk.output`: `put_char`, `put_str`, `put_line`, `put_number` write to
  a text stream, standard output by default.

## What it does not do

- There is no acknowledgement from the server; the client only paces
  itself with a fixed delay between signals, so a lost signal shifts every
  following bit.
- The server keeps a single decoder, so messages from two clients sending
  at the same time are mixed together.
- Messages are not stored, encrypted or authenticated; the server only
  writes them to its stream.

## Tests

```
pip install .[test]
pytest
```