# sigtalk

sigtalk sends text from one process to another using only the POSIX signals
`SIGUSR1` and `SIGUSR2`. Each byte goes out as eight signals, most significant
bit first. `SIGUSR1` carries a 0 bit and `SIGUSR2` carries a 1 bit. The server
rebuilds the bytes and writes each one to standard output as soon as it is
complete.

It runs only on POSIX systems, because it needs `os.kill`, `signal.pause` and
the user signals.

## Installation

```
pip install .
```

## Sending a message

Start the server in one terminal. It prints its process id and then waits for
signals until you press Ctrl-C:

```
$ sigtalk-server
Server PID: 12345
```

From a second terminal, send it a message:

```
$ sigtalk-client 12345 "hello there"
```

The server prints `hello there` followed by a newline, because the client
always ends a message with `\n`. The message is sent as UTF-8. After each
signal the client waits 0.0001 seconds so that the receiver can keep up.

If you give only the PID, the client sends the single byte `A` and no newline:

```
$ sigtalk-client 12345
```

If the arguments are wrong or the PID is not a positive integer, the client
prints a message and exits with status 1.

## Probing signal delivery

The probe commands check that signals arrive at all.

```
$ sigtalk-probe-server
Server PID: 12345
```

```
$ sigtalk-probe-client 12345      # sends SIGUSR1
$ sigtalk-probe-client 12345 1    # sends SIGUSR1
$ sigtalk-probe-client 12345 2    # sends SIGUSR2
```

For each signal it receives, the probe server prints a line such as
`Signal SIGUSR2 received`. Any kind other than 1 or 2 makes the client print an
error and exit with status 1.

## Library use

You can also use the parts of the commands on their own:

```python
from sigtalk.printf import sprintf
from sigtalk.protocol import BitDecoder, byte_to_bits

sprintf("%s is %d (%x)", "answer", 42, 42)   # 'answer is 42 (2a)'

decoder = BitDecoder()
for bit in byte_to_bits(ord("A")):
    byte = decoder.feed(bit)
print(byte)  # 65
```

- `sigtalk.printf` is a small formatter. `sprintf(fmt, *args)` returns a string,
  and `printf(fmt, *args, stream=None)` writes to a stream (stdout by default)
  and returns the number of characters written. It understands
  `%c %s %p %d %i %u %x %X %%`. `%d`, `%u` and `%x` treat their argument as a
  32-bit integer. `%s` shows `None` as `(null)`, and `%p` shows `None` or 0 as
  `(nil)`. An unknown conversion prints nothing, and too few arguments raise
  `TypeError`. The helpers `format_char`, `format_string`, `format_pointer`,
  `format_integer`, `format_unsigned` and `format_hex` are available on their own.
- `sigtalk.protocol` has the bit encoding: `byte_to_bits`, `signal_for_bit`,
  `bit_for_signal`, and `BitDecoder` with `feed` and `reset`.
- `sigtalk.client.send_byte` and `sigtalk.client.send_message` take optional
  `delay` and `kill` arguments. With `kill` you can capture the signals instead
  of sending them to a real process.
- `sigtalk.server.MessageServer(output=None)` and
  `sigtalk.probe.ProbeServer(output=None)` each provide `handle`, `install` and
  `serve_forever`. You can call `handle(signum)` directly to feed in signals
  without installing anything. `sigtalk.probe.send_probe(pid, kind=1, kill=None)`
  sends one probe signal.

## Limitations

The server sends nothing back. The client gets no acknowledgement and relies
only on its fixed delay between signals, so under heavy load signals can be
merged or lost. A message from one client can also interleave with a message
from another.

## Running the tests

```
pip install ".[test]"
pytest
```