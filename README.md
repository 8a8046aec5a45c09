# cokit

A collection of small, independent building blocks for Python programs:

- `cokit.hexdump`: classic hex + ASCII dumps of bytes, as a function and as a command
- `cokit.tinylog`: a tiny levelled logger with colours and an optional log file
- `cokit.generator`: a chainable lazy `Generator` (`map`, `filter`, `take`, `fold`, ...)
- `cokit.optional`, `cokit.variant`, `cokit.uniqueptr`: explicit value wrappers
- `cokit.rbtree`: an ordered red-black tree keyed by a function
- `cokit.reflect`: declare the members of a class and serialize instances as JSON
- `cokit.debug`: a debug printer tagged with the caller's location, with assertions
- `cokit.oscheck`: turn `-1` results into `OSError`, and a terminal raw-mode context manager
- `cokit.arena`: a bump-pointer arena allocator with a call-logging wrapper
- `cokit.streams`: buffered asyncio input/output streams over strings and file descriptors
- `cokit.combinators`: `when_all`, `when_any`, `sleep_for` and `sleep_until` for asyncio

It needs nothing beyond the standard library and Python 3.10 or later.
`cokit.oscheck.raw_mode` and waiting on pipes or terminals in
`cokit.streams.FileBuf` need a POSIX system.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Hex dumps

From the command line, dump a file or standard input:

```
cokit-hexdump -f some.bin
cokit-hexdump -x 8 < some.bin
cokit-hexdump -h
```

`-f <file>` chooses the file, `-x <size>` the number of bytes per line
(16 by default; it must be positive).

From Python:

```python
import sys
from cokit.hexdump import hexdump, hexdump_lines

for line in hexdump_lines(b"hello, world\n", 16):
    print(line)

hexdump(b"hello, world\n", 16, sys.stdout)
```

Each line holds the offset in eight hex digits, the bytes in hex, and the
printable characters between `|` bars (`.` for the rest).

## Logging

```python
from cokit.tinylog import LogLevel, log_info, log_debug, set_log_file, set_log_level

set_log_file("log.txt")
set_log_level(LogLevel.DEBUG)
log_debug("hello {}", 25)
log_info("hello {}", 25)
```

Messages are formatted with `str.format` and tagged with a timestamp, the
caller's file and line, and the level name. The levels are, in order,
trace, debug, info, critical, warning, error and fatal. The minimum level
shown on standard output comes from the `LOG_LEVEL` environment variable
(info by default); setting `LOG_FILE` appends every record to that file as
well, whatever its level.

## Chainable generators

```python
from cokit.generator import Generator

g = (
    Generator.from_array(1, 2, 3, 4, 5)
    .map(lambda i: i * 2)
    .filter(lambda i: i % 3 == 0)
    .take(10)
)
while g.has_next():
    print(g.next())

print(Generator.from_array(1, 2, 3).sum())
print(Generator.from_array(1, 2, 3).fold(0, lambda acc, x: acc + x))
```

A `Generator` is one-shot: chaining methods consume it and return a new one.
It is also an ordinary iterable.

## Optional, Variant and UniquePtr

```python
from cokit.optional import Optional, make_optional
from cokit.variant import Variant
from cokit.uniqueptr import make_unique

o = make_optional([1, 2, 3])
if o:
    print(o.value())
print(Optional().value_or(65))

v = Variant((int, float, str), "text")
print(v.index(), v.holds_alternative(str), v.get(str))
print(v.visit(lambda x: f"<{x}>"))

with make_unique(open, "log.txt", "a") as handle:
    handle.write("owned\n")
```

Reading an empty `Optional` raises `BadOptionalAccess`; reading the wrong
alternative of a `Variant` raises `BadVariantAccess`. A `UniquePtr` runs its
deleter (by default the object's `close()`) on `reset()` or at the end of a
`with` block.

## Red-black tree

```python
from cokit.rbtree import RbTree

tree = RbTree(key=lambda item: item[0])
tree.insert((3, "c"))
tree.insert((1, "a"))
print(tree.front(), tree.back(), len(tree), list(tree))
```

Values with equal keys keep their insertion order; `erase` takes the very
object that was inserted.

## Reflection

```python
from cokit.reflect import reflect, serialize

@reflect("age", "name")
class Student:
    def __init__(self, age, name):
        self.age = age
        self.name = name

print(serialize(Student(10, "Tom")))
```

`reflect_type(cls, ...)` registers members from outside the class, and
`serialize_with_methods` writes a method member as its own name.

## Debug printing

```python
from cokit.debug import Debug

with Debug() as d:
    d.print("value", 42, [1, 2])

with Debug() as d:
    d.check(1) < 2
```

Output goes to standard error when the block ends; a failed check or
`fail()` makes it raise `RuntimeError` instead.

## Buffered streams

```python
import asyncio
from cokit.streams import IStream, OStream, StringReadBuf, StringWriteBuf

async def main():
    reader = IStream(StringReadBuf("first\nsecond\n"), 8192)
    print(await reader.getline("\n"))

    sink = StringWriteBuf()
    writer = OStream(sink, 8192)
    await writer.puts("Hello, world")
    await writer.flush()
    print(sink.text)

asyncio.run(main())
```

`FileBuf(fd)` reads and writes a file descriptor; `IOStream` combines input
and output over one buffer. Reading past the end raises `EndOfStream`.

## asyncio combinators

```python
import asyncio
from cokit.combinators import when_all, when_any, sleep_for

async def main():
    results = await when_all(asyncio.sleep(0.1, result=1), asyncio.sleep(0.2, result=2))
    index, first = await when_any(asyncio.sleep(0.1, result="fast"), asyncio.sleep(1, result="slow"))
    await sleep_for(0.05)
    print(results, index, first)

asyncio.run(main())
```

## What cokit does not do

cokit has no executors or task objects of its own: there are no thread
pools, looper threads or completion callbacks; use `asyncio` or
`concurrent.futures` for that. It has no event loop and no socket or
server helpers either: `cokit.streams` and `cokit.combinators` run on the
standard asyncio loop, and networking is left to `asyncio` itself.