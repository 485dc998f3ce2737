# ledring

`ledring` is a small library with two parts:

- `ledring.ring_buffer.RingBuffer` is a first-in, first-out queue with a fixed capacity.
- `ledring.led_driver.LedDriver` controls sixteen LEDs. It sets bits in a 16-bit
  `LedRegister`. It reports out-of-range LED numbers to a
  `ledring.runtime_error.RuntimeErrorLog`.

It has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Ring buffer

```python
from ledring.ring_buffer import RingBuffer

buffer = RingBuffer(3)
buffer.is_empty()     # True
buffer.put("a")
buffer.put("b")
buffer.put("c")
buffer.is_full()      # True
buffer.put("d")       # raises OverflowError; "d" is not stored
buffer.peek()         # "a", and the item stays in the buffer
buffer.get()          # "a"
len(buffer)           # 2
```

- `RingBuffer(size)` raises `ValueError` if `size` is negative.
- `put` raises `OverflowError` when the buffer is full.
- `get` and `peek` raise `IndexError` when the buffer is empty.
- Items are returned in the order they were put, and any kind of object can be stored.

## LED driver

```python
from ledring.led_driver import LedDriver, LedRegister
from ledring.runtime_error import RuntimeErrorLog

register = LedRegister()
errors = RuntimeErrorLog()
driver = LedDriver(register, errors)   # every LED starts off; register.value is 0

driver.turn_on(8)
driver.turn_on(9)                      # register.value is now 0x180
driver.is_on(8)                        # True
driver.turn_all_on()                   # 0xffff
driver.turn_off(7)                     # 0xffbf
driver.turn_all_off()                  # 0
```

LEDs are numbered 1 to 16. LED 1 is the lowest bit.

`LedRegister(value=0)` holds a 16-bit value. Anything written to `value` is masked to
16 bits.

The driver never reads the register back. It keeps its own copy of the LED states and
writes that copy to the register after each change. Creating a driver clears the register,
whatever it held before.

The `error_log` argument may be left out. The driver then creates its own
`RuntimeErrorLog`, which is available as `driver.error_log`.

### Out-of-range LED numbers

If you pass an LED number outside 1 to 16:

- `turn_on` and `turn_off` leave the LEDs as they are.
- `is_on` returns `False` and `is_off` returns `True`.
- The driver calls `RuntimeErrorLog.report` with the message
  `"LED Driver: out-of-bounds LED"` and the LED number. It also passes the file and line
  inside the driver where the check was made.

The log keeps only the most recent report, in `last_error`, `last_parameter`, `last_file`
and `last_line`. These attributes are `None` until something is reported.
`RuntimeErrorLog.reset()` sets them back to `None`.

## What it does not do

`LedRegister` is an ordinary in-memory object. The package does not access real
hardware or memory-mapped I/O. It has no command-line program.