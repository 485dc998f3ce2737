"""A driver for a bank of sixteen LEDs mapped onto a 16-bit register."""

from __future__ import annotations

import inspect

from ledring.runtime_error import RuntimeErrorLog

FIRST_LED = 1
LAST_LED = 16
ALL_LEDS_ON = 0xFFFF
ALL_LEDS_OFF = 0x0000
OUT_OF_BOUNDS_MESSAGE = "LED Driver: out-of-bounds LED"


class LedRegister:
    """A 16-bit memory-mapped register that the LEDs are wired to."""

    def __init__(self, value: int = 0) -> None:
        self.value = value

    @property
    def value(self) -> int:
        return self._value

    @value.setter
    def value(self, new_value: int) -> None:
        self._value = new_value & 0xFFFF

    def __repr__(self) -> str:
        return f"LedRegister(0x{self._value:04x})"


def _bit(led_number: int) -> int:
    return 1 << (led_number - 1)


class LedDriver:
    """Controls LEDs 1 to 16, keeping its own image since the register is write-only."""

    def __init__(self, register: LedRegister, error_log: RuntimeErrorLog | None = None) -> None:
        self.register = register
        self.error_log = error_log if error_log is not None else RuntimeErrorLog()
        self._image = ALL_LEDS_OFF
        self._update_hardware()

    def _update_hardware(self) -> None:
        self.register.value = self._image

    def _out_of_bounds(self, led_number: int) -> bool:
        if FIRST_LED <= led_number <= LAST_LED:
            return False
        caller = inspect.currentframe()
        caller = caller.f_back if caller is not None else None
        file = caller.f_code.co_filename if caller is not None else __file__
        line = caller.f_lineno if caller is not None else 0
        self.error_log.report(OUT_OF_BOUNDS_MESSAGE, led_number, file, line)
        return True

    def turn_on(self, led_number: int) -> None:
        """Light one LED; out-of-range numbers are reported and ignored."""
        if self._out_of_bounds(led_number):
            return
        self._image |= _bit(led_number)
        self._update_hardware()

    def turn_off(self, led_number: int) -> None:
        """Switch off one LED; out-of-range numbers are reported and ignored."""
        if self._out_of_bounds(led_number):
            return
        self._image &= ~_bit(led_number) & 0xFFFF
        self._update_hardware()

    def turn_all_on(self) -> None:
        """Light every LED."""
        self._image = ALL_LEDS_ON
        self._update_hardware()

    def turn_all_off(self) -> None:
        """Switch off every LED."""
        self._image = ALL_LEDS_OFF
        self._update_hardware()

    def is_on(self, led_number: int) -> bool:
        """Return True if the LED is lit; out-of-range LEDs count as off."""
        if self._out_of_bounds(led_number):
            return False
        return bool(self._image & _bit(led_number))

    def is_off(self, led_number: int) -> bool:
        """Return True unless the LED is lit."""
        return not self.is_on(led_number)