import pytest

from ledring.led_driver import LedDriver, LedRegister
from ledring.runtime_error import RuntimeErrorLog


@pytest.fixture
def register():
    return LedRegister()


@pytest.fixture
def error_log():
    return RuntimeErrorLog()


@pytest.fixture
def driver(register, error_log):
    return LedDriver(register, error_log)


def test_leds_off_after_create():
    register = LedRegister(0xFFFF)
    LedDriver(register, RuntimeErrorLog())
    assert register.value == 0


def test_turn_on_led_one(driver, register):
    driver.turn_on(1)
    assert register.value == 1


def test_turn_off_led_one(driver, register):
    driver.turn_on(1)
    driver.turn_off(1)
    assert register.value == 0


def test_turn_on_multiple_leds(driver, register):
    driver.turn_on(8)
    driver.turn_on(9)
    assert register.value == 0x180


def test_turn_off_any_led(driver, register):
    driver.turn_all_on()
    driver.turn_off(7)
    assert register.value == 0xFFBF


def test_turn_on_all_leds(driver, register):
    driver.turn_all_on()
    assert register.value == 0xFFFF


def test_led_memory_is_not_readable(driver, register):
    register.value = 0xFFFF
    driver.turn_on(8)
    assert register.value == 0x80


def test_upper_and_lower_bounds(driver, register):
    driver.turn_on(1)
    driver.turn_on(16)
    assert register.value == 0x8001


def test_out_of_bounds_turn_on_does_no_harm(driver, register):
    for led in (-1, 0, 17, 3141):
        driver.turn_on(led)
    assert register.value == 0


def test_out_of_bounds_turn_off_does_no_harm(driver, register):
    driver.turn_all_on()
    for led in (-1, 0, 17, 3141):
        driver.turn_off(led)
    assert register.value == 0xFFFF


def test_out_of_bounds_produces_runtime_error(driver, error_log):
    driver.turn_on(-1)
    assert error_log.last_error == "LED Driver: out-of-bounds LED"
    assert error_log.last_parameter == -1


def test_out_of_bounds_error_records_caller_location(driver, error_log):
    driver.turn_off(17)
    assert error_log.last_parameter == 17
    assert error_log.last_file.endswith("led_driver.py")
    assert error_log.last_line > 0


def test_in_bounds_use_reports_nothing(driver, error_log):
    driver.turn_on(5)
    driver.turn_off(5)
    driver.is_on(16)
    assert error_log.last_error is None


def test_is_on(driver):
    assert not driver.is_on(11)
    driver.turn_on(11)
    assert driver.is_on(11)


def test_out_of_bounds_leds_are_off(driver):
    assert not driver.is_on(0)
    assert not driver.is_on(17)
    assert driver.is_off(784)
    assert not driver.is_on(3471)


def test_is_off(driver):
    assert driver.is_off(2)
    driver.turn_on(2)
    assert not driver.is_off(2)


def test_turn_off_multiple_leds(driver, register):
    driver.turn_all_on()
    driver.turn_off(8)
    driver.turn_off(9)
    assert register.value == 0xFE7F
    assert register.value == ~0x180 & 0xFFFF
    driver.turn_all_on()
    driver.turn_off(1)
    driver.turn_off(5)
    driver.turn_off(9)
    assert register.value == ~0x111 & 0xFFFF


def test_turn_off_all_leds(driver, register):
    driver.turn_all_on()
    driver.turn_all_off()
    assert register.value == 0


@pytest.mark.parametrize("led", range(1, 17))
def test_each_led_toggles_independently(driver, led):
    driver.turn_on(led)
    assert driver.is_on(led)
    assert all(driver.is_off(other) for other in range(1, 17) if other != led)
    driver.turn_off(led)
    assert driver.is_off(led)


def test_register_keeps_sixteen_bits():
    register = LedRegister(0x1FFFF)
    assert register.value == 0xFFFF


def test_driver_without_log_still_records_errors(register):
    driver = LedDriver(register, None)
    driver.turn_on(0)
    assert driver.error_log.last_parameter == 0
    assert register.value == 0