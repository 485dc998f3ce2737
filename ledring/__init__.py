"""Fixed-capacity ring buffer and a 16-LED register driver with error reporting."""

__version__ = "0.1.0"
__all__ = ["led_driver", "ring_buffer", "runtime_error"]