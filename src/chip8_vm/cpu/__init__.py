"""CPU core: decoder, executor, registers, call stack and timers."""
