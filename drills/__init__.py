"""Small command-line tools: greeting, text repetition, file reading and moving,
a calculator, an SQLite check, a fan-out writer and a TCP message pair."""

__version__ = "0.1.0"