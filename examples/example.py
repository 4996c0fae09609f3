#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Isoscribe contributors

"""Example usage of the isoscribe module.

This script prints every kind of log event in both output formats so the
rendering can be checked by eye.
"""

from isoscribe import Isoscribe, RecordingConsole, print_as_bullets


def run_sandbox(log: Isoscribe) -> None:
    """Emit one of each event, with and without auxiliary data."""
    log.log_level = "trace"
    log.trace("This is a trace message")
    log.debug("This is a debug message")
    log.debug("This is a debug message with content", {"test": "hello"})
    log.info("This is a info message")
    log.info("This is a info message with content", {"test": "hello"})
    log.warn("This is a warn message")
    log.warn("This is a warn message with content", {"test": "hello"})
    log.error("This is a error message")
    log.error("This is a error message with content", {"test": "hello"})
    log.success("This is a success message")
    log.success("This is a success message with content", {"test": "hello"})
    log.watch(f"Watching files{print_as_bullets(['src/', 'tests/'])}")
    log.checkpoint_start()
    log.checkpoint_end()

    try:
        raise RuntimeError("This is a fatal message")
    except RuntimeError as exc:
        log.fatal(exc)


def main():
    """Demonstrate logging functionality."""

    print("=" * 60)
    print("Isoscribe Examples")
    print("=" * 60)
    print()

    print("Example 1: string format")
    print("-" * 60)
    run_sandbox(Isoscribe("sandbox", log_format="string"))
    print()

    print("Example 2: json format")
    print("-" * 60)
    run_sandbox(Isoscribe("sandbox", log_format="json"))
    print()

    print("Example 3: RecordingConsole for testing")
    print("-" * 60)
    console = RecordingConsole()
    test_log = Isoscribe("test-service", log_level="warn", console=console)
    test_log.info("Not recorded (below WARN level)")
    test_log.warn("Recorded warning")
    test_log.error("Recorded error", {"code": 500})

    print(f"Total calls captured: {len(console.calls)}")
    print(f"Has 'Recorded warning': {console.has_output('Recorded warning')}")
    print(f"Error calls: {len(console.get_calls('error'))}")
    print()

    print("=" * 60)
    print("Examples completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
