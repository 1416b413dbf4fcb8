#!/usr/bin/env python3
"""Structured Context — build once, emit many, never mutate.

WHY AN IMMUTABLE CONTEXT
────────────────────────
A mutable logger that collects fields has to be cleared after every
record, and any code holding a reference sees the clear.  A ``Glog``
value never changes: adding a field returns a new value and emitting a
record returns a fresh empty one, so a base context can be shared by
every record of a request (or every thread) safely.

ARCHITECTURE
────────────
    ┌────────────────────────────────────────┐
    │  new().add("user", "alice")              │
    │       .add("count", 3)                   │
    │       .error("failed")                   │
    └──────────────────┬─────────────────────┘
                       │ Backend.emit(Level.ERROR, fields)
                       ▼
    ┌────────────────────────────────────────┐
    │  logging root logger ─► handler          │
    │  "default" (structlog formatter)         │
    │  level='error' msg='failed' user='alice' │
    └────────────────────────────────────────┘

KEY FUNCTIONS
─────────────
    Function                 Purpose
    ──────────────────────── ───────────────────────────────────
    configure_logging        Install the "default" handler
    new()                    Empty context
    .add / .add_fields       Accumulate fields (new value each time)
    .info / .errorf / ...    Emit one record, get an empty context
    set_primary_level        Change the backend threshold at runtime
    set_default_formatting   Single-line key=value preset

Run: python examples/01_structured_context.py
"""
from glogkit import (
    Arg,
    ConfigLevel,
    Field,
    TemplateArityError,
    configure_logging,
    new,
    set_default_formatting,
    set_handler_level,
    set_primary_level,
)


def main():
    print("=" * 60)
    print("Structured Context Examples")
    print("=" * 60)

    # === 1. Configure logging ===
    print("\n[1] Configure Logging")

    configure_logging(level="info", format="console")
    print("  Root logger has a 'default' handler at INFO (console output)")

    # === 2. Build and emit ===
    print("\n[2] Build a context and emit")

    request = new().add("request_id", "r-42").add("user", "alice")
    request.info("request received")
    request.add("rows", 120).notice("rows loaded")
    print(f"  Base context still holds: {dict(request.fields)}")

    # === 3. Batched fields ===
    print("\n[3] Batched fields (last write wins)")

    batch = request.add_fields(Field.of(stage="transform", rejected=3, user="bob"))
    batch.warning("rows rejected")

    # === 4. Templates ===
    print("\n[4] Templated messages")

    request.infof("{} of {} rows accepted", Arg.of(117, 120))
    try:
        request.errorf("{} of {} rows accepted", Arg.of(117))
    except TemplateArityError as e:
        print(f"  Rejected template: {e}")

    # === 5. Runtime thresholds ===
    print("\n[5] Runtime thresholds")

    set_primary_level(ConfigLevel.DEBUG)
    set_handler_level("default", ConfigLevel.DEBUG)
    request.debug("debug now visible")

    set_primary_level(ConfigLevel.ERROR)
    request.warning("filtered out")
    request.alert("alerts still pass")

    # === 6. Default formatting preset ===
    print("\n[6] Default formatting preset")

    set_default_formatting()
    request.emergency("single line key=value")

    print("\n" + "=" * 60)
    print("Done")


if __name__ == "__main__":
    main()
