#!/usr/bin/env python3
"""
Sensor readings example - working on both channels of a result stream.

Key concepts:
- Raw lines are parsed into Ok(reading) / Err(problem) lazily
- try_filter_map_success drops readings without a value
- Failures are logged and traced without being unwrapped
- take_while_success stops at the first failure and keeps it on .failure
"""

from __future__ import annotations

import json
import logging

from resflow import Err, FallibleIter, Ok, Trace

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


RAW = [
    '{"sensor": "t1", "value": 21.5}',
    "",
    '{"sensor": "t2", "value": "warm"}',
    '{"sensor": "t3", "value": null}',
    '{"sensor": "t4", "value": 19}',
]


def lines():
    for line in RAW:
        yield Ok(line) if line else Err("empty line")


def decode(line: str):
    try:
        return Ok(json.loads(line))
    except json.JSONDecodeError as exc:
        return Err(f"bad json: {exc.msg}")


def reading(record: dict):
    value = record.get("value")
    if value is None:
        return Ok(None)
    if not isinstance(value, (int, float)):
        return Err(f"{record.get('sensor')}: non-numeric value {value!r}")
    return Ok((record["sensor"], float(value)))


def main() -> None:
    trace = Trace()
    readings = (
        FallibleIter(lines())
        .traced(trace, label="raw")
        .fallible_transform_success(decode)
        .try_filter_map_success(reading)
        .log_failures()
    )
    for sensor, value in readings.successes():
        print(f"{sensor}: {value}")
    print(f"{len(trace.find_all(action='raw.failure'))} raw failure(s) traced")

    taken = FallibleIter(lines()).take_while_success()
    print(f"lines before first failure: {list(taken)!r}, stopped on {taken.failure!r}")


if __name__ == "__main__":
    main()
