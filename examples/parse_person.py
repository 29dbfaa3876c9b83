"""Parsing untrusted JSON with named exits.

A parser that raises ``ValueError`` for every problem gives its callers no way
to see, from the call site, which failures to expect. Returning an error value
instead works for failures we detect ourselves but not for exceptions raised
by code we call (here ``json.loads``).

With gbye each expected failure is a channel. ``trap`` turns the JSON
decoder's exception into the ``malformed`` exit, ``exit`` covers the checks we
make ourselves, and anything else escaping ``run`` is a bug.

Run with: uv run python examples/parse_person.py
"""

import asyncio
import json
from dataclasses import dataclass

from gbye import Controls, run


@dataclass(frozen=True)
class Person:
    age: int


@dataclass(frozen=True)
class Rejected:
    reason: str


def parse_person(ctl: Controls, text: str) -> Person:
    data = ctl.trap("malformed", text, lambda: json.loads(text))
    age = data.get("age")
    if not isinstance(age, int):
        ctl.exit("wrong_type", "age", age)
    if age < 0:
        ctl.exit("out_of_range", "age", age)
    return Person(age=age)


CHANNELS = {
    "malformed": lambda text, err: Rejected(f"not JSON ({err.msg}): {text!r}"),
    "wrong_type": lambda field, value: Rejected(f"{field} must be a number, got {value!r}"),
    "out_of_range": lambda field, value: Rejected(f"{field} must be 0 or greater, got {value}"),
}


async def fetch_text(text: str) -> str:
    await asyncio.sleep(0.01)
    if not text:
        raise ConnectionError("empty response")
    return text


async def fetch_person(ctl: Controls, text: str) -> Person:
    body = await ctl.trap("unreachable", lambda: fetch_text(text))
    return parse_person(ctl, body)


def main() -> None:
    for text in ['{"age": 10}', '{"age": "10"}', '{"age": -1}', '{"age": 10']:
        print(f"{text:>14} -> {run(lambda ctl: parse_person(ctl, text), CHANNELS)}")

    async_channels = {**CHANNELS, "unreachable": lambda err: Rejected(f"fetch failed: {err}")}
    for text in ['{"age": 33}', ""]:
        outcome = asyncio.run(run(lambda ctl: fetch_person(ctl, text), async_channels))
        print(f"{text!r:>14} -> {outcome}")


if __name__ == "__main__":
    main()
