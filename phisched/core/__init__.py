"""
Core Scheduling Model

Defines HOW a golden-ratio series is placed in time, independent of any
clock implementation or event sink.

Invariants:
- Time is expressed in clock-native units (ticks / beats).
- Offsets are measured from an anchor, never from clock zero.
- Both offset policies yield strictly increasing offsets.

Core explicitly does NOT:
- Sleep, wait or advance time
- Own a clock or keep state after submission
- Know what an event identifier means

Time advancement is always external.
"""
