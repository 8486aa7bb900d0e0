"""
Deterministic shipping fee calculation.

Pure Python math. No I/O, no caching, no clock.
Validate -> aggregate weights -> billable kg -> fee ladder -> format.
The server runs the same pipeline and its number is the one that gets charged.
"""
