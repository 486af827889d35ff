"""
Generators — produce source files from a validated flag cache.

Each generator module exposes a ``generate_*_code()`` function that
returns a list of ``Artifact`` instances.
"""
