"""
Generators — produce build files from site configuration.

Each generator module exposes a ``generate_*()`` function that returns
a ``GeneratedFile`` (or None when it has nothing to render).
"""
