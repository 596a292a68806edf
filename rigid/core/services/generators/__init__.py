"""
Generators — produce scaffold files from the user's answers.

Each generator module exposes a ``generate()`` function that returns
a list of ``GeneratedFile`` instances.
"""
