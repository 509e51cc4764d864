"""
Generators — produce the files scaffolded into a Moodle installation.

Each generator renders a ``GeneratedFile`` (pure) and writes it with
``generate()`` in a single operation.
"""
