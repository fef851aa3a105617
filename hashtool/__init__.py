"""hashtool - single-shot hash tool for agent orchestrators.

An orchestrator invokes ``hashtool <command>`` with named inputs in the
environment and reads one line of JSON (or an error message) from stdout.
"""

__version__ = "0.1.0"
