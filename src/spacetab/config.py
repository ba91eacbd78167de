"""
Run Configuration
=================

Settings for a single interpreter run. The defaults reproduce the plain
`spacetab < program` invocation: growable memory, quiet logging, and
source named after standard input.
"""

from dataclasses import dataclass
from typing import Optional, TextIO

from spacetab.machine import Machine
from spacetab.memory import FixedMemory, MemoryProtocol, SparseMemory


@dataclass
class RunConfig:
    """
    Configuration for one program run.

    Attributes:
        memory_size: Cell count for a bounded store, or None for growable memory
        verbose: Trace each executed instruction through logging
        filename: Source name used in error messages
    """
    memory_size: Optional[int] = None
    verbose: bool = False
    filename: str = "<stdin>"

    def __post_init__(self):
        if self.memory_size is not None and self.memory_size < 0:
            raise ValueError(f"memory_size must be non-negative, got {self.memory_size}")

    def create_memory(self) -> MemoryProtocol:
        if self.memory_size is None:
            return SparseMemory()
        return FixedMemory(self.memory_size)

    def create_machine(self, output: Optional[TextIO] = None) -> Machine:
        """Build a fresh machine in its default state."""
        return Machine(output=output, memory=self.create_memory())
