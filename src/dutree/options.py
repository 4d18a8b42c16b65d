"""Options controlling a du run."""

from dataclasses import dataclass

from .errors import ConflictingOptions
from .utils.formatting import KILO_UNIT_SIZE, POSIX_UNIT_SIZE


@dataclass(frozen=True)
class DuOptions:
    """Everything a run needs to know, passed explicitly to each step.

    The dereference and one-file-system flags are accepted for compatibility
    with Posix du but do not change how the tree is walked.
    """

    unit_size: int = POSIX_UNIT_SIZE
    list_all: bool = False
    summarise: bool = False
    dereference_all: bool = False
    dereference_args: bool = False
    one_file_system: bool = False

    @classmethod
    def from_flags(cls, kilo=False, **flags):
        """Create options from command line flags, ``kilo`` selects -k."""
        unit_size = KILO_UNIT_SIZE if kilo else POSIX_UNIT_SIZE
        return cls(unit_size=unit_size, **flags)

    def validate(self):
        """Raise ConflictingOptions if the options cannot be combined."""
        if self.list_all and self.summarise:
            raise ConflictingOptions("Cannot both summarise and show all entries.")
        return self
