from dataclasses import dataclass

from .errors import EXIT_MISTAKES, EXIT_OK


@dataclass
class RunStatus:
    """Mistake total of a completed run and the exit code it implies"""

    mistakes: int = 0
    lines: int = 0

    def record(self, mistakes: int):
        if mistakes < 0:
            raise ValueError("mistake count cannot be negative")
        self.mistakes += mistakes
        self.lines += 1

    @property
    def exit_code(self) -> int:
        return EXIT_MISTAKES if self.mistakes else EXIT_OK
