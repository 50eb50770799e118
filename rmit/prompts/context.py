"""Project Context - Cheap project-type signals for the prompt."""

from dataclasses import dataclass
from pathlib import Path

from rmit.output import print_warning

# Marker file -> label, in the order labels appear in the prompt
PROJECT_MARKERS: list[tuple[str, str]] = [
    ("go.mod", "Go project."),
    ("package.json", "JavaScript/Node.js project."),
    ("pom.xml", "Java/Maven project."),
    ("CMakeLists.txt", "C/C++ project with CMake."),
    ("pyproject.toml", "Python project."),
]


@dataclass(frozen=True)
class ProjectContext:
    descriptors: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(self.descriptors)

    def __bool__(self) -> bool:
        return bool(self.descriptors)


class ContextBuilder:
    """Maps top-level marker files to human-readable project labels."""

    def __init__(self, markers: list[tuple[str, str]] | None = None):
        self.markers = markers if markers is not None else PROJECT_MARKERS

    def describe(self, working_dir: Path | str | None = None) -> ProjectContext:
        root = Path(working_dir) if working_dir is not None else Path.cwd()
        try:
            entries = {entry.name for entry in root.iterdir()}
        except OSError as e:
            print_warning(f"Couldn't get project info: {e}")
            return ProjectContext()

        return ProjectContext(tuple(label for marker, label in self.markers if marker in entries))
