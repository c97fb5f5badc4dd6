"""JSON-backed project store; the editor's persistence collaborator."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from neocoder.runtime import telemetry

from ._storage import read_json, write_json
from .models import CodeFile, CodeProject, ProgrammingLanguage, utcnow

WELCOME_SWIFT = """import SwiftUI

struct WelcomeView: View {
    var body: some View {
        VStack(spacing: 20) {
            Text("Welcome to NeoCoder Road!")
                .font(.largeTitle)
                .fontWeight(.bold)

            Button("Start Coding") {
                print("Ready to code!")
            }
            .buttonStyle(.borderedProminent)
        }
        .padding()
    }
}
"""

EXAMPLE_JS = """// JavaScript Example
function fibonacci(n) {
    if (n <= 1) return n;
    return fibonacci(n - 1) + fibonacci(n - 2);
}

console.log("Fibonacci sequence:");
for (let i = 0; i < 10; i++) {
    console.log(`F(${i}) = ${fibonacci(i)}`);
}
"""


class ProjectStore:
    """Owns every project and writes the whole set to one JSON file.

    ``path=None`` keeps the store in memory. Read and write failures are
    logged and never raised, so ``on_content_changed`` is safe to call from
    the editor on every keystroke.
    """

    def __init__(
        self,
        path: Optional[Path] = None,
        *,
        seed_samples: bool = True,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.path = path
        self.projects: List[CodeProject] = []
        self.current_project: Optional[CodeProject] = None
        self._clock = clock or utcnow
        self.load()
        if not self.projects and seed_samples:
            self._create_sample_project()

    def load(self) -> None:
        raw = read_json(self.path)
        if not isinstance(raw, list):
            return
        try:
            projects = [CodeProject.from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as exc:
            telemetry.record_event(
                "projects.decode_failed",
                level="warning",
                data={"path": str(self.path), "error": str(exc)},
            )
            return
        self.projects = projects
        self.current_project = projects[0] if projects else None

    def save(self) -> bool:
        return write_json(self.path, [project.to_dict() for project in self.projects])

    def get_project(self, project_id: str) -> Optional[CodeProject]:
        return next((p for p in self.projects if p.id == project_id), None)

    def find_file(self, file_id: str) -> Optional[CodeFile]:
        project = self._project_for_file(file_id)
        return project.find_file(file_id) if project else None

    def create_project(self, name: str) -> CodeProject:
        project = CodeProject(name=name)
        self.projects.append(project)
        self.save()
        return project

    def delete_project(self, project_id: str) -> bool:
        project = self.get_project(project_id)
        if project is None:
            return False
        self.projects.remove(project)
        if self.current_project is project:
            self.current_project = self.projects[0] if self.projects else None
        self.save()
        return True

    def set_current_project(self, project_id: str) -> Optional[CodeProject]:
        project = self.get_project(project_id)
        if project is not None:
            self.current_project = project
        return project

    def create_file(
        self,
        project_id: str,
        name: str,
        language: ProgrammingLanguage,
        content: str = "",
    ) -> Optional[CodeFile]:
        project = self.get_project(project_id)
        if project is None:
            return None
        file = CodeFile(name=name, content=content, language=language)
        project.files.append(file)
        project.last_modified = self._clock()
        self.save()
        return file

    def update_file(
        self, file_id: str, content: str, *, timestamp: Optional[datetime] = None
    ) -> bool:
        project = self._project_for_file(file_id)
        file = project.find_file(file_id) if project else None
        if project is None or file is None:
            return False
        modified = timestamp or self._clock()
        file.content = content
        file.last_modified = modified
        project.last_modified = modified
        self.save()
        return True

    def delete_file(self, project_id: str, file_id: str) -> bool:
        project = self.get_project(project_id)
        if project is None:
            return False
        file = project.find_file(file_id)
        if file is None:
            return False
        project.files.remove(file)
        project.last_modified = self._clock()
        self.save()
        return True

    def on_content_changed(self, file_id: str, content: str, timestamp: datetime) -> None:
        if not self.update_file(file_id, content, timestamp=timestamp):
            telemetry.record_event(
                "projects.unknown_file", level="warning", data={"file": file_id}
            )

    def _project_for_file(self, file_id: str) -> Optional[CodeProject]:
        return next(
            (p for p in self.projects if p.find_file(file_id) is not None), None
        )

    def _create_sample_project(self) -> None:
        project = CodeProject(
            name="Welcome to NeoCoder",
            files=[
                CodeFile(
                    name="Welcome.swift",
                    content=WELCOME_SWIFT,
                    language=ProgrammingLanguage.SWIFT,
                ),
                CodeFile(
                    name="example.js",
                    content=EXAMPLE_JS,
                    language=ProgrammingLanguage.JAVASCRIPT,
                ),
            ],
        )
        self.projects.append(project)
        self.current_project = project
        self.save()


__all__ = ["ProjectStore"]
