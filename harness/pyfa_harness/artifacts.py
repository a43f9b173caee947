from dataclasses import dataclass, asdict
import json
from typing import Optional

from pyfa.core.types import Accepted, Stuck, Verdict


@dataclass
class RunArtifact:
    input: str
    outcome: str
    path: list
    stuck_state: Optional[str]
    stuck_symbol: Optional[str]
    pyfa_version: str
    timestamp: str

    @property
    def accepted(self) -> bool:
        return self.outcome == "accepted"


def outcome_name(verdict: Verdict) -> str:
    if isinstance(verdict, Accepted):
        return "accepted"
    if isinstance(verdict, Stuck):
        return "stuck"
    return "rejected"


def save_artifacts(artifacts: list[RunArtifact], path: str) -> None:
    artifacts_as_dicts = [asdict(artifact) for artifact in artifacts]
    with open(path, "w") as f:
        json.dump(artifacts_as_dicts, f, indent=2)


def load_artifacts(path: str) -> list[RunArtifact]:
    with open(path, "r") as f:
        data = json.load(f)

    return [RunArtifact(**item) for item in data]
