import logging
from datetime import datetime
from typing import Iterable, Optional

import pyfa
from pyfa.core.automaton import Automaton
from pyfa.core.types import Stuck, SubsetSpec
from .artifacts import RunArtifact, outcome_name

logger = logging.getLogger(__name__)


def prepare(automaton: Automaton, spec: Optional[SubsetSpec] = None) -> tuple[Automaton, Optional[str]]:
    """Return a deterministic automaton plus its listing if construction was needed."""
    if automaton.is_deterministic():
        logger.info("automaton is already deterministic")
        return automaton, None

    logger.info("converting nondeterministic automaton to deterministic")
    return automaton.determinize(spec)


def run_batch(
    automaton: Automaton,
    inputs: Iterable[str],
) -> list[RunArtifact]:
    artifacts = []

    for text in inputs:
        verdict = automaton.run(text)
        stuck = verdict if isinstance(verdict, Stuck) else None

        artifact = RunArtifact(
            input=text,
            outcome=outcome_name(verdict),
            path=list(verdict.path),
            stuck_state=stuck.state if stuck else None,
            stuck_symbol=stuck.symbol if stuck else None,
            pyfa_version=pyfa.__version__,
            timestamp=datetime.now().isoformat(),
        )
        logger.debug("%r -> %s", text, artifact.outcome)
        artifacts.append(artifact)

    return artifacts
