import argparse
import logging
import sys
from typing import Optional

from pyfa.core.types import SubsetSpec

from .artifacts import RunArtifact, save_artifacts
from .batch import prepare, run_batch
from .loader import load_automaton
from .serialization import save_automaton

logger = logging.getLogger(__name__)


def _print_run(artifact: RunArtifact, trace: bool) -> None:
    if trace:
        for state in artifact.path[1:]:
            print(f"  moved to state {state}")

    if artifact.outcome == "accepted":
        print(f"{artifact.input!r}: accepted (ended in {artifact.path[-1]})")
    elif artifact.outcome == "stuck":
        print(
            f"{artifact.input!r}: rejected, no transition from {artifact.stuck_state} "
            f"on {artifact.stuck_symbol!r}"
        )
    else:
        print(f"{artifact.input!r}: rejected (ended in non-final state {artifact.path[-1]})")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pyfa",
        description="Load a finite automaton, determinize it and check input strings.",
    )
    parser.add_argument("path", help="Transition file, one <tag><digits>,<symbol>=<tag><digits> per line")
    parser.add_argument(
        "inputs",
        nargs="*",
        help="Input strings to check. Read from stdin, one per line, when omitted.",
    )
    parser.add_argument("--initial", default=None, help="Initial state (default: first q-state seen)")
    parser.add_argument(
        "--max-states",
        type=int,
        default=SubsetSpec().max_states,
        help="Upper bound on deterministic states during construction",
    )
    parser.add_argument("--save-dfa", default=None, help="Pickle the deterministic automaton here")
    parser.add_argument("--artifacts", default=None, help="Write run results as JSON here")
    parser.add_argument("--trace", action="store_true", help="Print every visited state")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s: %(message)s",
    )

    try:
        spec = SubsetSpec(max_states=args.max_states)
        loaded = load_automaton(args.path, initial=args.initial)
        dfa, listing = prepare(loaded.automaton, spec)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 2

    if listing is not None:
        print("Transitions of the deterministic automaton:")
        print(listing)

    if args.save_dfa:
        save_automaton(dfa, args.save_dfa)
        logger.info("deterministic automaton saved to %s", args.save_dfa)

    inputs = args.inputs if args.inputs else [line.rstrip("\r\n") for line in sys.stdin]
    artifacts = run_batch(dfa, inputs)
    for artifact in artifacts:
        _print_run(artifact, args.trace)

    if args.artifacts:
        save_artifacts(artifacts, args.artifacts)
        logger.info("run artifacts saved to %s", args.artifacts)

    return 0 if all(artifact.accepted for artifact in artifacts) else 1


if __name__ == "__main__":
    sys.exit(main())
