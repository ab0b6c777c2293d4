import logging
from typing import Any, List, Tuple

from rangeset.config import ScenarioConfig
from rangeset.messages import show_membership, show_ranges
from rangeset.rangeset import RangeSet

logger = logging.getLogger(__name__)


def _describe(lo: Any, hi: Any) -> str:
    return str(lo) if lo == hi else f"[{lo}, {hi}]"


def run_scenario(config: ScenarioConfig, echo: bool = True) -> Tuple[RangeSet, List[bool]]:
    """
    Applies every step of ``config`` to a fresh set, then answers its probes.

    Prints the set after each insertion when ``echo`` is set. An
    ``InvalidRangeError`` from a reversed step propagates, leaving the set as
    it was after the previous step.
    """
    rangeset = config.build()
    logger.debug("Running %d steps against %r", len(config.steps), rangeset)

    for lo, hi in config.steps:
        rangeset.insert(rangeset.factory.create(lo, hi))
        if echo:
            show_ranges(f"After inserting {_describe(lo, hi)}:", rangeset)

    answers = []
    for probe in config.probes:
        member = rangeset.contains_point(probe)
        answers.append(member)
        if echo:
            show_membership(probe, member)
    return rangeset, answers


def demo_config() -> ScenarioConfig:
    # Points 0..9 one at a time, then ranges that are already covered
    steps: List[Tuple[Any, Any]] = [(i, i) for i in range(10)]
    steps += [(5, 6), (3, 4), (9, 9)]
    return ScenarioConfig(domain='int', discrete=True, steps=steps, probes=[9])
