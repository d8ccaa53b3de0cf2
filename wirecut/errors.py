class WiringError(Exception):
    """Base class for everything the partitioner raises."""


class InputModelError(WiringError, ValueError):
    """The wiring handed to the engine cannot be partitioned as described."""


class LooseWireError(WiringError, RuntimeError):
    """A wire no longer matches the components it is supposed to connect.

    This always indicates state shared between contraction branches and is
    never retried.
    """


class ReductionBudgetExhausted(WiringError, RuntimeError):
    """No cut of the target width was found within the attempt ceiling."""

    def __init__(self, attempts: int, target: int, best: int):
        super().__init__(
            f"Failed to find a cut of {target} wires in {attempts} attempts "
            f"(best reduction left {best} wires)")
        self.attempts = attempts
        self.target = target
        self.best = best
