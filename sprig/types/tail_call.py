from sprig import LispValue
from sprig.types.lambda_fn import Lambda


class TailCall:
    """A pending application returned from tail position when tail calls are enabled."""

    __slots__ = ("fn", "args")

    def __init__(self, fn: Lambda, args: list[LispValue]):
        self.fn = fn
        self.args = args
