"""Park-Miller minimal standard pseudo-random number generator."""

_UINT64_MASK = (1 << 64) - 1
_MODULUS = 0x7FFFFFFF


def do_rand(ctx):
    """Advance state ctx and return the new state, in [0, 0x7ffffffd]."""
    # Schrage's method: 16807 * x mod (2^31 - 1) without overflow.
    x = ((ctx & _UINT64_MASK) % 0x7FFFFFFE) + 1
    hi, lo = divmod(x, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += _MODULUS
    return x - 1


class Rand:
    """Generator whose state is the last value it returned."""

    def __init__(self, seed=1):
        self.state = seed & _UINT64_MASK

    def next(self):
        """Advance and return the next pseudo-random value."""
        self.state = do_rand(self.state)
        return self.state

    def __iter__(self):
        while True:
            yield self.next()