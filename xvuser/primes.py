"""Prime sieve built as a chain of filtering stages."""

import sys

END_LOOKUP = 35


def _drop_multiples(stream, prime):
    for n in stream:
        if n % prime != 0:
            yield n


def primes(limit=END_LOOKUP):
    """Yield the primes below limit, one filtering stage per prime found."""
    stream = iter(range(2, limit))
    while True:
        prime = next(stream, None)
        if prime is None:
            return
        yield prime
        stream = _drop_multiples(stream, prime)


def main(argv=None):
    """Report each prime below the lookup limit on standard error."""
    for prime in primes():
        sys.stderr.write(f"executing {prime}\n")
    return 0