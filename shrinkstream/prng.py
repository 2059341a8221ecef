"""JSF64: "A Small Noncryptographic PRNG" by Bob Jenkins.

Fast and reproducible, not unpredictable. All arithmetic is done on Python
integers reduced modulo 2**64.

See http://www.pcg-random.org/posts/bob-jenkins-small-prng-passes-practrand.html
for some recent analysis.
"""

MASK64 = (1 << 64) - 1

INITIAL_A = 0xF1EA5EED
WARMUP_ROUNDS = 20


def rotl(x: int, k: int) -> int:
    """Rotate a 64-bit word left by k bits (0 < k < 64)."""
    return ((x << k) | (x >> (64 - k))) & MASK64


class JSF64:
    """Seedable 64-bit word generator.

    Identical seeds give identical output sequences on every platform.
    """

    __slots__ = ("a", "b", "c", "d")

    def __init__(self, seed: int = 0):
        self.init(seed)

    def init(self, seed: int) -> None:
        """Reset state from a seed and discard the first outputs.

        Args:
            seed: Any integer; reduced modulo 2**64
        """
        seed &= MASK64
        self.a = INITIAL_A
        self.b = seed
        self.c = seed
        self.d = seed

        for _ in range(WARMUP_ROUNDS):
            self.rand()

    def rand(self) -> int:
        """Advance the state and return the next 64-bit word."""
        e = (self.a - rotl(self.b, 7)) & MASK64
        self.a = self.b ^ rotl(self.c, 13)
        self.b = (self.c + rotl(self.d, 37)) & MASK64
        self.c = (self.d + e) & MASK64
        self.d = (e + self.a) & MASK64
        return self.d

    @property
    def state(self) -> tuple[int, int, int, int]:
        return (self.a, self.b, self.c, self.d)
