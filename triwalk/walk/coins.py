"""
Random sources for the randomized walks.  Anything with a next_bit()
method returning 0 or 1 can be handed to a walk as its coin.
"""
import numpy as np


class Coin(object):
    def next_bit(self):
        raise NotImplementedError


class RandomCoin(Coin):
    """ fair coin on numpy's default generator.  The same seed gives
    the same sequence of flips.
    """
    def __init__(self,seed=None):
        self.rng=np.random.default_rng(seed)

    def next_bit(self):
        return int(self.rng.integers(0,2))


class FixedCoin(Coin):
    """ cycles through a fixed sequence of bits, for tests and
    reproducing a specific path.
    """
    def __init__(self,bits):
        self.bits=[int(bool(b)) for b in bits]
        if not self.bits:
            raise ValueError("FixedCoin needs at least one bit")
        self.count=0

    def next_bit(self):
        bit=self.bits[self.count%len(self.bits)]
        self.count+=1
        return bit
