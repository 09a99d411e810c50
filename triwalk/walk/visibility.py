"""
Randomized visibility walk: from the current cell, cross any edge the
target is beyond, testing the candidate edges in random order.
"""
from .base import Walk, enter_finite
from .coins import RandomCoin
from ..grid.triangulation import ccw, cw


def visibility_step(ctx,c,entry,coin):
    """
    c: current finite cell
    entry: local index of the edge c was entered across, or None for
      the first cell of the walk.
    coin: random source, one flip per step picks the order of the two
      edges other than the entry edge.

    Returns the local index of the edge to cross, or None if c contains
    the target.  The entry edge is only tested on the first cell, where
    nothing is known about it yet - otherwise the crossing into c
    already established that the target is not beyond it.
    """
    first=0 if entry is None else entry
    order=[ccw(first),cw(first)]
    if coin.next_bit():
        order.reverse()
    if entry is None:
        order.append(first)
    for i in order:
        if ctx.beyond(c,i):
            return i
    return None


class VisibilityWalk(Walk):
    """
    coin: object with next_bit(), defaults to RandomCoin(seed)
    """
    coin=None

    def __init__(self,target,tri,start=None,coin=None,seed=None,**kwargs):
        self.coin=coin if coin is not None else RandomCoin(seed)
        super(VisibilityWalk,self).__init__(target,tri,start=start,**kwargs)

    def walk(self,c):
        ctx=self.ctx
        tri=self.tri

        entry=None
        if tri.is_infinite(c):
            c,entry=enter_finite(ctx,c)
            if entry is None:
                return c

        while True:
            i=visibility_step(ctx,c,entry,self.coin)
            if i is None:
                return c
            nbr=ctx.cross(c,i)
            if tri.is_infinite(nbr):
                # target is outside the convex hull
                return nbr
            entry=tri.index_of(nbr,c)
            c=nbr
