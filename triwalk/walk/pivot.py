"""
Pivot walks: sweep through the cells around a pivot node until the
direction to the target is found, then hop across the edge opposite
the pivot and take the far node of the next cell as the new pivot.

PivotWalk picks the sweep direction at random for every pivot, SWalk
alternates it.

Each pivot is entered through the edge opposite it, so that edge is
known not to separate the target.  Testing one sweep edge and finding
the target is not beyond it leaves two possibilities: the target is in
the current cell, or beyond the other sweep edge.  With speculate=True
the other sweep edge is crossed without a test.  The next test, made
from the far side, either confirms the guess or sends the walk back
into the first cell, which then holds the target.  That backtrack is
the one revisit the pivot walks make legitimately.
"""
from .base import Walk, enter_finite, sweep_edge, rotate
from .coins import RandomCoin


class PivotingWalk(Walk):
    """ sweep and pivot machinery, subclasses choose the directions """
    speculate=True

    ccw=None # current sweep direction

    def choose_direction(self):
        """ True for counter-clockwise, called once per new pivot """
        raise NotImplementedError

    def establish(self,c,q):
        self.ctx.add_pivot(q)
        self.ccw=self.choose_direction()

    def new_pivot(self,c,entry):
        q=int(self.tri.cell_nodes(c)[entry])
        self.establish(c,q)
        return q

    def walk(self,c):
        c,q=self.initial_pivot(c)
        while q is not None:
            c,q=self.pivot_step(c,q)
        return c

    def initial_pivot(self,c):
        """
        Returns the cell and the first pivot, or (c,None) if the walk
        is already over.
        """
        ctx=self.ctx
        tri=self.tri
        if tri.is_infinite(c):
            c,entry=enter_finite(ctx,c)
            if entry is None:
                return c,None
            return c,self.new_pivot(c,entry)

        for i in range(3):
            if ctx.beyond(c,i):
                nbr=ctx.cross(c,i)
                if tri.is_infinite(nbr):
                    return nbr,None
                return nbr,self.new_pivot(nbr,tri.index_of(nbr,c))
        return c,None

    def pivot_step(self,c,q):
        """
        Sweep around pivot q from cell c, then either stop or hop to
        the next pivot.  Returns the next (cell,pivot), with pivot None
        when the walk is over.
        """
        ctx=self.ctx
        tri=self.tri

        i=sweep_edge(tri,c,q,self.ccw)
        if ctx.beyond(c,i):
            f=rotate(ctx,ctx.cross(c,i),q,self.ccw)
        else:
            j=sweep_edge(tri,c,q,not self.ccw)
            if self.speculate and not tri.is_infinite(tri.neighbor(c,j)):
                f=self.speculative_turn(c,q,j)
                if f is None:
                    return c,None
            else:
                if not ctx.beyond(c,j):
                    return c,None
                self.ccw=not self.ccw
                f=rotate(ctx,ctx.cross(c,j),q,self.ccw)

        if tri.is_infinite(f):
            return f,None

        # sink test, on the edge opposite the pivot
        k=tri.node_index(f,q)
        if not ctx.beyond(f,k):
            return f,None
        nbr=ctx.cross(f,k)
        if tri.is_infinite(nbr):
            return nbr,None
        return nbr,self.new_pivot(nbr,tri.index_of(nbr,f))

    def speculative_turn(self,c,q,j):
        """
        Cross sweep edge j of c without testing it and keep turning the
        other way.  Returns the cell where the turn stopped, or None
        after backtracking into c, which then contains the target.
        """
        ctx=self.ctx
        tri=self.tri

        self.ccw=not self.ccw
        nbr=ctx.cross(c,j)
        i=sweep_edge(tri,nbr,q,self.ccw)
        if ctx.beyond(nbr,i):
            # a wrong guess is harmless here, the turn comes back
            # around to c
            return rotate(ctx,ctx.cross(nbr,i),q,self.ccw)

        if ctx.beyond(nbr,tri.index_of(nbr,c)):
            # the omitted test would have failed
            ctx.add_to_walk(c)
            self.ccw=not self.ccw
            return None
        return nbr


class PivotWalk(PivotingWalk):
    """
    coin: object with next_bit(), defaults to RandomCoin(seed)
    """
    coin=None

    def __init__(self,target,tri,start=None,coin=None,seed=None,**kwargs):
        self.coin=coin if coin is not None else RandomCoin(seed)
        super(PivotWalk,self).__init__(target,tri,start=start,**kwargs)

    def choose_direction(self):
        return bool(self.coin.next_bit())


class SWalk(PivotingWalk):
    """
    Deterministic pivot walk: the first pivot is swept counter-clockwise
    (unless first_ccw=False) and the direction flips with every new
    pivot.
    """
    first_ccw=True

    def __init__(self,target,tri,start=None,**kwargs):
        self.states=set()
        super(SWalk,self).__init__(target,tri,start=start,**kwargs)

    def choose_direction(self):
        # called after the pivot is recorded, so the first pivot is odd
        return self.first_ccw == (len(self.ctx.pivots)%2==1)

    def establish(self,c,q):
        # cell, pivot and schedule parity determine the rest of the walk
        state=(c,q,len(self.ctx.pivots)%2)
        if state in self.states:
            raise self.ctx.did_not_converge("SWalk is cycling: cell %d, pivot %d seen before"%(c,q))
        self.states.add(state)
        super(SWalk,self).establish(c,q)
