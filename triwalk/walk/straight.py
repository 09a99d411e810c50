"""
Straight walk: follow the segment from a vertex of the starting cell
to the target, cell by cell.  Deterministic.
"""
from .base import Walk, enter_finite, sweep_edge, rotate
from ..grid.triangulation import ccw, cw
from ..spatial import robust_predicates


def straight_step(ctx,p,c,entry):
    """
    Advance along the segment p->target through finite cell c, which
    was entered across its edge `entry`.  Coming in across that edge,
    nodes[cw(entry)] is on the right of the segment and nodes[ccw(entry)]
    on the left, so the far node alone decides where the segment leaves.
    A far node exactly on the segment counts as left.

    Returns the local index of the edge to cross, or None if c contains
    the target.
    """
    r=ctx.tri.vertex(c,entry)
    if ctx.orientation(p,ctx.target,r)==robust_predicates.RIGHT:
        exit_edge,other=cw(entry),ccw(entry)
    else:
        exit_edge,other=ccw(entry),cw(entry)

    if ctx.beyond(c,exit_edge):
        return exit_edge
    # only when the segment passes exactly through a node
    if ctx.beyond(c,other):
        return other
    return None


class StraightWalk(Walk):
    # a straight segment enters a convex cell at most once
    allow_revisits=False

    def walk(self,c):
        ctx=self.ctx
        tri=self.tri

        if tri.is_infinite(c):
            c,entry=enter_finite(ctx,c)
            if entry is None:
                return c

        q=int(tri.cell_nodes(c)[0])
        self.p=tri.nodes['x'][q].copy()

        # turn around p to the cell holding the start of the segment
        for ccw_dir in (True,False):
            i=sweep_edge(tri,c,q,ccw_dir)
            if ctx.beyond(c,i):
                c=rotate(ctx,ctx.cross(c,i),q,ccw_dir)
                break
        if tri.is_infinite(c):
            return c

        k=tri.node_index(c,q)
        if not ctx.beyond(c,k):
            return c

        while True:
            nbr=ctx.cross(c,k)
            if tri.is_infinite(nbr):
                return nbr
            entry=tri.index_of(nbr,c)
            c=nbr
            k=straight_step(ctx,self.p,c,entry)
            if k is None:
                return c
