"""
Shared machinery for the walks.

A walk is run eagerly by its constructor.  The state of the walk
lives in a WalkContext, which is handed to the step functions below
and in the strategy modules, so each step can be exercised on its
own.  The context counts every orientation test and records every
cell entered, in order, revisits included.
"""
import logging
from collections import namedtuple

import numpy as np
from matplotlib.patches import Polygon

from ..grid.triangulation import ccw, cw
from ..spatial import robust_predicates
from ..utils import set_keywords, to_xy

log=logging.getLogger(__name__)

# how a walked cell looks when drawn
WALK_STYLE=dict(edgecolor='darkgreen',facecolor='#D2D2EB')


class WalkException(Exception):
    def __init__(self,*a,**k):
        super(WalkException,self).__init__(*a)
        set_keywords(self,k)

class InvalidStartFace(WalkException):
    start=None

class WalkDidNotConverge(WalkException):
    """
    The walk exceeded its step budget, or a deterministic walk came
    back to a state it had already been in.  path holds the cells
    visited up to that point, pivots the coordinates of the pivots.
    """
    path=None
    n_orientations=None
    pivots=None


WalkStatistics=namedtuple('WalkStatistics',
                          ['n_orientations','n_triangles','n_distinct','pivots'])


class WalkContext(object):
    def __init__(self,tri,target,max_steps=None,allow_revisits=True):
        self.tri=tri
        self.target=to_xy(target)
        self.max_steps=max_steps
        self.allow_revisits=allow_revisits
        self.path=[]
        self.visited=set()
        self.pivots=[] # node indices
        self.n_orientations=0

    def did_not_converge(self,msg):
        return WalkDidNotConverge(msg,path=list(self.path),
                                  n_orientations=self.n_orientations,
                                  pivots=self.pivot_points())

    def pivot_points(self):
        """ [N,2] coordinates of the pivots so far """
        if not self.pivots:
            return np.zeros((0,2),np.float64)
        return self.tri.nodes['x'][self.pivots]

    def add_to_walk(self,c):
        if not self.allow_revisits and c in self.visited:
            self.path.append(c)
            raise self.did_not_converge("Cell %d visited twice"%c)
        self.path.append(c)
        self.visited.add(c)
        if self.max_steps is not None and len(self.path)>self.max_steps:
            raise self.did_not_converge("No containing cell after %d steps"%self.max_steps)

    def add_pivot(self,n):
        self.pivots.append(n)

    def orientation(self,p,q,r):
        self.n_orientations+=1
        return robust_predicates.orientation(p,q,r)

    def beyond(self,c,i):
        """ True if the target is strictly outside finite cell c, across
        its edge i.  Collinear is not beyond.
        """
        pa=self.tri.vertex(c,cw(i))
        pb=self.tri.vertex(c,ccw(i))
        if pa is None or pb is None:
            raise ValueError("Edge %d of cell %d touches the infinite node"%(i,c))
        return self.orientation(pa,pb,self.target)==robust_predicates.LEFT

    def cross(self,c,i):
        nbr=self.tri.neighbor(c,i)
        self.add_to_walk(nbr)
        return nbr


def enter_finite(ctx,c):
    """
    From the infinite cell c, the only edge that can be tested is the
    hull edge.  Unless the target is strictly outside it, step across
    into the finite cell.
    Returns (cell,entry): the finite cell and the local index of the
    hull edge within it, or (c,None) if the walk ends at c.
    """
    tri=ctx.tri
    k=tri.node_index(c,tri.INF_NODE)
    nbr=tri.neighbor(c,k)
    entry=tri.index_of(nbr,c)
    if ctx.beyond(nbr,entry):
        return c,None
    ctx.add_to_walk(nbr)
    return nbr,entry

def sweep_edge(tri,c,q,ccw_dir):
    """ local index of the edge of c at node q which is crossed when
    turning counter-clockwise (ccw_dir True) or clockwise around q
    """
    k=tri.node_index(c,q)
    if ccw_dir:
        return ccw(k)
    else:
        return cw(k)

def rotate(ctx,c,q,ccw_dir):
    """
    Turn around node q, starting in cell c, as long as the target is
    beyond the edge ahead.  Stops in the cell whose sector at q holds
    the direction to the target, or in an infinite cell if the target
    is outside the hull.
    """
    tri=ctx.tri
    while not tri.is_infinite(c):
        i=sweep_edge(tri,c,q,ccw_dir)
        if not ctx.beyond(c,i):
            break
        c=ctx.cross(c,i)
    return c


class Walk(object):
    """
    Base class for the walks.  Subclasses implement walk(c), which
    starts at cell c (already recorded in the path) and returns the
    final cell.

    target: [x,y] point to locate
    tri: Triangulation
    start: starting cell, defaults to the infinite face of tri
    """
    # if max_steps is None, the budget is max_steps_factor*Ncells+100.
    # both None means no budget.
    max_steps=None
    max_steps_factor=20
    allow_revisits=True

    def __init__(self,target,tri,start=None,**kwargs):
        set_keywords(self,kwargs)
        self.log=logging.getLogger(self.__class__.__name__)
        self.tri=tri

        if start is None:
            start=tri.infinite_face()
        elif not tri.is_valid_cell(start):
            raise InvalidStartFace("Start %r is not a cell of the triangulation"%(start,),
                                   start=start)
        self.start=int(start)

        self.ctx=WalkContext(tri,target,max_steps=self.step_budget(),
                             allow_revisits=self.allow_revisits)
        self.ctx.add_to_walk(self.start)
        self.final_cell=self.walk(self.start)
        self.log.debug("%s: reached cell %d, %d cells, %d orientations"%(self.__class__.__name__,
                                                                          self.final_cell,
                                                                          self.num_triangles_visited(),
                                                                          self.num_orientations_performed()))

    def walk(self,c):
        raise NotImplementedError

    def step_budget(self):
        if self.max_steps is not None:
            return self.max_steps
        if self.max_steps_factor is None:
            return None
        return self.max_steps_factor*self.tri.Ncells()+100

    @property
    def target(self):
        return self.ctx.target

    @property
    def path(self):
        return list(self.ctx.path)

    @property
    def pivots(self):
        """ [N,2] coordinates of the pivots, in the order used """
        return self.ctx.pivot_points()

    def add_to_walk(self,face):
        self.ctx.add_to_walk(face)

    def num_triangles_visited(self):
        return len(self.ctx.path)

    def num_distinct_triangles(self):
        return len(self.ctx.visited)

    def num_orientations_performed(self):
        return self.ctx.n_orientations

    def statistics(self):
        return WalkStatistics(n_orientations=self.num_orientations_performed(),
                              n_triangles=self.num_triangles_visited(),
                              n_distinct=self.num_distinct_triangles(),
                              pivots=self.pivots)

    def contains_target(self):
        return self.tri.cell_contains(self.final_cell,self.target)

    def draw_triangle(self,face,style=None):
        """ polygon patch for face, None for infinite faces """
        xy=self.tri.cell_polygon(face)
        if xy is None:
            return None
        kw=dict(WALK_STYLE)
        kw.update(style or {})
        return Polygon(xy,closed=True,**kw)

    def plot(self,ax=None,**kwargs):
        from ..plot.walk_plot import plot_walk
        return plot_walk(self,ax=ax,**kwargs)
