"""
Read-only planar triangulation, stored CGAL style: every finite cell
is counter-clockwise, nbrs[i] is the cell across the edge opposite
nodes[i], and each edge of the convex hull has an infinite cell on its
outer side.  The infinite cells share the sentinel node INF_NODE, so
that every edge has exactly two cells.

Cells and nodes are rows of numpy record arrays, and all references
between them are integer indices.  Finite cells come first, infinite
cells are appended after them.

The triangulation itself is not built here - either pass explicit
triangles to from_cells(), or let qhull compute a Delaunay
triangulation with from_points().
"""
import logging

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import PolyCollection
from scipy import spatial

from ..spatial import robust_predicates
from ..utils import circular_pairs, to_xy

log=logging.getLogger(__name__)


class GridException(Exception):
    pass


def ccw(i):
    """ next local index, counter-clockwise """
    return (i+1)%3

def cw(i):
    return (i+2)%3

def edge_key(a,b):
    return (a,b) if a<b else (b,a)


class Triangulation(object):
    INF_NODE=-666
    max_sides=3

    node_dtype=[ ('x',(np.float64,2)) ]
    cell_dtype=[ ('nodes',(np.int32,3)),
                 ('nbrs',(np.int32,3)) ]

    def __init__(self,points=None,cells=None):
        """
        points: [N,2] node coordinates
        cells: [M,3] node indices for each triangle, any orientation.
          if omitted, the Delaunay triangulation of points is used.
        """
        self.log=logging.getLogger(self.__class__.__name__)
        self.nodes=np.zeros(0,self.node_dtype)
        self.cells=np.zeros(0,self.cell_dtype)
        self.n_finite=0

        if points is not None:
            if cells is None:
                self.bulk_init(points)
            else:
                self.init_from_cells(points,cells)

    @classmethod
    def from_points(cls,points):
        return cls(points=points)

    @classmethod
    def from_cells(cls,points,cells):
        return cls(points=points,cells=cells)

    def bulk_init(self,points):
        points=np.asarray(points,np.float64)
        # qhull is more reliable with centered coordinates
        try:
            sdt=spatial.Delaunay(points-points.mean(axis=0))
        except spatial.QhullError as exc:
            raise GridException("Delaunay triangulation failed: %s"%exc) from exc
        if len(sdt.coplanar):
            self.log.info("%d points were not included in the triangulation"%len(sdt.coplanar))
        self.init_from_cells(points,sdt.simplices)

    def init_from_cells(self,points,cells):
        points=np.asarray(points,np.float64)
        cells=np.array(cells,np.int64)

        if points.ndim!=2 or points.shape[1]!=2:
            raise GridException("points must be [N,2], got %s"%(points.shape,))
        if cells.ndim!=2 or cells.shape[1]!=3 or len(cells)==0:
            raise GridException("cells must be a non-empty [M,3] array, got %s"%(cells.shape,))
        if cells.min()<0 or cells.max()>=len(points):
            raise GridException("cells reference nodes which do not exist")

        self.nodes=np.zeros(len(points),self.node_dtype)
        self.nodes['x']=points

        for c in range(len(cells)):
            o=robust_predicates.orientation(*points[cells[c]])
            if o==robust_predicates.COLLINEAR:
                raise GridException("Cell %d %s is degenerate"%(c,cells[c]))
            if o==robust_predicates.RIGHT:
                cells[c,[1,2]]=cells[c,[2,1]]

        all_nodes=[ [int(n) for n in nodes] for nodes in cells]
        self.n_finite=len(all_nodes)

        # edge => list of (cell, local index of the opposite node)
        edge_cells={}
        def add_edges(c):
            nodes=all_nodes[c]
            for i in range(3):
                key=edge_key(nodes[ccw(i)],nodes[cw(i)])
                edge_cells.setdefault(key,[]).append( (c,i) )

        for c in range(self.n_finite):
            add_edges(c)

        # hull edge a->b is CCW for its finite cell, so the infinite
        # cell on the other side traverses it b->a
        boundary=[sides[0] for sides in edge_cells.values() if len(sides)==1]
        for c,i in boundary:
            a=all_nodes[c][ccw(i)]
            b=all_nodes[c][cw(i)]
            all_nodes.append( [b,a,self.INF_NODE] )
        for c in range(self.n_finite,len(all_nodes)):
            add_edges(c)

        nbrs=np.zeros( (len(all_nodes),3), np.int32)
        for key,sides in edge_cells.items():
            if len(sides)!=2:
                raise GridException("Edge %s has %d cells. Mesh must be a manifold with one boundary"%(key,len(sides)))
            (c0,i0),(c1,i1)=sides
            if all_nodes[c0][ccw(i0)]!=all_nodes[c1][cw(i1)]:
                raise GridException("Cells %d and %d traverse edge %s in the same direction"%(c0,c1,key))
            nbrs[c0,i0]=c1
            nbrs[c1,i1]=c0

        self.cells=np.zeros(len(all_nodes),self.cell_dtype)
        self.cells['nodes']=all_nodes
        self.cells['nbrs']=nbrs
        self.log.info("Triangulation: %d nodes, %d finite cells, %d hull edges"%(self.Nnodes(),
                                                                                 self.n_finite,
                                                                                 len(boundary)))

    # Counts and iterators
    def Nnodes(self):
        return len(self.nodes)
    def Ncells(self):
        return len(self.cells)
    def finite_cell_iter(self):
        return iter(range(self.n_finite))
    def infinite_cell_iter(self):
        return iter(range(self.n_finite,self.Ncells()))

    # Queries used by the walks
    def is_valid_cell(self,c):
        if isinstance(c,(bool,np.bool_)) or not isinstance(c,(int,np.integer)):
            return False
        return 0<=c<self.Ncells()

    def is_infinite(self,c):
        return c>=self.n_finite

    def infinite_face(self):
        """ default entry point for a walk """
        if self.Ncells()==self.n_finite:
            raise GridException("Triangulation has no cells")
        return self.n_finite

    def cell_nodes(self,c):
        return self.cells['nodes'][c]

    def neighbor(self,c,i):
        return int(self.cells['nbrs'][c,i])

    def vertex(self,c,i):
        """ coordinates of the i-th node of cell c, None for the
        infinite node
        """
        n=self.cells['nodes'][c,i]
        if n==self.INF_NODE:
            return None
        return self.nodes['x'][n]

    def node_index(self,c,n):
        for i in range(3):
            if self.cells['nodes'][c,i]==n:
                return i
        raise GridException("Node %d is not part of cell %d"%(n,c))

    def index_of(self,c,nbr):
        """ local index of the edge of c shared with nbr """
        for i in range(3):
            if self.cells['nbrs'][c,i]==nbr:
                return i
        raise GridException("Cell %d is not adjacent to cell %d"%(nbr,c))

    def cell_polygon(self,c):
        if self.is_infinite(c):
            return None
        return self.nodes['x'][self.cells['nodes'][c]]

    def cell_contains(self,c,t):
        """ exact test, not counted anywhere. Finite cells are closed
        triangles.  An infinite cell contains points strictly outside
        its hull edge, or on the line through it.
        """
        t=to_xy(t)
        if self.is_infinite(c):
            k=self.node_index(c,self.INF_NODE)
            return robust_predicates.orientation(self.vertex(c,ccw(k)),
                                                 self.vertex(c,cw(k)),t) != robust_predicates.RIGHT
        for a,b in circular_pairs(self.cell_polygon(c)):
            if robust_predicates.orientation(a,b,t)==robust_predicates.RIGHT:
                return False
        return True

    def locate_brute(self,t):
        """ first cell containing t by exhaustive search, preferring
        finite cells.  Slow, for checking the walks.
        """
        for c in self.finite_cell_iter():
            if self.cell_contains(c,t):
                return c
        for c in self.infinite_cell_iter():
            if self.cell_contains(c,t):
                return c
        return None

    def bounds(self):
        x=self.nodes['x']
        return [x[:,0].min(),x[:,0].max(),x[:,1].min(),x[:,1].max()]

    # Consistency checks
    def check_adjacency(self):
        for c in range(self.Ncells()):
            nodes=self.cells['nodes'][c]
            for i in range(3):
                nbr=self.neighbor(c,i)
                j=self.index_of(nbr,c)
                nbr_nodes=self.cells['nodes'][nbr]
                if (nbr_nodes[ccw(j)],nbr_nodes[cw(j)]) != (nodes[cw(i)],nodes[ccw(i)]):
                    raise GridException("Cells %d and %d disagree on their shared edge"%(c,nbr))
        return True

    def check_orientations(self):
        for c in self.finite_cell_iter():
            if robust_predicates.orientation(*self.cell_polygon(c))!=robust_predicates.LEFT:
                raise GridException("Cell %d is not counter-clockwise"%c)
        return True

    def check_convex_hull(self):
        """ consecutive hull edges may not turn right """
        for c in self.infinite_cell_iter():
            k=self.node_index(c,self.INF_NODE)
            na=self.cells['nodes'][c,cw(k)]
            nb=self.cells['nodes'][c,ccw(k)]
            nxt=self.neighbor(c,cw(k))
            nc=self.cells['nodes'][nxt,ccw(self.node_index(nxt,self.INF_NODE))]
            pnts=self.nodes['x'][[na,nb,nc]]
            if robust_predicates.orientation(*pnts)==robust_predicates.RIGHT:
                raise GridException("Hull is not convex at node %d"%nb)
        return True

    # Plotting
    def plot_cells(self,ax=None,mask=None,**kwargs):
        """ mask: cell indices to plot, defaults to all finite cells.
        infinite cells are skipped.
        """
        ax=ax or plt.gca()
        if mask is None:
            mask=self.finite_cell_iter()
        polys=[self.cell_polygon(c) for c in mask
               if not self.is_infinite(c)]
        kwargs.setdefault('edgecolor','k')
        kwargs.setdefault('facecolor','none')
        coll=PolyCollection(polys,**kwargs)
        ax.add_collection(coll)
        ax.autoscale_view()
        return coll

    def plot_nodes(self,ax=None,**kwargs):
        ax=ax or plt.gca()
        kwargs.setdefault('color','r')
        kwargs.setdefault('marker','.')
        kwargs.setdefault('linestyle','none')
        return ax.plot(self.nodes['x'][:,0],self.nodes['x'][:,1],**kwargs)
