"""
matplotlib rendering of walks: walked cells as filled triangles, the
pivot sequence as a line, the target as a marker.
"""
import matplotlib.pyplot as plt
from matplotlib.collections import PatchCollection


def plot_walk(walk,ax=None,style=None,pivots=True,target=True,labeler=None):
    """
    walk: a finished Walk
    style: overrides for the triangle style, e.g. dict(facecolor='y')
    labeler: f(i,cell) => string, to label cells with their position in
      the path.
    Returns the collection of walked cells.
    """
    ax=ax or plt.gca()

    patches=[]
    for c in walk.path:
        poly=walk.draw_triangle(c,style)
        if poly is not None:
            patches.append(poly)
    coll=PatchCollection(patches,match_original=True)
    ax.add_collection(coll)

    if pivots and len(walk.pivots):
        xy=walk.pivots
        ax.plot(xy[:,0],xy[:,1],'b-o',ms=4,zorder=3)

    if target:
        ax.plot([walk.target[0]],[walk.target[1]],'rx',ms=8,zorder=4)

    if labeler is not None:
        for i,c in enumerate(walk.path):
            xy=walk.tri.cell_polygon(c)
            if xy is None:
                continue
            ctr=xy.mean(axis=0)
            ax.text(ctr[0],ctr[1],labeler(i,c),ha='center',va='center',fontsize=7)

    ax.autoscale_view()
    return coll

def plot_comparison(tri,walks,fig=None):
    """
    Side-by-side plots of several walks on the same triangulation.
    walks: dict of title => Walk
    """
    fig=fig or plt.figure()
    fig.clf()
    axs=fig.subplots(1,len(walks),squeeze=False)[0]
    for ax,(title,walk) in zip(axs,walks.items()):
        tri.plot_cells(ax=ax,lw=0.5,edgecolor='0.6')
        plot_walk(walk,ax=ax)
        ax.set_title("%s\n%d cells, %d orientations"%(title,
                                                      walk.num_triangles_visited(),
                                                      walk.num_orientations_performed()),
                     fontsize=9)
        ax.set_aspect('equal')
        ax.xaxis.set_visible(False)
        ax.yaxis.set_visible(False)
    return fig
