import numpy as np
import matplotlib.pyplot as plt
import pandas as pd
from triwalk.grid.triangulation import Triangulation
from triwalk.spatial import point_generators
from triwalk.walk import StraightWalk, VisibilityWalk, PivotWalk, SWalk, api
from triwalk.plot import walk_plot

##

# random Delaunay triangulation of a disc
points=point_generators.random_points_in_disc(2000,radius=100,seed=1)
tri=Triangulation.from_points(points)

target=[40.0,-25.0]

walks={'Straight':StraightWalk(target,tri),
       'Visibility':VisibilityWalk(target,tri,seed=2),
       'Pivot':PivotWalk(target,tri,seed=2),
       'SWalk':SWalk(target,tri)}

for name,w in walks.items():
    print("%-12s cell %5d  triangles %4d  orientations %4d  pivots %3d"%(name,w.final_cell,
                                                                       w.num_triangles_visited(),
                                                                       w.num_orientations_performed(),
                                                                       len(w.pivots)))

fig=walk_plot.plot_comparison(tri,walks,fig=plt.figure(1,figsize=(14,4)))

##

# cost as the triangulation grows
rows=[]
for n in [250,1000,4000]:
    tri_n=Triangulation.from_points(point_generators.random_points_in_disc(n,radius=100,seed=n))
    targets=point_generators.random_points_in_disc(50,radius=90,seed=n+1)
    summary=api.summarize(api.compare_walks(tri_n,targets,seed=n))
    summary['n']=n
    rows.append(summary)

costs=pd.concat(rows).reset_index()
print(costs)

plt.figure(2).clf()
fig,ax=plt.subplots(num=2)
for method,grp in costs.groupby('method'):
    ax.loglog(grp.n,grp.n_orientations,'-o',label=method)
ax.loglog([250,4000],[5*np.sqrt(250),5*np.sqrt(4000)],'k--',label='sqrt(N)')
ax.set_xlabel('Vertices')
ax.set_ylabel('Mean orientation tests')
ax.legend()

plt.show()
