import numpy as np

from triwalk.grid.triangulation import Triangulation
from triwalk.spatial import point_generators
from triwalk.walk import api, FixedCoin


def square_mesh():
    points=[ [0,0],[1,0],[1,1],[0,1],[0.5,0.5] ]
    cells=[ [0,1,4],[1,2,4],[2,3,4],[3,0,4] ]
    return Triangulation.from_cells(points,cells)

def test_run_walk_ok():
    tri=square_mesh()
    for method in api.WALKS:
        res=api.run_walk(method,[0.5,0.9],tri,start=0,seed=1)
        assert res.method==method
        assert res.status==api.STATUS_OK
        assert res.cell==2
        assert res.path[0]==0
        assert res.path[-1]==2
        assert res.n_triangles==len(res.path)
        assert res.n_orientations>0
        assert res.error is None

def test_run_walk_invalid_start():
    tri=square_mesh()
    res=api.run_walk('swalk',[0.5,0.9],tri,start=42)
    assert res.status==api.STATUS_INVALID_START
    assert res.cell is None
    assert res.path==[]
    assert res.error.start==42

def test_run_walk_did_not_converge():
    tri=square_mesh()
    res=api.run_walk('visibility',[0.5,0.9],tri,start=0,
                     coin=FixedCoin([0]),max_steps=1)
    assert res.status==api.STATUS_DID_NOT_CONVERGE
    assert res.cell is None
    assert res.path==[0,3]
    assert res.n_triangles==2
    assert res.n_orientations==1

def test_programming_errors_propagate():
    tri=square_mesh()
    try:
        api.run_walk('zigzag',[0.5,0.9],tri)
        assert False
    except ValueError:
        pass
    try:
        api.run_walk('straight',[0.5,np.inf],tri)
        assert False
    except ValueError:
        pass

def test_compare_walks():
    points=np.concatenate( [point_generators.square_corners(1.0),
                            point_generators.random_points_in_square(150,1.0,seed=30)] )
    tri=Triangulation.from_points(points)
    targets=np.concatenate( [point_generators.random_points_in_square(5,0.9,seed=31),
                             [ [3.0,0.0] ] ] )

    df=api.compare_walks(tri,targets,seed=4)
    assert len(df)==len(targets)*len(api.WALKS)
    for col in ['target','x','y','method','status','cell','infinite',
                'n_triangles','n_orientations','n_pivots']:
        assert col in df.columns
    assert np.all(df.status==api.STATUS_OK)

    # every method agrees on the cell of every target
    for ti,grp in df.groupby('target'):
        assert grp.cell.nunique()==1
        assert grp.cell.iloc[0]==tri.locate_brute(targets[ti])
    assert np.all(df[df.target==5].infinite)
    assert not np.any(df[df.target<5].infinite)

    # only the pivot walks use pivots
    assert np.all(df[df.method.isin(['straight','visibility'])].n_pivots==0)

    summary=api.summarize(df)
    assert sorted(summary.index)==sorted(api.WALKS)

    df2=api.compare_walks(tri,targets,seed=4)
    assert np.all(df.n_orientations.values==df2.n_orientations.values)

def test_compare_subset():
    tri=square_mesh()
    df=api.compare_walks(tri,[ [0.5,0.9],[0.85,0.5] ],methods=['pivot','swalk'],start=0)
    assert list(df.method)==['pivot','swalk','pivot','swalk']
    assert list(df.cell)==[2,2,1,1]

def test_did_not_converge_keeps_pivots():
    tri=square_mesh()
    res=api.run_walk('swalk',[0.85,0.5],tri,start=0,max_steps=3)
    assert res.status==api.STATUS_DID_NOT_CONVERGE
    assert res.path==[0,1,2,1]
    assert np.allclose(res.pivots,[ [1,1] ])

def test_coin_ignored_for_deterministic_walks():
    tri=square_mesh()
    for method in ['straight','swalk']:
        res=api.run_walk(method,[0.5,0.9],tri,start=0,coin=FixedCoin([0]),seed=3)
        assert res.status==api.STATUS_OK
        assert res.cell==2
