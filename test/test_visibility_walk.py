import numpy as np

from triwalk.grid.triangulation import Triangulation
from triwalk.spatial import point_generators
from triwalk.walk import (VisibilityWalk, FixedCoin, RandomCoin,
                          WalkContext, WalkDidNotConverge, InvalidStartFace)
from triwalk.walk.visibility import visibility_step


def square_mesh():
    points=[ [0,0],[1,0],[1,1],[0,1],[0.5,0.5] ]
    cells=[ [0,1,4],[1,2,4],[2,3,4],[3,0,4] ]
    return Triangulation.from_cells(points,cells)

def test_square_walk():
    tri=square_mesh()
    w=VisibilityWalk([0.5,0.9],tri,start=0,coin=FixedCoin([0]))
    assert w.path==[0,3,2]
    assert w.final_cell==2
    assert w.num_triangles_visited()==3
    assert w.num_orientations_performed()==4
    assert w.contains_target()
    assert len(w.pivots)==0

    stats=w.statistics()
    assert stats.n_triangles==3
    assert stats.n_distinct==3
    assert stats.n_orientations==4

def test_first_cell_tests_all_edges():
    tri=square_mesh()
    ctx=WalkContext(tri,[0.4,0.2])
    # inside cell 0, so all three edges get tested
    assert visibility_step(ctx,0,None,FixedCoin([1]))==None
    assert ctx.n_orientations==3

    ctx=WalkContext(tri,[0.4,0.2])
    # entered across edge 1, which is not tested again
    assert visibility_step(ctx,0,1,FixedCoin([0]))==None
    assert ctx.n_orientations==2

def test_infinite_start():
    tri=square_mesh()
    w=VisibilityWalk([0.5,0.9],tri,seed=1)
    assert w.path[0]==tri.infinite_face()
    assert w.final_cell==2
    assert w.contains_target()

def test_outside_hull():
    tri=square_mesh()
    for seed in range(5):
        w=VisibilityWalk([2.0,0.5],tri,start=3,seed=seed)
        assert tri.is_infinite(w.final_cell)
        assert w.contains_target()

    # from the infinite side of the right edge, the walk never enters
    # the hull
    c=tri.neighbor(1,2)
    w=VisibilityWalk([2.0,0.5],tri,start=c,seed=0)
    assert w.path==[c]
    assert w.num_orientations_performed()==1

def test_vertex_and_edge_targets():
    tri=square_mesh()
    for target in [ [0.5,0.5],[1,1],[0,0],[0.25,0.25],[0.5,0] ]:
        for start in tri.finite_cell_iter():
            w=VisibilityWalk(target,tri,start=start,seed=start)
            assert w.contains_target()

def test_center_scenario():
    tri=square_mesh()
    for start in range(tri.Ncells()):
        w=VisibilityWalk([0.5,0.5],tri,start=start,seed=11)
        assert not tri.is_infinite(w.final_cell)
        assert 4 in tri.cell_nodes(w.final_cell)
        assert w.num_orientations_performed()>=1

def test_seed_determinism():
    points=point_generators.random_points_in_square(300,seed=2)
    tri=Triangulation.from_points(points)
    for target in point_generators.random_points_in_square(10,0.5,seed=3):
        w1=VisibilityWalk(target,tri,seed=17)
        w2=VisibilityWalk(target,tri,seed=17)
        assert w1.path==w2.path
        assert w1.num_orientations_performed()==w2.num_orientations_performed()
        w3=VisibilityWalk(target,tri,coin=RandomCoin(17))
        assert w3.path==w1.path

def test_step_budget():
    tri=square_mesh()
    try:
        VisibilityWalk([0.5,0.9],tri,start=0,coin=FixedCoin([0]),max_steps=1)
        assert False,"walk should have run out of steps"
    except WalkDidNotConverge as exc:
        assert exc.path==[0,3]
        assert exc.n_orientations==1

def test_bad_input():
    tri=square_mesh()
    for start in [8,-1,2.0,True,"0"]:
        try:
            VisibilityWalk([0.5,0.5],tri,start=start)
            assert False,"bad start accepted"
        except InvalidStartFace as exc:
            assert exc.start is start

    try:
        VisibilityWalk([np.nan,0.5],tri)
        assert False
    except ValueError:
        pass

    try:
        VisibilityWalk([0.5,0.5],tri,max_stepz=3)
        assert False
    except Exception as exc:
        assert 'max_stepz' in str(exc)

def test_fixed_coin():
    coin=FixedCoin([1,0,0])
    assert [coin.next_bit() for _ in range(5)]==[1,0,0,1,0]
    try:
        FixedCoin([])
        assert False
    except ValueError:
        pass
