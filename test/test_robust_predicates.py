from fractions import Fraction

import numpy as np

from triwalk.spatial import robust_predicates
from triwalk.spatial.robust_predicates import orientation, LEFT, RIGHT, COLLINEAR


def exact_orientation(a,b,c):
    a=[Fraction(v) for v in a]
    b=[Fraction(v) for v in b]
    c=[Fraction(v) for v in c]
    det=(a[0]-c[0])*(b[1]-c[1]) - (a[1]-c[1])*(b[0]-c[0])
    if det>0:
        return LEFT
    elif det<0:
        return RIGHT
    return COLLINEAR

def test_simple_turns():
    assert orientation([0,0],[1,0],[0,1])==LEFT
    assert orientation([0,0],[0,1],[1,0])==RIGHT
    assert orientation([0,0],[1,1],[2,2])==COLLINEAR
    # repeated points are collinear
    assert orientation([3,4],[3,4],[5,6])==COLLINEAR

def test_one_ulp_off_the_line():
    b=(12.0,12.0)
    c=(24.0,24.0)
    assert orientation((0.5,0.5),b,c)==COLLINEAR
    for k in range(1,5):
        eps=k*2.0**-53
        assert orientation((0.5,0.5+eps),b,c)==LEFT
        assert orientation((0.5+eps,0.5),b,c)==RIGHT

def test_near_degenerate_grid():
    # the classic failure case of the naive determinant
    b=(12.0,12.0)
    c=(24.0,24.0)
    ulp=2.0**-53
    for i in range(16):
        for j in range(16):
            a=(0.5+i*ulp,0.5+j*ulp)
            assert orientation(a,b,c)==exact_orientation(a,b,c)

def test_random_near_collinear():
    rng=np.random.default_rng(3)
    for _ in range(200):
        p=rng.uniform(-1e3,1e3,2)
        q=rng.uniform(-1e3,1e3,2)
        alpha=rng.uniform(0,1)
        # nearly on the segment, rounding leaves it on either side
        r=p+alpha*(q-p)
        assert orientation(p,q,r)==exact_orientation(p,q,r)
        # cyclic permutations agree, swaps flip
        assert orientation(q,r,p)==orientation(p,q,r)
        assert orientation(q,p,r)==-orientation(p,q,r)

def test_expansion_helpers():
    x,y=robust_predicates.two_sum(1.0,2.0**-60)
    assert x==1.0
    assert y==2.0**-60

    x,y=robust_predicates.two_product(1.0+2.0**-30,1.0+2.0**-30)
    assert Fraction(x)+Fraction(y) == (1+Fraction(1,2**30))**2

    h=robust_predicates.fast_expansion_sum_zeroelim([2.0**-60,1.0],[-1.0])
    assert h==[2.0**-60]
