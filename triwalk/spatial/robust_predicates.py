# Exact 2D orientation test, following J.R. Shewchuk's adaptive
# precision orient2d (predicates.c). Only the orientation test is
# needed for walking, so incircle and the 3D predicates are not here.
#
# Relies on IEEE double precision with round-to-nearest, which is what
# python floats give on any current platform.

LEFT=1       # counter-clockwise, positive signed area
RIGHT=-1     # clockwise
COLLINEAR=0

# what exactinit() computes for IEEE doubles
epsilon=2.0**-53
splitter=2.0**27+1.0

resulterrbound=(3.0 + 8.0*epsilon)*epsilon
ccwerrboundA=(3.0 + 16.0*epsilon)*epsilon
ccwerrboundB=(2.0 + 12.0*epsilon)*epsilon
ccwerrboundC=(9.0 + 64.0*epsilon)*epsilon*epsilon


## error-free transformations (macros in the C version)

def two_sum(a,b):
    x=a+b
    bvirt=x-a
    avirt=x-bvirt
    return x,(a-avirt)+(b-bvirt)

def two_diff_tail(a,b,x):
    bvirt=a-x
    avirt=x+bvirt
    return (a-avirt)+(bvirt-b)

def two_diff(a,b):
    x=a-b
    return x,two_diff_tail(a,b,x)

def split(a):
    c=splitter*a
    abig=c-a
    ahi=c-abig
    return ahi,a-ahi

def two_product(a,b):
    x=a*b
    ahi,alo=split(a)
    bhi,blo=split(b)
    err1=x-(ahi*bhi)
    err2=err1-(alo*bhi)
    err3=err2-(ahi*blo)
    return x,(alo*blo)-err3

def two_two_diff(a1,a0,b1,b0):
    """ (a1+a0)-(b1+b0) as a 4 component expansion, least significant
    component first.
    """
    i,x0=two_diff(a0,b0)
    j,i=two_sum(a1,i)
    i,x1=two_diff(i,b1)
    x3,x2=two_sum(j,i)
    return [x0,x1,x2,x3]


## expansions: lists of floats, increasing magnitude

def _merge_by_magnitude(e,f):
    g=[]
    i=j=0
    while i<len(e) and j<len(f):
        if (f[j]>e[i])==(f[j]>-e[i]):
            g.append(e[i])
            i+=1
        else:
            g.append(f[j])
            j+=1
    g.extend(e[i:])
    g.extend(f[j:])
    return g

def fast_expansion_sum_zeroelim(e,f):
    """ sum of two expansions, dropping zero components. The result
    still has its most significant component last.
    """
    g=_merge_by_magnitude(e,f)
    h=[]
    Q=g[0]
    for gnow in g[1:]:
        Q,hh=two_sum(Q,gnow)
        if hh!=0.0:
            h.append(hh)
    if Q!=0.0 or not h:
        h.append(Q)
    return h

def estimate(e):
    return sum(e)


def counterclockwise_adapt(pa,pb,pc,detsum):
    acx=pa[0]-pc[0]
    bcx=pb[0]-pc[0]
    acy=pa[1]-pc[1]
    bcy=pb[1]-pc[1]

    detleft,detlefttail=two_product(acx,bcy)
    detright,detrighttail=two_product(acy,bcx)

    B=two_two_diff(detleft,detlefttail,detright,detrighttail)

    det=estimate(B)
    errbound=ccwerrboundB*detsum
    if det>=errbound or -det>=errbound:
        return det

    acxtail=two_diff_tail(pa[0],pc[0],acx)
    bcxtail=two_diff_tail(pb[0],pc[0],bcx)
    acytail=two_diff_tail(pa[1],pc[1],acy)
    bcytail=two_diff_tail(pb[1],pc[1],bcy)

    if acxtail==0.0 and acytail==0.0 and bcxtail==0.0 and bcytail==0.0:
        return det

    errbound=ccwerrboundC*detsum + resulterrbound*abs(det)
    det+=(acx*bcytail + bcy*acxtail) - (acy*bcxtail + bcx*acytail)
    if det>=errbound or -det>=errbound:
        return det

    # fall through to the exact sum of all the partial products
    D=B
    for a,b,c,d in [ (acxtail,bcy,acytail,bcx),
                     (acx,bcytail,acy,bcxtail),
                     (acxtail,bcytail,acytail,bcxtail) ]:
        s1,s0=two_product(a,b)
        t1,t0=two_product(c,d)
        D=fast_expansion_sum_zeroelim(D,two_two_diff(s1,s0,t1,t0))
    return D[-1]


def counterclockwise(pa,pb,pc):
    """ Twice the signed area of triangle pa,pb,pc. The magnitude is
    approximate but the sign is exact.
    """
    pa=(float(pa[0]),float(pa[1]))
    pb=(float(pb[0]),float(pb[1]))
    pc=(float(pc[0]),float(pc[1]))

    detleft=(pa[0]-pc[0])*(pb[1]-pc[1])
    detright=(pa[1]-pc[1])*(pb[0]-pc[0])
    det=detleft-detright

    if detleft>0.0:
        if detright<=0.0:
            return det
        detsum=detleft+detright
    elif detleft<0.0:
        if detright>=0.0:
            return det
        detsum=-detleft-detright
    else:
        return det

    errbound=ccwerrboundA*detsum
    if det>=errbound or -det>=errbound:
        return det

    return counterclockwise_adapt(pa,pb,pc,detsum)


def orientation(a,b,c):
    """ LEFT if a,b,c make a left (counter-clockwise) turn, RIGHT for a
    right turn, COLLINEAR otherwise.
    """
    ccw=counterclockwise(a,b,c)
    if ccw>0:
        return LEFT
    elif ccw<0:
        return RIGHT
    return COLLINEAR
