import itertools

import numpy as np


def circular_pairs(iterable):
    """
    like pairwise, but closes the loop.
    s -> (s0,s1), (s1,s2), (s2, s3), ..., (sN,s0)
    """
    a, b = itertools.tee(iterable)
    b = itertools.cycle(b)
    next(b, None)
    return zip(a, b)

def set_keywords(obj,kw):
    """
    Utility for __init__ methods to update object state with
    keyword arguments.  Checks that the attributes already
    exist, to avoid spelling mistakes.  Uses getattr and
    setattr for compatibility with properties.
    """
    for k in kw:
        try:
            getattr(obj,k)
        except AttributeError:
            raise Exception("Setting attribute %s failed because it doesn't exist on %s"%(k,obj))
        setattr(obj,k,kw[k])

def to_xy(pnt):
    """ coerce pnt to a float64 [x,y] array, rejecting anything that
    is not a finite 2D point.
    """
    xy=np.asarray(pnt,dtype=np.float64)
    if xy.shape!=(2,):
        raise ValueError("Expected an [x,y] point, got shape %s"%(xy.shape,))
    if not np.all(np.isfinite(xy)):
        raise ValueError("Point %s is not finite"%xy)
    return xy
