"""
Random point sets for building demonstration triangulations and
choosing targets.
"""
import numpy as np


def random_points_in_square(n,half_width=1.0,seed=None):
    """ n points uniform in the square [-half_width,half_width]^2 """
    rng=np.random.default_rng(seed)
    return rng.uniform(-half_width,half_width,size=(n,2))

def random_points_in_disc(n,radius=1.0,seed=None):
    """ n points uniform in the disc of the given radius, centered on
    the origin
    """
    rng=np.random.default_rng(seed)
    r=radius*np.sqrt(rng.uniform(0,1,n))
    theta=rng.uniform(0,2*np.pi,n)
    return np.c_[r*np.cos(theta),r*np.sin(theta)]

def square_corners(half_width=1.0):
    """ the four corners, handy to pin the convex hull of a random
    set to the square
    """
    h=half_width
    return np.array([[-h,-h],[h,-h],[h,h],[-h,h]],np.float64)
