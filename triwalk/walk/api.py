"""
Entry points for callers that want results rather than exceptions,
e.g. a display layer, and a comparison of the walks over many targets.
"""
import logging
from collections import namedtuple

import numpy as np
import pandas as pd

from .base import InvalidStartFace, WalkDidNotConverge
from .straight import StraightWalk
from .visibility import VisibilityWalk
from .pivot import PivotWalk, SWalk

log=logging.getLogger(__name__)

WALKS={'straight':StraightWalk,
       'visibility':VisibilityWalk,
       'pivot':PivotWalk,
       'swalk':SWalk}

RANDOMIZED=['visibility','pivot']

STATUS_OK='ok'
STATUS_INVALID_START='invalid_start'
STATUS_DID_NOT_CONVERGE='did_not_converge'

WalkResult=namedtuple('WalkResult',
                      ['method','status','cell','path','n_orientations',
                       'n_triangles','pivots','error'])


def get_walk_class(method):
    try:
        return WALKS[method]
    except KeyError:
        raise ValueError("Unknown walk %r, choose from %s"%(method,", ".join(WALKS)))

def run_walk(method,target,tri,start=None,**kwargs):
    """
    Run one walk and report the outcome as a WalkResult.  Failures of
    the walk come back as a status, with whatever partial path exists.
    method: one of WALKS
    kwargs: passed on to the walk.  seed= and coin= only apply to the
      randomized walks, and are ignored for the others.
    """
    cls=get_walk_class(method)
    if method not in RANDOMIZED:
        kwargs.pop('seed',None)
        kwargs.pop('coin',None)
    try:
        w=cls(target,tri,start=start,**kwargs)
    except InvalidStartFace as exc:
        log.warning("%s: %s"%(method,exc))
        return WalkResult(method=method,status=STATUS_INVALID_START,cell=None,
                          path=[],n_orientations=0,n_triangles=0,
                          pivots=np.zeros((0,2)),error=exc)
    except WalkDidNotConverge as exc:
        log.warning("%s: %s"%(method,exc))
        return WalkResult(method=method,status=STATUS_DID_NOT_CONVERGE,cell=None,
                          path=exc.path,n_orientations=exc.n_orientations,
                          n_triangles=len(exc.path),pivots=exc.pivots,error=exc)

    return WalkResult(method=method,status=STATUS_OK,cell=w.final_cell,
                      path=w.path,n_orientations=w.num_orientations_performed(),
                      n_triangles=w.num_triangles_visited(),
                      pivots=w.pivots,error=None)

def compare_walks(tri,targets,methods=None,start=None,seed=None):
    """
    Walk to each target with each method.
    seed: base seed for the randomized walks, target i uses seed+i.
    Returns a DataFrame, one row per target and method.
    """
    methods=methods or list(WALKS)
    rows=[]
    for ti,target in enumerate(np.asarray(targets,np.float64)):
        for method in methods:
            kw={}
            if seed is not None:
                kw['seed']=seed+ti
            res=run_walk(method,target,tri,start=start,**kw)
            rows.append(dict(target=ti,x=target[0],y=target[1],
                             method=method,status=res.status,cell=res.cell,
                             infinite=(res.cell is not None and tri.is_infinite(res.cell)),
                             n_triangles=res.n_triangles,
                             n_orientations=res.n_orientations,
                             n_pivots=len(res.pivots)))
    return pd.DataFrame(rows)

def summarize(df):
    """ mean cost of each method over the successful walks """
    ok=df[ df.status==STATUS_OK ]
    return ok.groupby('method')[ ['n_triangles','n_orientations','n_pivots'] ].mean()
