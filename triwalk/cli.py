"""
Compare the walks on a random Delaunay triangulation.

  python -m triwalk.cli -n 200 --seed 1 --target 0.1 0.2 --plot walks.png
"""
import sys
import argparse
import logging

import numpy as np

from .grid.triangulation import Triangulation
from .spatial import point_generators
from .walk import api

log=logging.getLogger('triwalk')

parser=argparse.ArgumentParser(description='Locate points in a triangulation by walking.')
parser.add_argument("-n","--npoints",type=int,default=100,
                    help="Number of random vertices")
parser.add_argument("-w","--half-width",type=float,default=250.0,
                    help="Vertices are drawn from [-w,w]^2")
parser.add_argument("-s","--seed",type=int,default=None,
                    help="Seed for vertices, targets and the randomized walks")
parser.add_argument("-t","--target",type=float,nargs=2,action='append',metavar=('X','Y'),
                    help="Target point, may be repeated. Default is random targets")
parser.add_argument("-r","--random-targets",type=int,default=5,
                    help="Number of random targets when no target is given")
parser.add_argument("-m","--method",action='append',choices=list(api.WALKS),
                    help="Walk to run, may be repeated. Default all")
parser.add_argument("-p","--plot",metavar="path",default=None,
                    help="Save a plot of the walks to the first target")
parser.add_argument("-v","--verbose",action='store_true',
                    help="Debug logging")


def parse_and_run(argv=None):
    args=parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    seed=args.seed
    # corners pin the hull to the square
    points=np.concatenate( [point_generators.square_corners(args.half_width),
                            point_generators.random_points_in_square(args.npoints,args.half_width,
                                                                     seed=seed)] )
    tri=Triangulation.from_points(points)
    log.info("Triangulated %d points into %d cells"%(tri.Nnodes(),tri.n_finite))

    if args.target:
        targets=np.array(args.target)
    else:
        tseed=None if seed is None else seed+1
        targets=point_generators.random_points_in_square(args.random_targets,
                                                         args.half_width,seed=tseed)
    methods=args.method or list(api.WALKS)

    df=api.compare_walks(tri,targets,methods=methods,seed=seed)
    print(df.to_string(index=False))
    print()
    print(api.summarize(df).to_string())

    if args.plot:
        import matplotlib
        matplotlib.use('Agg')
        from .plot import walk_plot

        walks={}
        for method in methods:
            kw={}
            if method in api.RANDOMIZED:
                kw['seed']=seed
            try:
                walks[method]=api.get_walk_class(method)(targets[0],tri,**kw)
            except api.WalkDidNotConverge as exc:
                log.error("%s: %s"%(method,exc))
        fig=walk_plot.plot_comparison(tri,walks)
        fig.set_size_inches(4*len(walks),4.5)
        fig.savefig(args.plot)
        log.info("Wrote %s"%args.plot)
    return df

if __name__ == '__main__':
    parse_and_run()
    sys.exit(0)
