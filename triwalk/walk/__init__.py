from .base import (Walk, WalkContext, WalkStatistics, WalkException,
                   InvalidStartFace, WalkDidNotConverge)
from .coins import RandomCoin, FixedCoin
from .straight import StraightWalk
from .visibility import VisibilityWalk
from .pivot import PivotWalk, SWalk
from .api import WALKS, WalkResult, run_walk, compare_walks
