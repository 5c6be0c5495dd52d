from . import dim_enum
from . import data_type_enum

from .workload import Workload
from .network import Network
from .factors import Factors
from .cartesian_counter import CartesianCounter
from .index_factorization import IndexFactorizationSpace
from .permutation import PermutationSpace, Pattern
from .spatial_split import SpatialSplitSpace
from .mapping_point import MappingPoint
from .extract_info import extract_workload_info, extract_mapspace_info, \
    build_spaces, Spaces
