from collections import namedtuple

from . import dim_enum as de
from . import data_type_enum as dte
from .workload import Workload
from .index_factorization import IndexFactorizationSpace
from .permutation import PermutationSpace
from .spatial_split import SpatialSplitSpace


Spaces = namedtuple('Spaces',
                    ['index_factorization', 'permutation', 'spatial_split'])


def _dim(name):
    if name not in de.dim_table:
        raise ValueError('{} is not a problem dimension, choices: {}'
                         .format(name, ', '.join(de.dim_table)))
    return de.dim_table[name]


def _level(key, num_levels):
    level = int(key)
    if not 0 <= level < num_levels:
        raise ValueError('level {} is out of range [0, {})'
                         .format(level, num_levels))
    return level


def _levels(data, num_levels, what):
    """
    Map the level keys of `data` to level ordinals, rejecting keys such as
    "0" and "00" that name the same level.
    """
    levels = dict()
    for key, value in data.items():
        level = _level(key, num_levels)
        if level in levels:
            raise ValueError('{} gives level {} more than once'
                             .format(what, level))
        levels[level] = value
    return levels


def extract_workload_info(data, catalog=None):
    if "layer" in data:
        if catalog is None:
            raise ValueError("layer {} given without a layer catalog"
                             .format(data["layer"]))
        workload = catalog.get_layer_bounds(data["layer"],
                                            data.get("padPrimes", True))
        # Optional overrides.
        bounds = [data.get(de.table[d], b)
                  for d, b in enumerate(workload.bounds)]
    else:
        missing = [n for n in de.dim_table if n not in data]
        if missing:
            raise ValueError("workload misses dimensions {}, and no layer "
                             "is given".format(", ".join(missing)))
        bounds = [data[de.table[d]] for d in range(de.NUM)]

    strd = (data.get("Hstride", 1), data.get("Wstride", 1))
    dltn = (data.get("Hdilation", 1), data.get("Wdilation", 1))

    if "commonDensity" in data:
        densities = float(data["commonDensity"])
    elif "densities" in data:
        missing = [dte.table[t] for t in range(dte.NUM)
                   if dte.table[t] not in data["densities"]]
        if missing:
            raise ValueError("densities miss {}".format(", ".join(missing)))
        densities = [data["densities"][dte.table[t]] for t in range(dte.NUM)]
    else:
        densities = 1.0

    return Workload(bounds, strd=strd, dltn=dltn, densities=densities)


def extract_mapspace_info(data):
    if "num_levels" not in data:
        raise ValueError("mapspace needs num_levels")
    num_levels = data["num_levels"]
    if not isinstance(num_levels, int) or num_levels <= 0:
        raise ValueError("num_levels {} is invalid".format(num_levels))

    info = dict()
    info["num_levels"] = num_levels

    info["factors"] = dict()
    for name, pins in data.get("factors", {}).items():
        info["factors"][_dim(name)] = _levels(
            pins, num_levels, "factors of {}".format(name))

    info["permutations"] = dict()
    for level, names in _levels(data.get("permutations", {}), num_levels,
                                "permutations").items():
        info["permutations"][level] = [_dim(n) for n in names]

    info["spatial"] = dict()
    for level, split in _levels(data.get("spatial", {}), num_levels,
                                "spatial").items():
        if split is not None and not isinstance(split, int):
            raise ValueError("spatial split {} of level {} is invalid, needs "
                             "to be null or an integer".format(split, level))
        info["spatial"][level] = split

    info["unit_factors"] = dict()
    for level, n in _levels(data.get("unit_factors", {}), num_levels,
                            "unit_factors").items():
        if level not in info["spatial"]:
            raise ValueError("unit_factors given for level {}, which is not "
                             "spatial".format(level))
        info["unit_factors"][level] = n

    return info


def build_spaces(workload, mapspace_info, is_print=False):
    """
    Build the index factorization, permutation and spatial split spaces of
    `workload` under the constraints of an extracted `mapspace_info`.
    """
    num_levels = mapspace_info["num_levels"]

    index_factorization = IndexFactorizationSpace()
    index_factorization.init(workload, num_levels,
                             mapspace_info.get("factors"), is_print=is_print)

    permutation = PermutationSpace()
    permutation.init(num_levels)
    user_prefixes = mapspace_info.get("permutations", {})
    for level in range(num_levels):
        if level in user_prefixes:
            permutation.init_level(level, user_prefixes[level])
        else:
            permutation.init_level_canonical(level)

    spatial_split = SpatialSplitSpace()
    spatial_split.init(num_levels)
    unit_factors = mapspace_info.get("unit_factors", {})
    for level, split in sorted(mapspace_info.get("spatial", {}).items()):
        if split is None:
            spatial_split.init_level(level, unit_factors.get(level, 0))
        else:
            spatial_split.init_level_user_specified(level, split)

    return Spaces(index_factorization, permutation, spatial_split)
