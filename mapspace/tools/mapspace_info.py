import argparse
import json
import sys

from mapspace import util
from mapspace.mapping import MappingPoint
from mapspace.mapping import extract_workload_info
from mapspace.mapping import extract_mapspace_info
from mapspace.mapping import build_spaces
from mapspace.mapping import dim_enum as de

from mapspace.cnn_layers import LayerCatalog


def _load_json(path):
    with open(path) as json_data_file:
        return json.load(json_data_file)


def do_mapspace_info(args):
    """
    Build the mapspace of the given problem, print its sizes and decode a
    few mapping points. Return the spaces.
    """

    # Workload.
    catalog = LayerCatalog.load()
    if args.workload:
        workload_data = _load_json(args.workload)
    else:
        workload_data = {"layer": args.layer, "padPrimes": not args.no_pad_primes}
    workload = extract_workload_info(workload_data, catalog)
    print(workload)

    # Mapspace constraints.
    if args.mapspace:
        mapspace_data = _load_json(args.mapspace)
    else:
        mapspace_data = {"num_levels": args.levels}
    mapspace_info = extract_mapspace_info(mapspace_data)

    spaces = build_spaces(workload, mapspace_info, is_print=args.verbose)
    sizes = [space.size() for space in spaces]

    print("\n============================================")
    print("index factorization space size: {}".format(sizes[0]))
    print("permutation space size: {}".format(sizes[1]))
    print("spatial split space size: {}".format(sizes[2]))
    print("total mapspace size: {}".format(util.prod(sizes)))

    # Sample points of this worker's share of the index factorization space.
    beg, end = util.get_ith_range((0, sizes[0]), args.worker, args.workers)
    print("\nworker {}/{} covers factor ids [{}, {})"
          .format(args.worker, args.workers, beg, end))
    for factor_id in range(beg, min(end, beg + args.samples)):
        point = MappingPoint.decode(spaces, factor_id,
                                    factor_id % sizes[1],
                                    factor_id % sizes[2])
        print("\nfactor id {}:".format(factor_id))
        for level in range(mapspace_info["num_levels"]):
            order = point.loop_order(level)
            print("  level {}: {}  spatial {}".format(
                level,
                " ".join("{}{}".format(de.table[d], point.loop_blocking(d)[level])
                         for d in order),
                "".join(de.table[d] for d in point.spatial_dims(level)) or "-"))

    return spaces


def argparser():
    """
    Argument parser.
    """

    ap = argparse.ArgumentParser(description="Mapspace size and decoding")
    # ===================================================================================
    # workload
    # ===================================================================================
    ap.add_argument("layer", nargs="?",
                    help="layer name from the layer catalog")
    ap.add_argument("-w", "--workload",
                    help="workload specification (JSON), instead of a layer name")
    ap.add_argument("--no-pad-primes", action="store_true",
                    help="keep prime bounds instead of rounding them to a composite")
    # ===================================================================================
    # mapspace
    # ===================================================================================
    ap.add_argument("-m", "--mapspace",
                    help="mapspace constraints (JSON)")
    ap.add_argument("--levels", type=int, default=3,
                    help="number of tiling levels without a mapspace file")
    # ===================================================================================
    # decoding
    # ===================================================================================
    ap.add_argument("--samples", type=int, default=3,
                    help="number of mapping points to decode")
    ap.add_argument("--worker", type=int, default=0,
                    help="index of this worker")
    ap.add_argument("--workers", type=int, default=1,
                    help="number of workers sharing the factor id range")
    # ===================================================================================
    # verbose
    # ===================================================================================
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="show progress and details.")

    args = ap.parse_args()
    if (args.layer is None) == (args.workload is None):
        ap.error("give either a layer name or a workload file")
    if not 0 <= args.worker < args.workers:
        ap.error("worker must be in [0, workers)")

    return args


def main():
    """
    Main function.
    """
    args = argparser()
    try:
        do_mapspace_info(args)
    except (ValueError, OSError) as e:
        print("error: {}".format(e), file=sys.stderr)
        return 2

    return 0


if __name__ == '__main__':
    sys.exit(main())
