"""
Command line entry point.

edgeprune prune  --graph edges.csv --remove 10 -o out/processed
edgeprune remap  --action mkapply --index index.json a.csv b.csv
edgeprune egonets 0.egonet 1.egonet -o edges.csv --index index.json
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from typing import List, Optional

from .config import PruneConfig
from .edgelist import EdgeRecordError
from .egonets import egonets_to_csv
from .logger import get_logger, set_verbose
from .mapping import IdMapping, run_remap
from .pipeline import run_pipeline

log = get_logger(__name__)

REMAP_HELP = """\
actions:
  apply    apply the index to FILES; unseen nodes are allocated and written to the index
  revert   map allocated ids in FILES back to the originals; unseen nodes are untouched
  mkapply  build a fresh autoincrement index while applying it to FILES
  index    build a fresh index from FILES and write it, without output files
"""


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="edgeprune",
        description="Split an edge-list graph into connected components and prune non-critical edges.",
    )
    sub = p.add_subparsers(dest="command", required=True)

    pr = sub.add_parser("prune", help="Remove random non-spanning-tree edges from every component.")
    pr.add_argument("--graph", default="-", help="Input edge list CSV ('-' for stdin).")
    pr.add_argument("--remove", type=int, default=None, help="Number of edges to remove from each component.")
    pr.add_argument(
        "-o", "--output", default=None,
        help="Output base name; one <base><i>_edges.csv / <base><i>_removed.csv pair per component.",
    )
    pr.add_argument("--seed", type=int, default=None, help="Random seed for reproducible removals.")
    pr.add_argument("--workers", type=int, default=None, help="Components processed concurrently.")
    pr.add_argument("--config", default=None, help="YAML file with PruneConfig fields; flags override it.")
    pr.add_argument("--directed", action="store_true", help="Do not mirror input edges.")
    pr.add_argument("--no-summary", action="store_true", help="Skip <base>_summary.csv and <base>_metadata.json.")
    pr.add_argument("--verbose", action="store_true", help="Debug logging and a progress bar.")

    rm = sub.add_parser(
        "remap",
        help="Autoincrement node ids across edge-list files.",
        epilog=REMAP_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    rm.add_argument("--action", required=True, choices=["apply", "revert", "mkapply", "index"])
    rm.add_argument("--index", required=True, help="Index JSON file (read and/or written depending on action).")
    rm.add_argument("--prefix", default="mapped_", help="Prefix for output file names.")
    rm.add_argument("--verbose", action="store_true")
    rm.add_argument("files", nargs="+", help="Input edge-list CSV files.")

    eg = sub.add_parser("egonets", help="Convert egonet adjacency files (node: n1 n2 ...) into one edge-list CSV.")
    eg.add_argument("-o", "--output", required=True, help="Output edge-list CSV.")
    eg.add_argument("--index", default=None, help="Optionally save the id allocations as an index JSON.")
    eg.add_argument("--verbose", action="store_true")
    eg.add_argument("files", nargs="+", help="Input egonet files.")
    return p


def config_from_args(args: argparse.Namespace) -> PruneConfig:
    cfg = PruneConfig.from_yaml(args.config) if args.config else PruneConfig()
    overrides = {
        "remove": args.remove,
        "output": args.output,
        "random_state": args.seed,
        "workers": args.workers,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if args.directed:
        overrides["directed_input"] = True
    if args.no_summary:
        overrides["write_summary"] = False
    if args.verbose:
        overrides["verbose"] = True
    return replace(cfg, **overrides)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_verbose(True)

    try:
        if args.command == "prune":
            cfg = config_from_args(args)
            out = run_pipeline(args.graph, cfg)
            log.info("Processed %d component(s); output base %s", len(out["results"]), cfg.output)
        elif args.command == "remap":
            run_remap(args.action, args.index, args.files, prefix=args.prefix)
        elif args.command == "egonets":
            _, mapping = egonets_to_csv(args.files, args.output, IdMapping())
            if args.index:
                mapping.save(args.index)
    except (EdgeRecordError, ValueError, OSError) as exc:
        log.error("%s failed: %s", args.command, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
