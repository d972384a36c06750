"""
Component pruning pipeline.

Steps
-----
1) read   : edge records -> Graph
2) split  : Graph -> connected components
3) prune  : per component, spanning tree + random removal of non-tree edges
            (components run concurrently; they share no nodes)
4) save   : <base><i>_edges.csv, <base><i>_removed.csv, summary + metadata
"""

from __future__ import annotations

import json
import random
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from tqdm import tqdm

from .config import PruneConfig
from .edge_pruner import eligible_edges, remove_random_edges
from .edgelist import PathOrStream, open_writer, read_graph
from .graph import Edge, Graph
from .logger import get_logger
from .report import component_summary, report_graph_stats
from .spanning_tree import SpanningTree, build_spanning_tree

log = get_logger(__name__)


@dataclass
class ComponentResult:
    """Outcome of pruning one connected component (``index`` is 1-based)."""
    index: int
    graph: Graph
    tree: SpanningTree
    removed: List[Edge]
    nodes: int
    edges_before: int
    eligible: int
    elapsed: float = 0.0
    files: Dict[str, str] = field(default_factory=dict)


def component_rng(random_state: Optional[int], index: int) -> random.Random:
    """Independent generator for component ``index``; reproducible when ``random_state`` is set."""
    if random_state is None:
        return random.Random()
    return random.Random(random_state * 1_000_003 + index)


def prune_component(graph: Graph, index: int, n_remove: int, rng: random.Random) -> ComponentResult:
    t0 = time.perf_counter()
    edges_before = graph.undirected_edge_count()

    tree = build_spanning_tree(graph)
    log.debug("Computed spanning tree for graph #%d (%d edges)", index, len(tree))
    eligible = sum(1 for _ in eligible_edges(graph, tree))

    removed = remove_random_edges(graph, n_remove, tree, rng=rng)
    log.debug("Removed %d random edge(s) from graph #%d", len(removed), index)

    return ComponentResult(
        index=index,
        graph=graph,
        tree=tree,
        removed=removed,
        nodes=graph.number_of_nodes(),
        edges_before=edges_before,
        eligible=eligible,
        elapsed=time.perf_counter() - t0,
    )


def prune_graph(graph: Graph, cfg: PruneConfig) -> List[ComponentResult]:
    """
    Split ``graph`` into connected components and prune each one.

    Components are processed by a thread pool and joined before returning;
    results come back ordered by component number.
    """
    components = graph.connected_graphs()
    total = len(components)
    log.info("Found %d connected graph(s). Now processing them...", total)
    if not components:
        return []

    results: List[ComponentResult] = []
    with ThreadPoolExecutor(max_workers=min(cfg.workers, total)) as pool:
        futures = {
            pool.submit(
                prune_component, g, i, cfg.remove, component_rng(cfg.random_state, i)
            ): i
            for i, g in enumerate(components, start=1)
        }
        for fut in tqdm(as_completed(futures), total=total, desc="Pruning components", disable=not cfg.verbose):
            res = fut.result()
            log.debug("Finished processing graph number %d of %d", res.index, total)
            results.append(res)

    results.sort(key=lambda r: r.index)
    return results


# ------------------------------ persistence ------------------------------ #

def save_components(results: List[ComponentResult], output: Union[str, Path]) -> None:
    """
    Write per-component files next to the ``output`` base name:
      - <base><i>_edges.csv    remaining directed edges of component i
      - <base><i>_removed.csv  removed edges of component i
    """
    base = str(output)
    Path(base).parent.mkdir(parents=True, exist_ok=True)

    for res in results:
        edges_path = f"{base}{res.index}_edges.csv"
        removed_path = f"{base}{res.index}_removed.csv"

        with open_writer(removed_path) as w:
            for u, v in res.removed:
                w.write(u, v)
        with open_writer(edges_path) as w:
            for u, v in res.graph.edge_list():
                w.write(u, v)

        res.files = {"edges": edges_path, "removed": removed_path}


def save_summary(
    results: List[ComponentResult],
    output: Union[str, Path],
    metadata: Optional[Dict[str, Any]] = None,
) -> Dict[str, Path]:
    """<base>_summary.csv (one row per component) and <base>_metadata.json."""
    base = str(output)
    Path(base).parent.mkdir(parents=True, exist_ok=True)

    summary_path = Path(f"{base}_summary.csv")
    component_summary(results).to_csv(summary_path, index=False)

    meta_path = Path(f"{base}_metadata.json")
    with open(meta_path, "w", encoding="utf-8") as f:
        json.dump(metadata or {}, f, indent=2)
    return {"summary": summary_path, "metadata": meta_path}


def run_pipeline(source: PathOrStream, cfg: PruneConfig) -> Dict[str, Any]:
    """Read, split, prune and save. Returns the results plus run metadata."""
    total_t0 = time.perf_counter()
    stage_times: Dict[str, float] = {}

    t0 = time.perf_counter()
    graph = read_graph(source, directed=cfg.directed_input)
    stage_times["read"] = time.perf_counter() - t0
    log.info("Finished reading graph: %d nodes, %d edges", graph.number_of_nodes(), graph.undirected_edge_count())
    report_graph_stats(graph, name="Input graph")

    if not cfg.directed_input and not graph.is_undirected():
        log.warning("Input graph is not undirected; removals drop both directions of each pair")

    t0 = time.perf_counter()
    results = prune_graph(graph, cfg)
    stage_times["prune"] = time.perf_counter() - t0

    t0 = time.perf_counter()
    save_components(results, cfg.output)
    stage_times["save"] = time.perf_counter() - t0

    metadata: Dict[str, Any] = {
        "configuration": {
            "remove": cfg.remove,
            "output": cfg.output,
            "random_state": cfg.random_state,
            "workers": cfg.workers,
            "directed_input": cfg.directed_input,
        },
        "graph_properties": {
            "nodes": sum(r.nodes for r in results),
            "connected_components": len(results),
        },
        "components": [
            {
                "component": r.index,
                "nodes": r.nodes,
                "eligible": r.eligible,
                "removed": len(r.removed),
                "elapsed": r.elapsed,
                "files": r.files,
            }
            for r in results
        ],
        "stage_times": stage_times,
        "execution_time": time.perf_counter() - total_t0,
    }

    files: Dict[str, Path] = {}
    if cfg.write_summary:
        files = save_summary(results, cfg.output, metadata)

    return {"results": results, "metadata": metadata, "files": files}
