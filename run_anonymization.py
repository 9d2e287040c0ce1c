#!/usr/bin/env python3
"""Entry point for anonymizing a labelled graph against neighbourhood attribute disclosure.

Chains all stages into a single executable command:
graph loading/generation -> proximity check -> repair -> output ->
result.json -> figures.

Usage:
    python run_anonymization.py --config config.json
    python run_anonymization.py --config config.json --input graph.txt --output anon.txt
    python run_anonymization.py --config config.json --dry-run
"""

import argparse
import logging
import sys
import time
from contextlib import contextmanager
from dataclasses import replace
from pathlib import Path
from typing import Generator

from graphanon.config import AnonymizationConfig, config_from_json, full_config_hash
from graphanon.results import generate_run_id

log = logging.getLogger(__name__)


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints stage banners with elapsed time."""
    print(f"\n=== {name} ===")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"... done in {elapsed:.1f}s")
    log.info("Completed: %s in %.1fs", name, elapsed)


def run_pipeline(
    config: AnonymizationConfig,
    output_path: Path | None = None,
    results_dir: str = "results",
    render_plots: bool = True,
    cache_dir: Path | None = None,
) -> Path:
    """Execute the full anonymization pipeline.

    Args:
        config: Anonymization configuration.
        output_path: Where to write the repaired graph, if anywhere.
        results_dir: Base directory for results output.
        render_plots: Whether to draw the distance histogram.
        cache_dir: Generated graph cache location, defaulting to DEFAULT_CACHE_DIR.

    Returns:
        Path to the run output directory.
    """
    # Lazy imports to keep --dry-run fast
    from graphanon.anonymize import anonymize, vertex_distances
    from graphanon.graph import (
        DEFAULT_CACHE_DIR,
        generate_or_load_graph,
        read_labelled_graph,
        validate_labelled_graph,
        write_labelled_graph,
    )
    from graphanon.reproducibility import make_rng, set_seed
    from graphanon.results import write_result

    pipeline_start = time.monotonic()

    with stage_timer("Reproducibility Seeding"):
        set_seed(config.seed)
        rng = make_rng(config.seed)

    with stage_timer("Graph Loading"):
        if config.graph.input_path is not None:
            graph = read_labelled_graph(config.graph.input_path)
        else:
            graph = generate_or_load_graph(config, cache_dir or DEFAULT_CACHE_DIR)
        errors = validate_labelled_graph(graph)
        if errors:
            raise ValueError(
                "Input graph failed validation:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )
        initial_edges = graph.num_edges
        log.info("Graph: %r", graph)

    with stage_timer("Proximity Check"):
        before = vertex_distances(graph)
        log.info("Initial max distance: %.4f", before.max() if before.size else 0.0)

    with stage_timer("Repair"):
        result = anonymize(graph, config.repair, rng)
        after = vertex_distances(graph)

    if output_path is not None:
        with stage_timer("Write Anonymized Graph"):
            write_labelled_graph(graph, output_path)

    with stage_timer("Write Result JSON"):
        output_dir = write_result(
            config,
            result,
            graph_stats={
                "n": graph.n,
                "num_labels": graph.num_labels,
                "initial_edges": initial_edges,
                "final_edges": graph.num_edges,
            },
            distances={"before": before, "after": after},
            results_dir=results_dir,
        )

    if render_plots:
        with stage_timer("Visualization"):
            from graphanon.visualization import (
                apply_style,
                plot_distance_distribution,
                save_figure,
            )

            apply_style()
            fig = plot_distance_distribution(before, after, config.repair.alpha)
            save_figure(fig, output_dir / "figures", "distance_distribution")

    total_elapsed = time.monotonic() - pipeline_start
    print(f"\n{'=' * 60}")
    print(f"Pipeline complete in {total_elapsed:.1f}s")
    print(f"  Run:      {output_dir.name}")
    print(f"  Output:   {output_dir}")
    print(f"  Outcome:  {result.outcome}")
    print(f"  Edges:    {initial_edges} -> {graph.num_edges} "
          f"(+{result.edges_added}, {result.random_edges} random)")
    print(f"{'=' * 60}")

    return output_dir


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Anonymize a labelled graph by edge insertion"
    )
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="Path to anonymization config JSON file",
    )
    parser.add_argument(
        "--input",
        type=str,
        default=None,
        help="Graph file to anonymize (overrides graph.input_path)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Where to write the anonymized graph",
    )
    parser.add_argument(
        "--results-dir",
        type=str,
        default="results",
        help="Base directory for result.json and figures",
    )
    parser.add_argument(
        "--no-plots",
        action="store_true",
        help="Skip figure rendering",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show pipeline plan without running",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable DEBUG-level logging",
    )
    args = parser.parse_args()

    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config_path = Path(args.config)
    if not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    config = config_from_json(config_path.read_text())
    if args.input is not None:
        config = replace(config, graph=replace(config.graph, input_path=args.input))

    run_id = generate_run_id(config)
    print(f"Run ID:       {run_id}")
    print(f"Config hash:  {full_config_hash(config)}")
    print()
    if config.graph.input_path is not None:
        print(f"Graph:    {config.graph.input_path}")
    else:
        print(f"Graph:    n={config.graph.n}, num_labels={config.graph.num_labels}, "
              f"p={config.graph.p}")
    print(f"Repair:   strategy={config.repair.strategy}, alpha={config.repair.alpha}, "
          f"max_iterations={config.repair.max_iterations}")
    print(f"Seed:     {config.seed}")

    if args.dry_run:
        print(f"\nPipeline plan for run {run_id}:")
        print(f"  1. Set seed: {config.seed}")
        print("  2. Load or generate graph, validate structure")
        print("  3. Compute per-vertex neighbourhood distances")
        print(f"  4. Repair with {config.repair.strategy} strategy")
        print(f"  5. Write anonymized graph: {args.output or '(skipped)'}")
        print(f"  6. Write {args.results_dir}/{run_id}/result.json")
        print(f"  7. Figures: {'(skipped)' if args.no_plots else 'distance histogram'}")
        print("\n[dry-run] Config loaded successfully. Exiting.")
        return

    try:
        run_pipeline(
            config,
            output_path=Path(args.output) if args.output else None,
            results_dir=args.results_dir,
            render_plots=not args.no_plots,
        )
    except Exception:
        log.exception("Pipeline failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
