"""
artspace CLI: build embedding layouts from artwork records.

Input is a JSON array of records shaped like
    {"id": "...", "embedding": [...], "title": "...", "artist": "...", "year": 1889, "medium": "..."}
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import COLOR_BY_OPTIONS, RANDOM_STATE, REDUCER_METHOD, configure_logging
from .embedding_viz.errors import EmbeddingVizError
from .embedding_viz.layout import build_embedding_layout
from .embedding_viz.params import estimate_dbscan_params
from .embedding_viz.projector import REDUCER_METHODS, project_embeddings
from .models.artwork import ArtworkRecord, EmbeddingLayout

logger = logging.getLogger(__name__)


def load_records(path: str | Path) -> List[ArtworkRecord]:
    """Load artwork records from a JSON file (array, or {"artworks": [...]})."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = data.get("artworks", [])
    return [ArtworkRecord(**rec) for rec in data]


def write_layout(layout: EmbeddingLayout, out_path: str | Path) -> Path:
    """Write a layout as JSON, or as a per-point CSV table when the suffix is .csv."""
    out_path = Path(out_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if out_path.suffix.lower() == ".csv":
        layout.to_dataframe().to_csv(out_path, index=False)
    else:
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(layout.model_dump_json(indent=2))
    return out_path


def run_layout(
    data_path: str,
    out_path: Optional[str] = None,
    *,
    color_by: str = "cluster",
    show_clusters: bool = True,
    method: str = REDUCER_METHOD,
    random_state: int = RANDOM_STATE,
    seed: Optional[int] = None,
) -> EmbeddingLayout:
    """Build a layout from a records file and optionally write it out."""
    records = load_records(data_path)
    logger.info("Loaded %d artworks from %s", len(records), data_path)

    layout = build_embedding_layout(
        records,
        show_clusters=show_clusters,
        color_by=color_by,
        method=method,
        random_state=random_state,
        seed=seed,
    )

    print(f"Artworks: {len(layout.points)}")
    if layout.params is not None:
        print(f"DBSCAN: eps={layout.params.eps:.4f} min_pts={layout.params.min_pts}")
        print(f"Clusters: {layout.n_clusters}  Noise: {len(layout.noise_points)}")
        for cluster in layout.clusters:
            print(f"  Cluster {cluster.id}: {cluster.size} artworks, {cluster.color}")

    if out_path:
        written = write_layout(layout, out_path)
        print(f"Layout written to {written}")
    return layout


def run_params(
    data_path: str,
    *,
    method: str = REDUCER_METHOD,
    random_state: int = RANDOM_STATE,
) -> Dict[str, Any]:
    """Print the DBSCAN parameters estimated for the projected records."""
    records = load_records(data_path)
    coords = project_embeddings(
        [r.embedding for r in records], method=method, random_state=random_state
    )
    params = estimate_dbscan_params(coords)
    summary = {"n_points": len(records), **params.model_dump()}
    print(json.dumps(summary, indent=2))
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="artspace - Embedding layout toolkit for artwork galleries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Cluster-colored layout written as JSON
  python -m artspace.pipeline layout data/artworks.json --out artifacts/layout.json

  # Color by artist, no clustering, CSV output
  python -m artspace.pipeline layout data/artworks.json --color-by artist --no-clusters --out layout.csv

  # Inspect estimated DBSCAN parameters
  python -m artspace.pipeline params data/artworks.json
        """,
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level (default: ARTSPACE_LOG_LEVEL or INFO)")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Layout command
    layout_parser = subparsers.add_parser("layout", help="Build a 2D layout with clusters and colors")
    layout_parser.add_argument("data", type=str, help="Path to JSON file with artwork records")
    layout_parser.add_argument("--out", "-o", type=str, default=None, help="Output path (.json or .csv)")
    layout_parser.add_argument(
        "--color-by", "-c", type=str, default="cluster", choices=COLOR_BY_OPTIONS,
        help="Categorical field for point colors (default: cluster)",
    )
    layout_parser.add_argument("--no-clusters", action="store_true", help="Skip DBSCAN clustering and hulls")
    layout_parser.add_argument(
        "--method", "-m", type=str, default=REDUCER_METHOD, choices=REDUCER_METHODS,
        help=f"Reduction method (default: {REDUCER_METHOD})",
    )
    layout_parser.add_argument("--random-state", type=int, default=RANDOM_STATE, help="Seed for stochastic reducers")
    layout_parser.add_argument("--seed", type=int, default=None, help="Seed for category colors")

    # Params command
    params_parser = subparsers.add_parser("params", help="Print estimated DBSCAN parameters")
    params_parser.add_argument("data", type=str, help="Path to JSON file with artwork records")
    params_parser.add_argument("--method", "-m", type=str, default=REDUCER_METHOD, choices=REDUCER_METHODS)
    params_parser.add_argument("--random-state", type=int, default=RANDOM_STATE, help="Seed for stochastic reducers")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    if args.log_level:
        configure_logging(args.log_level)
    else:
        configure_logging()

    try:
        if args.command == "layout":
            run_layout(
                args.data,
                args.out,
                color_by=args.color_by,
                show_clusters=not args.no_clusters,
                method=args.method,
                random_state=args.random_state,
                seed=args.seed,
            )
        elif args.command == "params":
            run_params(args.data, method=args.method, random_state=args.random_state)
    except (OSError, json.JSONDecodeError, EmbeddingVizError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
