#!/usr/bin/env python3
"""
Polygon Finder

Enumerates every simple cycle ("polygon") of a small weighted undirected graph,
removes repeated discoveries and reports them by size with their perimeters.

Usage:
  find-polygons graph.txt
  find-polygons models_folder/ --out results/
  find-polygons --generator cube --format json
"""

import argparse
import csv
import json
import os
import sys
from typing import Any, Dict, List, Optional

from polyfinder import polyhedra
from polyfinder.cycles import find_cycles
from polyfinder.dedupe import KEYS, dedupe
from polyfinder.models import Model, load_model
from polyfinder.report import render_text, to_record

INPUT_EXTS = (".txt", ".edges", ".json")


def search(model: Model, key: str = "vertices", verbose: bool = False):
    """Raw enumeration followed by dedupe; returns the unique cycles."""
    raw = find_cycles(model.graph, model.graph.vertex_count)
    unique = dedupe(raw, key=KEYS[key])
    if verbose:
        print(f"  {len(raw)} raw cycles, {len(unique)} unique", file=sys.stderr)
    return unique


def process_model(
    model: Model,
    key: str = "vertices",
    max_vertices: Optional[int] = 100,
    verbose: bool = False,
) -> Dict[str, Any]:
    n = model.graph.vertex_count
    if max_vertices is not None and n > max_vertices:
        return {
            "model": model.name,
            "ok": False,
            "n_vertices": n,
            "n_edges": model.graph.edge_count,
            "message": f"{n} vertices exceeds --max-vertices {max_vertices}",
        }
    cycles = search(model, key=key, verbose=verbose)
    record = to_record(model, cycles)
    record["text"] = render_text(cycles, model.label)
    return record


def collect_inputs(path: str) -> List[str]:
    if os.path.isdir(path):
        return sorted(
            os.path.join(path, f)
            for f in os.listdir(path)
            if f.lower().endswith(INPUT_EXTS)
        )
    return [path]


def write_outputs(results: List[Dict[str, Any]], out_dir: str) -> None:
    os.makedirs(out_dir, exist_ok=True)

    results_path = os.path.join(out_dir, "polygon_results.json")
    with open(results_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=2)

    summary_path = os.path.join(out_dir, "summary.csv")
    with open(summary_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["model", "ok", "n_vertices", "n_edges", "polygons",
                         "triangles", "quadrilaterals", "pentagons", "note"])
        for r in results:
            counts = r.get("counts_by_size", {})
            writer.writerow([
                r.get("model", ""),
                r.get("ok", False),
                r.get("n_vertices", ""),
                r.get("n_edges", ""),
                r.get("num_polygons", ""),
                counts.get("3", 0) if r.get("ok") else "",
                counts.get("4", 0) if r.get("ok") else "",
                counts.get("5", 0) if r.get("ok") else "",
                r.get("message", r.get("error", "")),
            ])

    print(f"\nWrote {len(results)} result(s) to {out_dir}/", file=sys.stderr)
    print(f"Results: {results_path}", file=sys.stderr)
    print(f"Summary: {summary_path}", file=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Find all polygons (simple cycles) in a weighted graph")
    ap.add_argument("input", nargs="?", help="Edge list / JSON model file or folder of models")
    ap.add_argument("--generator", "-g", default=None, help="Use a built-in polyhedron graph instead of a file")
    ap.add_argument("--list-generators", action="store_true", help="List built-in polyhedron graphs and exit")
    ap.add_argument("--format", choices=["text", "json"], default="text", help="Stdout format (default: text)")
    ap.add_argument("--out", "-o", default=None, help="Output folder for polygon_results.json and summary.csv")
    ap.add_argument("--key", choices=sorted(KEYS), default="vertices",
                    help="vertices: one polygon per vertex set; rotation: one per distinct cycle")
    ap.add_argument(
        "--max-vertices",
        type=int,
        default=100,
        help="Safety cap: skip graphs with more vertices than this (default: 100)",
    )
    ap.add_argument("--verbose", "-v", action="store_true", help="Show progress on stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.list_generators:
        for name in polyhedra.available():
            print(name)
        return 0

    if args.generator is None and args.input is None:
        ap.error("an input path or --generator is required")

    results = []
    if args.generator is not None:
        sources = [("generator", args.generator)]
    else:
        sources = [("file", p) for p in collect_inputs(args.input)]

    for kind, src in sources:
        label = src if kind == "generator" else os.path.basename(src)
        if args.verbose:
            print(f"Processing {label}...", file=sys.stderr)
        try:
            model = polyhedra.build_model(src) if kind == "generator" else load_model(src)
            result = process_model(model, key=args.key, max_vertices=args.max_vertices,
                                   verbose=args.verbose)
        except (ValueError, TypeError, OSError) as e:
            result = {"model": label, "ok": False, "error": str(e)}
        results.append(result)

        if args.verbose:
            if result["ok"]:
                print(f"  OK: {result['num_polygons']} polygons", file=sys.stderr)
            else:
                print(f"  FAIL: {result.get('message', result.get('error', 'unknown'))}", file=sys.stderr)

    if args.out:
        write_outputs(results, args.out)

    if args.format == "json":
        payload = results[0] if len(results) == 1 else results
        print(json.dumps(payload, indent=2))
    else:
        for r in results:
            if len(results) > 1:
                print(f"== {r['model']}")
            if r["ok"]:
                print(r["text"])
            else:
                print(f"FAIL: {r.get('message', r.get('error', 'unknown'))}")

    return 0 if all(r["ok"] for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
