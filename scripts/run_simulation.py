"""Run a backlog simulation and save the report as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from backlog_engine.adapters import json_adapter
from backlog_engine.config import load_config
from backlog_engine.engine import TaskEngine
from backlog_engine.log import configure_logging
from backlog_engine.randomness import NumpyRandomSource
from backlog_engine.simulation import simulate_backlog


def main() -> None:
    parser = argparse.ArgumentParser(description="Simulate the never-ending task backlog")
    parser.add_argument("--steps", type=int, default=50, help="Number of task completions to simulate")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs")
    parser.add_argument("--config", default=None, help="Optional engine config JSON file")
    parser.add_argument("--backlog", default=None, help="Optional JSON file with a starting backlog")
    parser.add_argument("--out", default="outputs", help="Directory for the report and final backlog")
    parser.add_argument("--log-level", default="INFO")
    args = parser.parse_args()

    configure_logging(args.log_level)

    engine = TaskEngine(source=NumpyRandomSource(args.seed), config=load_config(args.config))
    backlog = json_adapter.parse(args.backlog) if args.backlog else engine.generate_initial_tasks()
    report = simulate_backlog(engine, args.steps, backlog=backlog)

    print(json.dumps(report, indent=2, ensure_ascii=False))

    outputs_dir = Path(args.out)
    outputs_dir.mkdir(parents=True, exist_ok=True)
    out_path = outputs_dir / "simulation_report.json"
    out_path.write_text(json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8")
    json_adapter.dump(backlog, str(outputs_dir / "backlog.json"))
    print(f"Saved simulation report to {out_path}")


if __name__ == "__main__":
    main()
