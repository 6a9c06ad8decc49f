"""
AutoML pipeline framework: command-line entry point.

Run from project root:
  python main.py
  python main.py --config my_config.yaml --data data.csv --target label
  python main.py --expression "(catf >> ohe) + (numf >> zscore) >> vote" --explain

Flow: Load config -> Load data -> Build stage tree from expression -> Explain
      -> Cross-validate (mean/std) -> Fit on all rows and report training score.
"""

import argparse
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from automl_framework.datasets import get_dataset, load_csv
from automl_framework.errors import PipelineError
from automl_framework.pipelines import Selection, explain, parse_pipeline
from automl_framework.utils.config_loader import load_config, section
from automl_framework.utils.crossval import crossvalidate
from automl_framework.utils.metrics import score

logger = logging.getLogger("main")


def _load_data(data_cfg: dict, csv_path: str | None, target: str | None):
    csv_path = csv_path or data_cfg.get("csv_path")
    if csv_path:
        target = target or data_cfg.get("target")
        if not target:
            raise SystemExit("--target (or data.target in config) is required with a CSV file")
        ds = load_csv(csv_path, target)
        if data_cfg.get("shuffle", False):
            ds = ds.shuffled(data_cfg.get("random_state", 42))
        return ds
    name = data_cfg.get("dataset", "iris")
    kwargs = {}
    if name == "iris":
        kwargs = {"shuffle": data_cfg.get("shuffle", True), "random_state": data_cfg.get("random_state", 123)}
    return get_dataset(name, **kwargs)


def _stage_options(config: dict) -> dict:
    """Per-name constructor defaults: stage options plus ensemble config dicts."""
    options = {k: dict(v or {}) for k, v in section(config, "stages").items()}
    for name, cfg in section(config, "ensembles").items():
        options.setdefault(name, {}).update(cfg or {})
    return options


def main() -> None:
    parser = argparse.ArgumentParser(description="Composable AutoML pipelines")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("--data", default=None, help="CSV file (overrides data.csv_path)")
    parser.add_argument("--target", default=None, help="Target column of the CSV file")
    parser.add_argument("--dataset", default=None, help="Built-in dataset name (iris, synthetic_classification, ...)")
    parser.add_argument("--expression", default=None, help="Pipeline expression (overrides pipeline.expression)")
    parser.add_argument("--strategy", default=None, choices=["best", "vote", "stack"], help="Strategy for a top-level selection")
    parser.add_argument("--metric", default=None, help="Scoring metric (overrides crossvalidation.metric)")
    parser.add_argument("--folds", type=int, default=None, help="Number of cross-validation folds")
    parser.add_argument("--explain", action="store_true", help="Print the stage tree and exit")
    args = parser.parse_args()

    config = load_config(args.config)
    log_cfg = section(config, "logging")
    logging.basicConfig(
        level=getattr(logging, str(log_cfg.get("level", "INFO")).upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    pipe_cfg = section(config, "pipeline")
    expression = args.expression or pipe_cfg.get("expression")
    if not expression:
        logger.error("No pipeline expression given (use --expression or pipeline.expression)")
        sys.exit(1)

    try:
        stage = parse_pipeline(expression, options=_stage_options(config))
        strategy = args.strategy or pipe_cfg.get("strategy")
        if strategy and isinstance(stage, Selection):
            stage.set_params(strategy=strategy)
    except PipelineError as e:
        logger.error("Invalid pipeline: %s", e)
        sys.exit(1)

    print(explain(stage))
    if args.explain:
        return

    data_cfg = section(config, "data")
    if args.dataset:
        data_cfg["dataset"] = args.dataset
        data_cfg["csv_path"] = None
    ds = _load_data(data_cfg, args.data, args.target)
    logger.info("Dataset %s: %d rows, %d columns", ds.name, ds.n_rows, ds.n_columns)

    cv_cfg = section(config, "crossvalidation")
    metric = args.metric or cv_cfg.get("metric", "accuracy")
    try:
        result = crossvalidate(
            stage,
            ds.features,
            ds.target,
            metric=metric,
            k=args.folds or int(cv_cfg.get("k", 10)),
            shuffle=bool(cv_cfg.get("shuffle", True)),
            random_state=cv_cfg.get("random_state", 42),
            n_jobs=int(cv_cfg.get("n_jobs", 1)),
        )
        stage.fit(ds.features, ds.target)
        train_score = score(metric, stage.transform(ds.features), ds.target)
    except PipelineError as e:
        logger.error("Pipeline failed: %s", e)
        sys.exit(1)

    print(explain(stage))
    logger.info("CV %s: %.3f +/- %.3f (%d folds)", metric, result.mean, result.std, len(result.scores))
    logger.info("Training %s: %.3f", metric, train_score)


if __name__ == "__main__":
    main()
