from __future__ import annotations

import argparse
import json
from typing import Any, Dict

from rotation.io.catalog_loader import load_catalog
from rotation.io.csv_loader import load_roster
from rotation.io.schedule_log import export_schedule_log, load_schedule_log
from rotation.models.catalog import DEFAULT_CATALOG
from rotation.models.config import SchedulerConfig
from rotation.models.schedule import Schedule
from rotation.solver.pickers import RandomPicker
from rotation.solver.rotation import generate_schedule
from rotation.solver.validation import validate_schedule
from rotation.utils.logging_setup import setup_logging

_VERBOSITY = {0: "WARNING", 1: "INFO", 2: "DEBUG"}


def _build_cfg(args: argparse.Namespace) -> SchedulerConfig:
    cfg: Dict[str, Any] = {
        "log_level": _VERBOSITY.get(args.verbose, "TRACE"),
        "log_file": args.log_file,
    }
    if args.seed is not None:
        cfg["seed"] = int(args.seed)
    if args.catalog:
        cfg["catalog_path"] = args.catalog
    return SchedulerConfig.from_dict(cfg)


def _print_schedule(schedule: Schedule) -> None:
    current = None
    for a in schedule.assignments:
        if a.station != current:
            current = a.station
            print(f"\n{current}")
        name = a.worker.name if a.worker else "-"
        print(f"  {a.slot.meal:>6}  {a.slot.interval:<16} {name}")
    for station, slot in schedule.unfilled:
        print(f"  (vazio) {station} {slot.label}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Gera a escala de rodízio dos postos")
    p.add_argument("--roster", required=True, help="CSV de funcionários (id,name,active)")
    p.add_argument("--previous", help="CSV da escala anterior (log)")
    p.add_argument("--catalog", help="JSON de postos e horários (padrão: catálogo embutido)")
    p.add_argument("--seed", type=int, default=None, help="Semente para sorteio reprodutível")
    p.add_argument("--out", help="Grava a nova escala neste CSV")
    p.add_argument("--log-file", dest="log_file", default=None, help="Arquivo de log")
    p.add_argument("-v", "--verbose", action="count", default=0)
    p.add_argument("--json", dest="json_out", action="store_true", help="Saída JSON (resumo)")
    args = p.parse_args(argv)

    cfg = _build_cfg(args)
    setup_logging(level=cfg.log_level, log_file=cfg.log_file)

    catalog = load_catalog(cfg.catalog_path) if cfg.catalog_path else DEFAULT_CATALOG
    roster = load_roster(args.roster)
    previous = load_schedule_log(args.previous, roster) if args.previous else None

    schedule = generate_schedule(roster, previous, catalog, RandomPicker(cfg.seed))
    validation = validate_schedule(schedule, catalog, previous, roster)

    if args.out:
        export_schedule_log(schedule, args.out)

    if args.json_out:
        print(json.dumps(
            {"summary": schedule.summary(), "validation": validation.as_dict()},
            ensure_ascii=False, indent=2,
        ))
    else:
        _print_schedule(schedule)
        print("\nResumo:")
        for k, v in schedule.summary().items():
            print(f" - {k}: {v}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
