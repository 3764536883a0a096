# main.py
import argparse
import logging
import sys

from chip_model import ChipInvariantError
from config import DEFAULT_CONFIG_PATH, LineConfig, load_config
from scheduler import ProductionLine


def build_parser():
    parser = argparse.ArgumentParser(description="Simulate a two-stage chip production line.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="YAML config file")
    parser.add_argument("--emissions", type=int, help="number of chips to produce")
    parser.add_argument("--period", type=float, help="seconds between chips")
    parser.add_argument("--time-unit", type=float, help="seconds of soldering per cost unit")
    parser.add_argument("--seed", type=int, help="random seed for chip sizes")
    parser.add_argument("--gui", action="store_true", help="open the tkinter monitor")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def resolve_config(args):
    cfg = LineConfig.from_dict(load_config(args.config))
    return cfg.updated(emissions=args.emissions, period_s=args.period,
                       time_unit_s=args.time_unit, seed=args.seed)


def run_headless(cfg):
    line = ProductionLine(cfg)
    line.start()
    try:
        line.join()
    except KeyboardInterrupt:
        line.cancel()
        line.join()
    stats = line.stats()
    print(f"Produced {stats['produced']} chips, soldered {stats['processed']}")
    return 0


def run_gui(cfg):
    import tkinter as tk
    from main_window import MainWindow

    root = tk.Tk()
    MainWindow(root, cfg)
    root.mainloop()
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(threadName)s %(message)s")
    try:
        cfg = resolve_config(args)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    try:
        return run_gui(cfg) if args.gui else run_headless(cfg)
    except ChipInvariantError as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
