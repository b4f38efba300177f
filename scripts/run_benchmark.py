#!/usr/bin/env python
import argparse, logging
from mrfo.benchmark import main

if __name__ == "__main__":
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", default="configs/benchmark.yaml")
    ap.add_argument("--out", default=None, help="output directory (overrides output_dir in the config)")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
    main(args.config, args.out)
