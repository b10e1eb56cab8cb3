import argparse
import logging
import warnings

import numpy as np
import scipy.sparse as sp

from ._exceptions import InvalidArgumentError, InvalidInputError, NumericDomainWarning
from ._initialization import AverageInitialization

logger = logging.getLogger("amf_init")


def _load_array(path, sparse=False):
    if sparse:
        if not path.endswith(".npz"):
            raise ValueError(f"Sparse input must be a .npz file: {path}")
        return sp.load_npz(path)
    if path.endswith(".npz"):
        return np.load(path)["arr_0"]
    elif path.endswith(".npy"):
        return np.load(path)
    else:
        raise ValueError(f"Unsupported input format: {path}")


def _configure_logging(verbose):
    level = logging.WARNING if verbose <= 0 else (logging.INFO if verbose == 1 else logging.DEBUG)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            fmt="[%(asctime)s] [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(handler)
    logger.setLevel(level)


def main(argv=None):
    p = argparse.ArgumentParser(prog="amf-init", description="Average initialization for alternating matrix factorization")
    sub = p.add_subparsers(dest="cmd", required=True)

    init = sub.add_parser("init", help="Initialize W and/or H from a matrix V")
    init.add_argument("--input", required=True, help="Path to V (.npz/.npy)")
    init.add_argument("--sparse", action="store_true", help="Load V with scipy.sparse.load_npz")
    init.add_argument("--rank", type=int, required=True, help="Factorization rank r")
    init.add_argument("--which", choices=["W", "H", "w", "h", "both"], default="both")
    init.add_argument("--seed", type=int, default=None)
    init.add_argument("--out", required=True, help="Output .npz file")
    init.add_argument("--verbose", type=int, default=0)

    args = p.parse_args(argv)
    _configure_logging(args.verbose)

    if args.cmd == "init":
        V = _load_array(args.input, sparse=args.sparse)
        logger.info("loaded %s with shape %s", args.input, V.shape)

        rule = AverageInitialization(random_state=args.seed)
        try:
            with warnings.catch_warnings():
                # reported once by the initialization below
                warnings.simplefilter("ignore", NumericDomainWarning)
                seed = rule.seed_value(V, args.rank)
            if args.which == "both":
                W, H = rule.initialize(V, args.rank)
                factors = dict(W=W, H=H)
            else:
                which = args.which.upper()
                factors = {which: rule.initialize_one(V, args.rank, which)}
        except (InvalidInputError, InvalidArgumentError) as exc:
            p.error(str(exc))

        np.savez_compressed(args.out, seed_value=np.asarray(seed, dtype=float), **factors)
        logger.info("wrote %s (seed value %.6g) to %s", ", ".join(factors), seed, args.out)
        return 0


if __name__ == "__main__":
    main()
