# tests/test_cli.py
import math

import numpy as np
import pytest
import scipy.sparse as sp

from amf_init import NumericDomainWarning
from amf_init.cli import main


def test_init_both_from_npy(tmp_path, small_dense):
    src = tmp_path / "V.npy"
    out = tmp_path / "init.npz"
    np.save(src, small_dense)

    assert main(["init", "--input", str(src), "--rank", "2", "--seed", "0", "--out", str(out)]) == 0

    res = np.load(out)
    seed = float(res["seed_value"])
    assert seed == pytest.approx(math.sqrt(1.5))
    assert res["W"].shape == (2, 2) and res["H"].shape == (2, 2)
    assert np.all(res["W"] >= seed) and np.all(res["H"] < seed + 1)


def test_init_one_from_npz(tmp_path, small_dense):
    src = tmp_path / "V.npz"
    out = tmp_path / "h.npz"
    np.savez(src, small_dense)

    main(["init", "--input", str(src), "--rank", "3", "--which", "h", "--out", str(out)])

    res = np.load(out)
    assert "W" not in res.files
    assert res["H"].shape == (3, 2)


def test_sparse_input(tmp_path, single_stored_sparse):
    src = tmp_path / "V_sparse.npz"
    out = tmp_path / "init.npz"
    sp.save_npz(src, single_stored_sparse)

    with pytest.warns(NumericDomainWarning):
        main(["init", "--input", str(src), "--sparse", "--rank", "1", "--out", str(out)])

    res = np.load(out)
    assert float(res["seed_value"]) == 0.0
    assert res["W"].shape == (3, 1) and res["H"].shape == (1, 3)


def test_invalid_rank_exits(tmp_path, small_dense, capsys):
    src = tmp_path / "V.npy"
    np.save(src, small_dense)

    with pytest.raises(SystemExit) as info:
        main(["init", "--input", str(src), "--rank", "0", "--out", str(tmp_path / "x.npz")])
    assert info.value.code == 2
    assert "rank" in capsys.readouterr().err


def test_unsupported_format(tmp_path):
    with pytest.raises(ValueError, match="Unsupported input format"):
        main(["init", "--input", str(tmp_path / "V.csv"), "--rank", "1", "--out", str(tmp_path / "x.npz")])
