import json

import pytest

from permchain import cli


def test_demo_output(capsys):
    cli.main(["demo"])
    out = json.loads(capsys.readouterr().out)
    assert out["balances"] == {"Alice": "90.00", "Bob": "55.00", "Charlie": "25.00"}
    assert out["wallets"] == {"validator1": 1, "Alice": 5, "Bob": 10}
    assert len(out["chain"]) == 2
    assert out["chain"][1]["prev_hash"] == out["chain"][0]["hash"]
    assert all(r["ok"] for r in out["results"])
    assert out["valid"]


def test_demo_full_scope():
    out = cli.run_demo(hash_scope="full")
    assert out["valid"]


def test_demo_unauthorized_validator():
    with pytest.raises(SystemExit):
        cli.main(["demo", "--validator", "mallory"])
